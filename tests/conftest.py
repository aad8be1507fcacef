import datetime
import textwrap
from pathlib import Path

import pytest

from folio.models.post import Post, PostBody
from folio.repos.posts_repo import InMemoryPostsRepo

BUILT_AT = datetime.datetime(2025, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


def write_post(root: Path, relative_path: str, text: str) -> Path:
    """Write a dedented markdown file below root and return its path."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def make_post(
    slug: str,
    *,
    date: str = "2025-01-01",
    title: str | None = None,
    excerpt: str = "An excerpt",
    category: str | None = None,
    author: str | None = None,
    body: str = "Some body text",
) -> Post:
    parsed = datetime.datetime.fromisoformat(date)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return Post(
        slug=slug,
        title=title or slug.replace("-", " ").title(),
        date=parsed,
        excerpt=excerpt,
        category=category,
        author=author,
        readTime="1 min",
        body=PostBody(raw=body, html=f"<p>{body}</p>"),
        sourcePath=f"blog/{slug}.md",
    )


def make_repo(posts) -> InMemoryPostsRepo:
    return InMemoryPostsRepo(posts, built_at=BUILT_AT)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return
        self._get_post_return = get_post_return
        self.calls = []

    def list_posts(self, search: str = "", category: str = "all"):
        self.calls.append((search, category))
        return self._list_posts_return

    def get_post(self, slug: str):
        self.calls.append(slug)
        return self._get_post_return


class FakeContactService:
    """
    Records messages instead of delivering them.
    """

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent = []

    async def send(self, request):
        if self.error:
            raise self.error
        self.sent.append(request)


@pytest.fixture
def content_dir(tmp_path) -> Path:
    root = tmp_path / "content"
    (root / "blog").mkdir(parents=True)
    return root
