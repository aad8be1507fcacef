import datetime
import logging
import posixpath
from typing import Callable, Dict, List, Optional

import frontmatter
from pydantic import ValidationError

from folio.exceptions import ContentError
from folio.models.post import Post, PostBody, PostFrontMatter
from folio.repos.posts_repo import InMemoryPostsRepo
from folio.services.content_parser import ContentParser
from folio.services.markdown_renderer import render_markdown
from folio.settings import settings
from folio.utils import calculate_reading_time

logger = logging.getLogger(__name__)


def build_post(
    relative_path: str,
    text: str,
    *,
    prefix: str = "blog/",
    render: Callable[[str], str] = render_markdown,
) -> Post:
    """Parse front-matter and body of one content file into a Post."""
    try:
        parsed = frontmatter.loads(text)
    except Exception as e:
        raise ContentError(f"Malformed front-matter: {e}", path=relative_path) from e

    try:
        meta = PostFrontMatter.model_validate(parsed.metadata or {})
    except ValidationError as e:
        errors = e.errors()
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in errors})
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in errors
        )
        raise ContentError(
            f"Invalid front-matter ({details})", path=relative_path, fields=fields
        ) from e

    body = parsed.content
    return Post(
        slug=derive_slug(relative_path, prefix),
        title=meta.title,
        date=meta.date,
        excerpt=meta.excerpt,
        category=meta.category,
        author=meta.author,
        image=meta.image,
        readTime=calculate_reading_time(body),
        body=PostBody(raw=body, html=render(body)),
        sourcePath=relative_path,
    )


def derive_slug(relative_path: str, prefix: str = "blog/") -> str:
    """blog/2024/hello.md -> 2024/hello, blog/guides/index.md -> guides"""
    base, _ = posixpath.splitext(relative_path)
    base = base.removeprefix(prefix)
    if base.endswith("/index"):
        base = base[: -len("/index")]
    return base


def compile_posts(
    parser: ContentParser,
    *,
    render: Callable[[str], str] = render_markdown,
) -> InMemoryPostsRepo:
    """Compile every content file. Any bad file aborts the whole build."""
    posts: List[Post] = []
    seen: Dict[str, str] = {}

    for relative_path in parser.list_markdown_paths():
        text = parser.get_markdown_content(relative_path)
        post = build_post(relative_path, text, prefix=parser.prefix, render=render)

        if post.slug in seen:
            raise ContentError(
                f"Duplicate slug '{post.slug}' (already defined by {seen[post.slug]})",
                path=relative_path,
            )
        seen[post.slug] = relative_path
        logger.debug(f"Compiled {relative_path} -> {post.slug} ({post.readTime})")
        posts.append(post)

    logger.info(f"Compiled {len(posts)} posts from {parser.root}")
    return InMemoryPostsRepo(
        posts, built_at=datetime.datetime.now(datetime.timezone.utc)
    )


def load_posts(
    content_dir: Optional[str] = None, prefix: Optional[str] = None
) -> InMemoryPostsRepo:
    """Build the post collection from the configured content directory."""
    parser = ContentParser(
        content_dir or settings.CONTENT_DIR, prefix=prefix or settings.BLOG_PREFIX
    )
    try:
        return compile_posts(parser)
    except ContentError as e:
        logger.error(f"Content build failed: {e}")
        raise
