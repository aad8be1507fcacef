import datetime
from typing import Iterable, Iterator, Optional, Tuple

from folio.models.post import Post


class InMemoryPostsRepo:
    """Read-only collection of compiled posts, in discovery order."""

    def __init__(self, posts: Iterable[Post], built_at: datetime.datetime):
        self._posts: Tuple[Post, ...] = tuple(posts)
        self.built_at = built_at

    def list_posts(self) -> Tuple[Post, ...]:
        return self._posts

    def get_post(self, slug: str) -> Optional[Post]:
        return next((post for post in self._posts if post.slug == slug), None)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)
