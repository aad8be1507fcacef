import logging
from typing import Iterable, List, Optional, Sequence

from folio.models.post import Post
from folio.schemas.blog import (
    ALL_CATEGORIES,
    ListingQuery,
    PostDetail,
    PostListing,
    PostSummary,
)

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(
        self, search: str = "", category: str = ALL_CATEGORIES
    ) -> PostListing:
        posts = self.repo.list_posts()
        matching = filter_posts(sort_posts(posts), search, category)
        logger.debug(
            f"Listing search={search!r} category={category!r}: {len(matching)}/{len(posts)} posts"
        )
        return PostListing(
            posts=[PostSummary.from_post(p) for p in matching],
            categories=collect_categories(posts),
            total=len(matching),
            search=search,
            category=category,
            reset=None if matching else ListingQuery(),
        )

    def get_post(self, slug: str) -> Optional[PostDetail]:
        post = self.repo.get_post(slug)
        if not post:
            return None
        return PostDetail.from_post(post)


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    """Newest first. sorted() is stable so equal dates keep discovery order."""
    return sorted(posts, key=lambda p: p.date, reverse=True)


def filter_posts(
    posts: Sequence[Post], search: str = "", category: str = ALL_CATEGORIES
) -> List[Post]:
    needle = search.lower()
    return [
        post
        for post in posts
        if (
            not needle
            or needle in post.title.lower()
            or needle in post.excerpt.lower()
        )
        and (category == ALL_CATEGORIES or post.category == category)
    ]


def collect_categories(posts: Iterable[Post]) -> List[str]:
    return sorted({post.category for post in posts if post.category})
