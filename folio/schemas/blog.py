from typing import List, Optional

from pydantic import BaseModel, Field

from folio.models.post import Post
from folio.utils import format_date

ALL_CATEGORIES = "all"


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    formattedDate: str
    excerpt: str
    category: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None
    readTime: str

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(
            slug=post.slug,
            title=post.title,
            date=post.date.isoformat(),
            formattedDate=format_date(post.date),
            excerpt=post.excerpt,
            category=post.category,
            author=post.author,
            image=post.image,
            readTime=post.readTime,
        )


class PostDetail(PostSummary):
    content: str  # Rendered HTML

    @classmethod
    def from_post(cls, post: Post) -> "PostDetail":
        summary = PostSummary.from_post(post)
        return cls(**summary.model_dump(), content=post.body.html)


class ListingQuery(BaseModel):
    search: str = ""
    category: str = ALL_CATEGORIES


class PostListing(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    total: int = 0
    search: str = ""
    category: str = ALL_CATEGORIES
    # Defaults to restore when nothing matched
    reset: Optional[ListingQuery] = None
