import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostFrontMatter(BaseModel):
    """Recognized front-matter keys of a blog post."""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str = Field(..., min_length=1)
    date: datetime.datetime
    excerpt: str = Field(..., min_length=1)
    category: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        # YAML gives date/datetime objects for unquoted values, str otherwise
        if isinstance(value, datetime.datetime):
            parsed = value
        elif isinstance(value, datetime.date):
            parsed = datetime.datetime.combine(value, datetime.time())
        elif isinstance(value, str):
            parsed = datetime.datetime.fromisoformat(value.strip())
        else:
            return value

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=datetime.timezone.utc)
        return parsed


class PostBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    html: str


class Post(BaseModel):
    """A compiled blog post. Built once per content file and never mutated."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    date: datetime.datetime
    excerpt: str
    category: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None
    readTime: str
    body: PostBody
    sourcePath: str
