import datetime
from typing import Literal

from pydantic import BaseModel, Field


class SitemapEntry(BaseModel):
    url: str
    lastModified: datetime.datetime
    changeFrequency: Literal["monthly", "weekly"]
    priority: float = Field(..., ge=0, le=1)
