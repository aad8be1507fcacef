import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from folio import dependencies as deps
from folio.schemas.blog import ALL_CATEGORIES, PostDetail, PostListing
from folio.services.posts_service import PostsService
from folio.settings import BLOG_PATH

logger = logging.getLogger(__name__)

router = APIRouter(prefix=BLOG_PATH)


@router.get("", response_model=PostListing)
def list_posts(
    search: str = Query("", description="Case-insensitive match on title or excerpt"),
    category: str = Query(ALL_CATEGORIES),
    service: PostsService = Depends(deps.get_posts_service),
):
    """List posts newest first, filtered by search text and category."""
    try:
        return service.list_posts(search=search, category=category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/{slug:path}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
