import httpx
from fastapi import Depends, Request

from folio.repos.posts_repo import InMemoryPostsRepo
from folio.services.contact_service import ContactService
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(request: Request) -> InMemoryPostsRepo:
    # Compiled once in the app lifespan
    return request.app.state.posts_repo


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


async def get_contact_service(current_settings: Settings = Depends(get_settings)):
    async with httpx.AsyncClient() as client:
        yield ContactService(client, current_settings)
