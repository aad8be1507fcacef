import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import contact, posts, site, sitemap
from folio.services.content_compiler import load_posts
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Folio API", description="Portfolio blog and contact backend")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A content error propagates here and the app refuses to start
    app.state.posts_repo = load_posts(settings.CONTENT_DIR, settings.BLOG_PREFIX)
    logger.info(f"Serving {len(app.state.posts_repo)} posts")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(sitemap.router)
app.include_router(contact.router)
app.include_router(site.router)


@app.get("/")
async def root():
    return {"message": "Folio API is running"}
