import argparse
import json
import logging
import sys
from pathlib import Path

from folio.exceptions import ContentError
from folio.services.content_compiler import load_posts
from folio.services.markdown_renderer import highlight_stylesheet
from folio.services.posts_service import PostsService
from folio.services.sitemap_service import build_sitemap, render_sitemap_xml
from folio.settings import settings

logger = logging.getLogger(__name__)


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def export_site(out_dir: Path) -> int:
    """Write the listing, every post and the sitemap. Returns the post count."""
    repo = load_posts(settings.CONTENT_DIR, settings.BLOG_PREFIX)
    service = PostsService(repo=repo)

    listing = service.list_posts()
    write_text(out_dir / "blog" / "index.json", listing.model_dump_json(indent=2))

    for post in repo:
        detail = service.get_post(post.slug)
        write_text(out_dir / "blog" / f"{post.slug}.json", detail.model_dump_json(indent=2))

    entries = build_sitemap(repo, settings.BASE_SITE_URL)
    write_text(out_dir / "sitemap.xml", render_sitemap_xml(entries))
    write_text(out_dir / "sitemap.json", json.dumps([e.model_dump(mode="json") for e in entries], indent=2))
    write_text(out_dir / "assets" / "highlight.css", highlight_stylesheet())
    return len(repo)


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    arg_parser = argparse.ArgumentParser(description="Export the blog as static files")
    arg_parser.add_argument("--out", default="out", help="Output directory")
    args = arg_parser.parse_args()

    try:
        count = export_site(Path(args.out))
        logger.info(f"Exported {count} posts to {args.out}")
    except ContentError:
        # load_posts already logged the details
        sys.exit(1)
