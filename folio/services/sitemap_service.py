import logging
import xml.etree.ElementTree as etree
from typing import List

from folio.repos.posts_repo import InMemoryPostsRepo
from folio.schemas.sitemap import SitemapEntry
from folio.settings import BLOG_PATH

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap(repo: InMemoryPostsRepo, base_url: str) -> List[SitemapEntry]:
    """
    Home page, blog listing, then one entry per post in collection order.
    Static pages take the newest post date so output only depends on the collection.
    """
    base_url = base_url.rstrip("/")
    posts = repo.list_posts()
    latest = max((p.date for p in posts), default=repo.built_at)

    entries = [
        SitemapEntry(
            url=base_url,
            lastModified=latest,
            changeFrequency="monthly",
            priority=1,
        ),
        SitemapEntry(
            url=f"{base_url}{BLOG_PATH}",
            lastModified=latest,
            changeFrequency="weekly",
            priority=0.9,
        ),
    ]
    entries.extend(
        SitemapEntry(
            url=f"{base_url}{BLOG_PATH}/{post.slug}",
            lastModified=post.date,
            changeFrequency="monthly",
            priority=0.8,
        )
        for post in posts
    )
    logger.debug(f"Built sitemap with {len(entries)} entries")
    return entries


def render_sitemap_xml(entries: List[SitemapEntry]) -> str:
    urlset = etree.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = etree.SubElement(urlset, "url")
        etree.SubElement(url, "loc").text = entry.url
        etree.SubElement(url, "lastmod").text = entry.lastModified.isoformat()
        etree.SubElement(url, "changefreq").text = entry.changeFrequency
        etree.SubElement(url, "priority").text = f"{entry.priority:g}"
    body = etree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'
