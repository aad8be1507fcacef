import datetime
import xml.etree.ElementTree as etree

from folio.services.content_compiler import build_post
from folio.services.sitemap_service import (
    SITEMAP_NS,
    build_sitemap,
    render_sitemap_xml,
)
from tests.conftest import BUILT_AT, make_post, make_repo


def test_build_sitemap_static_entries_then_posts():
    repo = make_repo(
        [make_post("first", date="2024-01-01"), make_post("2025/second", date="2025-02-03")]
    )

    entries = build_sitemap(repo, "https://example.com/")

    assert [e.url for e in entries] == [
        "https://example.com",
        "https://example.com/blog",
        "https://example.com/blog/first",
        "https://example.com/blog/2025/second",
    ]
    assert [e.changeFrequency for e in entries] == ["monthly", "weekly", "monthly", "monthly"]
    assert [e.priority for e in entries] == [1, 0.9, 0.8, 0.8]


def test_static_entries_use_latest_post_date():
    repo = make_repo([make_post("a", date="2024-01-01"), make_post("b", date="2025-02-03")])

    home, listing = build_sitemap(repo, "https://example.com")[:2]

    expected = datetime.datetime(2025, 2, 3, tzinfo=datetime.timezone.utc)
    assert home.lastModified == expected
    assert listing.lastModified == expected


def test_empty_collection_uses_build_time():
    entries = build_sitemap(make_repo([]), "https://example.com")

    assert len(entries) == 2
    assert all(e.lastModified == BUILT_AT for e in entries)


def test_build_sitemap_is_deterministic():
    repo = make_repo([make_post("a", date="2024-01-01")])

    assert build_sitemap(repo, "https://example.com") == build_sitemap(
        repo, "https://example.com"
    )


def test_post_entry_last_modified_matches_front_matter_date():
    text = '---\ntitle: "Hello"\ndate: "2025-01-01T00:00:00"\nexcerpt: "Hi"\n---\nBody'
    post = build_post("blog/hello.md", text, render=lambda body: body)

    entry = build_sitemap(make_repo([post]), "https://example.com")[-1]

    assert entry.url == "https://example.com/blog/hello"
    assert entry.lastModified.date() == datetime.date(2025, 1, 1)


def test_render_sitemap_xml():
    repo = make_repo([make_post("a", date="2024-01-01")])

    xml = render_sitemap_xml(build_sitemap(repo, "https://example.com"))

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = etree.fromstring(xml.split("\n", 1)[1])
    urls = root.findall(f"{{{SITEMAP_NS}}}url")
    assert len(urls) == 3
    last = urls[-1]
    assert last.find(f"{{{SITEMAP_NS}}}loc").text == "https://example.com/blog/a"
    assert last.find(f"{{{SITEMAP_NS}}}lastmod").text == "2024-01-01T00:00:00+00:00"
    assert last.find(f"{{{SITEMAP_NS}}}changefreq").text == "monthly"
    assert last.find(f"{{{SITEMAP_NS}}}priority").text == "0.8"
