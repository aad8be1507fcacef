from pathlib import Path

from folio.settings import Settings, choose_env_file


def test_blog_url_joins_base_and_listing_path():
    s = Settings(BASE_SITE_URL="https://example.com/")
    assert s.blog_url == "https://example.com/blog"


def test_content_root_is_a_path():
    s = Settings(CONTENT_DIR="posts")
    assert s.content_root == Path("posts")


def test_defaults_cover_pass_through_values():
    s = Settings(GOOGLE_SITE_VERIFICATION="token", ENABLE_PWA=False)
    assert s.GOOGLE_SITE_VERIFICATION == "token"
    assert s.ENABLE_PWA is False
    assert s.BLOG_PREFIX == "blog/"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
