from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BLOG_PATH = "/blog"


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    BLOG_PREFIX: str = "blog/"
    CODE_THEME: str = "one-dark"

    # Site
    BASE_SITE_URL: str = "https://lradev.app"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Contact delivery
    CONTACT_WEBHOOK_URL: str = ""
    CONTACT_API_KEY: str = ""
    CONTACT_FROM_EMAIL: str = "portfolio@lradev.app"
    CONTACT_TO_EMAIL: str = ""

    # Pass-through values for the frontend
    ENABLE_PWA: bool = True
    GOOGLE_SITE_VERIFICATION: str = ""

    @property
    def content_root(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def blog_url(self) -> str:
        return f"{self.BASE_SITE_URL.rstrip('/')}{BLOG_PATH}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
