from pathlib import Path
from typing import Optional
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content origin
    CONTENT_BASE_URL: str = "http://localhost:8080/"
    CATALOG_PATH: str = "posts/posts.json"
    POSTS_PATH: str = "posts/"
    CONTENT_EXTENSION: str = "md"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Site
    SITE_NAME: str = "My Blog"
    LISTING_URL: str = "/"
    POST_URL: str = "/post"

    # Rendering dependencies
    READINESS_POLL_INTERVAL_SECONDS: float = 0.1
    READINESS_TIMEOUT_SECONDS: Optional[float] = 10.0

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"

    def content_path(self, post_id: str) -> str:
        return f"{self.POSTS_PATH}{quote(post_id, safe='')}.{self.CONTENT_EXTENSION}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
