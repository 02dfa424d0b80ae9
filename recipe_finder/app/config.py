from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    SPOONACULAR_API_KEY: str = ""
    SPOONACULAR_BASE_URL: str = "https://api.spoonacular.com"
    JOKE_API_BASE_URL: str = "https://v2.jokeapi.dev/joke"
    JOKE_CATEGORY: str = "Any"
    APP_ENV: str = "development"
    PORT: int = 3000
    # milliseconds, like the front-end config it mirrors
    CACHE_DURATION: int = Field(default=30 * 60 * 1000, gt=0)
    CACHE_MAX_ENTRIES: int = Field(default=512, ge=1)
    DEFAULT_RECIPE_COUNT: int = Field(default=12, ge=1)
    UPSTREAM_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    STATIC_DIR: str = "public"

    @property
    def cache_ttl_seconds(self) -> float:
        return self.CACHE_DURATION / 1000


settings = Settings()
