"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConnection(BaseModel):
    """Resolved connection details for the catalog API."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(description="Base URL all catalog endpoints are relative to")
    headers: dict[str, str] = Field(default_factory=dict, description="Headers sent on every request")
    authenticated: bool = Field(default=False, description="Whether a bearer credential is attached")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "MovieTime"
    debug: bool = False
    app_base_url: str = "http://localhost:8000/"

    # TMDB API
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    request_timeout: float = 30.0

    # Favorites storage
    database_url: str = "sqlite+aiosqlite:///./movietime.db"
    favorites_key: str = "favorite_movies"

    @field_validator("tmdb_api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Treat a whitespace-only key as not configured."""
        return v.strip()

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the request timeout is positive."""
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than zero")
        return v

    @field_validator("favorites_key")
    @classmethod
    def validate_favorites_key(cls, v: str) -> str:
        """Validate that the favorites key is not empty."""
        if not v.strip():
            raise ValueError("FAVORITES_KEY must not be empty")
        return v

    def catalog_connection(self) -> CatalogConnection:
        """Resolve how the catalog API is reached.

        With an API key, requests go straight to TMDB with a bearer token.
        Without one, requests go through the same-origin ``/tmdb`` proxy and
        carry no credential.
        """
        headers = {"Accept": "application/json"}

        if self.tmdb_api_key:
            headers["Authorization"] = f"Bearer {self.tmdb_api_key}"
            return CatalogConnection(
                base_url=self.tmdb_base_url.rstrip("/"),
                headers=headers,
                authenticated=True,
            )

        return CatalogConnection(
            base_url=f"{self.app_base_url.rstrip('/')}/tmdb",
            headers=headers,
            authenticated=False,
        )

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if not self.tmdb_api_key:
            warnings.append(
                "TMDB_API_KEY is not set - catalog requests will be routed through "
                f"the proxy at {self.catalog_connection().base_url}"
            )

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
