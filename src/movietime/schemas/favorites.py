"""Result types for favorites storage operations."""

from pydantic import BaseModel, ConfigDict, Field

from movietime.schemas.catalog import Movie


class StoreResult(BaseModel):
    """Outcome of a favorites write.

    Writes never raise; a failed write is reported here instead.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(description="Whether the write reached the backing store")
    reason: str | None = Field(default=None, description="Why the write failed")

    @classmethod
    def success(cls) -> "StoreResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "StoreResult":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok


class FavoritesSnapshot(BaseModel):
    """Favorites as read from the backing store, with any absorbed error."""

    movies: list[Movie] = Field(default_factory=list, description="Favorite movies in stored order")
    error: str | None = Field(default=None, description="Why the stored list could not be read")
