"""Pydantic schemas for TMDB catalog responses."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Movie(BaseModel):
    """A single movie as returned in TMDB list responses."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB movie ID")
    title: str = Field(default="", description="Movie title")
    original_title: str | None = Field(default=None, description="Original title")
    original_language: str | None = Field(default=None, description="Original language code")
    overview: str | None = Field(default=None, description="Movie overview/synopsis")
    poster_path: str | None = Field(default=None, description="Poster image path or URL")
    backdrop_path: str | None = Field(default=None, description="Backdrop image path or URL")
    release_date: date | None = Field(default=None, description="Release date")
    vote_average: float = Field(default=0.0, description="Average vote score")
    vote_count: int = Field(default=0, description="Number of votes")
    popularity: float = Field(default=0.0, description="Popularity score")
    genre_ids: list[int] = Field(default_factory=list, description="TMDB genre IDs")
    adult: bool = Field(default=False, description="Adult content flag")
    video: bool = Field(default=False, description="Whether the entry is a video release")

    @field_validator("release_date", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | date | None) -> str | date | None:
        """Convert empty strings to None for date fields."""
        if v == "":
            return None
        return v


class MovieListResponse(BaseModel):
    """Paged list of movies (now playing, popular, search)."""

    model_config = ConfigDict(extra="ignore")

    page: int = Field(description="Current page number")
    total_pages: int = Field(description="Total number of pages")
    total_results: int = Field(description="Total number of results")
    results: list[Movie] = Field(default_factory=list, description="Movie results")


class Genre(BaseModel):
    """A genre attached to a movie."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB genre ID")
    name: str = Field(description="Genre name")


class MovieDetails(Movie):
    """Detailed movie information from TMDB."""

    genres: list[Genre] = Field(default_factory=list, description="Genres")
    runtime: int | None = Field(default=None, description="Runtime in minutes")
    budget: int = Field(default=0, description="Production budget")
    revenue: int = Field(default=0, description="Box office revenue")
    status: str | None = Field(default=None, description="Release status")
    tagline: str | None = Field(default=None, description="Movie tagline")
    imdb_id: str | None = Field(default=None, description="IMDB ID")
    homepage: str | None = Field(default=None, description="Official homepage URL")


class Video(BaseModel):
    """A video (trailer, teaser, clip...) attached to a movie."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="TMDB video ID")
    name: str = Field(default="", description="Video title")
    site: str = Field(default="", description="Hosting site, e.g. YouTube")
    type: str = Field(default="", description="Video type, e.g. Trailer")
    key: str = Field(default="", description="Site-specific video key")
    iso_639_1: str | None = Field(default=None, description="Language code")
    iso_3166_1: str | None = Field(default=None, description="Country code")
    size: int | None = Field(default=None, description="Vertical resolution")
    official: bool = Field(default=False, description="Published by the studio")
    published_at: str | None = Field(default=None, description="Publication timestamp")

    @property
    def youtube_url(self) -> str | None:
        """Watch URL when the video is hosted on YouTube."""
        if "youtube" not in self.site.lower() or not self.key:
            return None
        return f"https://www.youtube.com/watch?v={self.key}"


class MovieVideoResponse(BaseModel):
    """Response from the TMDB movie videos endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB movie ID")
    results: list[Video] = Field(default_factory=list, description="Videos")


class CastMember(BaseModel):
    """A single cast member from TMDB credits."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB person ID")
    name: str = Field(description="Person's name")
    original_name: str | None = Field(default=None, description="Original name")
    adult: bool = Field(default=False, description="Adult content flag")
    gender: int = Field(default=0, description="TMDB gender code")
    known_for_department: str | None = Field(default=None, description="Primary department")
    popularity: float = Field(default=0.0, description="Popularity score")
    profile_path: str | None = Field(default=None, description="Profile image path or URL")
    credit_id: str | None = Field(default=None, description="TMDB credit ID")
    cast_id: int | None = Field(default=None, description="Cast entry ID")
    character: str | None = Field(default=None, description="Character name")
    order: int = Field(default=0, description="Billing order")


class CrewMember(BaseModel):
    """A single crew member from TMDB credits."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB person ID")
    name: str = Field(description="Person's name")
    original_name: str | None = Field(default=None, description="Original name")
    adult: bool = Field(default=False, description="Adult content flag")
    gender: int = Field(default=0, description="TMDB gender code")
    known_for_department: str | None = Field(default=None, description="Primary department")
    popularity: float = Field(default=0.0, description="Popularity score")
    profile_path: str | None = Field(default=None, description="Profile image path or URL")
    credit_id: str | None = Field(default=None, description="TMDB credit ID")
    department: str | None = Field(default=None, description="Department")
    job: str | None = Field(default=None, description="Job title")


class CreditsResponse(BaseModel):
    """Response from TMDB movie credits endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB movie ID")
    cast: list[CastMember] = Field(default_factory=list, description="Cast members")
    crew: list[CrewMember] = Field(default_factory=list, description="Crew members")
