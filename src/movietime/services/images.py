"""Image path normalization for TMDB records.

TMDB returns image fields as relative fragments (``/abc123.jpg``) or not at
all. Everything handed to callers is rewritten to either an absolute CDN URL
or one of the fixed placeholder assets served by the hosting UI.
"""

from movietime.schemas.catalog import CreditsResponse, Movie, MovieDetails, MovieListResponse

# TMDB image base URLs
IMAGE_CDN_ROOT = "https://image.tmdb.org/t/p/"
POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
BACKDROP_BASE_URL = "https://image.tmdb.org/t/p/w780"

# Placeholder assets. Detail pages use the lower-case poster file.
POSTER_PLACEHOLDER = "/images/Poster.png"
DETAIL_POSTER_PLACEHOLDER = "/images/poster.png"
BACKDROP_PLACEHOLDER = "/images/backdrop.jpg"
PROFILE_PLACEHOLDER = "/images/Profile.jpg"

PLACEHOLDERS = frozenset(
    {POSTER_PLACEHOLDER, DETAIL_POSTER_PLACEHOLDER, BACKDROP_PLACEHOLDER, PROFILE_PLACEHOLDER}
)


def is_resolved(path: str | None) -> bool:
    """Return True if ``path`` is already a CDN URL or a placeholder."""
    if not path:
        return False
    return path.startswith(IMAGE_CDN_ROOT) or path in PLACEHOLDERS


def resolve_image_path(path: str | None, base_url: str, placeholder: str) -> str:
    """Resolve a TMDB image path.

    Args:
        path: Relative path from TMDB (e.g., "/abc123.jpg"), or None.
        base_url: CDN base including the size segment.
        placeholder: Asset returned when there is no image.

    Returns:
        ``base_url + path``, the placeholder for empty values, or ``path``
        unchanged when it has already been resolved.
    """
    if path is None or not path.strip():
        return placeholder

    if is_resolved(path):
        return path

    return f"{base_url}{path}"


def resolve_poster_path(path: str | None, placeholder: str = POSTER_PLACEHOLDER) -> str:
    return resolve_image_path(path, POSTER_BASE_URL, placeholder)


def resolve_backdrop_path(path: str | None) -> str:
    return resolve_image_path(path, BACKDROP_BASE_URL, BACKDROP_PLACEHOLDER)


def resolve_profile_path(path: str | None) -> str:
    # Profiles share the poster size
    return resolve_image_path(path, POSTER_BASE_URL, PROFILE_PLACEHOLDER)


def normalize_movie(movie: Movie, poster_placeholder: str = POSTER_PLACEHOLDER) -> Movie:
    """Rewrite poster and backdrop paths of a movie in place."""
    movie.poster_path = resolve_poster_path(movie.poster_path, poster_placeholder)
    movie.backdrop_path = resolve_backdrop_path(movie.backdrop_path)
    return movie


def normalize_movie_list(response: MovieListResponse) -> MovieListResponse:
    """Rewrite image paths of every movie in a list response."""
    for movie in response.results:
        normalize_movie(movie)
    return response


def normalize_movie_details(details: MovieDetails) -> MovieDetails:
    """Rewrite image paths of a single detail record."""
    normalize_movie(details, poster_placeholder=DETAIL_POSTER_PLACEHOLDER)
    return details


def normalize_credits(credits: CreditsResponse) -> CreditsResponse:
    """Rewrite profile paths of every cast and crew member."""
    for member in (*credits.cast, *credits.crew):
        member.profile_path = resolve_profile_path(member.profile_path)
    return credits
