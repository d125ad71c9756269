"""MovieTime: TMDB catalog client and locally persisted favorites."""

__version__ = "0.1.0"
