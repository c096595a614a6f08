"""API routers."""

from filmapi.api.routers import characters, franchises, movies

__all__ = ["characters", "movies", "franchises"]
