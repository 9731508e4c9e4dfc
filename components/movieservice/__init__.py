"""
MovieService component.
Exports the app factory, the router factory and the store/service for DI.
"""
from .contracts import Movie
from .errors import MovieServiceError, MovieNotFoundError, BadPayloadError
from .guard import ReadWriteLock
from .store import MovieStorePort, InMemoryMovieStore
from .service import MovieService
from .http import get_router
from .app import create_app

__all__ = [
    "Movie",
    "MovieServiceError",
    "MovieNotFoundError",
    "BadPayloadError",
    "ReadWriteLock",
    "MovieStorePort",
    "InMemoryMovieStore",
    "MovieService",
    "get_router",
    "create_app",
]
