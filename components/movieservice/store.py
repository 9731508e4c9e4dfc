from __future__ import annotations

import logging
from typing import Dict, Optional

from .contracts import Movie
from .guard import ReadWriteLock

logger = logging.getLogger("movieservice.store")


class MovieStorePort:
    """Port interface for the movie store."""

    def get(self, movie_id: str) -> Optional[Movie]:
        raise NotImplementedError

    def put(self, movie: Movie) -> None:
        raise NotImplementedError


class InMemoryMovieStore(MovieStorePort):
    """Thread-safe in-memory store: ``{ movie_id: Movie }`` behind a ReadWriteLock.

    Reads share the lock, writes take it exclusively. Stored records are
    frozen models, so returning them directly is a snapshot.
    Single-process only; contents live as long as the instance.
    """

    def __init__(self, lock: Optional[ReadWriteLock] = None) -> None:
        self._movies: Dict[str, Movie] = {}
        self._lock = lock or ReadWriteLock()

    def get(self, movie_id: str) -> Optional[Movie]:
        with self._lock.read():
            return self._movies.get(movie_id)

    def put(self, movie: Movie) -> None:
        with self._lock.write():
            replaced = movie.id in self._movies
            self._movies[movie.id] = movie
        logger.debug("store.put movie_id=%s replaced=%s", movie.id, replaced)
