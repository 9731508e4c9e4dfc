from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import ValidationError

from .contracts import Movie
from .errors import BadPayloadError, MovieNotFoundError
from .store import InMemoryMovieStore, MovieStorePort

logger = logging.getLogger("movieservice.service")

Payload = Union[bytes, str]


class MovieService:
    """Use-cases over the store: point lookup and insert-or-replace."""

    def __init__(self, store: Optional[MovieStorePort] = None) -> None:
        self.store = store or InMemoryMovieStore()

    # ---------- Public API ----------
    def fetch(self, movie_id: str) -> Movie:
        movie = self.store.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def decode(self, payload: Payload) -> Movie:
        """Strictly decode a JSON body into a Movie or raise BadPayloadError."""
        try:
            return Movie.model_validate_json(payload)
        except ValidationError as e:
            raise BadPayloadError(str(e), error_count=e.error_count()) from e

    def upsert(self, payload: Payload) -> Movie:
        movie = self.decode(payload)
        self.store.put(movie)
        logger.info("movie.upsert movie_id=%s", movie.id)
        return movie
