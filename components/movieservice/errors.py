from __future__ import annotations


class MovieServiceError(Exception):
    """Base error for MovieService."""


class MovieNotFoundError(MovieServiceError):
    """No movie stored under the requested id."""

    def __init__(self, movie_id: str):
        super().__init__(f"movie_id={movie_id}")
        self.movie_id = movie_id


class BadPayloadError(MovieServiceError):
    """Request body does not decode into a Movie."""

    def __init__(self, message: str, error_count: int = 1):
        super().__init__(message)
        self.error_count = error_count
