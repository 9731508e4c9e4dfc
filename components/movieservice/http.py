from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from .contracts import Movie
from .errors import BadPayloadError, MovieNotFoundError
from .service import MovieService

log = logging.getLogger("movieservice.http")

GREETING = "Hello, World!"


def get_router(service_factory: Callable[[], MovieService]) -> APIRouter:
    r = APIRouter(tags=["movies"])
    service = service_factory()

    @r.get("/", response_class=PlainTextResponse)
    def greet():
        return GREETING

    # Sync route: runs on the worker threadpool, so readers overlap.
    @r.get("/movie/{movie_id}", response_model=Movie)
    def get_movie(movie_id: str, svc: MovieService = Depends(lambda: service)):
        try:
            return svc.fetch(movie_id)
        except MovieNotFoundError:
            log.debug("movie.not_found movie_id=%s", movie_id)
            return Response(status_code=status.HTTP_404_NOT_FOUND)

    # Raw body so a bad payload maps to 400 rather than FastAPI's 422.
    @r.post("/movie")
    async def post_movie(request: Request, svc: MovieService = Depends(lambda: service)):
        body = await request.body()
        try:
            await run_in_threadpool(svc.upsert, body)
        except BadPayloadError as e:
            log.info("movie.bad_payload errors=%d", e.error_count)
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        return Response(status_code=status.HTTP_200_OK)

    return r
