"""Shared pytest fixtures: an in-memory movie service behind httpx.MockTransport.

The fake service implements the list/create/delete contract of the remote
collection, records every request it receives, and can be told to fail or to
hold a list request until the test releases it.
"""

from __future__ import annotations

import asyncio
import json
from urllib.parse import unquote

import httpx
import pytest

from filmshelf.services.catalog import CatalogStore
from filmshelf.services.movies.client import MoviesClient

BACKEND_URL = "http://movies.test"


class FakeMovieService:
    """In-memory stand-in for the remote movie collection."""

    def __init__(self) -> None:
        self.movies: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.fail: dict[str, int] = {}
        self.offline = False
        self.held: dict[str, asyncio.Event] = {}
        self._next_id = 1

    def add(self, movie_id: str | None = None, **fields) -> dict:
        if movie_id is None:
            movie_id = str(self._next_id)
            self._next_id += 1
        movie = {"id": movie_id, **fields}
        self.movies[movie_id] = movie
        return movie

    def hold(self, query: str) -> asyncio.Event:
        """Block list requests with `q=query` until the returned event is set."""
        event = asyncio.Event()
        self.held[query] = event
        return event

    def requests_for(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method in self.fail:
            return httpx.Response(self.fail[request.method], json={"detail": "boom"})

        path = request.url.path
        if path == "/test":
            return httpx.Response(200, json={"backend": "ok", "database": "connected"})
        if path == "/api/movies" and request.method == "GET":
            query = request.url.params.get("q")
            if query in self.held:
                await self.held[query].wait()
            return httpx.Response(200, json=self._list(query, request.url.params.get("genre")))
        if path == "/api/movies" and request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(201, json=self.add(**body))
        if path.startswith("/api/movies/") and request.method == "DELETE":
            raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
            movie_id = unquote(raw_path.rsplit("/", 1)[-1])
            if self.movies.pop(movie_id, None) is None:
                return httpx.Response(404, json={"detail": "Movie not found"})
            return httpx.Response(204)
        return httpx.Response(404, json={"detail": "Not found"})

    def _list(self, query: str | None, genre: str | None) -> list[dict]:
        movies = list(self.movies.values())
        if query:
            movies = [m for m in movies if query.lower() in m["title"].lower()]
        if genre:
            movies = [m for m in movies if any(genre.lower() in g.lower() for g in m.get("genres") or [])]
        return movies


@pytest.fixture
def fake_service() -> FakeMovieService:
    return FakeMovieService()


@pytest.fixture
def movies_client(fake_service: FakeMovieService) -> MoviesClient:
    return MoviesClient(base_url=BACKEND_URL, timeout=5.0, transport=httpx.MockTransport(fake_service))


@pytest.fixture
async def store(movies_client: MoviesClient):
    catalog = CatalogStore(movies_client)
    yield catalog
    await catalog.close()
    await movies_client.close()
