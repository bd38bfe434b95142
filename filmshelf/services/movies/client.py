from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter

from filmshelf.core.base_client import BaseClient
from filmshelf.core.config import settings
from filmshelf.core.exceptions import RemoteServiceError
from filmshelf.core.version import __version__
from filmshelf.models.movie import Movie
from filmshelf.services.movies.query import MOVIES_PATH, ListRequest, build_list_request, movie_path

_movie_list = TypeAdapter(list[Movie])


def _remote_error(action: str, exc: Exception) -> RemoteServiceError:
    """Map a failed call onto a single readable message."""
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return RemoteServiceError(f"Failed to {action} ({status})", status_code=status)
    if isinstance(exc, httpx.RequestError):
        return RemoteServiceError(f"Failed to {action}: could not reach the server")
    return RemoteServiceError(f"Failed to {action}: unexpected response from the server")


class MoviesClient(BaseClient):
    """
    Client for the remote movie collection service.

    Every method raises RemoteServiceError on a non-2xx response, a transport
    failure or a body that cannot be parsed.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"Filmshelf/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(
            base_url=base_url if base_url is not None else settings.BACKEND_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS,
            headers=headers,
            transport=transport,
        )

    async def list_movies(self, request: ListRequest | None = None) -> list[Movie]:
        """Fetch the movie list described by `request` (all movies when omitted)."""
        request = request or build_list_request()
        try:
            data = await self.get(request.url, params=request.params)
            return _movie_list.validate_python(data)
        except (httpx.HTTPError, ValueError) as e:
            raise _remote_error("load movies", e) from e

    async def create_movie(self, payload: dict[str, Any]) -> None:
        try:
            await self.post(MOVIES_PATH, json=payload)
        except httpx.HTTPError as e:
            raise _remote_error("add movie", e) from e
        logger.info(f"Created movie '{payload.get('title')}'")

    async def delete_movie(self, movie_id: str | int) -> None:
        try:
            await self.delete(movie_path(movie_id))
        except httpx.HTTPError as e:
            raise _remote_error("delete movie", e) from e
        logger.info(f"Deleted movie {movie_id}")

    async def check_connection(self) -> dict[str, Any]:
        """Probe the remote service; returns its JSON reply (or {} for a non-JSON body)."""
        try:
            response = await self._request("GET", settings.CONNECTION_CHECK_PATH)
        except httpx.HTTPError as e:
            raise _remote_error("reach the movie service", e) from e
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {"response": data}
