import asyncio
import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from loguru import logger

from filmshelf.core.exceptions import CatalogClosedError, FormValidationError, RemoteServiceError
from filmshelf.models.movie import MovieFilters, MovieForm
from filmshelf.services.catalog.state import CatalogStatus, ViewState
from filmshelf.services.movies.client import MoviesClient
from filmshelf.services.movies.payload import build_create_payload
from filmshelf.services.movies.query import build_list_request

Confirm = Callable[[], bool | Awaitable[bool]]


class CatalogStore:
    """
    Keeps the displayed movie list in step with the remote collection.

    All mutations happen on the event loop that owns the store. Each refresh
    is tagged with a sequence number when dispatched and its response is only
    applied while it is still the latest one; older responses are dropped.
    Work spawned through the store is cancelled by close(), after which no
    response can touch the state.
    """

    def __init__(self, client: MoviesClient):
        self.client = client
        self.state = ViewState()
        self.filters = MovieFilters()
        self.form = MovieForm()
        self.form_error: str | None = None
        self._sequence = 0
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def _set_state(self, state: ViewState) -> None:
        if self._closed:
            return
        self.state = state

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Run `coro` as a task bound to the store's lifetime."""
        if self._closed:
            coro.close()
            raise CatalogClosedError("Catalog store is closed")
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def mount(self) -> asyncio.Task:
        """Start a fresh session: loading state and an unfiltered initial fetch."""
        self.state = ViewState(status=CatalogStatus.LOADING)
        self.filters = MovieFilters()
        logger.info("Catalog mounted, loading movies")
        return self.spawn(self.refresh())

    async def settle(self) -> None:
        """Wait until every spawned operation has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Cancel pending work and stop accepting state changes."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.debug(f"Cancelled {len(tasks)} pending catalog operation(s)")

    async def refresh(self, filters: MovieFilters | None = None) -> None:
        """
        Reload the list with `filters` (which become the active filters) or
        with the active filters when none are given.
        """
        if self._closed:
            return
        if filters is not None:
            self.filters = filters
        self._sequence += 1
        sequence = self._sequence
        self._set_state(self.state.loading())

        request = build_list_request(self.filters)
        try:
            movies = await self.client.list_movies(request)
        except RemoteServiceError as e:
            if self._is_current(sequence):
                logger.warning(f"Movie list refresh failed: {e.message}")
                self._set_state(self.state.failed(e.message))
            return

        if self._is_current(sequence):
            self._set_state(self.state.loaded(movies))
        else:
            logger.debug(f"Discarding stale movie list (request {sequence}, latest {self._sequence})")

    def _is_current(self, sequence: int) -> bool:
        return not self._closed and sequence == self._sequence

    async def create(self, form: MovieForm | None = None) -> bool:
        """
        Submit the create form. Returns True once the movie was stored and the
        list reloaded; the form is then reset. On failure the form is kept.
        """
        if form is not None:
            self.form = form
        self.form_error = None
        if self._closed:
            return False

        try:
            payload = build_create_payload(self.form)
        except FormValidationError as e:
            self.form_error = e.message
            logger.info(f"Create rejected: {e.message}")
            return False

        try:
            await self.client.create_movie(payload)
        except RemoteServiceError as e:
            logger.warning(f"Create failed: {e.message}")
            self._set_state(self.state.failed(e.message))
            return False

        await self.refresh()
        if not self._closed:
            self.form = MovieForm()
        return True

    async def remove(self, movie_id: str | int, confirm: Confirm) -> bool:
        """Delete a movie after `confirm` agrees, then reload the list."""
        if self._closed:
            return False
        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug(f"Delete of movie {movie_id} cancelled")
            return False

        try:
            await self.client.delete_movie(movie_id)
        except RemoteServiceError as e:
            logger.warning(f"Delete of movie {movie_id} failed: {e.message}")
            self._set_state(self.state.failed(e.message))
            return False

        await self.refresh()
        return True
