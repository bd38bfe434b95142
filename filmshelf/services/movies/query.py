from urllib.parse import quote

from pydantic import BaseModel, Field

from filmshelf.models.movie import MovieFilters

MOVIES_PATH = "/api/movies"


class ListRequest(BaseModel):
    """A list request against the movie collection, not yet dispatched."""

    url: str
    params: dict[str, str] = Field(default_factory=dict)


def _is_set(value: str | None) -> bool:
    return bool(value and value.strip())


def build_list_request(filters: MovieFilters | None = None, base_url: str = "") -> ListRequest:
    """
    Build the list request for the given filters.

    Blank filter values are left out entirely; anything else is passed
    through verbatim, surrounding whitespace included.
    """
    filters = filters or MovieFilters()
    params: dict[str, str] = {}
    if _is_set(filters.query):
        params["q"] = filters.query
    if _is_set(filters.genre):
        params["genre"] = filters.genre
    return ListRequest(url=f"{base_url.rstrip('/')}{MOVIES_PATH}", params=params)


def movie_path(movie_id: str | int) -> str:
    # ids are opaque; "?", "#" or "/" must not leak into the path
    return f"{MOVIES_PATH}/{quote(str(movie_id), safe='')}"
