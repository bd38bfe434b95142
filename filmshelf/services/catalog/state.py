from enum import Enum

from pydantic import BaseModel, Field

from filmshelf.models.movie import Movie


class CatalogStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ViewState(BaseModel):
    """What the catalog page shows. Replaced as a whole on every transition."""

    entries: list[Movie] = Field(default_factory=list)
    status: CatalogStatus = CatalogStatus.LOADING
    error_message: str | None = None

    def loading(self) -> "ViewState":
        return ViewState(entries=self.entries, status=CatalogStatus.LOADING)

    def loaded(self, entries: list[Movie]) -> "ViewState":
        return ViewState(entries=entries, status=CatalogStatus.READY)

    def failed(self, message: str) -> "ViewState":
        return ViewState(entries=self.entries, status=CatalogStatus.ERROR, error_message=message)
