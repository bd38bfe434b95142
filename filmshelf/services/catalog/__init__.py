from filmshelf.services.catalog.state import CatalogStatus, ViewState
from filmshelf.services.catalog.store import CatalogStore

__all__ = [
    "CatalogStatus",
    "CatalogStore",
    "ViewState",
]
