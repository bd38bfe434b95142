class FilmshelfError(Exception):
    """Base class for errors raised by the catalog client."""


class FormValidationError(FilmshelfError):
    """A create form was rejected before any request was sent."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class RemoteServiceError(FilmshelfError):
    """
    The remote movie collection failed a request.

    `status_code` is the HTTP status when a response was received, None for
    transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogClosedError(FilmshelfError):
    """Work was scheduled on a catalog store after it was closed."""
