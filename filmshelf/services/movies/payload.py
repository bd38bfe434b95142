"""Coercion of raw create-form text into a create payload."""

import math
import re

from filmshelf.core.exceptions import FormValidationError
from filmshelf.models.movie import MovieCreate, MovieForm

# plain ASCII decimals only: no "_" separators, no non-ASCII digits, no nan/inf
_WHOLE_NUMBER = re.compile(r"[+-]?\d+(?:\.0*)?", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def split_list(raw: str) -> list[str]:
    """Split comma separated text, trimming segments and dropping empty ones."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def optional_text(raw: str) -> str | None:
    return raw if raw else None


def parse_int(field: str, raw: str) -> int | None:
    """Parse a whole number; "2016.0" is accepted as 2016."""
    text = raw.strip()
    if not text:
        return None
    if not _WHOLE_NUMBER.fullmatch(text):
        raise FormValidationError(field, f"{field.capitalize()} must be a whole number")
    return int(text.split(".", 1)[0])


def parse_float(field: str, raw: str) -> float | None:
    text = raw.strip()
    if not text:
        return None
    if not _DECIMAL.fullmatch(text):
        raise FormValidationError(field, f"{field.capitalize()} must be a number")
    value = float(text)
    if not math.isfinite(value):
        raise FormValidationError(field, f"{field.capitalize()} must be a number")
    return value


def build_create_payload(form: MovieForm) -> dict:
    """
    Turn the create form into the JSON body for POST /api/movies.

    Raises FormValidationError when the title is blank or a numeric field
    does not parse; optional fields left blank are omitted from the payload.
    """
    title = form.title.strip()
    if not title:
        raise FormValidationError("title", "Title is required")

    movie = MovieCreate(
        title=title,
        year=parse_int("year", form.year),
        genres=split_list(form.genres) or None,
        rating=parse_float("rating", form.rating),
        poster_url=optional_text(form.poster_url),
        description=optional_text(form.description),
        director=optional_text(form.director),
        cast=split_list(form.cast) or None,
    )
    return movie.to_payload()
