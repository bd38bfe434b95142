from pydantic import BaseModel, Field, field_validator


class Movie(BaseModel):
    """A catalog entry as stored by the remote movie collection."""

    id: str | int
    title: str
    year: int | None = None
    genres: list[str] = Field(default_factory=list)
    rating: float | None = None
    poster_url: str | None = None
    description: str | None = None
    director: str | None = None
    cast: list[str] = Field(default_factory=list)

    @field_validator("genres", "cast", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # the remote may send null for list fields it never stored
        return [] if value is None else value


class MovieCreate(BaseModel):
    """Create payload: a Movie minus its id. Unset fields are dropped on dump."""

    title: str
    year: int | None = None
    genres: list[str] | None = None
    rating: float | None = None
    poster_url: str | None = None
    description: str | None = None
    director: str | None = None
    cast: list[str] | None = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class MovieFilters(BaseModel):
    query: str = ""
    genre: str = ""


class MovieForm(BaseModel):
    """Raw text values of the create form, exactly as typed."""

    title: str = ""
    year: str = ""
    genres: str = ""
    rating: str = ""
    poster_url: str = ""
    description: str = ""
    director: str = ""
    cast: str = ""
