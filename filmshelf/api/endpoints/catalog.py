from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from filmshelf.core.templates import render
from filmshelf.models.movie import MovieFilters, MovieForm
from filmshelf.services.catalog import CatalogStore

router = APIRouter(tags=["catalog"])


def _store(request: Request) -> CatalogStore:
    return request.app.state.catalog


def _catalog_page(store: CatalogStore, status_code: int = 200) -> HTMLResponse:
    return render(
        "index.html",
        status_code=status_code,
        state=store.state,
        filters=store.filters,
        form=store.form,
        form_error=store.form_error,
    )


def _back_to_catalog() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def catalog_page(request: Request):
    store = _store(request)
    await store.settle()
    return _catalog_page(store)


@router.get("/state", summary="Current catalog view state")
async def catalog_state(request: Request) -> dict:
    store = _store(request)
    await store.settle()
    state = store.state
    return {
        "status": state.status.value,
        "error_message": state.error_message,
        "entries": [movie.model_dump() for movie in state.entries],
        "filters": store.filters.model_dump(),
    }


@router.post("/search")
async def search(request: Request, q: str = Form(""), genre: str = Form("")):
    store = _store(request)
    await store.spawn(store.refresh(MovieFilters(query=q, genre=genre)))
    return _back_to_catalog()


@router.post("/movies")
async def create_movie(
    request: Request,
    title: str = Form(""),
    year: str = Form(""),
    genres: str = Form(""),
    rating: str = Form(""),
    poster_url: str = Form(""),
    description: str = Form(""),
    director: str = Form(""),
    cast: str = Form(""),
):
    store = _store(request)
    form = MovieForm(
        title=title,
        year=year,
        genres=genres,
        rating=rating,
        poster_url=poster_url,
        description=description,
        director=director,
        cast=cast,
    )
    if await store.spawn(store.create(form)):
        return _back_to_catalog()
    # keep what the user typed so they can correct it
    return _catalog_page(store, status_code=400 if store.form_error else 502)


@router.get("/movies/{movie_id}/delete", response_class=HTMLResponse)
async def confirm_delete_page(movie_id: str, request: Request):
    store = _store(request)
    movie = next((m for m in store.state.entries if str(m.id) == movie_id), None)
    return render("confirm_delete.html", movie_id=movie_id, movie=movie)


@router.post("/movies/{movie_id}/delete")
async def delete_movie(movie_id: str, request: Request, confirm: str = Form("")):
    store = _store(request)
    confirmed = confirm == "yes"
    deleted = await store.spawn(store.remove(movie_id, confirm=lambda: confirmed))
    if not deleted and confirmed:
        logger.warning(f"Movie {movie_id} was not deleted")
    return _back_to_catalog()
