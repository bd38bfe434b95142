from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from filmshelf.core.exceptions import RemoteServiceError
from filmshelf.core.templates import render

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/test", response_class=HTMLResponse, summary="Check the connection to the movie service")
async def connection_check(request: Request):
    client = request.app.state.catalog.client
    try:
        details = await client.check_connection()
    except RemoteServiceError as exc:
        logger.warning(f"Connection check against {client.base_url} failed: {exc.message}")
        return render(
            "connection.html",
            status_code=502,
            backend_url=client.base_url,
            ok=False,
            error=exc.message,
            details={},
        )
    return render("connection.html", backend_url=client.base_url, ok=True, error=None, details=details)
