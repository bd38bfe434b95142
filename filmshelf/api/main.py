from fastapi import APIRouter

from .endpoints.catalog import router as catalog_router
from .endpoints.health import router as health_router

api_router = APIRouter()

api_router.include_router(catalog_router)
api_router.include_router(health_router)
