from fastapi import APIRouter
from app.api.v1 import health, locations, reference, search

api_router = APIRouter()
api_router.include_router(search.router)
api_router.include_router(locations.router)
api_router.include_router(reference.router)
api_router.include_router(health.router)
