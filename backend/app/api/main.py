from fastapi import APIRouter

from app.api.routes import (
    movies,
    screenings,
    utils,
)

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(movies.router)
api_router.include_router(screenings.router)
