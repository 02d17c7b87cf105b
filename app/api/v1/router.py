from fastapi import APIRouter

from app.api.routers import kitchens, restaurants

api_router = APIRouter()

api_router.include_router(kitchens.router)
api_router.include_router(restaurants.router)
