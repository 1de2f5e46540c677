from fastapi import APIRouter

from app.api.health import router as health_router
from app.api.vehicles.router import router as vehicles_router

api_router = APIRouter()
api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(vehicles_router, prefix="/api/vehicles", tags=["vehicles"])
