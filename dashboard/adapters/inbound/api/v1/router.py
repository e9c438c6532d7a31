# dashboard/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from dashboard.adapters.inbound.api.v1.endpoints import auth_endpoint, announcement_endpoint, quiz_endpoint

api_router = APIRouter()

# Include the endpoint routers
api_router.include_router(auth_endpoint.router, prefix="/auth", tags=["Auth"])
api_router.include_router(announcement_endpoint.router, prefix="/announcement", tags=["Announcement"])
api_router.include_router(quiz_endpoint.router, prefix="/quiz", tags=["Quiz"])
