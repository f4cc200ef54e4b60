from fastapi import APIRouter
from app.api.health.routes import health_router
from app.api.reports.routes import reports_router
api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
