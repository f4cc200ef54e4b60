from fastapi import APIRouter
from app.api import health

health_router = APIRouter()
@health_router.get("/")
async def health_check():
    client_source_status = await health.check_client_source()

    status = "ok"
    if client_source_status == "down":
        status = "degraded"

    return {
        "status": status,
        "checks": {
            "client_source": client_source_status,
            "disk": health.check_disk(),
            "memory": health.check_memory()
        }
    }
