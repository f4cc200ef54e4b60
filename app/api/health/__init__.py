import httpx
import psutil
import shutil

from app.core.config import Config



async def check_client_source():
    try:
        async with httpx.AsyncClient(timeout=2.0) as client:
            response = await client.get(Config.CLIENTS_SOURCE_URL)
        return "up" if response.status_code < 500 else "down"
    except httpx.HTTPError:
        return "down"


def check_disk():
    total, used, free = shutil.disk_usage("/")
    return {
        "total_gb": round(total / (1024 ** 3), 2),
        "used_gb": round(used / (1024 ** 3), 2),
        "free_gb": round(free / (1024 ** 3), 2),
        "usage_percent": round((used / total) * 100, 2)
    }


def check_memory():
    mem = psutil.virtual_memory()
    return {
        "total_gb": round(mem.total / (1024 ** 3), 2),
        "used_gb": round(mem.used / (1024 ** 3), 2),
        "available_gb": round(mem.available / (1024 ** 3), 2),
        "usage_percent": mem.percent
    }
