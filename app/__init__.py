from fastapi import FastAPI
from app.api.router import api_router
from app.core.exception_handlers import register_exception_handlers
from app.core.middlewares import register_middleware


version = "v1"

description = """
Monthly revenue, trend and export reports for the travel agency back office.
    """

version_prefix =f"/api/{version}"

app = FastAPI(
    title="travel-agency-reports-service",
    description=description,
    version=version,
    license_info={"name": "MIT License", "url": "https://opensource.org/license/mit"},
    openapi_url=f"{version_prefix}/openapi.json",
    docs_url=f"{version_prefix}/docs",
    redoc_url=f"{version_prefix}/redoc"
)

register_exception_handlers(app)


register_middleware(app)


app.include_router(api_router, prefix=f"{version_prefix}")
