import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.exceptions import GlobalException
from app.core.errors import ErrorCode
from app.core.messages import ErrorMessage
from app.core.middlewares import logger
from app.utils.response import ErrorDetail, error_response


def _error_json(status_code: int, message: str, code: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_response(
            message=message,
            errors=[ErrorDetail(code=code, message=detail)],
            status_code=status_code,
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI):
    # ---------- Custom Domain Errors ----------
    @app.exception_handler(GlobalException)
    async def handle_global_exception(
        request: Request, exc: GlobalException
    ):
        return _error_json(
            exc.status_code, exc.message, exc.error_code, exc.message
        )

    # ---------- Client Source Errors ----------
    @app.exception_handler(httpx.HTTPError)
    async def handle_client_source_error(
        request: Request, exc: httpx.HTTPError
    ):
        logger.error(f"Client source failure on {request.url.path}: {exc}")
        return _error_json(
            502,
            ErrorMessage.CLIENT_SOURCE_FAILURE,
            ErrorCode.EXTERNAL_SERVICE_ERROR,
            str(exc),
        )

    # ---------- Catch-all (500) ----------
    @app.exception_handler(Exception)
    async def handle_unhandled_exception(
        request: Request, exc: Exception
    ):
        logger.exception(f"Unhandled error on {request.url.path}")
        return _error_json(
            500,
            ErrorMessage.SERVER_ERROR,
            ErrorCode.INTERNAL_SERVER_ERROR,
            str(exc),
        )
