from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import ErrorMessage

from .base import AppError

logger = getLogger(__name__)


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    body = ErrorMessage(message=message, uri=request.url.path)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f" {exc.status_code} Error: {exc.detail} (cause: {exc.__cause__!r})")
        else:
            logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return _error_response(request, exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        logger.warning(f" 400 Error: {errors}")
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, f"Invalid request. {errors}"
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", exc_info=exc)
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred.",
        )
