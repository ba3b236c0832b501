"""
Error Handlers
==============

Render every error as the ``{status, message, data}`` envelope.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from influencer_service.application.dto.influencer_dto import GlobalResponse

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, error) -> JSONResponse:
    body = GlobalResponse(status=status_code, message=message, data={"error": error})
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException raised by controllers or by routing (404/405)."""
    return _envelope(exc.status_code, "error", exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or wrongly typed request body."""
    return _envelope(status.HTTP_400_BAD_REQUEST, "Error parsing json", exc.errors())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything nobody else handled."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "error", "Internal server error")


def register_error_handlers(application: FastAPI) -> None:
    """Attach the envelope error handlers to an application."""
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
