"""Exception handlers mapping domain failures to JSON error responses."""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..analytics import StatisticsError
from ..services import PriceFeedError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standardized error response envelope."""

    detail: str
    error_code: str


def _error_code_from_status(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 400:
        return "bad_request"
    if status_code == 422:
        return "validation_error"
    return "http_error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers for standardized responses."""

    @app.exception_handler(HTTPException)
    async def _handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
        detail = exc.detail if exc.detail else "HTTP error"
        if not isinstance(detail, str):
            detail = str(detail)
        error = ErrorResponse(detail=detail, error_code=_error_code_from_status(exc.status_code))
        logger.warning("HTTPException on %s: %s", request.url.path, error.model_dump())
        return JSONResponse(status_code=exc.status_code, content=error.model_dump())

    @app.exception_handler(StatisticsError)
    async def _handle_statistics_error(request: Request, exc: StatisticsError) -> JSONResponse:
        error = ErrorResponse(detail=str(exc), error_code=exc.error_code)
        logger.warning("Statistics error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content=error.model_dump())

    @app.exception_handler(PriceFeedError)
    async def _handle_price_feed_error(request: Request, exc: PriceFeedError) -> JSONResponse:
        error = ErrorResponse(detail=f"Failed to fetch price data: {exc}", error_code=exc.error_code)
        logger.error("Price feed error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=502, content=error.model_dump())


__all__ = ["ErrorResponse", "register_exception_handlers"]
