"""Mapping of domain errors to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from holonet.api.schemas import APIError, ErrorDetail
from holonet.core.exceptions import HolonetError, InvalidResourceKind, UpstreamLookupFailed

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The Star Wars resource you requested could not be found."


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = APIError(error=ErrorDetail(code=code, message=message))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def not_found_handler(request: Request, exc: HolonetError) -> JSONResponse:
    """Unknown kinds and failed upstream lookups read as a missing resource."""
    logger.info(f"{request.url.path} not found: {exc.message}")
    return _error_response(404, "not_found", NOT_FOUND_MESSAGE)


async def holonet_error_handler(request: Request, exc: HolonetError) -> JSONResponse:
    """Any other domain failure is a server error."""
    logger.error(f"{request.url.path} failed: {exc.message}")
    return _error_response(500, "internal_error", "An unexpected error occurred.")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidResourceKind, not_found_handler)
    app.add_exception_handler(UpstreamLookupFailed, not_found_handler)
    app.add_exception_handler(HolonetError, holonet_error_handler)
