"""
Exception handlers shared by every router.

- request validation (bad JSON, wrong types, bad path ids) -> 400
- storage failures -> 500 with a generic message
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (
    asyncpg.exceptions.PostgresError,
    asyncpg.exceptions.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error."},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    for exc_type in STORAGE_ERRORS:
        app.add_exception_handler(exc_type, storage_error_handler)
