# src/services/order_service/app.py
"""
FastAPI application for the order service.

Every error response has the shape {"error": "<message>"}.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.common.exceptions import (
    AlreadyAssigned,
    DistanceLookupFailed,
    NotFoundFailure,
    OrderServiceError,
    PersistenceFailed,
    ValidationFailure,
)
from src.common.logger import log_error, log_warning, setup_logging
from src.config import settings
from src.infra.database import close_db, get_db, init_db
from src.services.order_service.dependencies import cleanup_dependencies, init_dependencies
from src.services.order_service.routes import router


ERROR_STATUS_CODES: dict[type[OrderServiceError], int] = {
    ValidationFailure: 400,
    DistanceLookupFailed: 400,
    NotFoundFailure: 404,
    AlreadyAssigned: 409,
    PersistenceFailed: 500,
}


def status_code_for(error: OrderServiceError) -> int:
    """Maps a domain error to an HTTP status, most specific class first."""
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_db()
    await init_dependencies()
    yield
    await cleanup_dependencies()
    await close_db()


app = FastAPI(
    title="Order Service",
    version=settings.system.VERSION,
    lifespan=lifespan
)

app.include_router(router)


@app.exception_handler(OrderServiceError)
async def handle_order_service_error(request: Request, exc: OrderServiceError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        await log_error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        await log_warning(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return error_response(status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "Invalid request payload"

    for error in exc.errors():
        loc = error.get("loc", ())
        if len(loc) >= 2 and loc[0] == "query":
            name = loc[1]
            if error.get("type") == "int_parsing":
                message = f"{name} parameter should be a number"
            elif "ge" in (error.get("ctx") or {}):
                message = f"{name} parameter should be greater than or equal to {error['ctx']['ge']}"
            else:
                message = f"Invalid {name} parameter"
            break

    await log_warning(f"{request.method} {request.url.path} rejected (400): {message}")
    return error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return error_response(405, "Unsupported Request Method")
    return error_response(exc.status_code, str(exc.detail))


@app.get("/health")
async def health_check() -> JSONResponse:
    database_ok = await get_db().health_check()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "ok" if database_ok else "degraded",
            "service": "order_service",
            "database": "ok" if database_ok else "unavailable",
        },
    )
