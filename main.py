# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Waitlist Service
================
Collects waitlist email signups and free-text feedback ("thoughts"), with
API-key-gated listing and CSV export for admins.

Port: 3000 (PORT)
"""
import asyncio
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.controllers import system_controller, thought_controller, waitlist_controller
from app.core.config import Settings, settings as default_settings
from app.core.database import build_engine, connect_with_retry, init_schema
from app.core.dependencies import Container
from app.core.errors import ServiceError
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware
from app.schemas import ErrorResponse

logger = get_logger("waitlist-service")


def _request_context(request: Request, status: int) -> dict:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "method": request.method,
        "path": request.url.path,
        "status": status,
    }


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or default_settings
    engine = engine or build_engine(settings)

    async def bootstrap_schema(application: FastAPI) -> None:
        ready = await connect_with_retry(
            lambda: init_schema(engine),
            retries=settings.DB_CONNECT_RETRIES,
            delay=settings.DB_CONNECT_RETRY_DELAY,
        )
        application.state.db_ready = ready
        if not ready:
            logger.warning("Running degraded: database schema unavailable")

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        """Start serving at once; the schema bootstrap retries in the background."""
        # None while the bootstrap is pending, then True/False.
        application.state.db_ready = None
        bootstrap = asyncio.create_task(bootstrap_schema(application))
        logger.info("%s %s listening on port %d", settings.SERVICE_NAME, settings.SERVICE_VERSION, settings.PORT)
        yield
        bootstrap.cancel()
        with suppress(asyncio.CancelledError):
            await bootstrap
        engine.dispose()
        logger.info("Database connection pool disposed — shutting down")

    application = FastAPI(
        title="Waitlist Service",
        description="Collects waitlist signups and feedback, with admin export.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        responses={
            400: {"model": ErrorResponse, "description": "Validation error"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )
    application.state.container = Container(settings, engine)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)

    @application.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.info(
            "Request rejected: %s", exc.message,
            extra=_request_context(request, exc.status_code),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Invalid request body"},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception", extra=_request_context(request, 500))
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error"},
        )

    application.include_router(system_controller.router)
    application.include_router(waitlist_controller.router)
    application.include_router(thought_controller.router)
    return application


app = create_app()


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT, log_level="info")
