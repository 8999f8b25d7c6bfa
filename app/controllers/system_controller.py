# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import ping
from app.core.dependencies import Container, get_container

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(container: Container = Depends(get_container)):
    """Liveness check — never touches the database."""
    return {
        "status": "ok",
        "message": "Server is running",
        "service": container.settings.SERVICE_NAME,
        "version": container.settings.SERVICE_VERSION,
    }


@router.get("/health/ready")
def readiness_check(request: Request, container: Container = Depends(get_container)):
    """Readiness check — verifies database connectivity and the schema bootstrap."""
    try:
        ping(container.engine)
    except SQLAlchemyError as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "database": "unavailable", "detail": str(exc)},
        )
    db_ready = getattr(request.app.state, "db_ready", None)
    if db_ready is not True:
        return JSONResponse(
            status_code=503,
            content={
                "status": "degraded",
                "database": "connected",
                "schema": "pending" if db_ready is None else "unavailable",
            },
        )
    return {"status": "ok", "database": "connected"}


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
