# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Waitlist endpoints — signup, count, admin list and export.
Thin HTTP layer — delegates ALL logic to WaitlistService.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.dependencies import client_context, get_waitlist_service, require_admin
from app.metrics import EXPORTS
from app.schemas import (
    CountResponse, WaitlistListResponse, WaitlistRequest, WaitlistSubmitResponse,
)
from app.services.waitlist_service import WaitlistService

router = APIRouter(prefix="/api/waitlist", tags=["Waitlist"])


@router.post("", status_code=201, response_model=WaitlistSubmitResponse)
def join_waitlist(
    payload: WaitlistRequest,
    context: dict = Depends(client_context),
    service: WaitlistService = Depends(get_waitlist_service),
):
    count = service.join(payload.email, source=payload.source, **context)
    return WaitlistSubmitResponse(message="Successfully added to waitlist", count=count)


@router.get("/count", response_model=CountResponse)
def waitlist_count(service: WaitlistService = Depends(get_waitlist_service)):
    return CountResponse(count=service.count())


@router.get("/all", response_model=WaitlistListResponse, dependencies=[Depends(require_admin)])
def list_waitlist(service: WaitlistService = Depends(get_waitlist_service)):
    """Every signup, newest first. Requires X-API-Key."""
    entries = service.list_entries()
    return WaitlistListResponse(count=len(entries), data=entries)


@router.get("/export", dependencies=[Depends(require_admin)])
def export_waitlist(service: WaitlistService = Depends(get_waitlist_service)):
    """Download every signup as CSV. Requires X-API-Key."""
    body = service.export_csv()
    EXPORTS.labels(collection="waitlist").inc()
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=waitlist.csv"},
    )
