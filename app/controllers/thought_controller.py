# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Thoughts endpoints — submit, count, admin list and export."""
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.dependencies import client_context, get_thought_service, require_admin
from app.metrics import EXPORTS
from app.schemas import CountResponse, SubmitResponse, ThoughtListResponse, ThoughtRequest
from app.services.thought_service import ThoughtService

router = APIRouter(prefix="/api/thoughts", tags=["Thoughts"])


@router.post("", status_code=201, response_model=SubmitResponse)
def submit_thought(
    payload: ThoughtRequest,
    context: dict = Depends(client_context),
    service: ThoughtService = Depends(get_thought_service),
):
    service.submit(payload.message, email=payload.email, source=payload.source, **context)
    return SubmitResponse(message="Thanks for sharing your thoughts")


@router.get("/count", response_model=CountResponse)
def thoughts_count(service: ThoughtService = Depends(get_thought_service)):
    return CountResponse(count=service.count())


@router.get("/all", response_model=ThoughtListResponse, dependencies=[Depends(require_admin)])
def list_thoughts(service: ThoughtService = Depends(get_thought_service)):
    entries = service.list_entries()
    return ThoughtListResponse(count=len(entries), data=entries)


@router.get("/export", dependencies=[Depends(require_admin)])
def export_thoughts(service: ThoughtService = Depends(get_thought_service)):
    body = service.export_csv()
    EXPORTS.labels(collection="thoughts").inc()
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=thoughts.csv"},
    )
