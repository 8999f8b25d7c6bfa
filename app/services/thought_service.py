# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for thoughts — free-text feedback, email optional."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.core.errors import ValidationError
from app.core.logging import get_logger
from app.metrics import THOUGHTS_SUBMITTED, VALIDATION_FAILURES
from app.repositories.thought_repository import ThoughtRepository
from app.services import validation
from app.services.export import render_csv

logger = get_logger(__name__)

EXPORT_HEADER = ("Email", "Message", "Submitted Date", "Source", "IP Address")


class ThoughtService:
    def __init__(self, repo: ThoughtRepository, default_source: str):
        self._repo = repo
        self._default_source = default_source

    def submit(self, message: Optional[str], email: Optional[str] = None,
               source: Optional[str] = None, ip_address: Optional[str] = None,
               user_agent: Optional[str] = None) -> None:
        try:
            trimmed = validation.require_message(message)
            normalized = validation.optional_email(email)
            resolved_source = validation.resolve_source(source, self._default_source)
        except ValidationError:
            VALIDATION_FAILURES.labels(collection="thoughts").inc()
            raise

        entry = {
            "id": str(uuid.uuid4()),
            "email": normalized,
            "message": trimmed,
            "created_at": datetime.now(timezone.utc),
            "source": resolved_source,
            "ip_address": ip_address,
            "user_agent": user_agent[:512] if user_agent else None,
        }
        self._repo.insert(entry)
        THOUGHTS_SUBMITTED.inc()
        logger.info("Thought stored id=%s email=%s length=%d", entry["id"], normalized, len(trimmed),
                    extra={"collection": "thoughts"})

    def count(self) -> int:
        return self._repo.count()

    def list_entries(self) -> List[Dict[str, Any]]:
        return [
            {
                "email": r["email"],
                "message": r["message"],
                "timestamp": r["created_at"],
                "source": r["source"],
            }
            for r in self._repo.list_all()
        ]

    def export_csv(self) -> str:
        rows = [
            (r["email"], r["message"], r["created_at"], r["source"], r["ip_address"])
            for r in self._repo.list_all()
        ]
        logger.info("Thoughts exported rows=%d", len(rows), extra={"collection": "thoughts"})
        return render_csv(EXPORT_HEADER, rows)
