# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for waitlist signups."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.core.errors import ConflictError, ValidationError
from app.core.logging import get_logger
from app.metrics import VALIDATION_FAILURES, WAITLIST_DUPLICATES, WAITLIST_SIGNUPS
from app.repositories.waitlist_repository import WaitlistRepository
from app.services import validation
from app.services.export import render_csv

logger = get_logger(__name__)

EXPORT_HEADER = ("Email", "Signup Date", "Source", "IP Address")


class WaitlistService:
    def __init__(self, repo: WaitlistRepository, default_source: str):
        self._repo = repo
        self._default_source = default_source

    def join(self, email: Optional[str], source: Optional[str] = None,
             ip_address: Optional[str] = None,
             user_agent: Optional[str] = None) -> int:
        """Store a signup and return the collection size read afterwards.

        The count is not atomic with the insert and may lag under
        concurrent signups.
        """
        try:
            normalized = validation.require_email(email)
            resolved_source = validation.resolve_source(source, self._default_source)
        except ValidationError:
            VALIDATION_FAILURES.labels(collection="waitlist").inc()
            raise

        entry = {
            "id": str(uuid.uuid4()),
            "email": normalized,
            "created_at": datetime.now(timezone.utc),
            "source": resolved_source,
            "ip_address": ip_address,
            "user_agent": user_agent[:512] if user_agent else None,
        }
        try:
            self._repo.insert(entry)
        except ConflictError:
            WAITLIST_DUPLICATES.inc()
            raise
        WAITLIST_SIGNUPS.inc()
        logger.info("Waitlist signup id=%s email=%s source=%s", entry["id"], normalized, resolved_source,
                    extra={"collection": "waitlist"})
        return self._repo.count()

    def count(self) -> int:
        return self._repo.count()

    def list_entries(self) -> List[Dict[str, Any]]:
        return [
            {"email": r["email"], "timestamp": r["created_at"], "source": r["source"]}
            for r in self._repo.list_all()
        ]

    def export_csv(self) -> str:
        rows = [
            (r["email"], r["created_at"], r["source"], r["ip_address"])
            for r in self._repo.list_all()
        ]
        logger.info("Waitlist exported rows=%d", len(rows), extra={"collection": "waitlist"})
        return render_csv(EXPORT_HEADER, rows)
