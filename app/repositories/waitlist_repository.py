# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for waitlist signups."""
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError
from app.core.logging import get_logger
from app.models.tables import waitlist
from app.repositories.base import TableRepository

logger = get_logger(__name__)


class WaitlistRepository(TableRepository):
    table = waitlist

    def _on_integrity_error(self, entry: Dict[str, Any], exc: IntegrityError) -> None:
        # The unique index on email is the only constraint an insert can trip.
        logger.info("Duplicate signup rejected: %s", entry["email"], extra={"collection": "waitlist"})
        raise ConflictError() from exc
