# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared data-access helpers for the single-table repositories."""
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import Table, func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import StorageError
from app.core.logging import get_logger

logger = get_logger(__name__)


def _isoformat(value: datetime) -> str:
    # SQLite drops tzinfo; stored values are always UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class TableRepository:
    table: Table

    def __init__(self, engine: Engine):
        self._engine = engine

    def _row_to_dict(self, row) -> Dict[str, Any]:
        data = dict(row)
        data["created_at"] = _isoformat(data["created_at"])
        return data

    def insert(self, entry: Dict[str, Any]) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(self.table).values(**entry))
        except IntegrityError as exc:
            self._on_integrity_error(entry, exc)
        except SQLAlchemyError as exc:
            logger.error("Failed to persist entry %s: %s", entry["id"], exc, extra={"collection": self.table.name})
            raise StorageError() from exc

    def _on_integrity_error(self, entry: Dict[str, Any], exc: IntegrityError) -> None:
        logger.error("Integrity error on entry %s: %s", entry["id"], exc, extra={"collection": self.table.name})
        raise StorageError() from exc

    def count(self) -> int:
        try:
            with self._engine.connect() as conn:
                return conn.execute(select(func.count()).select_from(self.table)).scalar() or 0
        except SQLAlchemyError as exc:
            logger.error("Failed to count rows: %s", exc, extra={"collection": self.table.name})
            raise StorageError("Server error") from exc

    def list_all(self) -> List[Dict[str, Any]]:
        """Every row, newest first."""
        query = select(self.table).order_by(
            self.table.c.created_at.desc(), self.table.c.id.desc()
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Failed to read rows: %s", exc, extra={"collection": self.table.name})
            raise StorageError("Server error") from exc
        return [self._row_to_dict(r) for r in rows]
