# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for thoughts (free-text feedback)."""
from app.models.tables import thoughts
from app.repositories.base import TableRepository


class ThoughtRepository(TableRepository):
    table = thoughts
