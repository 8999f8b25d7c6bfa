# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from app.repositories.thought_repository import ThoughtRepository
from app.repositories.waitlist_repository import WaitlistRepository

__all__ = ["ThoughtRepository", "WaitlistRepository"]
