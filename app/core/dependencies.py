# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.

Each application instance owns one ``Container`` on ``app.state`` so the
engine and admin key are passed in explicitly rather than read from globals.
"""
from typing import Optional

from fastapi import Header, Request
from sqlalchemy.engine import Engine

from app.core.config import Settings
from app.repositories.thought_repository import ThoughtRepository
from app.repositories.waitlist_repository import WaitlistRepository
from app.services.auth_service import AdminAuthService
from app.services.thought_service import ThoughtService
from app.services.waitlist_service import WaitlistService


class Container:
    def __init__(self, settings: Settings, engine: Engine):
        self.settings = settings
        self.engine = engine
        self.waitlist_repo = WaitlistRepository(engine)
        self.thought_repo = ThoughtRepository(engine)
        self.waitlist_service = WaitlistService(self.waitlist_repo, settings.DEFAULT_SOURCE)
        self.thought_service = ThoughtService(self.thought_repo, settings.DEFAULT_SOURCE)
        self.auth_service = AdminAuthService(settings.ADMIN_API_KEY)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_waitlist_service(request: Request) -> WaitlistService:
    return get_container(request).waitlist_service


def get_thought_service(request: Request) -> ThoughtService:
    return get_container(request).thought_service


def require_admin(
    request: Request,
    api_key: Optional[str] = Header(default=None, alias="X-API-Key"),
) -> None:
    get_container(request).auth_service.require_admin(api_key)


def client_context(request: Request) -> dict:
    """IP address and User-Agent of the caller, captured at submission."""
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }
