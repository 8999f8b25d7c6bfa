# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Admin authentication — shared API key check."""
import hmac
from typing import Optional

from app.core.errors import UnauthorizedError
from app.core.logging import get_logger
from app.metrics import ADMIN_AUTH_FAILURES

logger = get_logger(__name__)


class AdminAuthService:
    def __init__(self, admin_api_key: str):
        self._admin_key = admin_api_key or ""

    def validate_api_key(self, api_key: Optional[str]) -> bool:
        # An unset server key locks the admin routes rather than opening them.
        if not self._admin_key or not api_key:
            return False
        return hmac.compare_digest(api_key.encode("utf-8"), self._admin_key.encode("utf-8"))

    def require_admin(self, api_key: Optional[str]) -> None:
        if not self.validate_api_key(api_key):
            ADMIN_AUTH_FAILURES.inc()
            logger.warning("Admin request rejected: %s API key", "missing" if not api_key else "invalid")
            raise UnauthorizedError()
