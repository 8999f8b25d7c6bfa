# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
JSON-lines logger for the waitlist service.

Request context (``request_id``, ``method``, ``path``, ``status``) and the
``collection`` a record belongs to are passed through ``extra=`` and copied
into the output when present.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

CONTEXT_FIELDS = ("request_id", "method", "path", "status", "collection")


class JSONFormatter(logging.Formatter):
    def __init__(self, service: str):
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_obj[field] = value
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = str(record.exc_info[1])
            log_obj["exception_type"] = type(record.exc_info[1]).__name__
        return json.dumps(log_obj)


def get_logger(name: str = "waitlist-service") -> logging.Logger:
    from app.core.config import settings
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter(settings.SERVICE_NAME))
        logger.handlers = [handler]
        logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        logger.propagate = False
    return logger
