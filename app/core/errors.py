# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service error taxonomy. Each error knows its HTTP status and the message
that is safe to return to the caller.
"""


class ServiceError(Exception):
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class UnauthorizedError(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class ConflictError(ServiceError):
    status_code = 409
    default_message = "This email is already registered"


class StorageError(ServiceError):
    status_code = 500
    default_message = "Server error. Please try again."
