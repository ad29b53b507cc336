"""
Error hierarchy for InvoiceFlow.

Each error carries the HTTP status it maps to. The messages are safe to
return to the caller; internal details only go to the logs.
"""

from fastapi import status


class InvoiceFlowError(Exception):
    """Base exception for all InvoiceFlow errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class AuthenticationError(InvoiceFlowError):
    """Missing, invalid or expired credentials."""

    http_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(InvoiceFlowError):
    """
    Entity absent, or owned by another user.

    Both cases share this error so the caller cannot probe for other
    tenants' ids.
    """

    http_status = status.HTTP_404_NOT_FOUND


class UpstreamError(InvoiceFlowError):
    """The data store failed for a reason other than a missing row."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, operation: str):
        super().__init__("Internal server error")
        self.operation = operation


class ConflictError(InvoiceFlowError):
    """A unique value (such as a registration email) is already taken."""

    http_status = status.HTTP_409_CONFLICT
