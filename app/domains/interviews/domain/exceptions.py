"""
Interview Domain Exceptions

Failures of the collaborators the reminder pipeline depends on.
"""

from app.core.domain.exceptions import DomainException, IntegrationException


class StoreError(DomainException):
    """Raised when a read or write against the interview store fails."""

    def __init__(self, message: str, original_error: Exception | None = None):
        details = {"original_error": str(original_error)} if original_error else {}
        super().__init__(message, "STORE_ERROR", details)
        self.original_error = original_error


class CandidateFetchError(StoreError):
    """Raised when sweep candidates cannot be fetched. Aborts the sweep."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.code = "CANDIDATE_FETCH_ERROR"


class NoRecipientConfiguredError(DomainException):
    """Raised when neither a fixed recipient nor the interview owner is known."""

    def __init__(self, interview_id: int | None = None):
        super().__init__(
            "no recipient configured",
            "NO_RECIPIENT_CONFIGURED",
            {"interview_id": interview_id},
        )


class MessageTransportError(IntegrationException):
    """Raised when the messaging platform rejects or fails a push."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__("line", message, original_error, code="MESSAGE_TRANSPORT_ERROR")
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code
