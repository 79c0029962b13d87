"""Custom error types for the advisor."""

from typing import Optional


class AdvisorError(Exception):
    """Base error for advisor operations."""
    pass


class ConfigurationError(AdvisorError):
    """Provider is missing a credential or has an invalid setting."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class BackendError(AdvisorError):
    """Remote completion call failed (non-2xx response or transport error)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        provider: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.provider = provider


class ContentStoreError(AdvisorError):
    """Content store query failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# Shown to users whenever analyze_need rejects.
APOLOGY_MESSAGE = (
    "I'm sorry, I'm having trouble processing your request right now. "
    "Please try again or contact us directly."
)
