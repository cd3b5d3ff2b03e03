"""External service domain exceptions."""

from .base import DomainException


class ExternalAPIException(DomainException):
    """Raised when an external service returns an error."""

    def __init__(
        self,
        message: str,
        service: str = "external",
        status_code: int | None = None,
    ):
        super().__init__(
            message=message,
            code="EXTERNAL_API_ERROR",
        )
        self.service = service
        self.status_code = status_code


class ExternalTimeoutException(ExternalAPIException):
    """Raised when an external service times out."""

    def __init__(self, service: str = "external"):
        super().__init__(
            message=f"{service} request timed out",
            service=service,
            status_code=None,
        )
        self.code = "EXTERNAL_API_TIMEOUT"
