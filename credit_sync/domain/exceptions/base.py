"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidArgumentException(DomainException):
    """Raised when a required input is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
        )
