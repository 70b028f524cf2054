# app/core/exceptions.py
"""
Domain errors raised by the customer service.

Every error carries an ErrorKind tag. Nothing inside the service catches
these; the API layer translates the kind into an HTTP status code in one
place (see app/api/v1/error_handlers.py).
"""
from enum import Enum


class ErrorKind(str, Enum):
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    EMAIL_UNAVAILABLE = "EMAIL_UNAVAILABLE"


class CustomerServiceError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerNotFoundError(CustomerServiceError):
    """No customer exists with the requested id."""
    kind = ErrorKind.CUSTOMER_NOT_FOUND

    def __init__(self, message: str, *, customer_id: int | None = None):
        super().__init__(message)
        self.customer_id = customer_id


class EmailUnavailableError(CustomerServiceError):
    """Another customer already holds the requested email."""
    kind = ErrorKind.EMAIL_UNAVAILABLE

    def __init__(self, message: str, *, email: str | None = None):
        super().__init__(message)
        self.email = email
