"""
Domain exceptions.
"""

from typing import Optional


class CarteiraError(Exception):
    """Base class for application errors."""


class ValidationError(CarteiraError):
    """User input rejected before reaching the store."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class StoreError(CarteiraError):
    """The backing store failed to complete an operation."""

    def __init__(self, operation: str, message: str, cause: Optional[Exception] = None):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message
        self.cause = cause


class AuthenticationError(CarteiraError):
    """Credentials or session token not accepted."""
