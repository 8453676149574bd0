"""
Custom exceptions for validation errors.

Hard errors: the request is rejected before it reaches a tool
Soft warnings: the request proceeds, the caller decides what to show
"""

from dataclasses import dataclass


# ============ HARD ERRORS ============
# These block the request

class ValidationError(Exception):
    """Base exception for all validation errors."""
    def __init__(self, message: str, user_message: str = None, field_name: str = None):
        super().__init__(message)
        self.user_message = user_message or message
        self.field_name = field_name  # Offending field, when there is one


class TypeMismatchError(ValidationError):
    """Field value is not a string."""
    pass


class EmptyInputError(ValidationError):
    """Field value is empty after trimming."""
    pass


class LengthExceededError(ValidationError):
    """Field value exceeds its maximum allowed length."""
    def __init__(self, message: str, field_name: str, max_length: int, user_message: str = None):
        super().__init__(message, user_message, field_name)
        self.max_length = max_length


class RateLimitExceededError(ValidationError):
    """Too many requests from one client in the current window."""
    pass


class SecurityRiskError(ValidationError):
    """Input matched the injection denylist."""
    pass


# ============ SOFT WARNINGS ============
# These let the request through

@dataclass
class ValidationWarning:
    """
    A soft warning that doesn't block the request.
    """
    message: str  # Human-readable, e.g. "Context looks repetitive"
