"""
Field validation BEFORE a request reaches a tool.

Checks:
- Value is a string
- Value is not blank
- Trimmed value fits the field's max length (500 for query, 200 for context)
"""

from .config import ValidationConfig, get_config
from .exceptions import EmptyInputError, LengthExceededError, TypeMismatchError

QUERY_FIELD = 'query'
CONTEXT_FIELD = 'context'


class InputValidator:
    """
    Validates raw field values from tool arguments.
    Returns trimmed strings or raises a categorized ValidationError.
    """

    def __init__(self, config: ValidationConfig = None):
        self.config = config or get_config()

    def validate_api_input(self, value, field_name: str, max_length: int) -> str:
        """
        Validate one field value.

        Args:
            value: Raw value from the caller (any type)
            field_name: Name used in error messages
            max_length: Maximum length of the trimmed value

        Returns:
            The value with leading/trailing whitespace removed

        Raises:
            TypeMismatchError: value is not a string
            EmptyInputError: value is blank
            LengthExceededError: trimmed value is longer than max_length
        """
        if not isinstance(value, str):
            raise TypeMismatchError(f"{field_name} must be a string", field_name=field_name)

        trimmed = value.strip()
        if not trimmed:
            raise EmptyInputError(f"{field_name} cannot be empty", field_name=field_name)

        if len(trimmed) > max_length:
            raise LengthExceededError(
                self._length_message(field_name, max_length),
                field_name=field_name,
                max_length=max_length,
            )

        return trimmed

    def validate_query(self, value) -> str:
        return self.validate_api_input(value, QUERY_FIELD, self.config.max_query_length)

    def validate_context(self, value) -> str:
        return self.validate_api_input(value, CONTEXT_FIELD, self.config.max_context_length)

    @staticmethod
    def _length_message(field_name: str, max_length: int) -> str:
        # Callers branch on the prefix: query overflows are the caller's fault
        error_type = 'API error' if field_name == QUERY_FIELD else 'System error'
        return f"{error_type}: {field_name} exceeds maximum length of {max_length} characters"


# Singleton instance
_input_validator = None


def get_input_validator() -> InputValidator:
    """Get or create the singleton InputValidator."""
    global _input_validator
    if _input_validator is None:
        _input_validator = InputValidator()
    return _input_validator


def validate_api_input(value, field_name: str, max_length: int) -> str:
    """Module-level shortcut for InputValidator.validate_api_input."""
    return get_input_validator().validate_api_input(value, field_name, max_length)
