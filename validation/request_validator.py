"""
Validation entry points for tool arguments.

RequestValidator applies InputValidator to the two tool fields (query and
context) with their configured limits, validates batches without stopping
at the first failure, and formats errors with fix-it suggestions for end
users.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional

from .config import ValidationConfig, get_config
from .exceptions import ValidationError
from .input_validator import InputValidator

# Suggestions shown under an error, keyed by field name
SUGGESTIONS = {
    'query': [
        '• 確保查詢長度不超過 500 字元',
        '• 使用繁體中文或英文字母',
        '• 避免特殊字元和控制字元',
    ],
    'context': [
        '• 確保內容長度不超過 200 字元',
        '• 提供相關的背景資訊',
        '• 避免重複內容',
    ],
    'trainNumber': [
        '• 車次號碼應為 1-4 位數字',
        '• 可選擇性包含一個字母後綴',
        '• 例如: 152, 1234, 152A',
    ],
    'stationName': [
        '• 使用完整或部分車站名稱',
        '• 支援中文和英文站名',
        '• 例如: 台北, 花蓮, Taipei',
    ],
}
DEFAULT_SUGGESTIONS = ['• 請檢查輸入格式']


@dataclass
class ToolInputs:
    validated_query: str
    validated_context: Optional[str] = None


class BatchInput(NamedTuple):
    value: object
    field_name: str
    max_length: int


@dataclass
class ValidationResult:
    """
    Outcome of validate_batch().

    validated_inputs lines up with the inputs ("" where an entry failed);
    errors only holds the failure messages, in input order.
    """
    valid: bool
    errors: List[str] = field(default_factory=list)
    validated_inputs: List[str] = field(default_factory=list)


class RequestValidator:
    """Validates the query/context pair a tool receives."""

    def __init__(self, config: ValidationConfig = None, input_validator: InputValidator = None):
        self.config = config or get_config()
        self.input_validator = input_validator or InputValidator(self.config)

    def validate_tool_inputs(self, query, context=None) -> ToolInputs:
        """
        Validate query (required) and context (optional).

        Query is checked first, so its error wins when both are bad. A None
        or empty-string context counts as not given.

        Raises:
            ValidationError subclasses from InputValidator
        """
        validated_query = self.input_validator.validate_query(query)

        validated_context = None
        if context is not None and context != '':
            validated_context = self.input_validator.validate_context(context)

        return ToolInputs(validated_query, validated_context)

    def validate_batch(self, inputs: Iterable[BatchInput]) -> ValidationResult:
        """Validate every (value, field_name, max_length) entry; never raises on bad input."""
        errors = []
        validated_inputs = []

        for value, field_name, max_length in inputs:
            try:
                validated_inputs.append(
                    self.input_validator.validate_api_input(value, field_name, max_length)
                )
            except ValidationError as e:
                errors.append(str(e))
                validated_inputs.append('')

        return ValidationResult(
            valid=not errors,
            errors=errors,
            validated_inputs=validated_inputs,
        )


def get_validation_error(field_name: str, error_message: str) -> str:
    """Append the field's suggestion list to an error message."""
    suggestions = SUGGESTIONS.get(field_name, DEFAULT_SUGGESTIONS)
    return f"{error_message}\n\n建議:\n" + '\n'.join(suggestions)


# Singleton instance
_request_validator = None


def get_request_validator() -> RequestValidator:
    """Get or create the singleton RequestValidator."""
    global _request_validator
    if _request_validator is None:
        _request_validator = RequestValidator()
    return _request_validator


def validate_tool_inputs(query, context=None) -> ToolInputs:
    return get_request_validator().validate_tool_inputs(query, context)


def validate_batch(inputs: Iterable[BatchInput]) -> ValidationResult:
    return get_request_validator().validate_batch(inputs)
