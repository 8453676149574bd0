"""
Validation module for the train query tools.

Provides field validation, sanitization, security scanning and per-client
rate limiting in front of tool handlers.

Usage:
    from validation import (
        get_rate_limiter,
        get_request_validator,
        sanitize_input,
        contains_security_risks,
        ValidationError,
    )
"""

# Exceptions and warnings
from .exceptions import (
    ValidationError,
    TypeMismatchError,
    EmptyInputError,
    LengthExceededError,
    RateLimitExceededError,
    SecurityRiskError,
    ValidationWarning,
)

# Configuration
from .config import ValidationConfig, get_config, update_config, reset_config

# Validators
from .input_validator import get_input_validator, InputValidator, validate_api_input
from .sanitizer import get_sanitizer, Sanitizer, sanitize_input, normalize_unicode
from .security import (
    get_security_scanner,
    SecurityScanner,
    SECURITY_PATTERNS,
    contains_security_risks,
    validate_context,
)
from .rate_limiter import get_rate_limiter, RateLimiter, ClientRateRecord, check_rate_limit
from .format_validator import (
    validate_train_number,
    validate_station_name,
    validate_date_format,
    validate_time_format,
    is_clean_query,
    extract_numbers,
)
from .request_validator import (
    get_request_validator,
    RequestValidator,
    ToolInputs,
    BatchInput,
    ValidationResult,
    validate_tool_inputs,
    validate_batch,
    get_validation_error,
)

__all__ = [
    # Exceptions
    'ValidationError',
    'TypeMismatchError',
    'EmptyInputError',
    'LengthExceededError',
    'RateLimitExceededError',
    'SecurityRiskError',
    # Warnings
    'ValidationWarning',
    # Config
    'ValidationConfig',
    'get_config',
    'update_config',
    'reset_config',
    'reset_validators',
    # Validators
    'get_input_validator',
    'get_sanitizer',
    'get_security_scanner',
    'get_rate_limiter',
    'get_request_validator',
    'InputValidator',
    'Sanitizer',
    'SecurityScanner',
    'RateLimiter',
    'RequestValidator',
    'ClientRateRecord',
    'SECURITY_PATTERNS',
    # Operations
    'validate_api_input',
    'sanitize_input',
    'normalize_unicode',
    'contains_security_risks',
    'validate_context',
    'check_rate_limit',
    'validate_tool_inputs',
    'validate_batch',
    'get_validation_error',
    'validate_train_number',
    'validate_station_name',
    'validate_date_format',
    'validate_time_format',
    'is_clean_query',
    'extract_numbers',
    # Results
    'ToolInputs',
    'BatchInput',
    'ValidationResult',
]


def reset_validators() -> None:
    """Drop every singleton so the next accessor call rebuilds it from a fresh config."""
    from . import input_validator, rate_limiter, request_validator, sanitizer, security

    reset_config()
    input_validator._input_validator = None
    sanitizer._sanitizer = None
    security._security_scanner = None
    rate_limiter._rate_limiter = None
    request_validator._request_validator = None
