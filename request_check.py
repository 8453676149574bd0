# ---- 1. Imports ----
import sys
from typing import List, Tuple

from validation import (
    get_rate_limiter,
    get_request_validator,
    get_sanitizer,
    get_security_scanner,
    normalize_unicode,
    EmptyInputError,
    RateLimitExceededError,
    SecurityRiskError,
    ToolInputs,
    ValidationWarning,
)

DEFAULT_CLIENT_ID = "stdio-client"


# ---- 2. Helper: NFKC-normalize string fields, leave the rest for the type check ----
def _normalize(value):
    return normalize_unicode(value) if isinstance(value, str) else value


# ---- 3. Main: gate a tool request ----
def check_request(
    query,
    context=None,
    client_id: str = DEFAULT_CLIENT_ID,
) -> Tuple[ToolInputs, List[ValidationWarning]]:
    """
    Run every pre-tool check on one request.

    Returns:
        Tuple of (cleaned_inputs, list_of_warnings)
        - cleaned_inputs: normalized, sanitized query and context
        - warnings: soft issues the caller may surface (may be empty)

    Raises:
        RateLimitExceededError: client is over its window budget
        ValidationError subclasses for bad fields
        SecurityRiskError: a field matched the injection denylist
    """
    # 1. Rate limit gate
    limiter = get_rate_limiter()
    if not limiter.check_rate_limit(client_id):
        window_seconds = limiter.config.rate_limit_window_ms // 1000
        raise RateLimitExceededError(
            f"Rate limit exceeded for {client_id}",
            user_message=f"Too many requests. Please wait up to {window_seconds} seconds.",
        )

    # 2. Normalize first: NFKC can lengthen text, so limits apply to the normalized form
    inputs = get_request_validator().validate_tool_inputs(_normalize(query), _normalize(context))

    # 3. Sanitize (only ever shortens)
    sanitizer = get_sanitizer()
    cleaned = ToolInputs(
        validated_query=sanitizer.sanitize_input(inputs.validated_query),
        validated_context=sanitizer.sanitize_input(inputs.validated_context) if inputs.validated_context else None,
    )
    if not cleaned.validated_query:
        # Only control characters were sent
        raise EmptyInputError("query cannot be empty", field_name="query")
    cleaned.validated_context = cleaned.validated_context or None

    # 4. Security scan (hard error)
    scanner = get_security_scanner()
    for field_name, value in (("query", cleaned.validated_query), ("context", cleaned.validated_context)):
        if value and scanner.contains_security_risks(value):
            raise SecurityRiskError(
                f"{field_name} matched a security pattern",
                user_message="Your request contains content that isn't allowed. Please rephrase it.",
                field_name=field_name,
            )

    # 5. Context shape (soft warning)
    warnings = []
    if cleaned.validated_context and not scanner.validate_context(cleaned.validated_context):
        warnings.append(ValidationWarning("Context looks repetitive and may be ignored"))

    return cleaned, warnings


# ---- 4. Optional standalone test ----
if __name__ == "__main__":
    from validation import ValidationError, get_validation_error

    print("Query guard test mode. Empty query quits.")
    while True:
        query = input("\nQuery: ").strip()
        if not query:
            sys.exit(0)
        context = input("Context (optional): ").strip() or None
        try:
            cleaned, warnings = check_request(query, context)
            print(f"  query:   {cleaned.validated_query}")
            print(f"  context: {cleaned.validated_context}")
            for w in warnings:
                print(f"  - {w.message}")
        except RateLimitExceededError as e:
            print(f"\nRate limited: {e.user_message}")
        except ValidationError as e:
            print("\n" + get_validation_error(e.field_name or "query", e.user_message))
