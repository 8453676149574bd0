"""
Heuristic security checks on free-text input.

This is a denylist, not a parser: a clean result does not make the text
safe to interpret. Anything downstream that evaluates input (HTML, SQL,
shell) still has to escape or parameterize it.

Checks:
- Injection markers (script tags, script/file URI schemes, inline event
  handlers, base64 data URIs, hex escapes, null bytes)
- Context shape: strings dominated by one repeated word are treated as spam
"""

import logging
import re
from typing import Iterable

from .config import ValidationConfig, get_config

logger = logging.getLogger(__name__)

SECURITY_PATTERNS = (
    r'<script',             # Script tags
    r'javascript:',         # JavaScript URLs
    r'on\w+\s*=',           # Event handlers
    r'data:.*base64',       # Data URLs with base64
    r'vbscript:',           # VBScript URLs
    r'file://',             # File URLs
    r'\\x[0-9a-f]{2}',      # Hex encoded characters
    r'\x00',                # Null bytes
)


class SecurityScanner:
    """Pattern-based detector for obvious injection attempts."""

    def __init__(self, config: ValidationConfig = None, patterns: Iterable[str] = SECURITY_PATTERNS):
        self.config = config or get_config()
        self._patterns: list[re.Pattern] = [re.compile(p, re.IGNORECASE) for p in patterns]

    def contains_security_risks(self, text: str) -> bool:
        """Return True if text matches any denylisted pattern."""
        for pattern in self._patterns:
            if pattern.search(text):
                logger.warning("Input matched security pattern %r", pattern.pattern)
                return True
        return False

    def validate_context(self, context: str) -> bool:
        """
        Check that a context string looks like real content.

        Returns False when the unique/total word ratio is at or below
        config.min_unique_word_ratio, or when a security pattern matches.
        """
        words = context.split()
        if words:
            ratio = len(set(words)) / len(words)
        else:
            ratio = 1.0

        if ratio <= self.config.min_unique_word_ratio:
            logger.info("Context rejected as repetitive (unique ratio %.2f)", ratio)
            return False
        return not self.contains_security_risks(context)


# Singleton instance
_security_scanner = None


def get_security_scanner() -> SecurityScanner:
    """Get or create the singleton SecurityScanner."""
    global _security_scanner
    if _security_scanner is None:
        _security_scanner = SecurityScanner()
    return _security_scanner


def contains_security_risks(text: str) -> bool:
    return get_security_scanner().contains_security_risks(text)


def validate_context(context: str) -> bool:
    return get_security_scanner().validate_context(context)
