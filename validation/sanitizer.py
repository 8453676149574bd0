"""
Best-effort input normalization.

sanitize_input() strips control characters, collapses whitespace and
enforces the query length cap. normalize_unicode() folds compatibility
forms (fullwidth letters, ligatures, circled digits) so the security
scanner sees the plain characters.
"""

import re
import unicodedata

from .config import ValidationConfig, get_config

# Control characters; tab, newline and CR are left for the whitespace pass
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_WHITESPACE_RUN = re.compile(r'\s+')


class Sanitizer:
    """Strips problematic characters without changing validity."""

    def __init__(self, config: ValidationConfig = None):
        self.config = config or get_config()

    def sanitize_input(self, text: str) -> str:
        """Remove control characters and normalize whitespace."""
        if text is None:
            return ""

        text = text.strip()
        text = _CONTROL_CHARS.sub('', text)
        text = _WHITESPACE_RUN.sub(' ', text).strip()

        # Cap last so it applies to the normalized string
        return text[:self.config.max_query_length].rstrip()

    @staticmethod
    def normalize_unicode(text: str) -> str:
        """NFKC normalization."""
        return unicodedata.normalize('NFKC', text)


# Singleton instance
_sanitizer = None


def get_sanitizer() -> Sanitizer:
    """Get or create the singleton Sanitizer."""
    global _sanitizer
    if _sanitizer is None:
        _sanitizer = Sanitizer()
    return _sanitizer


def sanitize_input(text: str) -> str:
    return get_sanitizer().sanitize_input(text)


def normalize_unicode(text: str) -> str:
    return Sanitizer.normalize_unicode(text)
