"""
Process-wide validation limits.

One ValidationConfig instance is shared by every validator and the rate
limiter, so update() takes effect on the next call without rebuilding them.
Defaults can be overridden from the environment (the nearest .env file,
searched upward from the working directory, is loaded first).
"""

import logging
import os
from dataclasses import dataclass, fields

import pytz
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "QUERY_GUARD_"

# Fields that must stay strictly positive
_POSITIVE_FIELDS = (
    "max_query_length",
    "max_context_length",
    "rate_limit_window_ms",
    "max_requests_per_window",
)


@dataclass
class ValidationConfig:
    """Configurable limits for input validation and rate limiting."""
    max_query_length: int = 500
    max_context_length: int = 200
    rate_limit_window_ms: int = 60_000
    max_requests_per_window: int = 30
    # Contexts at or below this unique/total word ratio count as spam
    min_unique_word_ratio: float = 0.2
    # Share of the window budget after which a client gets logged
    rate_limit_warning_ratio: float = 0.8
    timezone: str = "Asia/Taipei"

    def __post_init__(self):
        self._check()

    def update(self, **overrides) -> "ValidationConfig":
        """
        Merge overrides into this config in place.

        Fields left out (or passed as None) keep their current value.

        Raises:
            TypeError: Unknown field name
            ValueError: A limit would become non-positive, or the timezone is unknown
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown config fields: {', '.join(unknown)}")

        previous = {name: getattr(self, name) for name in known}
        for name, value in overrides.items():
            if value is not None:
                setattr(self, name, value)
        try:
            self._check()
        except (TypeError, ValueError):
            for name, value in previous.items():
                setattr(self, name, value)
            raise

        changed = {k: v for k, v in overrides.items() if v is not None}
        if changed:
            logger.info("Validation config updated: %s", changed)
        return self

    def _check(self) -> None:
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 <= self.min_unique_word_ratio < 1:
            raise ValueError("min_unique_word_ratio must be in [0, 1)")
        try:
            pytz.timezone(self.timezone)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {self.timezone}")

    @classmethod
    def from_env(cls, env_file: str = None) -> "ValidationConfig":
        """Build a config from QUERY_GUARD_* environment variables."""
        env_file = env_file or find_dotenv(usecwd=True)
        if env_file:
            load_dotenv(env_file)

        values = {}
        for f in fields(cls):
            raw = os.getenv(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            if f.type in (int, "int"):
                values[f.name] = int(raw)
            elif f.type in (float, "float"):
                values[f.name] = float(raw)
            else:
                values[f.name] = raw
        return cls(**values)


# Singleton instance
_config = None


def get_config() -> ValidationConfig:
    """Get or create the shared ValidationConfig."""
    global _config
    if _config is None:
        _config = ValidationConfig.from_env()
    return _config


def update_config(**overrides) -> ValidationConfig:
    """Partially override the shared config; omitted fields keep their value."""
    return get_config().update(**overrides)


def reset_config() -> None:
    """Drop the shared config so the next get_config() rebuilds it."""
    global _config
    _config = None
