"""
Per-client request rate limiting.

Fixed-window counter: each client gets max_requests_per_window requests per
rate_limit_window_ms, counted from its first request in the window. Because
windows are fixed rather than sliding, a client bursting across a window
boundary can get up to 2x the limit through in quick succession.

State is in-memory and resets on restart. Stale client records are evicted
by a sweep that piggybacks on check_rate_limit() at most once per window.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from .config import ValidationConfig, get_config

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


@dataclass
class ClientRateRecord:
    client_id: str
    window_start: float
    request_count: int


class RateLimiter:
    """
    Fixed-window request counter keyed by client id.

    All table access runs under one lock, so check-then-increment is atomic
    across threads.
    """

    def __init__(self, config: ValidationConfig = None, clock: Clock = monotonic_ms):
        self.config = config or get_config()
        self._clock = clock
        self._lock = threading.Lock()
        self._records: Dict[str, ClientRateRecord] = {}
        self._last_sweep = clock()

    def check_rate_limit(self, client_id: str) -> bool:
        """
        Record a request from client_id.

        Returns:
            True if the request is admitted, False if the client is over its
            limit for the current window. Rejections do not touch the record.
        """
        with self._lock:
            now = self._clock()
            window = self.config.rate_limit_window_ms
            limit = self.config.max_requests_per_window

            if now - self._last_sweep > window:
                self._sweep(now, window)
                self._last_sweep = now

            record = self._records.get(client_id)
            if record is None or now - record.window_start > window:
                self._records[client_id] = ClientRateRecord(client_id, now, 1)
                return True

            if record.request_count < limit:
                record.request_count += 1
                if record.request_count > limit * self.config.rate_limit_warning_ratio:
                    logger.warning(
                        "Client %s approaching rate limit: %d/%d",
                        client_id, record.request_count, limit,
                    )
                return True

            logger.info("Client %s rate limited: %d requests in window", client_id, record.request_count)
            return False

    def request_count(self, client_id: str) -> int:
        """Requests counted for client_id in its current window (0 if unseen)."""
        with self._lock:
            record = self._records.get(client_id)
            if record is None or self._clock() - record.window_start > self.config.rate_limit_window_ms:
                return 0
            return record.request_count

    @property
    def client_count(self) -> int:
        with self._lock:
            return len(self._records)

    def reset(self) -> None:
        """Forget every client (for tests and admin resets)."""
        with self._lock:
            self._records.clear()
            self._last_sweep = self._clock()

    def _sweep(self, now: float, window: float) -> None:
        # Caller holds the lock
        expired = [cid for cid, rec in self._records.items() if now - rec.window_start > window]
        for cid in expired:
            del self._records[cid]
        if expired:
            logger.debug("Evicted %d stale rate-limit records", len(expired))


# Singleton instance
_rate_limiter = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the singleton RateLimiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def check_rate_limit(client_id: str) -> bool:
    return get_rate_limiter().check_rate_limit(client_id)
