"""Shared fixtures: fresh config/singletons per test and a controllable clock."""

import pytest

import validation
from validation import ValidationConfig


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    for name in (
        "QUERY_GUARD_MAX_QUERY_LENGTH",
        "QUERY_GUARD_MAX_CONTEXT_LENGTH",
        "QUERY_GUARD_RATE_LIMIT_WINDOW_MS",
        "QUERY_GUARD_MAX_REQUESTS_PER_WINDOW",
        "QUERY_GUARD_MIN_UNIQUE_WORD_RATIO",
        "QUERY_GUARD_RATE_LIMIT_WARNING_RATIO",
        "QUERY_GUARD_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)
    validation.reset_validators()
    yield
    validation.reset_validators()


@pytest.fixture
def config() -> ValidationConfig:
    return ValidationConfig()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
