from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_dispatch import runtime
from lib_log_dispatch.application.use_cases.create_record import RecordFactory, create_record_factory
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import LogRecord
from lib_log_dispatch.runtime._settings import ENV_MINIMUM_SEVERITY

FIXED_NOW = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    def now(self) -> datetime:
        return FIXED_NOW


class SequentialIds:
    def __init__(self) -> None:
        self.counter = 0

    def __call__(self) -> str:
        self.counter += 1
        return f"rec-{self.counter:03d}"


@pytest.fixture(autouse=True)
def clean_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(ENV_MINIMUM_SEVERITY, raising=False)
    runtime.reset()
    try:
        yield
    finally:
        runtime.reset()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def record_factory() -> RecordFactory:
    return create_record_factory(clock=FixedClock(), id_provider=SequentialIds())


@pytest.fixture
def make_record():
    def _make(message: str = "hello", severity: Severity = Severity.INFO, **context: object) -> LogRecord:
        return LogRecord(
            record_id="rec-1",
            timestamp=FIXED_NOW,
            severity=severity,
            message=message,
            context=context or None,
        )

    return _make
