from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_dispatch.adapters.enrich import ContextEnricher
from lib_log_dispatch.adapters.rate_limiter import SlidingWindowRateLimiter
from lib_log_dispatch.adapters.scrubber import RegexScrubber
from lib_log_dispatch.application.ports.stage import DROP
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import LogRecord


def _record(ts: datetime, password: str = "secret", severity: Severity = Severity.ERROR) -> LogRecord:
    return LogRecord(
        record_id="rec",
        timestamp=ts,
        severity=severity,
        message="boom",
        context={"password": password, "token": "abc123", "nested": {"password": ["hunter2", "ok"]}},
    )


def test_regex_scrubber_masks_sensitive_fields() -> None:
    scrubber = RegexScrubber(patterns={"password": r".+", "token": r"[0-9]+"})
    record = _record(datetime(2025, 9, 23, tzinfo=timezone.utc))
    scrubbed = scrubber(record)
    assert scrubbed.context["password"] == "***"
    assert scrubbed.context["token"] == "***"
    assert record.context["password"] == "secret"


def test_regex_scrubber_recurses_into_nested_values() -> None:
    scrubber = RegexScrubber(patterns={"nested": r"hunter"}, replacement="<redacted>")
    scrubbed = scrubber(_record(datetime(2025, 9, 23, tzinfo=timezone.utc)))
    assert scrubbed.context["nested"] == {"password": ["<redacted>", "ok"]}


def test_regex_scrubber_passes_through_records_without_context() -> None:
    record = LogRecord("rec", datetime(2025, 9, 23, tzinfo=timezone.utc), Severity.INFO, "plain")
    assert RegexScrubber(patterns={"password": ".+"})(record) is record


def test_rate_limiter_drops_excess_records() -> None:
    limiter = SlidingWindowRateLimiter(max_records=2, interval=timedelta(seconds=1))
    base = datetime(2025, 9, 23, tzinfo=timezone.utc)
    first = _record(base)
    assert limiter(first) is first
    assert limiter(_record(base)) is not DROP
    assert limiter(_record(base)) is DROP


def test_rate_limiter_keys_buckets_by_severity() -> None:
    limiter = SlidingWindowRateLimiter(max_records=1, interval=timedelta(seconds=10))
    base = datetime(2025, 9, 23, tzinfo=timezone.utc)
    assert limiter(_record(base, severity=Severity.ERROR)) is not DROP
    assert limiter(_record(base, severity=Severity.INFO)) is not DROP
    assert limiter(_record(base, severity=Severity.ERROR)) is DROP


def test_rate_limiter_resets_after_window() -> None:
    limiter = SlidingWindowRateLimiter(max_records=1, interval=timedelta(seconds=1))
    base = datetime(2025, 9, 23, tzinfo=timezone.utc)
    assert limiter(_record(base)) is not DROP
    later = base + timedelta(seconds=2)
    assert limiter(_record(later)) is not DROP


@pytest.mark.parametrize("max_records, interval", [(0, timedelta(seconds=1)), (1, timedelta(0))])
def test_rate_limiter_rejects_non_positive_configuration(max_records: int, interval: timedelta) -> None:
    with pytest.raises(ValueError, match="must be positive"):
        SlidingWindowRateLimiter(max_records=max_records, interval=interval)


def test_context_enricher_keeps_caller_values() -> None:
    record = LogRecord(
        "rec",
        datetime(2025, 9, 23, tzinfo=timezone.utc),
        Severity.INFO,
        "msg",
        context={"request_id": "r-1", "service": "override"},
    )
    enriched = ContextEnricher(service="checkout", region="eu")(record)
    assert dict(enriched.context) == {"service": "override", "region": "eu", "request_id": "r-1"}
    assert enriched is not record
