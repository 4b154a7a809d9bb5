from __future__ import annotations

import logging

import pytest

from lib_log_dispatch.domain.levels import LEVEL_LABELS, Severity, coerce_severity


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", Severity.DEBUG),
        ("INFO", Severity.INFO),
        ("Warn", Severity.WARN),
        ("warning", Severity.WARN),
        ("error", Severity.ERROR),
        ("FATAL", Severity.FATAL),
        ("critical", Severity.FATAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: Severity) -> None:
    assert Severity.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        Severity.from_name("verbose")


@pytest.mark.parametrize("number, expected", [(0, Severity.DEBUG), (2, Severity.WARN), (4, Severity.FATAL)])
def test_from_numeric_maps_scale(number: int, expected: Severity) -> None:
    assert Severity.from_numeric(number) is expected


@pytest.mark.parametrize("number", [-1, 5, 10])
def test_from_numeric_rejects_values_outside_scale(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported severity numeric"):
        Severity.from_numeric(number)


def test_scale_is_totally_ordered() -> None:
    ordered = sorted(Severity, key=int)
    assert ordered == [Severity.DEBUG, Severity.INFO, Severity.WARN, Severity.ERROR, Severity.FATAL]
    assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL
    assert Severity.ERROR >= Severity.WARN


@pytest.mark.parametrize("level", Severity)
def test_label_matches_lookup_table(level: Severity) -> None:
    assert level.label == LEVEL_LABELS[level] == level.name


@pytest.mark.parametrize(
    "level, python_level",
    [
        (Severity.DEBUG, logging.DEBUG),
        (Severity.INFO, logging.INFO),
        (Severity.WARN, logging.WARNING),
        (Severity.ERROR, logging.ERROR),
        (Severity.FATAL, logging.CRITICAL),
    ],
)
def test_to_python_level_returns_logging_constant(level: Severity, python_level: int) -> None:
    assert level.to_python_level() == python_level


@pytest.mark.parametrize("value, expected", [(Severity.INFO, Severity.INFO), ("3", Severity.ERROR), (" warn ", Severity.WARN)])
def test_coerce_severity_accepts_enum_names_and_digits(value: object, expected: Severity) -> None:
    assert coerce_severity(value) is expected  # type: ignore[arg-type]
