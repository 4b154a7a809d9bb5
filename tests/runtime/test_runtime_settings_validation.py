from __future__ import annotations

import pytest

from lib_log_dispatch import runtime
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.runtime._settings import ENV_MINIMUM_SEVERITY, build_dispatch_config


@pytest.mark.parametrize(
    "env_value, error_match",
    [
        ("verbose", "Unknown severity"),
        ("9", "Unsupported severity numeric"),
    ],
)
def test_invalid_minimum_severity_environment(monkeypatch: pytest.MonkeyPatch, env_value: str, error_match: str) -> None:
    monkeypatch.setenv(ENV_MINIMUM_SEVERITY, env_value)
    with pytest.raises(ValueError, match=error_match):
        runtime.init()
    assert not runtime.is_initialised()


@pytest.mark.parametrize("value, error_match", [("loud", "Unknown severity"), (-1, "Unsupported severity numeric")])
def test_invalid_minimum_severity_argument(value: object, error_match: str) -> None:
    with pytest.raises(ValueError, match=error_match):
        build_dispatch_config(minimum_severity=value)  # type: ignore[arg-type]


def test_build_dispatch_config_freezes_collections() -> None:
    stage = lambda record: record  # noqa: E731
    config = build_dispatch_config(stages=[stage])
    assert config.stages == (stage,)
    assert config.backends == ()


def test_build_dispatch_config_resolves_severity_names() -> None:
    assert build_dispatch_config(minimum_severity="warn").minimum_severity is Severity.WARN


def test_build_dispatch_config_prefers_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_MINIMUM_SEVERITY, "error")
    assert build_dispatch_config(minimum_severity="warn").minimum_severity is Severity.ERROR
