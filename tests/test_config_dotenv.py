from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from lib_log_dispatch import cli as cli_module
from lib_log_dispatch import config as log_config
from lib_log_dispatch import runtime
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.runtime._settings import ENV_MINIMUM_SEVERITY


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The nearest .env above the working directory feeds ``init``."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_MINIMUM_SEVERITY}=error\n")
    monkeypatch.chdir(nested)

    loaded = log_config.enable_dotenv()

    try:
        assert loaded == env_file.resolve()
        assert os.environ[ENV_MINIMUM_SEVERITY] == "error"
        assert runtime.init(minimum_severity="debug").minimum_severity is Severity.ERROR
    finally:
        os.environ.pop(ENV_MINIMUM_SEVERITY, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text(f"{ENV_MINIMUM_SEVERITY}=error\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv(ENV_MINIMUM_SEVERITY, "warn")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ[ENV_MINIMUM_SEVERITY] == "warn"


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first.env"
    first.write_text("LOG_DOTENV_PROBE=first\n")
    second = tmp_path / "second.env"
    second.write_text("LOG_DOTENV_PROBE=second\n")
    monkeypatch.delenv("LOG_DOTENV_PROBE", raising=False)

    try:
        assert log_config.enable_dotenv(first) == first.resolve()
        assert log_config.enable_dotenv(second) == first.resolve()
        assert os.environ["LOG_DOTENV_PROBE"] == "first"
    finally:
        os.environ.pop("LOG_DOTENV_PROBE", None)


def test_enable_dotenv_without_file_returns_none(tmp_path: Path) -> None:
    assert log_config.enable_dotenv(tmp_path / "missing.env") is None


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "yes", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(monkeypatch: pytest.MonkeyPatch, explicit: bool | None, env_value: str | None, expected: bool) -> None:
    if env_value is None:
        monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(log_config.DOTENV_ENV_VAR, env_value)
    assert log_config.should_use_dotenv(explicit) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
