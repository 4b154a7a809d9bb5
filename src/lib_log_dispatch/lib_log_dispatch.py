"""Convenience helpers built on the runtime façade.

Purpose
-------
Host the helpers used by the CLI and smoke tests: the metadata banner, the
deterministic failure path, and :func:`logdemo`, which exercises the whole
pipeline against the console backend.

Contents
--------
* :func:`summary_info` - metadata banner as a string.
* :func:`i_should_fail` - always raises ``RuntimeError``.
* :func:`logdemo` - initialise, emit one record per severity, shut down.
"""

from __future__ import annotations

import asyncio
from typing import Any

from rich.console import Console

from . import runtime
from .adapters import CONSOLE_STYLE_THEMES, ContextEnricher, RichConsoleBackend, RingBufferBackend
from .domain.levels import Severity, coerce_severity
from .domain.records import LogRecord


class _AlwaysFailingBackend:
    """Backend that rejects every record; shows fan-out isolation in the demo."""

    name = "always-fails"

    async def send(self, record: LogRecord) -> None:
        raise ConnectionError(f"demo backend refused record {record.record_id}")


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def i_should_fail() -> None:
    """Intentionally raise ``RuntimeError`` to test error propagation paths.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    RuntimeError: I should fail
    """

    raise RuntimeError("I should fail")


def logdemo(
    *,
    theme: str = "classic",
    minimum_severity: str | int | Severity = Severity.DEBUG,
    fail_backend: bool = False,
    console: Console | None = None,
) -> dict[str, Any]:
    """Emit one record per severity through a freshly initialised dispatcher.

    The dispatcher is installed as the active instance for the duration of
    the demo and torn down afterwards, so calling this while another
    dispatcher is active raises :class:`AlreadyInitializedError`.

    Returns
    -------
    dict[str, Any]
        ``theme``, ``minimum_severity``, ``emitted`` (records delivered to the
        in-memory backend), ``records`` (their dictionaries), and
        ``backend_failures`` (diagnostics reported by the dispatcher).
    """

    if theme not in CONSOLE_STYLE_THEMES:
        raise ValueError(f"Unknown console theme: {theme!r}")
    threshold = coerce_severity(minimum_severity)
    memory = RingBufferBackend(name="demo-memory")
    backends: list[Any] = [RichConsoleBackend(console=console, styles=CONSOLE_STYLE_THEMES[theme]), memory]
    if fail_backend:
        backends.append(_AlwaysFailingBackend())
    failures: list[dict[str, Any]] = []

    def _diagnostic(name: str, payload: dict[str, Any]) -> None:
        if name == "backend_error":
            failures.append(payload)

    dispatcher = runtime.init(
        minimum_severity=threshold,
        backends=backends,
        stages=[ContextEnricher(demo="logdemo", theme=theme)],
        diagnostic_hook=_diagnostic,
    )

    async def _emit() -> None:
        await dispatcher.debug("debug message", context={"step": 1})
        await dispatcher.info("info message", context={"step": 2})
        await dispatcher.warn("warn message", context={"step": 3})
        await dispatcher.error("error message", ValueError("demo failure"), context={"step": 4})
        await dispatcher.fatal("fatal message", context={"step": 5})
        await runtime.shutdown_async()

    try:
        asyncio.run(_emit())
    finally:
        runtime.reset()

    return {
        "theme": theme,
        "minimum_severity": dispatcher.minimum_severity.label,
        "emitted": len(memory),
        "records": [record.to_dict() for record in memory.snapshot()],
        "backend_failures": failures,
    }


__all__ = ["i_should_fail", "logdemo", "summary_info"]
