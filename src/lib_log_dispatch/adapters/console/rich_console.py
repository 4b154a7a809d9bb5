"""Rich-powered console backend implementing :class:`DeliveryBackendPort`.

Purpose
-------
Render each delivered record as one styled line on a terminal.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :class:`RichConsoleBackend` - backend registered under the name ``console``.

System Role
-----------
Default human-facing sink used by the CLI demo; failures are wrapped in
:class:`BackendDeliveryError` so the dispatcher can report which backend broke.
"""

from __future__ import annotations

from typing import Callable, Mapping

from rich.console import Console

from lib_log_dispatch.adapters._formatting import DEFAULT_TEMPLATE, build_format_payload
from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.domain.errors import BackendDeliveryError
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import LogRecord


#: Default Rich styles keyed by :class:`Severity`.
_STYLE_MAP: Mapping[Severity, str] = {
    Severity.DEBUG: "dim",
    Severity.INFO: "cyan",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.FATAL: "bold red",
}

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARN": "yellow",
        "ERROR": "red",
        "FATAL": "bold red",
    },
    "dark": {
        "DEBUG": "grey42",
        "INFO": "bright_white",
        "WARN": "bold gold3",
        "ERROR": "bold red3",
        "FATAL": "bold white on red3",
    },
    "neon": {
        "DEBUG": "#00ffd5",
        "INFO": "#39ff14",
        "WARN": "#fff700",
        "ERROR": "#ff073a",
        "FATAL": "bold #ff00ff on black",
    },
}
"""Built-in console palettes keyed by theme name."""


class RichConsoleBackend(DeliveryBackendPort):
    """Print records using Rich formatting with style overrides."""

    name = "console"

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
        template: str | None = None,
        formatter: Callable[[LogRecord], str] | None = None,
    ) -> None:
        """Configure colour handling, styles, and the line layout.

        ``formatter`` takes precedence over ``template``; both default to
        :data:`DEFAULT_TEMPLATE`.
        """
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = Severity.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged
        self._template = template or DEFAULT_TEMPLATE
        self._formatter = formatter

    async def send(self, record: LogRecord) -> None:
        """Print ``record``; any rendering failure becomes :class:`BackendDeliveryError`.

        Examples
        --------
        >>> import asyncio
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> record = LogRecord('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), Severity.INFO, 'msg')
        >>> console = Console(file=StringIO(), record=True)
        >>> asyncio.run(RichConsoleBackend(console=console).send(record))
        >>> 'msg' in console.export_text()
        True
        """
        try:
            line = self.format(record)
            style = "" if self._no_color else self._style_map.get(record.severity, "")
            self._console.print(line, style=style, highlight=False, markup=False)
        except Exception as exc:
            raise BackendDeliveryError(
                "RichConsoleBackend failed to send record",
                backend_name=self.name,
                record=record,
            ) from exc

    def format(self, record: LogRecord) -> str:
        """Return the console line for ``record``."""
        if self._formatter is not None:
            return self._formatter(record)
        return self._template.format(**build_format_payload(record))


__all__ = ["CONSOLE_STYLE_THEMES", "RichConsoleBackend"]
