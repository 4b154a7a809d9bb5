"""Dispatcher gating, transforming, and fanning out log records.

Purpose
-------
Own the live backend set and stage chain, expose one coroutine per severity,
and deliver every surviving record to all backends while isolating backend
failures from each other and from the caller.

Contents
--------
* :class:`Dispatcher` - the orchestrator used by the runtime façade.

System Role
-----------
Application-layer core. Configuration errors are raised synchronously; stage
errors propagate to the awaiting caller; delivery errors are reported on the
module logger and the diagnostic hook, never re-entering the dispatcher.

Notes
-----
Mutating the backend set or the stage chain while dispatches are in flight is
not synchronised. A call walks the live stage list, so a stage appended while
the call is still in the chain runs for that call too; the backends are
snapshotted when fan-out starts. Stages and backends have no timeout; a
hung one stalls only the call or fan-out task that awaits it.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Mapping

from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.application.ports.stage import DROP, Stage, StageResult, is_drop
from lib_log_dispatch.domain.errors import DuplicateBackendError, StageContractError
from lib_log_dispatch.domain.levels import Severity
from lib_log_dispatch.domain.records import ErrorInfo, LogRecord

from ._types import DiagnosticHook, DispatchConfig
from .create_record import RecordFactory, create_record_factory

LOGGER = logging.getLogger(__name__)


class Dispatcher:
    """Gate, transform, and fan out log records.

    Parameters
    ----------
    config:
        :class:`DispatchConfig`; ``None`` uses the defaults (``DEBUG``, no
        backends, no stages).
    record_factory:
        Callable building records; defaults to :func:`create_record_factory`.

    Raises
    ------
    DuplicateBackendError
        When ``config.backends`` repeats a name.

    Examples
    --------
    >>> import asyncio
    >>> class Collect:
    ...     name = 'collect'
    ...     def __init__(self):
    ...         self.records = []
    ...     async def send(self, record):
    ...         self.records.append(record.message)
    >>> sink = Collect()
    >>> dispatcher = Dispatcher(DispatchConfig(minimum_severity=Severity.INFO, backends=[sink]))
    >>> async def run():
    ...     await dispatcher.debug('hidden')
    ...     await dispatcher.error('shown')
    ...     await dispatcher.flush()
    >>> asyncio.run(run())
    >>> sink.records
    ['shown']
    """

    def __init__(
        self,
        config: DispatchConfig | None = None,
        *,
        record_factory: RecordFactory | None = None,
    ) -> None:
        resolved = config if config is not None else DispatchConfig()
        self._minimum_severity = resolved.minimum_severity
        self._backends: list[DeliveryBackendPort] = []
        for backend in resolved.backends:
            self.add_backend(backend)
        self._stages: list[Stage] = list(resolved.stages)
        self._diagnostic: DiagnosticHook = resolved.diagnostic_hook
        self._create_record = record_factory if record_factory is not None else create_record_factory()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def minimum_severity(self) -> Severity:
        return self._minimum_severity

    @property
    def backends(self) -> tuple[DeliveryBackendPort, ...]:
        """Registered backends in registration order."""
        return tuple(self._backends)

    @property
    def stages(self) -> tuple[Stage, ...]:
        """Stage chain in execution order."""
        return tuple(self._stages)

    @property
    def pending(self) -> int:
        """Number of fan-out tasks still in flight."""
        return len(self._pending)

    # Logging entry points

    async def debug(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        await self.log(Severity.DEBUG, message, context=context)

    async def info(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        await self.log(Severity.INFO, message, context=context)

    async def warn(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        await self.log(Severity.WARN, message, context=context)

    async def error(
        self,
        message: str,
        error: BaseException | ErrorInfo | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        await self.log(Severity.ERROR, message, error=error, context=context)

    async def fatal(
        self,
        message: str,
        error: BaseException | ErrorInfo | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        await self.log(Severity.FATAL, message, error=error, context=context)

    async def log(
        self,
        severity: Severity,
        message: str,
        *,
        error: BaseException | ErrorInfo | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Run ``message`` through the gate, the stage chain, and fan-out.

        Returns once the stage chain has finished; backend delivery continues
        in a background task (see :meth:`flush`). Exceptions raised by a stage
        propagate and nothing is delivered for that call.
        """
        if severity < self._minimum_severity:
            return
        record = self._create_record(severity, message, error, context)
        outcome = await self._run_stages(record)
        if is_drop(outcome):
            return
        self._spawn_fan_out(outcome)

    # Backend and stage management

    def add_backend(self, backend: DeliveryBackendPort) -> None:
        """Append ``backend``; raise :class:`DuplicateBackendError` on a repeated name."""
        if any(existing.name == backend.name for existing in self._backends):
            raise DuplicateBackendError(backend.name)
        self._backends.append(backend)

    def remove_backend(self, name: str) -> None:
        """Remove the backend called ``name``; unknown names are ignored."""
        self._backends = [backend for backend in self._backends if backend.name != name]

    def add_stage(self, stage: Stage) -> None:
        """Append ``stage`` to the end of the chain."""
        self._stages.append(stage)

    # Lifecycle

    async def flush(self) -> None:
        """Wait until every in-flight fan-out task has finished."""
        while self._pending:
            await asyncio.gather(*tuple(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        """Flush pending deliveries, then call ``close()`` on backends that define it."""
        await self.flush()
        for backend in tuple(self._backends):
            close = getattr(backend, "close", None)
            if close is None:
                continue
            try:
                outcome = close()
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Backend %r raised while closing; continuing", backend.name, exc_info=exc)
                self._emit_diagnostic(
                    "backend_close_error",
                    {"backend": backend.name, "exception": _describe_exception(exc)},
                )

    # Internals

    async def _run_stages(self, record: LogRecord) -> StageResult:
        current = record
        index = 0
        while index < len(self._stages):
            stage = self._stages[index]
            index += 1
            outcome = stage(current)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if is_drop(outcome):
                return DROP
            if not isinstance(outcome, LogRecord):
                raise StageContractError(
                    f"Stage {_describe(stage)} returned {type(outcome).__name__}; expected LogRecord or DROP",
                )
            current = outcome
        return current

    def _spawn_fan_out(self, record: LogRecord) -> None:
        backends = tuple(self._backends)
        if not backends:
            return
        task = asyncio.get_running_loop().create_task(self._fan_out(backends, record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _fan_out(self, backends: tuple[DeliveryBackendPort, ...], record: LogRecord) -> None:
        """Invoke every backend, then await all attempts without short-circuiting."""
        attempts: list[tuple[DeliveryBackendPort, Awaitable[Any]]] = []
        for backend in backends:
            try:
                outcome = backend.send(record)
            except Exception as exc:  # noqa: BLE001
                self._report_backend_failure(backend, record, exc)
                continue
            if inspect.isawaitable(outcome):
                attempts.append((backend, outcome))
        if not attempts:
            return
        results = await asyncio.gather(*(outcome for _, outcome in attempts), return_exceptions=True)
        for (backend, _), result in zip(attempts, results):
            if isinstance(result, BaseException):
                self._report_backend_failure(backend, record, result)

    def _report_backend_failure(self, backend: DeliveryBackendPort, record: LogRecord, exc: BaseException) -> None:
        """Log and publish one delivery failure; never raises."""
        name = getattr(backend, "name", None) or type(backend).__name__
        try:
            LOGGER.error("Backend %r failed to deliver record %s; continuing", name, record.record_id, exc_info=exc)
            self._emit_diagnostic(
                "backend_error",
                {
                    "backend": name,
                    "record_id": record.record_id,
                    "severity": record.severity.label,
                    "exception": _describe_exception(exc),
                },
            )
        except Exception as report_exc:  # noqa: BLE001
            LOGGER.error("Reporting the failure of backend %r raised; continuing", name, exc_info=report_exc)

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        """Invoke the diagnostic hook while guarding against callback failures."""
        if self._diagnostic is None:
            return
        try:
            self._diagnostic(name, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Diagnostic hook raised while reporting %s", name, exc_info=diagnostic_exc)


def _describe(stage: Stage) -> str:
    return getattr(stage, "__qualname__", None) or type(stage).__name__


def _describe_exception(exc: BaseException) -> str:
    try:
        return repr(exc)
    except Exception:  # noqa: BLE001
        return f"<{type(exc).__name__} with unprintable repr>"


__all__ = ["Dispatcher"]
