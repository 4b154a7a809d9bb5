"""Configuration resolution for the runtime façade.

Translate keyword arguments plus ``LOG_*`` environment overrides into a
:class:`DispatchConfig`. Environment values win over arguments so operators can
tune a deployed service without code changes.
"""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Iterable

from lib_log_dispatch.application.ports.backend import DeliveryBackendPort
from lib_log_dispatch.application.ports.stage import Stage
from lib_log_dispatch.application.use_cases._types import DiagnosticHook, DispatchConfig
from lib_log_dispatch.domain.levels import Severity, coerce_severity

ENV_MINIMUM_SEVERITY = "LOG_MINIMUM_SEVERITY"


def build_dispatch_config(
    *,
    minimum_severity: str | int | Severity = Severity.DEBUG,
    backends: Iterable[DeliveryBackendPort] = (),
    stages: Iterable[Stage] = (),
    diagnostic_hook: DiagnosticHook = None,
) -> DispatchConfig:
    """Return a frozen :class:`DispatchConfig` with overrides applied.

    Raises
    ------
    ValueError
        When the severity argument or ``LOG_MINIMUM_SEVERITY`` is not a known
        severity name or number.
    """
    config = DispatchConfig(
        minimum_severity=coerce_severity(minimum_severity),
        backends=tuple(backends),
        stages=tuple(stages),
        diagnostic_hook=diagnostic_hook,
    )
    return apply_env_overrides(config)


def apply_env_overrides(config: DispatchConfig) -> DispatchConfig:
    """Return ``config`` with ``LOG_MINIMUM_SEVERITY`` applied when set."""
    raw = os.getenv(ENV_MINIMUM_SEVERITY)
    if not raw or not raw.strip():
        return config
    return replace(config, minimum_severity=coerce_severity(raw))


__all__ = ["ENV_MINIMUM_SEVERITY", "apply_env_overrides", "build_dispatch_config"]
