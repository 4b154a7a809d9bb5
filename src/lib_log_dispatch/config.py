"""Optional ``.env`` loading for the ``LOG_*`` configuration variables.

Hosts call :func:`enable_dotenv` once at startup, before :func:`lib_log_dispatch.init`,
so values such as ``LOG_MINIMUM_SEVERITY`` can live in a project-level
``.env`` file. Variables already present in the environment are never
overridden.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
"""Environment toggle that enables ``.env`` loading for the CLI."""

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``path`` (or the nearest ``.env`` above the working directory).

    Returns the resolved file that was loaded, or ``None`` when no file was
    found. Subsequent calls return the first result without reloading.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        candidate = Path(path) if path is not None else _find_nearest()
        if candidate is None or not candidate.is_file():
            LOGGER.debug("No .env file found; environment left unchanged")
            return None
        resolved = candidate.resolve()
        load_dotenv(resolved, override=False)
        _DOTENV_LOADED = resolved
        LOGGER.debug("Loaded environment overrides from %s", resolved)
        return resolved


def should_use_dotenv(explicit: bool | None = None) -> bool:
    """Return ``explicit`` when given, else whether ``LOG_USE_DOTENV`` is truthy."""

    if explicit is not None:
        return explicit
    return os.getenv(DOTENV_ENV_VAR, "").strip().lower() in _TRUTHY


def _find_nearest() -> Path | None:
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


def _reset_dotenv_state_for_testing() -> None:
    """Forget earlier :func:`enable_dotenv` calls."""

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
