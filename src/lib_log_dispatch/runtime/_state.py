"""Lifecycle guard holding the single active dispatcher."""

from __future__ import annotations

from threading import RLock
from typing import Callable

from lib_log_dispatch.application.use_cases._types import DispatchConfig
from lib_log_dispatch.application.use_cases.dispatch import Dispatcher
from lib_log_dispatch.domain.errors import AlreadyInitializedError, NotInitializedError


class LifecycleGuard:
    """Enforce "at most one configured dispatcher" for whoever owns the guard.

    The runtime façade owns one process-wide guard; tests and embedding hosts
    can create their own to get fully independent instances.

    Examples
    --------
    >>> guard = LifecycleGuard()
    >>> guard.is_initialised()
    False
    >>> dispatcher = guard.initialize(DispatchConfig())
    >>> guard.get_active() is dispatcher
    True
    >>> guard.reset(); guard.reset()
    >>> guard.is_initialised()
    False
    """

    def __init__(self, factory: Callable[[DispatchConfig], Dispatcher] = Dispatcher) -> None:
        self._factory = factory
        self._active: Dispatcher | None = None
        self._lock = RLock()

    def initialize(self, config: DispatchConfig) -> Dispatcher:
        """Build and install a dispatcher; raise if one is already active."""

        with self._lock:
            if self._active is not None:
                raise AlreadyInitializedError()
            dispatcher = self._factory(config)
            self._active = dispatcher
            return dispatcher

    def get_active(self) -> Dispatcher:
        """Return the active dispatcher or raise :class:`NotInitializedError`."""

        with self._lock:
            if self._active is None:
                raise NotInitializedError()
            return self._active

    def reset(self) -> None:
        """Forget the active dispatcher; a no-op when none is active."""

        with self._lock:
            self._active = None

    def is_initialised(self) -> bool:
        with self._lock:
            return self._active is not None


__all__ = ["LifecycleGuard"]
