"""Delivery backend port.

Purpose
-------
Describe the contract every sink (console, HTTP, third-party service) fulfils
so the dispatcher can fan records out without knowing what the sinks are.

System Role
-----------
Consumed by :class:`lib_log_dispatch.application.use_cases.dispatch.Dispatcher`;
implemented by the adapters package and by host applications.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from lib_log_dispatch.domain.records import LogRecord


@runtime_checkable
class DeliveryBackendPort(Protocol):
    """Accept a record and attempt delivery.

    ``name`` must be unique within a dispatcher and stable for the lifetime of
    the object. ``send`` signals success by returning normally (directly or
    through an awaitable) and failure by raising.
    """

    name: str

    def send(self, record: LogRecord) -> Awaitable[None] | None:
        """Deliver ``record`` to the backend."""


__all__ = ["DeliveryBackendPort"]
