"""Pipeline stage contract and the drop signal.

A stage is any callable mapping a :class:`LogRecord` to either a (possibly new)
record or :data:`DROP`. Stages may be coroutine functions; the dispatcher awaits
whatever awaitable they return before running the next stage.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Final, Union

from lib_log_dispatch.domain.records import LogRecord


class Drop:
    """Marker type for the drop signal; use the :data:`DROP` singleton."""

    _instance: "Drop | None" = None

    def __new__(cls) -> "Drop":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DROP"

    def __bool__(self) -> bool:
        return False


DROP: Final = Drop()
"""Returned by a stage to stop the chain; the record is silently discarded."""

StageResult = Union[LogRecord, Drop]
Stage = Callable[[LogRecord], Union[StageResult, Awaitable[StageResult]]]


def is_drop(result: object) -> bool:
    """Return ``True`` when ``result`` is the drop signal.

    Examples
    --------
    >>> is_drop(DROP), is_drop(Drop()), is_drop(None)
    (True, True, False)
    """
    return isinstance(result, Drop)


__all__ = ["DROP", "Drop", "Stage", "StageResult", "is_drop"]
