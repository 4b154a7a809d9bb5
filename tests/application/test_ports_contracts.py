from __future__ import annotations

from datetime import datetime, timezone

from lib_log_dispatch.adapters import RichConsoleBackend, RingBufferBackend
from lib_log_dispatch.application.ports import DROP, ClockPort, DeliveryBackendPort, Drop, IdProvider, is_drop
from lib_log_dispatch.application.use_cases.create_record import SystemClock, UuidProvider
from lib_log_dispatch.domain.records import LogRecord


class _SyncBackend:
    name = "sync"

    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def send(self, record: LogRecord) -> None:
        self.records.append(record)


class _NamelessBackend:
    def send(self, record: LogRecord) -> None:
        return None


def test_backends_satisfy_delivery_port() -> None:
    assert isinstance(_SyncBackend(), DeliveryBackendPort)
    assert isinstance(RingBufferBackend(), DeliveryBackendPort)
    assert isinstance(RichConsoleBackend(), DeliveryBackendPort)


def test_backend_without_name_is_not_a_delivery_port() -> None:
    assert not isinstance(_NamelessBackend(), DeliveryBackendPort)


def test_drop_is_a_falsy_singleton() -> None:
    assert Drop() is DROP
    assert not DROP
    assert repr(DROP) == "DROP"
    assert is_drop(DROP)
    assert not is_drop(None)


def test_default_clock_and_ids_satisfy_ports() -> None:
    clock = SystemClock()
    ids = UuidProvider()
    assert isinstance(clock, ClockPort)
    assert isinstance(ids, IdProvider)
    assert clock.now().tzinfo is timezone.utc
    assert clock.now() <= datetime.now(timezone.utc)
    first, second = ids(), ids()
    assert first != second
    assert len(first) == 32
