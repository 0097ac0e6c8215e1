from __future__ import annotations

from typing import Optional

import pytest

from pi_oled.display import Ssd1306Display
from pi_oled.errors import TransportError


class RecordingTransport:
    """In-memory `BusTransport` that logs every call as (kind, payload)."""

    def __init__(self, fail_on: Optional[str] = None, fail_after: int = 0) -> None:
        self.calls: list[tuple[str, object]] = []
        self.address: Optional[int] = None
        self.closed = False
        self.fail_on = fail_on
        self.fail_after = fail_after
        self._seen: dict[str, int] = {}

    def _record(self, kind: str, payload) -> None:
        count = self._seen.get(kind, 0)
        self._seen[kind] = count + 1
        if kind == self.fail_on and count >= self.fail_after:
            raise TransportError(f"{kind} rejected")
        self.calls.append((kind, payload))

    def set_address(self, address: int) -> None:
        self._record("address", address)
        self.address = address

    def write_command(self, cmd: int) -> None:
        self._record("command", int(cmd))

    def write_data(self, buffer: bytes) -> None:
        self._record("data", bytes(buffer))

    def write_raw(self, payload: bytes) -> None:
        self._record("raw", bytes(payload))

    def close(self) -> None:
        self.closed = True

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]

    def commands(self) -> list[int]:
        return [payload for kind, payload in self.calls if kind == "command"]

    def frames(self) -> list[bytes]:
        return [payload for kind, payload in self.calls if kind in ("raw", "data")]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def oled(transport) -> Ssd1306Display:
    display = Ssd1306Display(0x3C, transport)
    display.initialize()
    transport.calls.clear()
    return display
