"""Pi-side I2C transport for the SSD1306 driver.

The driver only needs three byte-level writes:
1) `write_command(cmd)`  -> [0x00, cmd]
2) `write_data(buffer)`  -> [0x40, *buffer]
3) `write_raw(payload)`  -> payload as-is (buffer already carries its 0x40)

Each call is one blocking I2C transaction on the Linux bus (/dev/i2c-N).
Any OSError from the kernel (NACK, missing device, missing bus) comes back
as `TransportError`.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from smbus2 import SMBus, i2c_msg

from .commands import CONTROL_COMMAND, CONTROL_DATA
from .errors import TransportError

log = logging.getLogger(__name__)


class BusTransport(Protocol):
    def set_address(self, address: int) -> None: ...

    def write_command(self, cmd: int) -> None: ...

    def write_data(self, buffer: bytes) -> None: ...

    def write_raw(self, payload: bytes) -> None: ...

    def close(self) -> None: ...


def check_address(address: int) -> int:
    address = int(address)
    if not (0 <= address <= 0x7F):
        raise ValueError("address must be 7-bit (0..127)")
    return address


class SMBusTransport:
    """`BusTransport` backed by smbus2 on a Raspberry Pi I2C bus.

    The bus device is opened when the slave address is bound, so building
    the transport never touches hardware.
    """

    def __init__(self, bus_number: int = 1, *, bus: Optional[SMBus] = None) -> None:
        self.bus_number = int(bus_number)
        self._bus = bus
        self._address: Optional[int] = None

    @property
    def address(self) -> Optional[int]:
        return self._address

    def set_address(self, address: int) -> None:
        address = check_address(address)
        if self._bus is None:
            try:
                self._bus = SMBus(self.bus_number)
            except OSError as exc:
                raise TransportError(f"cannot open I2C bus {self.bus_number}: {exc}") from exc
        self._address = address
        log.debug("bound I2C address 0x%02X on bus %d", address, self.bus_number)

    def _require_bus(self, op: str) -> tuple[SMBus, int]:
        if self._bus is None or self._address is None:
            raise TransportError(f"{op}: no slave address bound")
        return self._bus, self._address

    def write_command(self, cmd: int) -> None:
        cmd = int(cmd)
        if not (0 <= cmd <= 0xFF):
            raise ValueError("command byte must be 0..255")
        bus, address = self._require_bus("write_command")
        try:
            bus.write_byte_data(address, CONTROL_COMMAND, cmd)
        except OSError as exc:
            raise TransportError(f"write_command 0x{cmd:02X} to 0x{address:02X} failed: {exc}") from exc

    def write_data(self, buffer: bytes) -> None:
        self._transfer("write_data", bytes([CONTROL_DATA]) + bytes(buffer))

    def write_raw(self, payload: bytes) -> None:
        self._transfer("write_raw", bytes(payload))

    def _transfer(self, op: str, payload: bytes) -> None:
        bus, address = self._require_bus(op)
        # i2c_rdwr sends the whole frame in one transaction; SMBus block
        # writes cap out at 32 bytes.
        msg = i2c_msg.write(address, payload)
        try:
            bus.i2c_rdwr(msg)
        except OSError as exc:
            raise TransportError(f"{op} of {len(payload)} bytes to 0x{address:02X} failed: {exc}") from exc
        log.debug("%s: %d bytes to 0x%02X", op, len(payload), address)

    def close(self) -> None:
        if self._bus is not None:
            self._bus.close()
            self._bus = None
        self._address = None
