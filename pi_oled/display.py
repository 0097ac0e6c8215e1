"""SSD1306 128x64 OLED driver for Raspberry Pi over I2C.

Lifecycle:
  UNINITIALIZED --initialize()--> READY --close()--> CLOSED

`fill`, `set_pixel`, `flush`, `set_contrast` and `invert` only work while
READY. CLOSED is terminal; build a new driver to light the panel again.

Every mutating call transmits the full framebuffer in one I2C transaction
unless it is called with `flush=False`, in which case `flush()` sends it.

Dependencies on Pi:
  pip install smbus2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .commands import DEFAULT_ADDRESS, CommandCode, build_init_sequence, check_geometry
from .errors import SequencingError, TransportError
from .framebuffer import DisplayBuffer
from .i2c_transport import BusTransport, SMBusTransport, check_address

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OledConfig:
    i2c_bus: int = 1
    address: int = DEFAULT_ADDRESS
    width: int = 128
    height: int = 64
    leading_control_byte: bool = True

    def __post_init__(self) -> None:
        check_address(self.address)
        check_geometry(self.width, self.height)


class DriverState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CLOSED = "closed"


class Ssd1306Display:
    """One SSD1306 panel at a fixed I2C address.

    The driver takes ownership of `transport`: it binds the address during
    `initialize()` and closes the transport during `close()`.
    """

    def __init__(
        self,
        address: int,
        transport: BusTransport,
        *,
        width: int = 128,
        height: int = 64,
        leading_control_byte: bool = True,
    ) -> None:
        self.address = check_address(address)
        self.width = int(width)
        self.height = int(height)
        check_geometry(self.width, self.height)
        self._transport = transport
        self._buffer = DisplayBuffer(self.width, self.height, leading_control_byte=leading_control_byte)
        self._state = DriverState.UNINITIALIZED

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def buffer(self) -> bytes:
        """Snapshot of the framebuffer, leading control byte included."""
        return self._buffer.frame()

    def _require(self, op: str, state: DriverState = DriverState.READY) -> None:
        if self._state is not state:
            raise SequencingError(f"{op}() needs a {state.value} display, current state is {self._state.value}")

    # ----- lifecycle -----

    def initialize(self) -> None:
        """Bind the slave address, configure the panel and blank it."""
        self._require("initialize", DriverState.UNINITIALIZED)

        try:
            self._transport.set_address(self.address)
            for byte in build_init_sequence(self.height):
                self._transport.write_command(byte)

            self._buffer.fill(0x00)
            self._buffer.mark_control_byte()
            self._transmit()
        except TransportError:
            # Release the bus; set_address reopens it on a retry.
            self._transport.close()
            raise

        self._state = DriverState.READY
        log.info("display 0x%02X initialized (%dx%d)", self.address, self.width, self.height)

    def close(self) -> None:
        """Blank display RAM, switch the panel off and release the bus."""
        self._require("close")

        self._buffer.fill(0x00)
        self._transmit()
        self._transport.write_command(CommandCode.DISPLAY_OFF)
        self._transport.close()

        self._state = DriverState.CLOSED
        log.info("display 0x%02X closed", self.address)

    def __enter__(self) -> "Ssd1306Display":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._state is not DriverState.READY:
            return
        if exc is None:
            self.close()
            return
        try:
            self.close()
        except TransportError:
            log.exception("close of display 0x%02X failed while handling %s", self.address, exc_type.__name__)

    # ----- drawing -----

    def fill(self, value: int, *, flush: bool = True) -> None:
        """Set every pixel byte to `value` (0x00 clears, 0xFF lights all)."""
        self._require("fill")
        self._buffer.fill(value)
        if flush:
            self._transmit()

    def set_pixel(self, x: int, y: int, *, flush: bool = True) -> None:
        """Light pixel (x, y). Pixels are only ever set; use fill(0) to clear."""
        self._require("set_pixel")
        index = self._buffer.set_pixel(x, y)
        log.debug("pixel (%d, %d) -> cell %d bit %d", x, y, index, y % 8)
        if flush:
            self._transmit()

    def get_pixel(self, x: int, y: int) -> bool:
        return self._buffer.get_pixel(x, y)

    def flush(self) -> None:
        """Send the current framebuffer to the panel."""
        self._require("flush")
        self._transmit()

    # ----- panel settings -----

    def set_contrast(self, level: int) -> None:
        self._require("set_contrast")
        if not (0 <= level <= 0xFF):
            raise ValueError("contrast must be 0..255")
        self._transport.write_command(CommandCode.SET_CONTRAST)
        self._transport.write_command(level)

    def invert(self, enabled: bool) -> None:
        self._require("invert")
        cmd = CommandCode.DISPLAY_INVERSE if enabled else CommandCode.DISPLAY_NORMAL
        self._transport.write_command(cmd)

    def _transmit(self) -> None:
        try:
            if self._buffer.has_control_byte:
                self._transport.write_raw(self._buffer.frame())
            else:
                self._transport.write_data(self._buffer.pixel_bytes())
        except TransportError:
            log.warning("framebuffer transmit to 0x%02X failed; panel may not match buffer", self.address)
            raise


def open_display(config: Optional[OledConfig] = None) -> Ssd1306Display:
    """Build an uninitialized driver on the Pi I2C bus named in `config`."""
    config = config or OledConfig()
    return Ssd1306Display(
        config.address,
        SMBusTransport(config.i2c_bus),
        width=config.width,
        height=config.height,
        leading_control_byte=config.leading_control_byte,
    )
