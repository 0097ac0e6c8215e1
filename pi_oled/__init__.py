"""Raspberry Pi SSD1306 OLED driver over I2C.

Modules:
- commands.py: SSD1306 command codes and the init sequence
- framebuffer.py: page-addressed display RAM mirror and pixel mapping
- i2c_transport.py: smbus2-backed command/data writes
- display.py: driver state machine (initialize / fill / set_pixel / close)
- oled_smoke.py: hardware smoke test
"""
from pi_oled.commands import CONTROL_COMMAND, CONTROL_DATA, DEFAULT_ADDRESS, CommandCode, build_init_sequence
from pi_oled.display import DriverState, OledConfig, Ssd1306Display, open_display
from pi_oled.errors import DisplayError, PixelRangeError, SequencingError, TransportError
from pi_oled.framebuffer import DisplayBuffer, pixel_address
from pi_oled.i2c_transport import BusTransport, SMBusTransport

__all__ = [
    "BusTransport",
    "CONTROL_COMMAND",
    "CONTROL_DATA",
    "CommandCode",
    "DEFAULT_ADDRESS",
    "DisplayBuffer",
    "DisplayError",
    "DriverState",
    "OledConfig",
    "PixelRangeError",
    "SMBusTransport",
    "SequencingError",
    "Ssd1306Display",
    "TransportError",
    "build_init_sequence",
    "open_display",
    "pixel_address",
]
