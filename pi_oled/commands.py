"""SSD1306 command set and the power-on configuration sequence.

I2C framing (first byte of every transaction):
  0x00 : following byte(s) are commands
  0x40 : following bytes are display RAM data

Command values are from section 9 of the SSD1306 datasheet.
Address ranges (column / page) always take an explicit start AND end byte;
leaving the end byte out leaves the controller waiting for it and the next
command gets eaten as the end address.
"""

from __future__ import annotations

from enum import IntEnum

CONTROL_COMMAND = 0x00
CONTROL_DATA = 0x40

DEFAULT_ADDRESS = 0x3C

# Controller RAM: 128 segment columns, 64 COM rows (8 pages).
RAM_COLUMNS = 128
RAM_ROWS = 64


class CommandCode(IntEnum):
    DISPLAY_RESUME_RAM = 0xA4
    DISPLAY_ON_IGNORE_RAM = 0xA5
    DISPLAY_NORMAL = 0xA6
    DISPLAY_INVERSE = 0xA7
    DISPLAY_OFF = 0xAE
    DISPLAY_ON = 0xAF
    SET_CLOCK_DIV = 0xD5

    SEG_REMAP_NORMAL = 0xA0
    SEG_REMAP_REVERSE = 0xA1

    COM_SCAN_NORMAL = 0xC0
    COM_SCAN_REVERSE = 0xC8

    SET_COM_PINS = 0xDA
    SET_DISPLAY_OFFSET = 0xD3
    SET_PRECHARGE = 0xD9
    SET_MULTIPLEX = 0xA8
    SET_VCOMH = 0xDB

    SET_MEM_ADDR_MODE = 0x20
    SET_COLUMN_ADDR = 0x21
    SET_PAGE_ADDR = 0x22

    SET_START_LINE = 0x40

    DEACTIVATE_SCROLL = 0x2E
    ACTIVATE_SCROLL = 0x2F

    SET_CONTRAST = 0x81
    SET_CHARGE_PUMP = 0x8D
    ENABLE_CHARGE_PUMP = 0x14

    SET_PAGE_START_0 = 0xB0
    SET_PAGE_START_1 = 0xB1
    SET_PAGE_START_2 = 0xB2
    SET_PAGE_START_3 = 0xB3
    SET_PAGE_START_4 = 0xB4
    SET_PAGE_START_5 = 0xB5
    SET_PAGE_START_6 = 0xB6
    SET_PAGE_START_7 = 0xB7


# Parameter bytes used by the init sequence.
CLOCK_DIV_DEFAULT = 0x80
DISPLAY_OFFSET_NONE = 0x00
MEM_ADDR_HORIZONTAL = 0x00
COM_PINS_ALTERNATIVE = 0x12
COM_PINS_SEQUENTIAL = 0x02
CONTRAST_DEFAULT = 0x9F
PRECHARGE_INTERNAL_VCC = 0xF1
VCOMH_077_VCC = 0x20


def page_start(page: int) -> int:
    """Return the page-addressing-mode start command for `page` (0..7)."""
    if not (0 <= page <= 7):
        raise ValueError("page must be 0..7")
    return CommandCode.SET_PAGE_START_0 + page


def check_geometry(width: int, height: int) -> None:
    """Reject panel sizes the controller RAM cannot hold."""
    if not (1 <= width <= RAM_COLUMNS):
        raise ValueError(f"width must be 1..{RAM_COLUMNS}")
    if not (8 <= height <= RAM_ROWS) or height % 8:
        raise ValueError(f"height must be a multiple of 8 in 8..{RAM_ROWS}")


def build_init_sequence(height: int = RAM_ROWS) -> list[int]:
    """Return the ordered byte stream that configures the panel.

    Every entry is sent as its own command transaction. The column window
    always spans all 128 RAM columns, whatever page stride the framebuffer
    uses. Multiplex ratio, page window and COM pin layout follow the panel
    height; at 64 rows they are 0x3F, 0x00..0x07 and 0x12.
    """
    check_geometry(RAM_COLUMNS, height)
    pages = height // 8
    com_pins = COM_PINS_ALTERNATIVE if height == RAM_ROWS else COM_PINS_SEQUENTIAL
    return [
        CommandCode.DISPLAY_OFF,
        CommandCode.SET_CLOCK_DIV, CLOCK_DIV_DEFAULT,
        CommandCode.SET_MULTIPLEX, height - 1,
        CommandCode.SET_DISPLAY_OFFSET, DISPLAY_OFFSET_NONE,
        CommandCode.SET_START_LINE,
        CommandCode.SET_CHARGE_PUMP, CommandCode.ENABLE_CHARGE_PUMP,
        CommandCode.SET_MEM_ADDR_MODE, MEM_ADDR_HORIZONTAL,
        CommandCode.SET_COLUMN_ADDR, 0x00, RAM_COLUMNS - 1,
        CommandCode.SET_PAGE_ADDR, 0x00, pages - 1,
        CommandCode.SEG_REMAP_REVERSE,
        CommandCode.COM_SCAN_REVERSE,
        CommandCode.SET_COM_PINS, com_pins,
        CommandCode.SET_CONTRAST, CONTRAST_DEFAULT,
        CommandCode.SET_PRECHARGE, PRECHARGE_INTERNAL_VCC,
        CommandCode.SET_VCOMH, VCOMH_077_VCC,
        CommandCode.DISPLAY_RESUME_RAM,
        CommandCode.DISPLAY_NORMAL,
        CommandCode.DEACTIVATE_SCROLL,
        CommandCode.DISPLAY_ON,
    ]
