"""In-memory mirror of the SSD1306 display RAM.

Layout (horizontal addressing mode, page-major / column-minor):
  byte 0        : 0x40 data control byte (only when leading_control_byte=True)
  byte offset.. : page 0 columns 0..width-1, page 1 columns 0..width-1, ...

One byte covers 8 vertically stacked pixels of one column. Bit 0 is the top
row of the page, bit 7 the bottom row. A set bit is a lit pixel.

With the control byte embedded the whole buffer can go out as a single raw
I2C write, no extra framing needed.
"""

from __future__ import annotations

from .commands import CONTROL_DATA
from .errors import PixelRangeError


def pixel_address(x: int, y: int, *, width: int, height: int, offset: int = 0) -> tuple[int, int]:
    """Map a pixel coordinate to (buffer index, bit mask).

    Args:
        x: Column, 0..width-1.
        y: Row, 0..height-1.
        width: Bytes per page (panel width in columns).
        height: Panel height in rows.
        offset: Number of leading bytes before pixel data (0 or 1).

    Returns:
        `(index, mask)` where `buffer[index] & mask` is the pixel.
    """
    if not (0 <= x < width) or not (0 <= y < height):
        raise PixelRangeError(f"pixel ({x}, {y}) outside {width}x{height} panel")
    page = y // 8
    index = offset + x + page * width
    mask = 1 << (y % 8)
    return index, mask


class DisplayBuffer:
    def __init__(self, width: int, height: int, *, leading_control_byte: bool = True) -> None:
        if width <= 0 or height <= 0 or height % 8:
            raise ValueError("height must be a positive multiple of 8 and width positive")
        self.width = int(width)
        self.height = int(height)
        self.pages = self.height // 8
        self.offset = 1 if leading_control_byte else 0
        self._data = bytearray(self.offset + self.pages * self.width)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def has_control_byte(self) -> bool:
        return self.offset == 1

    def mark_control_byte(self) -> None:
        """Write the 0x40 data marker into byte 0 (no-op without one)."""
        if self.offset:
            self._data[0] = CONTROL_DATA

    def fill(self, value: int) -> None:
        """Overwrite every pixel byte with `value`, keeping the control byte."""
        if not (0 <= value <= 0xFF):
            raise ValueError("fill value must be 0..255")
        self._data[self.offset:] = bytes([value]) * (len(self._data) - self.offset)

    def set_pixel(self, x: int, y: int) -> int:
        """OR one pixel on and return the touched buffer index."""
        index, mask = pixel_address(x, y, width=self.width, height=self.height, offset=self.offset)
        self._data[index] |= mask
        return index

    def get_pixel(self, x: int, y: int) -> bool:
        index, mask = pixel_address(x, y, width=self.width, height=self.height, offset=self.offset)
        return bool(self._data[index] & mask)

    def pixel_bytes(self) -> bytes:
        """Pixel data without the leading control byte."""
        return bytes(self._data[self.offset:])

    def frame(self) -> bytes:
        """Whole buffer as sent on the wire, control byte included."""
        return bytes(self._data)
