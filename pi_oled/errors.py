"""Exception types raised by the OLED driver and its I2C transport."""

from __future__ import annotations


class DisplayError(RuntimeError):
    """Base class for every driver-level failure."""


class TransportError(DisplayError):
    """Raised when an I2C transaction to the display fails."""


class SequencingError(DisplayError):
    """Raised when an operation is called in the wrong driver state."""


class PixelRangeError(DisplayError, ValueError):
    """Raised when a pixel coordinate falls outside the panel."""
