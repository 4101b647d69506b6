#!/usr/bin/env python3
"""
Pixel - packed 24-bit color values

A color is one int laid out as 0xRRGGBB. Pixel extends int so buffers and
drivers can store it directly, while still exposing the channels by name.
"""
from typing import Optional, Tuple

from .errors import InvalidArgumentError

COLOR_MASK = 0xFFFFFF
CHANNEL_MASK = 0xFF


class Pixel(int):
    """Packed RGB color that IS an int

    Usage:
        pixel = Pixel(255, 0, 0)        # Red pixel
        pixel = Pixel(0xFF0000)         # Red pixel from packed int
        print(pixel.r, pixel.g, pixel.b)  # Access RGB components
    """

    def __new__(cls, r: int, g: Optional[int] = None, b: Optional[int] = None) -> 'Pixel':
        """Create pixel from RGB channels or an existing packed value

        Channels are truncated to their low 8 bits and a packed value to its
        low 24 bits; out-of-range input is never an error.

        Raises:
            InvalidArgumentError: If only two of the three channels are given
        """
        if g is None and b is None:
            return int.__new__(cls, int(r) & COLOR_MASK)
        if g is None or b is None:
            raise InvalidArgumentError("Must provide either just int value or all three RGB values")
        return int.__new__(cls, ((int(r) & CHANNEL_MASK) << 16)
                           | ((int(g) & CHANNEL_MASK) << 8)
                           | (int(b) & CHANNEL_MASK))

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & CHANNEL_MASK

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & CHANNEL_MASK

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & CHANNEL_MASK

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"


def pack(red: int, green: int, blue: int) -> Pixel:
    """Combine three channels into one 24-bit color (red in bits 23-16)"""
    return Pixel(red, green, blue)


def unpack(color: int) -> Tuple[int, int, int]:
    """Split a 24-bit color back into (red, green, blue)"""
    return ((color >> 16) & CHANNEL_MASK, (color >> 8) & CHANNEL_MASK, color & CHANNEL_MASK)


def to_color(*args) -> Pixel:
    """Coerce either one packed value or three channels into a Pixel

    Raises:
        InvalidArgumentError: For any other argument count, or a non-integer value
    """
    if len(args) not in (1, 3):
        raise InvalidArgumentError(f"expecting either 1 or 3 color arguments: {len(args)}")
    for value in args:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"color values must be integers: {type(value).__name__}")
    return Pixel(*args)


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)
RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)
