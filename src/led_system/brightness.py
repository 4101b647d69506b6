"""
Display-time brightness scaling

Integer fixed-point: each channel is multiplied by (brightness + 1) and shifted
right by 8. Stored buffer values are never modified by this.
"""
from typing import Tuple

from .pixel import CHANNEL_MASK, Pixel, unpack


def scale(color: int, brightness: int) -> Tuple[int, int, int]:
    """Scale a packed color by an 8-bit brightness, returning (r, g, b)"""
    factor = (brightness & CHANNEL_MASK) + 1
    r, g, b = unpack(color)
    return ((r * factor) >> 8, (g * factor) >> 8, (b * factor) >> 8)


def scale_pixel(color: int, brightness: int) -> Pixel:
    return Pixel(*scale(color, brightness))
