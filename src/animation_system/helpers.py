"""
Helper utilities for animations
"""

import time

from led_system.pixel import Pixel


def wheel(pos: int) -> Pixel:
    """
    Map a position on the 0-255 hue wheel to a color.

    The wheel is three 85-step segments, each linearly interpolating between
    two primaries: 0 is green, 85 is red, 170 is blue.

    Args:
        pos: Position on the wheel (0-255)

    Returns:
        Pixel on the red-green-blue hue circle
    """
    if pos < 85:
        return Pixel(pos * 3, 255 - pos * 3, 0)
    if pos < 170:
        pos -= 85
        return Pixel(255 - pos * 3, 0, pos * 3)
    pos -= 170
    return Pixel(0, pos * 3, 255 - pos * 3)


def pause(wait_ms: float) -> None:
    """Sleep between frames"""
    time.sleep(wait_ms / 1000.0)
