#!/usr/bin/env python3
"""
LED System - pixel buffer and device handle for addressable RGB strips

The main components are:

- Pixel: packed 24-bit color that extends int (pack / unpack helpers)
- PixelBuffer: fixed-length, bounds-checked store of colors
- Strip: PixelBuffer plus device configuration, flushed through a HardwareDriver
- Ws281xDriver: rpi_ws281x implementation of HardwareDriver
- TextRenderer: terminal implementation of HardwareDriver for debugging

Usage:
    from led_system import LedStripConfig, Strip, Ws281xDriver, Pixel

    with Strip(LedStripConfig(led_count=8, gpio_pin=18), Ws281xDriver()) as strip:
        strip[0] = Pixel(255, 0, 0)         # Red pixel
        strip[1:5] = Pixel(0, 255, 0)       # Green pixels
        strip.show()
"""

from .pixel import Pixel, pack, unpack, BLACK, WHITE, RED, GREEN, BLUE
from .errors import (LedSystemError, OutOfRangeError, InvalidArgumentError,
                     ConfigurationError, StripClosedError, RenderError)
from .pixel_buffer import PixelBuffer
from .brightness import scale, scale_pixel
from .interfaces import LedStrip, HardwareDriver
from .config import LedStripConfig
from .strip import Strip
from .ws281x_driver import Ws281xDriver
from .text_renderer import TextRenderer

__all__ = [
    'Pixel', 'pack', 'unpack', 'BLACK', 'WHITE', 'RED', 'GREEN', 'BLUE',
    'LedSystemError', 'OutOfRangeError', 'InvalidArgumentError',
    'ConfigurationError', 'StripClosedError', 'RenderError',
    'PixelBuffer', 'scale', 'scale_pixel',
    'LedStrip', 'HardwareDriver', 'LedStripConfig',
    'Strip', 'Ws281xDriver', 'TextRenderer',
]

__version__ = '1.0.0'
