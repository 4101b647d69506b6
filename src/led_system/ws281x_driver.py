#!/usr/bin/env python3
"""
Ws281xDriver - rpi_ws281x implementation of HardwareDriver

This is the only module that depends on rpi_ws281x. It can be imported on any
machine; constructing the driver without the library installed is an error.
"""
from typing import Optional, Sequence, TYPE_CHECKING

from .errors import ConfigurationError, RenderError
from .interfaces import HardwareDriver

# Import rpi_ws281x at module level within driver
try:
    from rpi_ws281x import PixelStrip
except ImportError:
    # Handle gracefully for development on non-Pi systems
    PixelStrip = None

if TYPE_CHECKING:
    from utils import ClassLogger


class Ws281xDriver(HardwareDriver):
    """Drives a WS281x strip through the DMA/PWM engine of a Raspberry Pi

    The handle returned by configure() is the underlying rpi_ws281x PixelStrip.
    Brightness is pushed to the library on every render so that changes made
    on the Strip take effect at the next show().
    """

    def __init__(self, logger: Optional['ClassLogger'] = None) -> None:
        """
        Raises:
            ConfigurationError: If rpi_ws281x is not available
        """
        if PixelStrip is None:
            raise ConfigurationError("rpi_ws281x not available - run on Raspberry Pi")
        self._logger = logger

    def configure(self, led_count: int, gpio_pin: int, dma: int, freq_hz: int,
                  invert: bool, brightness: int, channel: int = 0) -> 'PixelStrip':
        strip = PixelStrip(led_count, gpio_pin, freq_hz, dma, invert, brightness, channel)
        try:
            strip.begin()
        except RuntimeError as e:
            if self._logger:
                self._logger.error(f"Leds could not be initialized on GPIO {gpio_pin}", e)
            raise ConfigurationError(f"Leds could not be initialized: {e}") from e
        if self._logger:
            self._logger.info(f"ws281x channel {channel} started on GPIO {gpio_pin}")
        return strip

    def render(self, handle: 'PixelStrip', colors: Sequence[int], brightness: int) -> None:
        for i, color in enumerate(colors):
            handle.setPixelColor(i, int(color))
        handle.setBrightness(brightness)
        try:
            handle.show()
        except RuntimeError as e:
            if self._logger:
                self._logger.error("ws281x render failed", e)
            raise RenderError(f"Leds failed to render: {e}") from e

    def release(self, handle: Optional['PixelStrip']) -> None:
        if handle is None:
            return
        # PixelStrip has no public teardown; _cleanup frees the ws2811 struct
        handle._cleanup()
        if self._logger:
            self._logger.info("ws281x resources released")
