#!/usr/bin/env python3
"""
Strip - pixel buffer plus device configuration behind one handle

The Strip owns its PixelBuffer exclusively and hands snapshots of it to a
HardwareDriver on show(). The driver is chosen by the caller at construction;
there is no implicit fallback. Hardware is acquired in __init__ and released by
close(), by shutdown(), or by leaving a `with` block.
"""
from typing import Any, Callable, Iterable, List, Optional, TYPE_CHECKING, Union

from .config import LedStripConfig
from .errors import StripClosedError
from .interfaces import HardwareDriver, LedStrip
from .pixel import CHANNEL_MASK, Pixel, to_color
from .pixel_buffer import PixelBuffer

if TYPE_CHECKING:
    from utils import ClassLogger


class Strip(LedStrip):
    """Addressable LED strip backed by an in-memory PixelBuffer

    Usage:
        config = LedStripConfig(led_count=8, gpio_pin=18)
        with Strip(config, Ws281xDriver()) as strip:
            strip.set_pixel(0, 255, 0, 0).show()
    """

    def __init__(self, config: LedStripConfig, driver: HardwareDriver,
                 logger: Optional['ClassLogger'] = None) -> None:
        """
        Args:
            config: Strip parameters, validated here
            driver: Output that receives frames on show()
            logger: ClassLogger instance from HybridLogger.get_class_logger()

        Raises:
            ConfigurationError: If the configuration is invalid or the driver rejects it
        """
        config.validate()
        self._config = config
        self._driver = driver
        self._logger = logger
        self._brightness = config.brightness & CHANNEL_MASK
        self._buffer: Optional[PixelBuffer] = PixelBuffer(config.led_count)
        self._handle = driver.configure(config.led_count, config.gpio_pin, config.dma,
                                        config.freq_hz, config.invert, self._brightness,
                                        config.channel)
        if self._logger:
            self._logger.info(f"Strip opened: {config.led_count} LEDs on GPIO {config.gpio_pin} "
                              f"(DMA {config.dma}, {config.freq_hz} Hz)")

    @classmethod
    def create(cls, led_count: int, gpio_pin: int, driver: HardwareDriver,
               logger: Optional['ClassLogger'] = None, **options) -> 'Strip':
        """Build a strip from positional length/pin plus LedStripConfig keyword fields"""
        return cls(LedStripConfig(led_count=led_count, gpio_pin=gpio_pin, **options),
                   driver, logger)

    def _live_buffer(self) -> PixelBuffer:
        if self._buffer is None:
            raise StripClosedError("Leds are not initialized (strip is closed)")
        return self._buffer

    # Configuration (read-only after construction)

    @property
    def config(self) -> LedStripConfig:
        """Readable after close, like closed and repr()"""
        return self._config

    @property
    def gpio_pin(self) -> int:
        self._live_buffer()
        return self._config.gpio_pin

    @property
    def dma(self) -> int:
        self._live_buffer()
        return self._config.dma

    @property
    def freq_hz(self) -> int:
        self._live_buffer()
        return self._config.freq_hz

    @property
    def invert(self) -> bool:
        self._live_buffer()
        return self._config.invert

    @property
    def channel(self) -> int:
        self._live_buffer()
        return self._config.channel

    @property
    def closed(self) -> bool:
        return self._buffer is None

    @property
    def brightness(self) -> int:
        self._live_buffer()
        return self._brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        """Only affects frames sent by later show() calls; stored colors are untouched"""
        self._live_buffer()
        self._brightness = int(value) & CHANNEL_MASK
        if self._logger:
            self._logger.debug(f"Brightness set to {self._brightness}")

    # Buffer access

    def __len__(self) -> int:
        return len(self._live_buffer())

    def num_pixels(self) -> int:
        return len(self._live_buffer())

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        return self._live_buffer()[pos]

    def __setitem__(self, pos: Union[int, slice], color: Union[int, List[int]]) -> None:
        self._live_buffer()[pos] = color

    def get_pixel(self, index: int) -> Pixel:
        return self._live_buffer().get(index)

    def set_pixel(self, index: int, *color) -> 'Strip':
        """Set one pixel from a packed color or from three channel values

        Raises:
            InvalidArgumentError: For any other number of color arguments
            OutOfRangeError: If index is outside the strip
        """
        self._live_buffer().set(index, to_color(*color))
        return self

    def fill(self, color: int, start: Any = None, length: Optional[int] = None) -> 'Strip':
        self._live_buffer().fill(color, start, length)
        return self

    def fill_with(self, fn: Callable[[int], int], start: Any = None,
                  length: Optional[int] = None) -> 'Strip':
        self._live_buffer().fill_with(fn, start, length)
        return self

    def replace(self, colors: Iterable[int]) -> 'Strip':
        self._live_buffer().replace(colors)
        return self

    def reverse(self) -> 'Strip':
        self._live_buffer().reverse()
        return self

    def rotate(self, count: int = 1) -> 'Strip':
        self._live_buffer().rotate(count)
        return self

    def to_list(self) -> List[Pixel]:
        return self._live_buffer().to_list()

    def clear(self) -> 'Strip':
        """Turn every pixel off in the buffer. Call show() to make it visible."""
        self._live_buffer().clear()
        return self

    # Output

    def show(self) -> 'Strip':
        """Hand the current buffer to the driver; blocks until the driver returns"""
        frame = self._live_buffer().to_list()
        self._driver.render(self._handle, frame, self._brightness)
        return self

    def close(self) -> None:
        """Drop the buffer and release driver resources. Safe to call twice."""
        if self._buffer is None:
            return
        self._buffer = None
        try:
            self._driver.release(self._handle)
        finally:
            self._handle = None
            if self._logger:
                self._logger.info(f"Strip on GPIO {self._config.gpio_pin} closed")

    def shutdown(self) -> None:
        """Blank the LEDs, then release hardware: clear, show, close

        The hardware is released even if the final show() fails. Does nothing
        once the strip is closed.
        """
        if self._buffer is None:
            return
        try:
            self.clear().show()
        finally:
            self.close()

    def __enter__(self) -> 'Strip':
        self._live_buffer()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        state = "closed" if self._buffer is None else f"{len(self._buffer)} LEDs"
        return f"Strip(gpio_pin={self._config.gpio_pin}, {state})"
