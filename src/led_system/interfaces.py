#!/usr/bin/env python3
"""
LED system interfaces

LedStrip is the narrow capability animations are written against: indexed
pixel access, bulk fill and show. HardwareDriver is what a Strip hands its
finished frames to; the ws281x driver and the text renderer both implement it.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union, List

from .pixel import Pixel


class LedStrip(ABC):
    """Abstract interface for LED strip control using Python index notation

    Supported Operations:
        strip[5] = Pixel(255, 0, 0)                    # Single pixel
        strip[0:10] = Pixel(0, 255, 0)                 # Slice to same color
        strip.fill(Pixel(0, 0, 0))                     # Whole strip
        strip.show()                                   # Make it visible

        color = strip[5]                               # Get single pixel
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        """Get pixel color(s). Returns single Pixel or list for slice."""
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[int, List[int]]) -> None:
        """Set pixel(s) to color(s).

        Raises:
            OutOfRangeError: If an integer position is outside the strip
            InvalidArgumentError: If trying to assign list to single position
            ValueError: If color list length doesn't match slice length
        """
        pass

    @abstractmethod
    def fill(self, color: int, start: Any = None, length: Optional[int] = None) -> 'LedStrip':
        """Set a span of pixels (default: all) to one color."""
        pass

    @abstractmethod
    def show(self) -> 'LedStrip':
        """Update the physical display with current buffer.

        Pixel changes are not visible until this is called. Returns the strip
        so calls can be chained.
        """
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        """Return number of pixels in the strip."""
        pass


class HardwareDriver(ABC):
    """Transmits finished frames to a physical (or simulated) output

    A Strip calls configure() once when it is built, render() on every show()
    and release() once when it is closed.
    """

    @abstractmethod
    def configure(self, led_count: int, gpio_pin: int, dma: int, freq_hz: int,
                  invert: bool, brightness: int, channel: int = 0) -> Any:
        """Acquire output resources and return an opaque handle.

        Raises:
            ConfigurationError: If the parameters are rejected
        """
        pass

    @abstractmethod
    def render(self, handle: Any, colors: Sequence[int], brightness: int) -> None:
        """Transmit one frame; may block until it has been sent.

        Raises:
            RenderError: If the frame could not be transmitted
        """
        pass

    @abstractmethod
    def release(self, handle: Any) -> None:
        """Free output resources. Calling it twice is harmless."""
        pass
