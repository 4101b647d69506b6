#!/usr/bin/env python3
"""
TextRenderer - terminal stand-in for LED hardware

Draws each frame as one line of colored glyphs using 24-bit ANSI escapes,
redrawing in place with a carriage return. Colors are brightness-scaled the
same way the hardware would scale them.
"""
import sys
from typing import Optional, Sequence, TextIO, TYPE_CHECKING

from .brightness import scale
from .interfaces import HardwareDriver

if TYPE_CHECKING:
    from utils import ClassLogger

RESET = '\033[0m'
DEFAULT_GLYPH = "◉ "


class _TextHandle:
    def __init__(self, led_count: int):
        self.led_count = led_count
        self.released = False


class TextRenderer(HardwareDriver):
    """HardwareDriver that prints frames instead of transmitting them

    Args:
        stream: Where to draw (default stdout)
        glyph: Text drawn for each pixel; empty falls back to the default
        logger: Optional ClassLogger
    """

    def __init__(self, stream: Optional[TextIO] = None, glyph: str = DEFAULT_GLYPH,
                 logger: Optional['ClassLogger'] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._glyph = glyph or DEFAULT_GLYPH
        self._logger = logger

    def configure(self, led_count: int, gpio_pin: int, dma: int, freq_hz: int,
                  invert: bool, brightness: int, channel: int = 0) -> _TextHandle:
        if self._logger:
            self._logger.info(f"Text renderer standing in for {led_count} LEDs on GPIO {gpio_pin}")
        return _TextHandle(led_count)

    def format_frame(self, colors: Sequence[int], brightness: int) -> str:
        cells = []
        for color in colors:
            r, g, b = scale(color, brightness)
            cells.append(f"\033[38;2;{r};{g};{b}m{self._glyph}{RESET}")
        return "\r" + "".join(cells)

    def render(self, handle: _TextHandle, colors: Sequence[int], brightness: int) -> None:
        self._stream.write(self.format_frame(colors, brightness))
        self._stream.flush()

    def release(self, handle: Optional[_TextHandle]) -> None:
        if handle is None or handle.released:
            return
        handle.released = True
        self._stream.write("\n")
        self._stream.flush()
