"""
Classic strand-test animations

Each animation is a blocking loop of buffer writes, show() and a pause. They
only use the LedStrip contract (index writes, num_pixels, show), never read
pixels back, and return the strip. Chase patterns skip indices past the end
of the strip rather than wrapping them.

Settings come from an optional AnimationParams passed after the color (or
straight after the strip for the rainbows); keyword arguments override it.
"""

from typing import Optional, TYPE_CHECKING

from led_system.pixel import BLACK
from .config import AnimationParams
from .helpers import pause, wheel

if TYPE_CHECKING:
    from led_system.interfaces import LedStrip


def _resolve(params: Optional[AnimationParams], **overrides) -> AnimationParams:
    base = params if params is not None else AnimationParams()
    return base.merged(**overrides)


def color_wipe(strip: 'LedStrip', color: int, params: Optional[AnimationParams] = None, *,
               wait_ms: Optional[float] = None) -> 'LedStrip':
    """Wipe color across the strip a pixel at a time."""
    settings = _resolve(params, wait_ms=wait_ms)
    for i in range(strip.num_pixels()):
        strip[i] = color
        strip.show()
        pause(settings.wait_ms)
    return strip


def theater_chase(strip: 'LedStrip', color: int, params: Optional[AnimationParams] = None, *,
                  wait_ms: Optional[float] = None, iterations: Optional[int] = None,
                  spacing: Optional[int] = None) -> 'LedStrip':
    """
    Movie theater light style chaser animation.

    Every `spacing`-th pixel is lit, shown, then turned off again before the
    pattern moves on by one pixel.

    Args:
        strip: LED strip to draw on
        color: Color of the lit pixels
        params: Base settings (default AnimationParams())
        wait_ms: Pause after each frame
        iterations: Number of full passes through all phases (default 10)
        spacing: Distance between lit pixels

    Raises:
        ValueError: If the merged settings are invalid (e.g. spacing < 1)
    """
    settings = _resolve(params, wait_ms=wait_ms, iterations=iterations, spacing=spacing)
    repeats = 10 if settings.iterations is None else settings.iterations
    num_pixels = strip.num_pixels()
    for _ in range(repeats):
        for phase in range(settings.spacing):
            lit = range(phase, num_pixels, settings.spacing)
            for i in lit:
                strip[i] = color
            strip.show()
            pause(settings.wait_ms)
            for i in lit:
                strip[i] = BLACK
    return strip


def rainbow(strip: 'LedStrip', params: Optional[AnimationParams] = None, *,
            wait_ms: Optional[float] = None, iterations: Optional[int] = None) -> 'LedStrip':
    """Draw a rainbow that fades across all pixels at once (1 cycle by default)."""
    settings = _resolve(params, wait_ms=wait_ms, iterations=iterations)
    repeats = 1 if settings.iterations is None else settings.iterations
    num_pixels = strip.num_pixels()
    for j in range(256 * repeats):
        for i in range(num_pixels):
            strip[i] = wheel((i + j) & 0xFF)
        strip.show()
        pause(settings.wait_ms)
    return strip


def rainbow_cycle(strip: 'LedStrip', params: Optional[AnimationParams] = None, *,
                  wait_ms: Optional[float] = None, iterations: Optional[int] = None) -> 'LedStrip':
    """Draw a rainbow that spreads one full hue cycle across the strip (5 cycles by default)."""
    settings = _resolve(params, wait_ms=wait_ms, iterations=iterations)
    repeats = 5 if settings.iterations is None else settings.iterations
    num_pixels = strip.num_pixels()
    for j in range(256 * repeats):
        for i in range(num_pixels):
            strip[i] = wheel(((i * 256 // num_pixels) + j) & 0xFF)
        strip.show()
        pause(settings.wait_ms)
    return strip


def theater_chase_rainbow(strip: 'LedStrip', params: Optional[AnimationParams] = None, *,
                          wait_ms: Optional[float] = None,
                          spacing: Optional[int] = None) -> 'LedStrip':
    """Rainbow movie theater light style chaser animation."""
    settings = _resolve(params, wait_ms=wait_ms, spacing=spacing)
    spacing = settings.spacing
    num_pixels = strip.num_pixels()
    for j in range(256):
        for phase in range(spacing):
            lit = [(i + phase, i) for i in range(0, num_pixels, spacing) if i + phase < num_pixels]
            for index, base in lit:
                strip[index] = wheel((base + j) % 255)
            strip.show()
            pause(settings.wait_ms)
            for index, _ in lit:
                strip[index] = BLACK
    return strip
