#!/usr/bin/env python3
"""
PixelBuffer - fixed-length in-memory store of 24-bit colors

The buffer never touches hardware. It is created with every slot off, mutated
in place and never resized. Integer indices are bounds-checked and never
wrapped, so buffer[-1] is an error rather than the last pixel.
"""
from typing import Callable, Iterable, Iterator, List, Optional, Union

from .errors import ConfigurationError, InvalidArgumentError, OutOfRangeError
from .pixel import BLACK, Pixel, to_color

Span = Union[int, range, slice, None]


class PixelBuffer:
    """Ordered sequence of Pixel values with bounds-checked mutation

    Supported Operations:
        buffer[5] = Pixel(255, 0, 0)                   # Single pixel
        buffer[0:10] = Pixel(0, 255, 0)                # Slice to same color
        buffer[0:3] = [pixel1, pixel2, pixel3]         # Slice to different colors
        buffer.fill(0x0000FF, 4, 2)                    # Two pixels from index 4
        buffer.fill_with(lambda i: Pixel(i, 0, 0))     # Generated pattern
    """

    def __init__(self, length: int):
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigurationError(f"length must be a number: {type(length).__name__}")
        if length < 0:
            raise ConfigurationError(f"length cannot be negative: {length}")
        self._pixels: List[Pixel] = [BLACK] * length

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(list(self._pixels))

    def __repr__(self) -> str:
        return f"PixelBuffer(length={len(self._pixels)})"

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"index must be an integer: {type(index).__name__}")
        if index < 0 or index >= len(self._pixels):
            raise OutOfRangeError(index, len(self._pixels))

    def _span(self, start: Span = None, length: Optional[int] = None) -> range:
        """Resolve fill-style (start, length) arguments into concrete indices

        A slice or range is taken with Python slice semantics. An int start
        counts from the end when negative (clamped at 0), a missing length
        runs to the end, a negative length selects nothing.
        """
        count = len(self._pixels)
        if isinstance(start, slice):
            return range(*start.indices(count))
        if isinstance(start, range):
            return range(*slice(start.start, start.stop, start.step).indices(count))

        begin = 0 if start is None else start
        if begin < 0:
            begin = max(count + begin, 0)
        span = count - begin if length is None else length
        if span < 0:
            return range(0)
        return range(begin, min(count, begin + span))

    def get(self, index: int) -> Pixel:
        self._check_index(index)
        return self._pixels[index]

    def set(self, index: int, color: int) -> None:
        """Store color (masked to 24 bits) at index. No display update."""
        self._check_index(index)
        self._pixels[index] = to_color(color)

    def fill(self, color: int, start: Span = None, length: Optional[int] = None) -> None:
        """Set every pixel in the selected span (default: whole buffer) to color"""
        value = to_color(color)
        for i in self._span(start, length):
            self._pixels[i] = value

    def fill_with(self, fn: Callable[[int], int], start: Span = None,
                  length: Optional[int] = None) -> None:
        """Set pixel i to fn(i) for every i in the selected span"""
        for i in self._span(start, length):
            self._pixels[i] = to_color(fn(i))

    def replace(self, colors: Iterable[int]) -> None:
        """Copy colors in from index 0

        Extra input values are ignored; pixels past the end of the input are
        left untouched.
        """
        for i, color in zip(range(len(self._pixels)), colors):
            self._pixels[i] = to_color(color)

    def to_list(self) -> List[Pixel]:
        """Snapshot copy, unaffected by later mutation"""
        return list(self._pixels)

    def clear(self) -> None:
        self.fill(BLACK)

    def reverse(self) -> None:
        self._pixels.reverse()

    def rotate(self, count: int = 1) -> None:
        """Rotate in place so the pixel at count comes first (negative rotates back)"""
        if not self._pixels:
            return
        shift = count % len(self._pixels)
        self._pixels[:] = self._pixels[shift:] + self._pixels[:shift]

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        if isinstance(pos, slice):
            return self._pixels[pos]
        return self.get(pos)

    def __setitem__(self, pos: Union[int, slice], color: Union[int, List[int]]) -> None:
        """Set pixel(s) to color(s)

        Raises:
            InvalidArgumentError: If assigning a list to a single position
            ValueError: If color list length doesn't match slice length
        """
        if isinstance(pos, slice):
            indices = range(*pos.indices(len(self._pixels)))
            if isinstance(color, (list, tuple)):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, value in zip(indices, color):
                    self._pixels[i] = to_color(value)
            else:
                value = to_color(color)
                for i in indices:
                    self._pixels[i] = value
        else:
            if isinstance(color, (list, tuple)):
                raise InvalidArgumentError("Cannot assign list of colors to single position")
            self.set(pos, color)
