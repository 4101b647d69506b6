"""
LED system exceptions

Every error raised by led_system derives from LedSystemError and also from the
builtin exception a caller would naturally catch for that situation.
"""


class LedSystemError(Exception):
    """Base class for all LED system errors"""


class OutOfRangeError(LedSystemError, IndexError):
    """Pixel index outside 0..length-1"""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} is outside of LED range: 0...{length - 1}")
        self.index = index
        self.length = length


class InvalidArgumentError(LedSystemError, TypeError):
    """Wrong arity or type passed to a color-setting call"""


class ConfigurationError(LedSystemError, ValueError):
    """Strip parameters rejected, either by validation or by the hardware driver"""


class StripClosedError(LedSystemError, RuntimeError):
    """Operation attempted on a strip after close()"""


class RenderError(LedSystemError):
    """Driver failed to transmit a frame"""
