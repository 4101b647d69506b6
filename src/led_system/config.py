"""
LED strip configuration
"""

from dataclasses import dataclass, fields

from .errors import ConfigurationError


@dataclass(frozen=True)
class LedStripConfig:
    """Configuration for a single LED strip"""
    led_count: int
    gpio_pin: int
    freq_hz: int = 800000
    dma: int = 5
    invert: bool = False
    brightness: int = 255  # 0-255, masked to 8 bits
    channel: int = 0

    def validate(self) -> None:
        """Basic validation of configuration

        Raises:
            ConfigurationError: On a non-integer or out-of-range field
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if field.name == 'invert':
                if not isinstance(value, bool):
                    raise ConfigurationError(f"invert must be a bool: {type(value).__name__}")
            elif isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{field.name} must be a number: {type(value).__name__}")

        if self.led_count < 0:
            raise ConfigurationError(f"length cannot be negative: {self.led_count}")
        if self.gpio_pin < 0:
            raise ConfigurationError(f"GPIO cannot be negative: {self.gpio_pin}")
        if self.dma < 0:
            raise ConfigurationError(f"DMA channel cannot be negative: {self.dma}")
        if self.freq_hz <= 0:
            raise ConfigurationError(f"frequency must be positive: {self.freq_hz}")
        if self.channel not in (0, 1):
            raise ConfigurationError(f"PWM channel must be 0 or 1: {self.channel}")
