"""Shared fixtures: a recording stand-in for LED hardware."""

import time

import pytest

from led_system import ConfigurationError, HardwareDriver, LedStripConfig, Strip


class RecordingDriver(HardwareDriver):
    """Keeps every rendered frame instead of transmitting it."""

    def __init__(self, reject: bool = False):
        self.reject = reject
        self.configured = []
        self.frames = []
        self.brightnesses = []
        self.released = []

    def configure(self, led_count, gpio_pin, dma, freq_hz, invert, brightness, channel=0):
        if self.reject:
            raise ConfigurationError("Leds could not be initialized: -5")
        self.configured.append((led_count, gpio_pin, dma, freq_hz, invert, brightness, channel))
        return object()

    def render(self, handle, colors, brightness):
        self.frames.append(list(colors))
        self.brightnesses.append(brightness)

    def release(self, handle):
        self.released.append(handle)


@pytest.fixture
def driver():
    return RecordingDriver()


@pytest.fixture
def make_strip(driver):
    """Factory for strips wired to the shared recording driver."""
    def _make(led_count=4, gpio_pin=18, **options):
        return Strip(LedStripConfig(led_count=led_count, gpio_pin=gpio_pin, **options), driver)
    return _make


@pytest.fixture
def sleeps(monkeypatch):
    """Record pauses instead of sleeping."""
    calls = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls
