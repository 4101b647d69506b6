"""Tests for display-time brightness scaling."""

import pytest

from led_system import pack, scale, scale_pixel


def test_full_brightness_is_identity():
    assert scale(pack(255, 255, 255), 255) == (255, 255, 255)
    assert scale(pack(12, 34, 56), 255) == (12, 34, 56)


def test_zero_brightness_follows_formula():
    # factor is 1, so every channel shifts down to 0
    assert scale(pack(255, 128, 1), 0) == (0, 0, 0)


@pytest.mark.parametrize("brightness,expected", [
    (127, (127, 64, 0)),
    (63, (63, 32, 0)),
])
def test_fixed_point_arithmetic(brightness, expected):
    assert scale(pack(255, 128, 0), brightness) == expected


def test_brightness_masked_to_8_bits():
    assert scale(pack(255, 0, 0), 256 + 127) == scale(pack(255, 0, 0), 127)


def test_scale_pixel_packs_result():
    assert scale_pixel(pack(255, 255, 255), 127) == pack(127, 127, 127)
