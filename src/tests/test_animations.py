"""Tests for the strand-test animations and the hue wheel."""

import pytest

from animation_system import (AnimationParams, AnimationStep, color_wipe, play, rainbow,
                              rainbow_cycle, strandtest_playlist, theater_chase,
                              theater_chase_rainbow, wheel)
from led_system import pack


class TestWheel:

    @pytest.mark.parametrize("pos,rgb", [
        (0, (0, 255, 0)),
        (84, (252, 3, 0)),
        (85, (255, 0, 0)),
        (169, (3, 0, 252)),
        (170, (0, 0, 255)),
        (255, (0, 255, 0)),
    ])
    def test_segment_boundaries(self, pos, rgb):
        assert wheel(pos) == pack(*rgb)

    def test_every_position_sums_to_255(self):
        for pos in range(256):
            color = wheel(pos)
            assert color.r + color.g + color.b == 255


class TestColorWipe:

    def test_final_buffer_and_show_count(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=4)
        color = pack(255, 0, 0)
        assert color_wipe(strip, color, wait_ms=0) is strip
        assert strip.to_list() == [color] * 4
        assert len(driver.frames) == 4

    def test_wipe_progresses_one_pixel_per_frame(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=3)
        color_wipe(strip, 7, wait_ms=75)
        assert driver.frames == [[7, 0, 0], [7, 7, 0], [7, 7, 7]]
        assert sleeps == [0.075] * 3


class TestTheaterChase:

    def test_ends_with_all_pixels_off(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=6)
        theater_chase(strip, 9, wait_ms=0, iterations=1, spacing=3)
        assert strip.to_list() == [0] * 6
        assert driver.frames == [
            [9, 0, 0, 9, 0, 0],
            [0, 9, 0, 0, 9, 0],
            [0, 0, 9, 0, 0, 9],
        ]

    def test_irregular_length_skips_past_end(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=5)
        theater_chase(strip, 9, wait_ms=0, iterations=1, spacing=3)
        assert driver.frames == [
            [9, 0, 0, 9, 0],
            [0, 9, 0, 0, 9],
            [0, 0, 9, 0, 0],
        ]

    def test_default_iterations(self, make_strip, driver, sleeps):
        theater_chase(make_strip(led_count=3), 1, wait_ms=0)
        assert len(driver.frames) == 30

    def test_zero_spacing_rejected(self, make_strip):
        with pytest.raises(ValueError):
            theater_chase(make_strip(), 1, spacing=0)


class TestRainbows:

    def test_rainbow_shifts_all_pixels_together(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=3)
        rainbow(strip, wait_ms=0)
        assert len(driver.frames) == 256
        assert driver.frames[0] == [wheel(0), wheel(1), wheel(2)]
        assert driver.frames[10] == [wheel(10), wheel(11), wheel(12)]
        assert strip.to_list() == [wheel(255), wheel(0), wheel(1)]

    def test_rainbow_iterations(self, make_strip, driver, sleeps):
        rainbow(make_strip(led_count=1), wait_ms=0, iterations=2)
        assert len(driver.frames) == 512

    def test_rainbow_cycle_spreads_wheel_across_strip(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=4)
        rainbow_cycle(strip, wait_ms=0, iterations=1)
        assert len(driver.frames) == 256
        assert driver.frames[0] == [wheel(0), wheel(64), wheel(128), wheel(192)]
        assert driver.frames[100] == [wheel(100), wheel(164), wheel(228), wheel(36)]

    def test_rainbow_cycle_default_iterations(self, make_strip, driver, sleeps):
        rainbow_cycle(make_strip(led_count=1), wait_ms=0)
        assert len(driver.frames) == 256 * 5

    def test_rainbow_cycle_empty_strip(self, make_strip, driver, sleeps):
        rainbow_cycle(make_strip(led_count=0), wait_ms=0, iterations=1)
        assert driver.frames == [[]] * 256

    def test_theater_chase_rainbow(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=5)
        theater_chase_rainbow(strip, wait_ms=0, spacing=3)
        assert len(driver.frames) == 256 * 3
        assert driver.frames[0] == [wheel(0), 0, 0, wheel(3), 0]
        assert driver.frames[1] == [0, wheel(0), 0, 0, wheel(3)]
        assert driver.frames[2] == [0, 0, wheel(0), 0, 0]
        assert driver.frames[3] == [wheel(1), 0, 0, wheel(4), 0]
        assert strip.to_list() == [0] * 5

    def test_theater_chase_rainbow_hue_wraps_at_255(self, make_strip, driver, sleeps):
        theater_chase_rainbow(make_strip(led_count=1), wait_ms=0, spacing=1)
        assert driver.frames[255] == [wheel(0)]


class TestPlaylist:

    def test_params_defaults(self):
        params = AnimationParams()
        assert (params.wait_ms, params.iterations, params.spacing) == (50, None, 3)

    def test_merged_skips_unset_overrides(self):
        params = AnimationParams(wait_ms=20, spacing=2).merged(wait_ms=None, spacing=4)
        assert params == AnimationParams(wait_ms=20, spacing=4)

    @pytest.mark.parametrize("params", [
        AnimationParams(wait_ms=-1),
        AnimationParams(iterations=-1),
        AnimationParams(spacing=0),
    ])
    def test_invalid_params(self, params):
        with pytest.raises(ValueError):
            params.validate()

    def test_unknown_animation(self, make_strip):
        with pytest.raises(ValueError):
            AnimationStep("sparkle").run(make_strip())

    def test_color_required_for_wipe(self, make_strip):
        with pytest.raises(ValueError):
            AnimationStep("color_wipe").run(make_strip())

    def test_play_runs_steps_in_order(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=2)
        play(strip, [
            AnimationStep("color_wipe", 5, AnimationParams(wait_ms=0)),
            AnimationStep("clear"),
            AnimationStep("theater_chase", 6, AnimationParams(wait_ms=0, iterations=1, spacing=2)),
        ])
        assert driver.frames == [[5, 0], [5, 5], [6, 0], [0, 6]]

    def test_strandtest_playlist_is_valid(self):
        steps = strandtest_playlist()
        for step in steps:
            step.validate()
        assert [step.name for step in steps][:4] == ["color_wipe"] * 3 + ["clear"]


class TestParamsObject:

    def test_color_wipe_with_params(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=2)
        color_wipe(strip, 5, AnimationParams(wait_ms=0))
        assert driver.frames == [[5, 0], [5, 5]]
        assert sleeps == [0.0, 0.0]

    def test_default_wait_is_50ms(self, make_strip, sleeps):
        color_wipe(make_strip(led_count=1), 5)
        assert sleeps == [0.05]

    def test_theater_chase_with_params(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=4)
        theater_chase(strip, 1, AnimationParams(wait_ms=0, iterations=1, spacing=2))
        assert driver.frames == [[1, 0, 1, 0], [0, 1, 0, 1]]

    def test_keywords_override_params(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=4)
        theater_chase(strip, 1, AnimationParams(wait_ms=10, iterations=3, spacing=2),
                      iterations=1, spacing=4)
        assert len(driver.frames) == 4
        assert sleeps == [0.01] * 4

    def test_rainbows_with_params(self, make_strip, driver, sleeps):
        strip = make_strip(led_count=2)
        rainbow(strip, AnimationParams(wait_ms=0, iterations=1))
        rainbow_cycle(strip, AnimationParams(wait_ms=0, iterations=1))
        assert len(driver.frames) == 512

    def test_theater_chase_rainbow_with_params(self, make_strip, driver, sleeps):
        theater_chase_rainbow(make_strip(led_count=2), AnimationParams(wait_ms=0, spacing=2))
        assert len(driver.frames) == 256 * 2

    def test_invalid_params_object_rejected(self, make_strip, driver):
        with pytest.raises(ValueError):
            color_wipe(make_strip(), 1, AnimationParams(wait_ms=-5))
        assert driver.frames == []
