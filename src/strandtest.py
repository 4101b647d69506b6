#!/usr/bin/env python3
"""
Strand test - cycles the classic animations on a WS281x strip

Runs color wipes, theater chases and rainbows until interrupted. Ctrl+C or
SIGTERM blank the strip and release the DMA channel before the process exits.

Usage:
    python -m strandtest                     # 8 LEDs on GPIO 18
    python -m strandtest --length 60 --brightness 64
    python -m strandtest --debug             # draw in the terminal instead
"""

import argparse
import logging
import signal
import sys
from typing import List, Optional

from animation_system import play, strandtest_playlist
from led_system import LedStripConfig, LedSystemError, Strip, TextRenderer, Ws281xDriver
from utils import HybridLogger

LED_COUNT = 8           # Number of LED pixels.
LED_PIN = 18            # GPIO pin connected to the pixels (must support PWM!).
LED_FREQ_HZ = 800000    # LED signal frequency in hertz (usually 800khz)
LED_DMA = 5             # DMA channel to use for generating signal (try 5)
LED_BRIGHTNESS = 255    # Scale the brightness of the pixels (0 to 255)
LED_INVERT = False      # True to invert the signal (when using NPN transistor level shift)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cycle strand-test animations on an addressable LED strip",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--length', type=int, default=LED_COUNT, help='Number of LEDs')
    parser.add_argument('--pin', type=int, default=LED_PIN, help='GPIO pin (must support PWM)')
    parser.add_argument('--freq', type=int, default=LED_FREQ_HZ, help='Signal frequency in Hz')
    parser.add_argument('--dma', type=int, default=LED_DMA, help='DMA channel')
    parser.add_argument('--brightness', type=int, default=LED_BRIGHTNESS, help='Brightness 0-255')
    parser.add_argument('--invert', action='store_true', default=LED_INVERT,
                        help='Invert the signal (NPN level shifter)')
    parser.add_argument('--debug', action='store_true',
                        help='Render to the terminal instead of the strip')
    parser.add_argument('--loops', type=int, default=None,
                        help='Stop after this many passes (default: run until interrupted)')
    parser.add_argument('--log-dir', default='logs', help='Directory for the log file')
    parser.add_argument('--no-log-file', action='store_true', help='Log to the console only')
    return parser


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt(f"signal {signum}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    main_logger = HybridLogger("strandtest", None if args.no_log_file else args.log_dir)
    logger = main_logger.get_main_logger(logging.INFO)
    previous_handler = signal.signal(signal.SIGTERM, _raise_interrupt)
    strip = None

    try:
        config = LedStripConfig(
            led_count=args.length,
            gpio_pin=args.pin,
            freq_hz=args.freq,
            dma=args.dma,
            invert=args.invert,
            brightness=args.brightness,
        )
        if args.debug:
            driver = TextRenderer(logger=main_logger.get_class_logger("TextRenderer"))
        else:
            driver = Ws281xDriver(logger=main_logger.get_class_logger("Ws281xDriver"))
        strip = Strip(config, driver, logger=main_logger.get_class_logger("Strip"))

        logger.info("Press Ctrl-C to quit.")
        playlist = strandtest_playlist()
        passes = 0
        while args.loops is None or passes < args.loops:
            play(strip, playlist, logger)
            passes += 1
        return 0

    except KeyboardInterrupt:
        logger.info("Received shutdown signal, blanking strip")
        return 0

    except LedSystemError as e:
        logger.error("Strand test failed", e)
        return 1

    finally:
        try:
            if strip is not None:
                strip.shutdown()
        finally:
            signal.signal(signal.SIGTERM, previous_handler)
            logger.info("Strand test stopped")
            main_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
