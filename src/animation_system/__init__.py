"""
Animation System - strand-test lighting effects for any LedStrip
"""

from .helpers import wheel, pause
from .animations import (color_wipe, theater_chase, rainbow, rainbow_cycle,
                         theater_chase_rainbow)
from .config import AnimationParams
from .playlist import AnimationStep, play, strandtest_playlist

__all__ = [
    'wheel', 'pause',
    'color_wipe', 'theater_chase', 'rainbow', 'rainbow_cycle', 'theater_chase_rainbow',
    'AnimationParams', 'AnimationStep', 'play', 'strandtest_playlist',
]
