"""
Playlists - named animation steps run back to back on one strip
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from led_system.pixel import BLACK, BLUE, GREEN, RED, WHITE
from .animations import (color_wipe, rainbow, rainbow_cycle, theater_chase,
                         theater_chase_rainbow)
from .config import AnimationParams

if TYPE_CHECKING:
    from led_system.interfaces import LedStrip
    from utils import ClassLogger


def _clear(strip: 'LedStrip', params: Optional[AnimationParams] = None) -> 'LedStrip':
    # Buffer only; the next animation's first show() makes it visible
    return strip.fill(BLACK)


ANIMATIONS: Dict[str, Callable[..., 'LedStrip']] = {
    'color_wipe': color_wipe,
    'theater_chase': theater_chase,
    'rainbow': rainbow,
    'rainbow_cycle': rainbow_cycle,
    'theater_chase_rainbow': theater_chase_rainbow,
    'clear': _clear,
}

# Animations whose first argument after the strip is a color
COLOR_ANIMATIONS = frozenset({'color_wipe', 'theater_chase'})


@dataclass(frozen=True)
class AnimationStep:
    """One animation call: which animation, its color (if any) and parameters"""
    name: str
    color: Optional[int] = None
    params: AnimationParams = field(default_factory=AnimationParams)

    def validate(self) -> None:
        if self.name not in ANIMATIONS:
            raise ValueError(f"Unknown animation '{self.name}'")
        if (self.name in COLOR_ANIMATIONS) != (self.color is not None):
            raise ValueError(f"Animation '{self.name}' color mismatch: {self.color}")
        self.params.validate()

    def run(self, strip: 'LedStrip') -> 'LedStrip':
        self.validate()
        args = (self.color,) if self.color is not None else ()
        return ANIMATIONS[self.name](strip, *args, self.params)


def play(strip: 'LedStrip', steps: Sequence[AnimationStep],
         logger: Optional['ClassLogger'] = None) -> 'LedStrip':
    """Run each step in order. Errors propagate; nothing is retried."""
    for step in steps:
        if logger:
            logger.debug(f"Running {step.name}")
        step.run(strip)
    return strip


def strandtest_playlist() -> List[AnimationStep]:
    """The classic strand test: wipes, chases, then the rainbow effects"""
    wipe = AnimationParams(wait_ms=75)
    chase = AnimationParams(wait_ms=100)
    fast = AnimationParams(wait_ms=20)
    return [
        AnimationStep('color_wipe', RED, wipe),
        AnimationStep('color_wipe', GREEN, wipe),
        AnimationStep('color_wipe', BLUE, wipe),
        AnimationStep('clear'),
        AnimationStep('theater_chase', WHITE, chase),
        AnimationStep('theater_chase', RED, chase),
        AnimationStep('theater_chase', BLUE, chase),
        AnimationStep('rainbow', params=fast),
        AnimationStep('rainbow_cycle', params=fast),
        AnimationStep('theater_chase_rainbow', params=AnimationParams(wait_ms=75)),
    ]
