"""
Animation call parameters
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class AnimationParams:
    """Per-call animation settings

    iterations=None means the animation's own repeat count (theater_chase 10,
    rainbow 1, rainbow_cycle 5). Animations ignore fields they have no use for.
    """
    wait_ms: float = 50
    iterations: Optional[int] = None
    spacing: int = 3

    def validate(self) -> None:
        """Basic validation of parameters"""
        if self.wait_ms < 0:
            raise ValueError(f"wait_ms cannot be negative, got {self.wait_ms}")
        if self.iterations is not None and self.iterations < 0:
            raise ValueError(f"iterations cannot be negative, got {self.iterations}")
        if self.spacing < 1:
            raise ValueError(f"spacing must be at least 1, got {self.spacing}")

    def merged(self, **overrides) -> 'AnimationParams':
        """Copy with every override that is not None applied, validated"""
        params = replace(self, **{name: value for name, value in overrides.items()
                                  if value is not None})
        params.validate()
        return params
