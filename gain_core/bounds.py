"""Clamp and compare gains within the hardware range."""
from dataclasses import dataclass

from gain_constants import GAIN_MIN, GAIN_MAX
from .protocol import format_gain


@dataclass(frozen=True)
class GainBounds:
    """Legal gain range of the device, inclusive on both ends."""
    minimum: float = GAIN_MIN
    maximum: float = GAIN_MAX

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(f"Gain minimum {self.minimum} is above maximum {self.maximum}")

    def clamp(self, value: float) -> float:
        """Saturate value into [minimum, maximum]."""
        return max(self.minimum, min(self.maximum, value))


DEFAULT_BOUNDS = GainBounds()


def differs(a: float, b: float) -> bool:
    """True if a and b are different at the device's reporting precision."""
    return format_gain(a) != format_gain(b)
