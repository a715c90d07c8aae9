"""
Key event classification for event mode.

Raw events come from evdev (anything with ``type``, ``code`` and ``value``).
Only presses of the two configured keys are acted on; releases and
autorepeats are dropped here, no debouncing is done.
"""
from dataclasses import dataclass
from enum import Enum

from evdev import ecodes

from gain_constants import DEFAULT_VOLUME_UP_KEY, DEFAULT_VOLUME_DOWN_KEY, KEY_PRESS


class KeyCode(Enum):
    VOLUME_UP = "VolUp"
    VOLUME_DOWN = "VolDown"
    OTHER = "Other"


@dataclass(frozen=True)
class KeyEvent:
    """Classified key event."""
    code: KeyCode
    pressed: bool

    @property
    def actionable(self) -> bool:
        return self.pressed and self.code is not KeyCode.OTHER


IGNORED = KeyEvent(KeyCode.OTHER, pressed=False)


class KeyEventClassifier:
    """Maps raw input events to volume up/down presses."""

    def __init__(self, up_key: int = DEFAULT_VOLUME_UP_KEY, down_key: int = DEFAULT_VOLUME_DOWN_KEY):
        if up_key == down_key:
            raise ValueError("Volume up and down keys must differ")
        self.bindings = {up_key: KeyCode.VOLUME_UP, down_key: KeyCode.VOLUME_DOWN}

    def classify(self, raw_event) -> KeyEvent:
        if raw_event.type != ecodes.EV_KEY or raw_event.value != KEY_PRESS:
            return IGNORED
        return KeyEvent(self.bindings.get(raw_event.code, KeyCode.OTHER), pressed=True)
