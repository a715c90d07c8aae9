"""
OffsetAdjuster - fixed-step gain change per key press.

Independent of GainController: reads the gain fresh on every event and
keeps nothing between events.
"""
import logging
from typing import Optional

from gain_constants import GAIN_OFFSET
from .bounds import DEFAULT_BOUNDS, GainBounds, differs
from .device import DeviceController, apply_gain, read_gain
from .events import KeyCode, KeyEvent

logger = logging.getLogger(__name__)


class OffsetAdjuster:
    """Nudges the device gain up or down by a fixed offset."""

    def __init__(self, device: DeviceController, offset: float = GAIN_OFFSET,
                 bounds: GainBounds = DEFAULT_BOUNDS):
        self.device = device
        self.offset = offset
        self.bounds = bounds

    def handle(self, event: KeyEvent) -> Optional[float]:
        """
        Apply one key press.

        Returns:
            The gain sent to the device, or None if nothing was sent
        """
        if not event.actionable:
            return None

        current = read_gain(self.device)
        delta = self.offset if event.code is KeyCode.VOLUME_UP else -self.offset
        corrected = self.bounds.clamp(current + delta)

        if not differs(current, corrected):
            logger.debug(f"{event.code.value}: gain already at {current:.1f} dB, nothing to do")
            return None

        logger.debug(f"{event.code.value}: {current:.1f} -> {corrected:.1f} dB")
        apply_gain(self.device, corrected)
        return corrected
