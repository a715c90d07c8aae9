"""
GainController - proportional feedback loop on the device gain.

Each poll either adopts the observed gain as the baseline (when the last
baseline is not trusted) or scales the drift from the baseline by
GAIN_SCALE, clamps it and writes it back. After any write the baseline is
dropped: the device may clamp the value or be changed externally, so the
next poll has to re-read it.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from gain_constants import GAIN_MIN, GAIN_SCALE, log_gain
from .bounds import DEFAULT_BOUNDS, GainBounds, differs
from .device import DeviceController, apply_gain, read_gain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerState:
    """Baseline the controller trusts. known=False means adopt the next observation."""
    known: bool
    baseline: float

    @classmethod
    def unknown(cls) -> "ControllerState":
        return cls(known=False, baseline=GAIN_MIN)


class GainController:
    """Computes and applies gain corrections. Holds no control state; remembers the last observed gain for logging."""

    def __init__(self, device: DeviceController, scale: float = GAIN_SCALE,
                 bounds: GainBounds = DEFAULT_BOUNDS):
        self.device = device
        self.scale = scale
        self.bounds = bounds
        self._last_observed: Optional[float] = None  # logging only

    def correction(self, baseline: float, observed: float) -> float:
        """Scaled and clamped target for an observed drift from baseline."""
        diff = observed - baseline
        return self.bounds.clamp(baseline + diff * self.scale)

    def step(self, state: ControllerState, observed: float) -> ControllerState:
        """
        Feed one observation through the state machine.

        Args:
            state: State returned by the previous step
            observed: Gain just read from the device

        Returns:
            The next state. Unknown after a write, otherwise Known.
        """
        if not state.known:
            logger.debug(f"Baseline set to {observed:.1f} dB")
            return ControllerState(known=True, baseline=observed)

        corrected = self.correction(state.baseline, observed)
        if not differs(state.baseline, corrected):
            return state

        logger.debug(f"Drift {state.baseline:.1f} -> {observed:.1f} dB, correcting to {corrected:.1f} dB")
        apply_gain(self.device, corrected)
        return ControllerState.unknown()

    def poll(self, state: ControllerState) -> ControllerState:
        """Read the current gain from the device and step on it."""
        observed = read_gain(self.device)
        if self._last_observed is None or observed != self._last_observed:
            log_gain(logger, "RX", observed, self._last_observed)
        self._last_observed = observed
        return self.step(state, observed)
