"""
Device controller seam.

The gain loop and the key handler only ever talk to a DeviceController:
``query()`` returns the controller's status text and ``set()`` takes an
already formatted gain. MiniDspController is the real one; tests use fakes.
"""
import logging
from typing import Protocol

from gain_constants import log_gain
from .protocol import parse_gain, format_gain

logger = logging.getLogger(__name__)


class DeviceController(Protocol):
    def query(self) -> str: ...                 # status text holding Gain(...)
    def set(self, value: str) -> None: ...      # one-decimal gain, e.g. "-12.5"


def read_gain(device: DeviceController) -> float:
    """Query the device and return its current gain in dB."""
    return parse_gain(device.query())


def apply_gain(device: DeviceController, value: float) -> str:
    """
    Send a gain to the device.

    Args:
        device: Controller to write to
        value: Gain in dB, already clamped by the caller

    Returns:
        The formatted value that was sent
    """
    formatted = format_gain(value)
    log_gain(logger, "TX", value)
    device.set(formatted)
    return formatted
