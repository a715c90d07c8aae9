"""
Text protocol of the minidsp control utility.

The utility prints its status with the master gain embedded as
``Gain(<number>)`` and accepts a new gain as a one-decimal argument.
"""
import re

from gain_constants import GAIN_PATTERN, GAIN_PRECISION
from .exceptions import ProtocolParseError

GAIN_REGEX = re.compile(GAIN_PATTERN)


def parse_gain(text: str) -> float:
    """
    Extract the gain from the controller's status output.

    Raises:
        ProtocolParseError: No Gain(...) found, or it does not hold a number
    """
    match = GAIN_REGEX.search(text)
    if match is None:
        raise ProtocolParseError("No Gain(...) value in controller output", output=text)

    captured = match.group("gain")
    try:
        return float(captured)
    except ValueError:
        raise ProtocolParseError(f"Gain value {captured!r} is not a number", output=text)


def format_gain(value: float) -> str:
    """Render a gain the way the device reports and accepts it, e.g. '-12.3'."""
    text = f"{value:.{GAIN_PRECISION}f}"
    # -0.04 rounds to "-0.0"; it is the same setting as "0.0"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text
