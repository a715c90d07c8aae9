"""
Gain Constants and Key Mappings for miniDSP control.

Contains the device gain range, the loop tuning values, the default
up/down key bindings and a shared gain logging helper.
"""

from typing import Optional

from evdev import ecodes


# ==============================================================================
# 1) DEVICE - miniDSP 2x4 HD gain range and control binary
# ==============================================================================

MINIDSP_BINARY = "minidsp"

GAIN_MIN = -127.0     # dB, quietest the device accepts
GAIN_MAX = 0.0        # dB, no positive gain on the analog outputs

# Controller output is "...Gain(-23.5)..."; capture mirrors the device formatting
GAIN_PATTERN = r"Gain\((?P<gain>-*\d*\.*\d*)\)"
GAIN_PRECISION = 1    # decimals the device reports and accepts


# ==============================================================================
# 2) LOOP TUNING - How hard and how often we correct
# ==============================================================================

GAIN_SCALE = 6.0        # Amplification of an observed drift
POLL_INTERVAL = 0.050   # seconds between polls
GAIN_OFFSET = 3.0       # dB added/removed per key press


# ==============================================================================
# 3) KEY BINDINGS - Physical keys for event mode (configurable)
# ==============================================================================

DEFAULT_VOLUME_UP_KEY = ecodes.KEY_U
DEFAULT_VOLUME_DOWN_KEY = ecodes.KEY_D

KEY_PRESS = 1   # EV_KEY value for press (0 = release, 2 = autorepeat)


def key_name(code: int) -> str:
    """Human-readable evdev key name (for logging)."""
    name = ecodes.keys.get(code, f"KEY{code}")
    # Aliased codes resolve to a list of names
    if isinstance(name, list):
        return name[0]
    return name


def key_code(name: str) -> int:
    """Resolve an evdev key or button name like 'KEY_U' to its code. Raises KeyError."""
    name = name.strip().upper()
    if not name.startswith(("KEY_", "BTN_")):
        raise KeyError(name)
    return ecodes.ecodes[name]


GAIN_LOG_LABELS = {
    "RX": "Current gain",
    "TX": "Setting new gain",
}


def log_gain(logger, direction: str, value: float, previous: Optional[float] = None):
    """
    Log a gain observation or command in consistent format.

    Args:
        logger: Logger instance to use
        direction: "RX" for observed ("Current gain"), "TX" for sent ("Setting new gain")
        value: Gain in dB
        previous: Prior gain, logged as the change when given
    """
    label = GAIN_LOG_LABELS[direction]
    if previous is None:
        logger.info(f"{label}: {value:.1f} dB")
    else:
        logger.info(f"{label}: {value:.1f} dB (was {previous:.1f} dB)")

