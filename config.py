"""
Configuration and Argument Parsing for miniDSP gain sync.

Handles CLI argument parsing and validation. No config file, no
environment variables.
"""

import argparse
import os
from typing import List, Optional, Tuple

from gain_constants import (
    GAIN_MIN, GAIN_MAX, GAIN_SCALE, GAIN_OFFSET, POLL_INTERVAL, MINIDSP_BINARY,
    DEFAULT_VOLUME_UP_KEY, DEFAULT_VOLUME_DOWN_KEY, key_code, key_name,
)

EVENT_MODE = "event"
POLL_MODE = "poll"


def validate_positive_float(value: str) -> float:
    """
    Validate a strictly positive float.

    Raises:
        argparse.ArgumentTypeError: If validation fails
    """
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number.")
    if not parsed > 0:
        raise argparse.ArgumentTypeError(f"Value must be > 0, got {parsed}.")
    return parsed


def validate_gain_range(value: str) -> Tuple[float, float]:
    """
    Validate and parse the gain range.

    Args:
        value: Comma-separated pair of floats, e.g. "-127,0"

    Returns:
        Tuple of (gain_min, gain_max)

    Raises:
        argparse.ArgumentTypeError: If validation fails
    """
    try:
        parsed = list(map(float, value.split(",")))
    except ValueError:
        raise argparse.ArgumentTypeError("Gain range must be two numbers separated by a comma.")
    if len(parsed) != 2:
        raise argparse.ArgumentTypeError("You must provide exactly two values: MIN,MAX.")

    gain_min, gain_max = parsed
    if gain_min >= gain_max:
        raise argparse.ArgumentTypeError("Gain MIN must be below MAX.")
    return gain_min, gain_max


def validate_keys(value: str) -> Tuple[int, int]:
    """
    Validate and parse the volume up/down key pair.

    Args:
        value: Comma-separated evdev key names (e.g., "KEY_U,KEY_D")

    Returns:
        Tuple of (up_code, down_code)

    Raises:
        argparse.ArgumentTypeError: If validation fails
    """
    names = value.split(",")
    if len(names) != 2:
        raise argparse.ArgumentTypeError("You must provide exactly two keys: UP,DOWN.")
    try:
        up, down = map(key_code, names)
    except KeyError as e:
        raise argparse.ArgumentTypeError(f"Unknown key name: {e}")
    if up == down:
        raise argparse.ArgumentTypeError("UP and DOWN keys must differ.")
    return up, down


def parse_arguments(argv: Optional[List[str]] = None, script_file: str = None):
    """
    Parse command-line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])
        script_file: Path to the main script file (for default log file name)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="miniDSP gain sync - keeps the miniDSP gain in step with volume changes.",
        epilog="With no mode (or any mode other than 'event') the gain is polled.",
    )

    # Determine default log file name
    if script_file:
        default_log_file = os.path.splitext(os.path.basename(script_file))[0] + ".log"
    else:
        default_log_file = "gain_sync.log"

    parser.add_argument("mode", nargs="?", default=POLL_MODE,
                        help=f"'{EVENT_MODE}' to react to key presses, anything else to poll. Default is poll.")
    parser.add_argument("device_path", nargs="?", default=None,
                        help="Input device for event mode, e.g. /dev/input/event3.")

    parser.add_argument("--log_level", choices=["DEBUG", "INFO", "NONE"], default="INFO",
                        help="Set logging level. Default is INFO.")

    parser.add_argument("--log_file_name", type=str, default=default_log_file,
                        help=f"Name of the log file, empty to disable. Default is '{default_log_file}'.")

    parser.add_argument("--minidsp_binary", type=str, default=MINIDSP_BINARY,
                        help=f"Path or name of the minidsp control binary. Default is '{MINIDSP_BINARY}'.")

    parser.add_argument("--gain_scale", type=validate_positive_float, default=GAIN_SCALE,
                        help=f"Factor applied to observed gain drift in poll mode. Default is {GAIN_SCALE}.")

    parser.add_argument("--poll_interval_ms", type=validate_positive_float, default=POLL_INTERVAL * 1000,
                        help=f"Milliseconds between polls. Default is {POLL_INTERVAL * 1000:.0f}.")

    parser.add_argument("--gain_offset", type=validate_positive_float, default=GAIN_OFFSET,
                        help=f"dB added or removed per key press in event mode. Default is {GAIN_OFFSET}.")

    parser.add_argument("--gain_range", type=validate_gain_range, default=(GAIN_MIN, GAIN_MAX),
                        help=f"Comma-separated MIN,MAX gain in dB (write --gain_range=MIN,MAX for negative MIN). Default is '{GAIN_MIN:g},{GAIN_MAX:g}'.")

    parser.add_argument("--keys", type=validate_keys, default=(DEFAULT_VOLUME_UP_KEY, DEFAULT_VOLUME_DOWN_KEY),
                        help=f"Comma-separated evdev names of the volume up and down keys. "
                             f"Default is '{key_name(DEFAULT_VOLUME_UP_KEY)},{key_name(DEFAULT_VOLUME_DOWN_KEY)}'.")

    parser.add_argument("--grab", action="store_true", default=False,
                        help="Grab the input device so other programs don't see its events.")

    parser.add_argument("--high_priority", action="store_true", default=False,
                        help="Raise process priority (needs permission to lower the nice value).")

    # Parse arguments
    args = parser.parse_args(argv)

    if args.mode != EVENT_MODE:
        args.mode = POLL_MODE
    elif not args.device_path:
        parser.error("event mode needs an input device path")

    # Assign parsed pairs to individual variables for clarity
    args.gain_min, args.gain_max = args.gain_range
    args.up_key, args.down_key = args.keys
    args.poll_interval = args.poll_interval_ms / 1000
    return args
