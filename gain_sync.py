"""
miniDSP gain sync - keeps a miniDSP's master gain in step with the user.

Poll mode (default) watches the gain reported by the ``minidsp`` utility and
amplifies any drift, so a small turn of the volume knob becomes a larger
gain change. Event mode listens on an input device and steps the gain up or
down by a fixed offset on each volume key press.
"""

__version__ = "1.0.0"

import os
import signal
import sys
import logging
from typing import Iterable, List, Optional

import psutil

from config import parse_arguments, EVENT_MODE
from DspControl import MiniDspController, EvdevInputSource
from gain_core import (
    FatalError, GainBounds, GainController, KeyEventClassifier, OffsetAdjuster,
    PollDriver, EventDriver, DeviceController,
)
from gain_constants import key_name
from logging_setup import setup_logging

# Nice value for --high_priority on POSIX (Windows uses a priority class)
HIGH_PRIORITY_NICE = -10

# Module-level logger (set by setup_logging)
logger = logging.getLogger(__name__)


def set_higher_priority():
    try:
        p = psutil.Process(os.getpid())
        if sys.platform == 'win32':
            p.nice(psutil.ABOVE_NORMAL_PRIORITY_CLASS)
        else:
            p.nice(HIGH_PRIORITY_NICE)
        logger.debug("Main Process priority raised.")
    except (psutil.Error, OSError) as e:
        logger.warning(f"Failed to set higher priority: {e}")


class GainSyncDaemon:
    """Wires the device, the input source and exactly one driver together."""

    def __init__(self, args, device: Optional[DeviceController] = None, source: Optional[Iterable] = None):
        """
        Args:
            args: Namespace from parse_arguments()
            device: Device controller (defaults to the minidsp binary)
            source: Input events for event mode (defaults to the evdev device)
        """
        if device is None:
            device = MiniDspController(args.minidsp_binary)
        self.device = device
        self.source = source
        bounds = GainBounds(args.gain_min, args.gain_max)

        if args.mode == EVENT_MODE:
            if self.source is None:
                self.source = EvdevInputSource(args.device_path, grab=args.grab)
            self.driver = EventDriver(
                self.source,
                KeyEventClassifier(args.up_key, args.down_key),
                OffsetAdjuster(device, args.gain_offset, bounds),
            )
        else:
            self.driver = PollDriver(GainController(device, args.gain_scale, bounds), args.poll_interval)

    def run(self):
        """Run the driver until stopped. FatalErrors propagate."""
        try:
            self.driver.run()
        finally:
            close = getattr(self.source, "close", None)
            if close is not None:
                close()

    def stop(self):
        """Let the current cycle finish, then end run(). Closing the source unblocks a pending read."""
        logger.info("Stopping daemon...")
        self.driver.stop()
        close = getattr(self.source, "close", None)
        if close is not None:
            close()


def signal_handler(sig, frame, daemon):
    """Handles SIGINT/SIGTERM and shuts down the daemon."""
    logger.info(f"{signal.Signals(sig).name} received, shutting down...")
    daemon.stop()


def log_configuration(args):
    logger.info(f"---> Configuration:")
    logger.info(f"     Mode: {args.mode}")
    logger.info(f"     Log level: {args.log_level}, file: {args.log_file_name or '(none)'}")
    logger.info(f"     minidsp binary: {args.minidsp_binary}")
    logger.info(f"     Gain range: {args.gain_min:.1f} .. {args.gain_max:.1f} dB")
    if args.mode == EVENT_MODE:
        logger.info(f"     Input device: {args.device_path} (grab={args.grab})")
        logger.info(f"     Keys: up={key_name(args.up_key)}, down={key_name(args.down_key)}")
        logger.info(f"     Offset: {args.gain_offset} dB")
    else:
        logger.info(f"     Scale: {args.gain_scale}, interval: {args.poll_interval_ms:.0f} ms")
    logger.info(f"<--- End configuration")


def main(argv: Optional[List[str]] = None, device: Optional[DeviceController] = None,
         source: Optional[Iterable] = None) -> int:
    """
    Run gain sync. Returns the process exit status.

    0 after a clean stop, 1 after a FatalError.
    """
    args = parse_arguments(argv, __file__)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    _, stop_logging = setup_logging(args.log_level, args.log_file_name, script_dir,
                                    version=__version__, script_name=os.path.basename(__file__))
    previous_handlers = {}
    try:
        log_configuration(args)
        if args.high_priority:
            set_higher_priority()

        daemon = GainSyncDaemon(args, device=device, source=source)
        for sig in (signal.SIGINT, signal.SIGTERM):
            previous_handlers[sig] = signal.signal(sig, lambda sig, frame: signal_handler(sig, frame, daemon))

        daemon.run()
        return 0
    except FatalError as e:
        logger.critical(f"Fatal: {e}. Aborting.")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
        return 0
    finally:
        for sig, previous in previous_handlers.items():
            if previous is not None:
                signal.signal(sig, previous)
        stop_logging()


if __name__ == "__main__":
    sys.exit(main())
