"""
EvdevInputSource - key events from a Linux input device file.

Iterating the source blocks until the next event. It never ends on its
own; read errors surface as DeviceReadError.
"""
import logging
from typing import Iterator

import evdev

from gain_core.exceptions import DeviceReadError

logger = logging.getLogger(__name__)


class EvdevInputSource:
    """Blocking, non-restartable stream of evdev InputEvents."""

    def __init__(self, path: str, grab: bool = False):
        self.path = path
        self.grab = grab
        self.device = None
        self._closed = False

    def open(self):
        try:
            self.device = evdev.InputDevice(self.path)
        except OSError as e:
            raise DeviceReadError(f"Failed to open input device '{self.path}': {e}", path=self.path) from e
        logger.info(f"Listening on {self.path} ({self.device.name})")

        if self.grab:
            try:
                self.device.grab()
            except OSError as e:
                raise DeviceReadError(f"Failed to grab input device '{self.path}': {e}", path=self.path) from e
            logger.debug(f"Grabbed {self.path} for exclusive access")

    def close(self):
        self._closed = True
        if self.device is None:
            return
        try:
            self.device.close()
            logger.debug("Input device closed.")
        except OSError:
            logger.debug("Error closing input device during shutdown")
        self.device = None

    def __iter__(self) -> Iterator[evdev.InputEvent]:
        if self._closed:
            return
        if self.device is None:
            self.open()
        try:
            yield from self.device.read_loop()
        except OSError as e:
            # close() from a signal handler breaks the pending read
            if self._closed:
                return
            raise DeviceReadError(f"Failed to read event from '{self.path}': {e}", path=self.path) from e
