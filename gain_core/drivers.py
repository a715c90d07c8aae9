"""
Drivers - the two top-level loops. Exactly one runs per process.

PollDriver polls the device on a fixed interval and feeds GainController.
EventDriver blocks on the input source and feeds OffsetAdjuster.
Both run until stop() is called or a FatalError escapes.
"""
import logging
import threading
from typing import Iterable

from gain_constants import POLL_INTERVAL
from .controller import ControllerState, GainController
from .events import KeyEventClassifier
from .exceptions import DeviceReadError
from .offset import OffsetAdjuster

logger = logging.getLogger(__name__)


class PollDriver:
    """Poll, correct, sleep, repeat."""

    def __init__(self, controller: GainController, interval: float = POLL_INTERVAL):
        self.controller = controller
        self.interval = interval
        self.state = ControllerState.unknown()
        self._stop_event = threading.Event()

    def run(self) -> ControllerState:
        """Run until stopped. Returns the final controller state."""
        logger.info(f"Poll mode: every {self.interval * 1000:.0f} ms, scale {self.controller.scale}")
        while not self._stop_event.is_set():
            self.state = self.controller.poll(self.state)
            self._stop_event.wait(self.interval)
        logger.info("Poll loop stopped.")
        return self.state

    def stop(self):
        self._stop_event.set()


class EventDriver:
    """Consume input events and turn volume key presses into gain steps."""

    def __init__(self, source: Iterable, classifier: KeyEventClassifier, adjuster: OffsetAdjuster):
        self.source = source
        self.classifier = classifier
        self.adjuster = adjuster
        self._stop_event = threading.Event()

    def run(self):
        """
        Run until stopped.

        Raises:
            DeviceReadError: The source failed or ran dry
        """
        logger.info(f"Event mode: offset {self.adjuster.offset} dB per key press")
        for raw_event in self.source:
            if self._stop_event.is_set():
                break
            event = self.classifier.classify(raw_event)
            if event.actionable:
                self.adjuster.handle(event)
        else:
            if not self._stop_event.is_set():
                raise DeviceReadError("Input event stream ended", path=getattr(self.source, "path", None))
        logger.info("Event loop stopped.")

    def stop(self):
        self._stop_event.set()
