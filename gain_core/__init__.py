"""Gain Core - protocol, state machine and drivers for miniDSP gain sync."""
from .exceptions import (
    GainSyncError,
    FatalError,
    DeviceError,
    ProcessInvocationError,
    ProtocolParseError,
    DeviceReadError,
)
from .protocol import parse_gain, format_gain
from .bounds import GainBounds, DEFAULT_BOUNDS, differs
from .device import DeviceController, read_gain, apply_gain
from .controller import ControllerState, GainController
from .events import KeyCode, KeyEvent, KeyEventClassifier
from .offset import OffsetAdjuster
from .drivers import PollDriver, EventDriver

__all__ = [
    # Exceptions
    'GainSyncError',
    'FatalError',
    'DeviceError',
    'ProcessInvocationError',
    'ProtocolParseError',
    'DeviceReadError',
    # Protocol and bounds
    'parse_gain',
    'format_gain',
    'GainBounds',
    'DEFAULT_BOUNDS',
    'differs',
    # Device seam
    'DeviceController',
    'read_gain',
    'apply_gain',
    # Loop
    'ControllerState',
    'GainController',
    'KeyCode',
    'KeyEvent',
    'KeyEventClassifier',
    'OffsetAdjuster',
    'PollDriver',
    'EventDriver',
]
