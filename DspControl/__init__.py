"""
DspControl - external collaborators for miniDSP gain sync.

Linux only. Requires: pip install evdev

Usage:
    from DspControl import MiniDspController, EvdevInputSource

    device = MiniDspController()            # wraps the `minidsp` binary
    device.query()                          # "... Gain(-23.5) ..."
    device.set("-20.5")

    source = EvdevInputSource("/dev/input/event3", grab=True)
    for event in source:                    # blocks for each event
        ...
"""

from .minidsp import MiniDspController
from .input_device import EvdevInputSource

__all__ = [
    'MiniDspController',
    'EvdevInputSource',
]
