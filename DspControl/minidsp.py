"""
MiniDspController - talks to the device through the ``minidsp`` CLI.

Every call spawns the binary and waits for it; there is no timeout, a hung
binary hangs the loop.

    minidsp                 -> status text containing Gain(<dB>)
    minidsp gain -- <dB>    -> sets master gain (value may be negative)
"""
from __future__ import annotations

import logging
import subprocess
from typing import List

from gain_constants import MINIDSP_BINARY
from gain_core.exceptions import ProcessInvocationError

logger = logging.getLogger(__name__)


class MiniDspController:
    """DeviceController backed by the minidsp command line tool."""

    def __init__(self, binary: str = MINIDSP_BINARY):
        self.binary = binary

    def _run(self, *args: str) -> str:
        """Run the binary with args and return its decoded stdout."""
        cmd: List[str] = [self.binary, *args]
        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as e:
            raise ProcessInvocationError(f"Failed to run '{self.binary}': {e}", command=cmd) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            logger.warning(f"{' '.join(cmd)} exited with rc={result.returncode}: {stderr}")

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProcessInvocationError(f"Unreadable output from '{self.binary}': {e}", command=cmd) from e

    def query(self) -> str:
        return self._run()

    def set(self, value: str) -> None:
        # "--" keeps a negative gain from being read as an option
        self._run("gain", "--", value)
