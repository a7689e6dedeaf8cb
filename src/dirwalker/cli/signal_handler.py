"""Signal handling utilities for the dirwalker CLI.

This module provides signal handlers for managing interruptions
and ensuring proper cleanup during command-line operation.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can stop writing and exit cleanly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Conventional exit status for the signal received, if any."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Prevents further error messages about a closed pipe during shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
