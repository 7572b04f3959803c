"""Signal handling utilities for the dart-export CLI.

This module provides the SIGINT handler that lets an export stop cleanly between
two writes when the user presses Ctrl+C.
"""

import signal
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Handles SIGINT for graceful interruption management.

    Attributes:
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigint_handler: Original SIGINT signal handler.
    """

    def __init__(self) -> None:
        """Initialize signal handler with the original handler preserved."""
        self.sigint_received = Event()
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGINT signal.

        A second Ctrl+C reaches the original handler.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure the SIGINT handler."""
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)
