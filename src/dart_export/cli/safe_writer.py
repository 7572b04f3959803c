"""Safe output writing utilities for the dart-export CLI.

This module provides a writing interface that stops as soon as the user
interrupts the export.
"""

import os
import types
from pathlib import Path
from typing import Optional, Type

from dart_export.cli.signal_handler import signal_handler
from dart_export.types import PathType


class ExportInterrupted(Exception):
    """Raised by SafeWriter.write when SIGINT has been received."""


class SafeWriter:
    """Signal-aware writer for the export file.

    The file is opened (and truncated) on construction. Text is encoded as UTF-8 and
    written unchanged, with no newline translation, so the same chunks always produce
    the same bytes on every platform.

    Attributes:
        file: Path of the output file.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: PathType):
        """Open the output file for writing.

        Args:
            file: Path of the output file. An existing file is overwritten.

        Raises:
            TypeError: If file is not a str or PathLike.
            OSError: If the file cannot be opened.
        """
        if not isinstance(file, (str, os.PathLike)):
            raise TypeError(f"Expected str or PathLike, got {type(file).__name__}")

        self.file = Path(file)
        self._closed = False
        self._file_obj = self.file.open("wb")
        self.fd = self._file_obj.fileno()

    def write(self, data: str) -> None:
        """Write data unless an interrupt was received.

        Args:
            data: String data to write.

        Raises:
            ExportInterrupted: If SIGINT has been received.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.sigint_received.is_set():
            raise ExportInterrupted()

        payload = data.encode("utf-8")
        # os.write may write fewer bytes than requested
        while payload:
            written = os.write(self.fd, payload)
            payload = payload[written:]

    def close(self) -> None:
        """Close the output file. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._file_obj.close()

    def __enter__(self) -> "SafeWriter":
        """Enter the context manager.

        Returns:
            self: The SafeWriter instance for use in the with block.
        """
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Exit the context manager and close the file.

        If closing fails while an exception from the with block is already
        propagating, the original exception is kept.

        Args:
            exc_type: The exception type, if an exception was raised.
            exc_val: The exception value, if an exception was raised.
            exc_tb: The exception traceback, if an exception was raised.
        """
        try:
            self.close()
        except OSError:
            # Only suppress close errors if there was already an exception
            if exc_type is None:
                raise
