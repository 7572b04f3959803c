"""Tools for reading a text file as line-numbered output."""

from typing import Iterator, Optional, TextIO


class NumberedLineReader:
    """Iterator that yields the lines of a file prefixed with right-aligned line numbers.

    The content is split on ``"\\n"`` only. A file containing k newline characters has
    k + 1 lines, so a file ending with a newline yields a final empty line and an
    empty file yields a single empty line. Every yielded line ends with ``"\\n"``.

    Numbers are right-aligned to the width of the largest number in the file, which
    requires knowing the line count up front. The reader makes a first pass over the
    file in fixed-size chunks to count newlines, seeks back to the start, and then
    reads one line at a time, so memory use is bounded by the longest line rather than
    the file size.

    Args:
        file_obj: An opened, seekable text file object. It should be opened with
            ``newline="\\n"`` so that carriage returns are neither translated nor
            treated as line breaks.
        chunk_size: Size of chunks read while counting lines. Must be at least 4096.
            Defaults to 65536 (64 KB).

    Raises:
        ValueError: If chunk_size is less than 4096.

    Example:
        >>> import io
        >>> reader = NumberedLineReader(io.StringIO("\\n".join("abcdefghij")))
        >>> lines = list(reader)
        >>> lines[0]
        ' 1: a\\n'
        >>> lines[-1]
        '10: j\\n'
    """

    MINIMUM_CHUNK_SIZE = 4096  # 4 KB

    def __init__(self, file_obj: TextIO, chunk_size: int = 65536) -> None:
        """Initialize the reader with a file object and chunk size."""

        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, " f"got {chunk_size}")

        self._file: TextIO = file_obj
        self._chunk_size: int = chunk_size
        self._line_count: Optional[int] = None
        self._number: int = 0
        self._done: bool = False

    @property
    def line_count(self) -> int:
        """Number of lines in the file (newline count plus one)."""
        if self._line_count is None:
            self._line_count = self._count_lines()
        return self._line_count

    @property
    def width(self) -> int:
        """Width line numbers are padded to: the digit count of line_count."""
        return len(str(self.line_count))

    def _count_lines(self) -> int:
        start = self._file.tell()
        newlines = 0
        while True:
            chunk = self._file.read(self._chunk_size)
            if not chunk:
                break
            newlines += chunk.count("\n")
        self._file.seek(start)
        return newlines + 1

    def __iter__(self) -> Iterator[str]:
        """Return self as iterator."""
        return self

    def __next__(self) -> str:
        """Get the next numbered line.

        Returns:
            The line content, prefixed with its padded number and ``": "``, ending
            with ``"\\n"``.

        Raises:
            StopIteration: When all lines have been returned.
            UnicodeError: If there are encoding issues when reading the file.
        """
        if self._done:
            raise StopIteration

        width = self.width
        line = self._file.readline()
        if line.endswith("\n"):
            line = line[:-1]
        else:
            # No terminator means this is the last line, possibly empty
            self._done = True

        self._number += 1
        return f"{self._number:>{width}}: {line}\n"
