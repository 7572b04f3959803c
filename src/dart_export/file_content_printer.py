"""File content printer with streaming support.

This module streams the content section of an export: for every file of a
FileSystemTree, a path header followed by the file's line-numbered content.
"""

from pathlib import Path
from typing import Iterator, Tuple

from .file_system_tree.file_system_tree import FileSystemTree
from .io.numbered_line_reader import NumberedLineReader


class FileContentPrinter:
    """Streams line-numbered file content while maintaining bounded memory usage.

    Files are visited in the tree's output order. For each file the printer emits a
    header block (a blank line, then ``// ==== <relative path> ====``), a blank line,
    and every line of the file prefixed with its right-aligned line number. Output is
    produced chunk by chunk; no file is held in memory as a whole.

    Files are read using the specified encoding (UTF-8 by default). Undecodable bytes
    are replaced by default, so every file yields output; a file that cannot be read
    at all aborts the stream with an OSError.

    Attributes:
        fs_tree (FileSystemTree): The filesystem tree to process.
        encoding (str): The encoding to use when reading files.
        errors (str): How to handle encoding errors when reading files.

    Example:
        >>> tree = FileSystemTree("lib", project_root=".")  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree)  # doctest: +SKIP
        >>> for chunk in printer.stream_contents():  # doctest: +SKIP
        ...     print(chunk, end='')
        <BLANKLINE>
        // ==== lib/main.dart ====
        <BLANKLINE>
        1: void main() {}
        2:
    """

    def __init__(self, fs_tree: FileSystemTree, encoding: str = "utf-8", errors: str = "replace") -> None:
        """Initialize the FileContentPrinter.

        Args:
            fs_tree: The filesystem tree to process.
            encoding: The encoding to use when reading files. Defaults to "utf-8".
            errors: How to handle encoding errors. Must be one of "strict" (raises error),
                "ignore" (skips invalid bytes), or "replace" (replaces invalid bytes with
                U+FFFD). Defaults to "replace".

        Raises:
            ValueError: If errors is not one of "strict", "ignore", or "replace".
            LookupError: If the specified encoding is not available.
        """
        if errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{errors}'. Must be one of: strict, ignore, replace")

        # Validate encoding early to fail fast
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.fs_tree = fs_tree
        self.encoding = encoding
        self.errors = errors

    @staticmethod
    def format_header(relative_path: str) -> str:
        """Format the header block that precedes a file's content.

        Example:
            >>> FileContentPrinter.format_header("lib/main.dart")
            '\\n// ==== lib/main.dart ====\\n\\n'
        """
        return f"\n// ==== {relative_path} ====\n\n"

    def _yield_numbered_content(self, file_path: str, relative_path: str) -> Iterator[str]:
        """Stream a single file's header and numbered lines.

        Args:
            file_path: Absolute path to the file.
            relative_path: Path relative to the project root, used in the header.

        Yields:
            str: The header block, then one numbered line at a time.

        Raises:
            OSError: If the file cannot be opened or read.
            ValueError: If the file cannot be decoded and errors is "strict".
        """
        yield self.format_header(relative_path)

        try:
            # newline="\n" keeps carriage returns as content
            with open(Path(file_path), "r", encoding=self.encoding, errors=self.errors, newline="\n") as file:
                yield from NumberedLineReader(file)
        except UnicodeError as e:
            raise ValueError(
                f"Failed to decode '{relative_path}' with {self.encoding} "
                f"encoding (errors='{self.errors}'): {str(e)}"
            ) from e
        except OSError as e:
            # Add context to OS-level errors
            raise OSError(f"Failed to read '{relative_path}': {str(e)}") from e

    def yield_file_contents(self) -> Iterator[Tuple[str, str, Iterator[str]]]:
        """Stream file content with metadata.

        Yields:
            Iterator[Tuple[str, str, Iterator[str]]]: Tuples of (absolute_path,
                relative_path, content_iterator) where content_iterator yields the
                header block and numbered lines of the file.

        Raises:
            OSError: If there are errors reading files or accessing the filesystem.
        """
        for file_path, relative_path in self.fs_tree.iterate_files():
            yield file_path, relative_path, self._yield_numbered_content(file_path, relative_path)

    def stream_contents(self) -> Iterator[str]:
        """Stream the whole content section, one chunk at a time."""
        for _, _, content in self.yield_file_contents():
            yield from content
