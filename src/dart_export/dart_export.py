"""Export of a Dart source directory to a single text document.

This module provides the StreamingDartExport class, which combines the directory tree
and the line-numbered file contents of a project's source directory into one
document, produced as a stream of text chunks.
"""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from dart_export.exceptions import SourceDirectoryNotFoundError
from dart_export.exclusion_rules.base_rules import BaseExclusionRules
from dart_export.exclusion_rules.exact_rules import ExactPathExclusionRules
from dart_export.file_content_printer import FileContentPrinter
from dart_export.file_system_tree.file_system_tree import FileSystemTree
from dart_export.types import PathType

# Generated and auxiliary files, relative to the project root
DEFAULT_EXCLUDED_PATHS: Tuple[str, ...] = (
    "lib/generated/build_info.dart",
    "lib/build_info.dart",
    "lib/firebase_options.dart",
    "lib/models/event.g.dart",
    ".dart_tool/flutter_build/dart_plugin_registrant.dart",
)
DEFAULT_SOURCE_DIR = "lib"
DEFAULT_SUFFIX = ".dart"
DEFAULT_OUTPUT_FILE = "dart_export.txt"

DIVIDER = "=" * 80
CONTENTS_LABEL = "File contents:"


class StreamingDartExport:
    """Streaming exporter for the source directory of a Dart project.

    The exported document consists of an introductory line, the directory tree of the
    source directory, an 80-character divider, a label line, and the content section
    produced by FileContentPrinter. It is generated as a stream of chunks and written
    without being assembled in memory.

    The source directory is checked at construction, so a missing directory is
    reported before any output is opened. Everything else (unreadable directories or
    files) fails while streaming.

    Attributes:
        project_root (Path): Directory relative paths are computed from.
        source_dir (Path): The exported directory, below project_root.
        exclusion_rules (BaseExclusionRules): Rules deciding which files are left out.
        suffix (str): Extension of the exported files.

    Example:
        >>> exporter = StreamingDartExport(".")  # doctest: +SKIP
        >>> chunks = list(exporter.stream_document())  # doctest: +SKIP
        >>> exporter.file_count  # doctest: +SKIP
        12

    Raises:
        SourceDirectoryNotFoundError: If the source directory does not exist.
    """

    def __init__(
        self,
        project_root: PathType,
        *,
        source_dir: str = DEFAULT_SOURCE_DIR,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        suffix: str = DEFAULT_SUFFIX,
    ):
        """Initialize the export.

        Args:
            project_root: The project directory. Can be any path-like object.
            source_dir: Name of the directory to export, relative to project_root.
                Defaults to "lib".
            exclusion_rules: Rules for excluding files. If None, the files listed in
                DEFAULT_EXCLUDED_PATHS are excluded.
            suffix: Extension of the files to export. Defaults to ".dart".

        Raises:
            SourceDirectoryNotFoundError: If project_root/source_dir is not a directory.
        """
        self.project_root = Path(project_root)
        self.source_dir = self.project_root / source_dir
        if not self.source_dir.is_dir():
            raise SourceDirectoryNotFoundError(source_dir)

        self._source_dir_name = source_dir
        self.exclusion_rules = (
            exclusion_rules if exclusion_rules is not None else ExactPathExclusionRules(DEFAULT_EXCLUDED_PATHS)
        )
        self.suffix = suffix

        self._fs_tree = FileSystemTree(
            self.source_dir, project_root=self.project_root, exclusion_rules=self.exclusion_rules, suffix=suffix
        )
        self._content_printer = FileContentPrinter(self._fs_tree)

    @property
    def intro(self) -> str:
        """The first line of the document."""
        return f"Directory structure of the {self._source_dir_name} folder:"

    @property
    def file_count(self) -> int:
        """Number of exported files."""
        return self._fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        """Number of directories below the source directory."""
        return self._fs_tree.get_directory_count()

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree section, one line (with newline) at a time."""
        for line in self._fs_tree.stream_tree_representation():
            yield line + "\n"

    def stream_contents(self) -> Iterator[str]:
        """Stream the content section."""
        yield from self._content_printer.stream_contents()

    def stream_document(self) -> Iterator[str]:
        """Stream the complete document.

        Yields:
            str: Chunks whose concatenation is the exported document.

        Raises:
            OSError: If a directory or file cannot be read.
        """
        yield f"{self.intro}\n\n"
        yield from self.stream_tree()
        yield f"\n\n{DIVIDER}\n\n{CONTENTS_LABEL}\n"
        yield from self.stream_contents()
