"""File system tree representation with exact-path exclusion rules.

This module provides the FileSystemTree class, which builds the tree of directories
and qualifying source files below a source directory and renders it in the style of
the Unix ``tree`` command.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from dart_export.exclusion_rules.base_rules import BaseExclusionRules, normalize_relative_path
from dart_export.file_system_tree.file_system_node import FileSystemNode
from dart_export.types import PathType


class FileSystemTree:
    """A tree representation of a source directory restricted to qualifying files.

    Directories are always part of the tree. Files are included only if their
    extension equals ``suffix`` and the exclusion rules do not exclude their path
    relative to ``project_root``. At every level directories come before files, and
    each group is ordered by name.

    The tree is built lazily on first access, walking the directory hierarchy with an
    explicit stack of directories still to visit. Any error reading a directory
    propagates; nothing is skipped silently.

    Symbolic links are never descended into. A link whose name has the right
    extension is listed like a file.

    Attributes:
        root_path (Path): The directory the tree is rooted at.
        project_root (Path): The directory relative paths are computed from.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files.
        suffix (str): The file extension that qualifies a file, including the dot.

    Example:
        >>> tree = FileSystemTree("lib", project_root=".")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        ├── models/
        │   └── user.dart
        └── main.dart
    """

    def __init__(
        self,
        root_path: PathType,
        project_root: Optional[PathType] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        suffix: str = ".dart",
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            project_root: Directory that relative paths (for exclusion matching and
                display) are computed from. Defaults to root_path.
            exclusion_rules: Rules for excluding files. Defaults to None.
            suffix: Extension a file must have to be included. Defaults to ".dart".
        """
        self.root_path = Path(root_path)
        self.project_root = Path(project_root) if project_root is not None else self.root_path
        self.exclusion_rules = exclusion_rules
        self.suffix = suffix
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree.

        Builds the tree if it hasn't been built yet.

        Returns:
            The root node of the tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If any directory in the tree cannot be read.
        """
        if self._tree is None:
            self._tree = self._build_tree()
            self._count_files_and_directories()
        return self._tree

    def _relative_path(self, path: PathType) -> str:
        return normalize_relative_path(os.path.relpath(path, self.project_root))

    def _build_tree(self) -> FileSystemNode:
        """Build the filesystem tree from the root path.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If any directory in the tree cannot be read.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(
            self.root_path.resolve().name, is_dir=True, relative_path=self._relative_path(self.root_path)
        )

        # Children of one directory are attached together and in order, so the order
        # in which directories are popped does not affect the result.
        pending: List[Tuple[Path, FileSystemNode]] = [(self.root_path, root)]
        while pending:
            directory, node = pending.pop()
            for name, is_dir in self._list_entries(directory):
                child_path = directory / name
                child = FileSystemNode(
                    name, parent=node, is_dir=is_dir, relative_path=self._relative_path(child_path)
                )
                if is_dir:
                    pending.append((child_path, child))

        return root

    def _list_entries(self, directory: Path) -> List[Tuple[str, bool]]:
        """List the qualifying entries of a directory in output order.

        Args:
            directory: The directory to list.

        Returns:
            (name, is_dir) pairs, directories first, each group sorted by name.

        Raises:
            OSError: If the directory cannot be read.
        """
        entries = []
        try:
            with os.scandir(directory) as it:
                for entry in it:
                    if entry.is_dir(follow_symlinks=False):
                        entries.append((entry.name, True))
                    elif self._qualifies(entry.path, entry.name):
                        entries.append((entry.name, False))
        except OSError as e:
            raise OSError(f"Failed to read directory '{self._relative_path(directory)}': {e}") from e

        entries.sort(key=lambda item: (not item[1], item[0]))
        return entries

    def _qualifies(self, path: str, name: str) -> bool:
        if os.path.splitext(name)[1] != self.suffix:
            return False
        if self.exclusion_rules is None:
            return True
        return not self.exclusion_rules.exclude_file(path, self.project_root)

    def _walk(self) -> Iterator[Tuple[str, bool, FileSystemNode]]:
        """Walk the tree in pre-order, skipping the root.

        Yields:
            Triples of (prefix, is_last, node). prefix is the continuation drawn for
            the node's ancestors, is_last tells whether the node is its parent's last
            child.
        """
        # Children are pushed in reverse so the first child is popped first
        pending: List[Tuple[str, bool, FileSystemNode]] = []

        def push_children(node: FileSystemNode, prefix: str) -> None:
            last = len(node.children) - 1
            for i in range(last, -1, -1):
                pending.append((prefix, i == last, node.children[i]))

        push_children(self.get_tree(), "")
        while pending:
            prefix, is_last, node = pending.pop()
            yield prefix, is_last, node
            if node.children:
                push_children(node, prefix + ("    " if is_last else "│   "))

    def _count_files_and_directories(self) -> None:
        """Count the files and directories in the tree, excluding the root."""
        self._file_count = 0
        self._directory_count = 0
        for _, _, node in self._walk():
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of qualifying files in the tree.

        Example:
            >>> tree = FileSystemTree("lib")  # doctest: +SKIP
            >>> tree.get_file_count()  # doctest: +SKIP
            42
        """
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all files in the tree.

        Files are yielded in output order: a pre-order walk in which, at every level,
        the contents of subdirectories come before the files of the directory itself.

        Yields:
            Pairs of (absolute_path, relative_path) for each file. relative_path is
            relative to project_root and uses forward slashes.

        Example:
            >>> tree = FileSystemTree("lib", project_root=".")  # doctest: +SKIP
            >>> for abs_path, rel_path in tree.iterate_files():  # doctest: +SKIP
            ...     print(rel_path)
            lib/models/user.dart
            lib/main.dart
        """
        for _, _, node in self._walk():
            if not node.is_dir:
                yield (str(self.project_root / node.relative_path), node.relative_path)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The root directory itself is not printed. Each entry is prefixed with
        ``├── `` or, for the last sibling, ``└── ``; nested entries are indented with
        ``│   `` below a parent that has following siblings and four spaces
        otherwise. Directory names end with ``/``.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Example:
            >>> tree = FileSystemTree("lib")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            ├── widgets/
            │   └── button.dart
            └── main.dart
        """
        for prefix, is_last, node in self._walk():
            connector = "└── " if is_last else "├── "
            yield f"{prefix}{connector}{node.display_name}"

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a string, lines joined by newlines."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree so the next access reflects the current filesystem."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
