"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a directory flag and the entry's path relative to the
    project root. Children are kept in the order they are attached, which is the
    order used for both rendering and content output.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        relative_path (str): Normalized path relative to the project root.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("lib", is_dir=True, relative_path="lib")
        >>> child = FileSystemNode("main.dart", parent=root, relative_path="lib/main.dart")
        >>> child.is_dir
        False
        >>> child.display_name
        'main.dart'
        >>> root.display_name
        'lib/'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            relative_path: Path relative to the project root. Defaults to "".
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.relative_path = relative_path

    @property
    def display_name(self) -> str:
        """Name as shown in the tree, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_dir else self.name
