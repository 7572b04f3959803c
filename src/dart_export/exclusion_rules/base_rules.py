import os
from abc import ABC, abstractmethod
from pathlib import PurePath

from dart_export.types import PathType


def normalize_relative_path(path: PathType) -> str:
    """
    Normalize a relative path to the form used for exclusion matching.

    Redundant separators and ``.`` segments are collapsed with ``os.path.normpath`` and
    the platform separator is replaced by a forward slash, so ``lib\\main.dart`` on
    Windows and ``lib/main.dart`` elsewhere normalize to the same string.

    Args:
        path: A path relative to the project root.

    Returns:
        str: The normalized path using forward slashes.

    Example:
        >>> normalize_relative_path("lib//models/./event.g.dart")
        'lib/models/event.g.dart'
    """
    return PurePath(os.path.normpath(path)).as_posix()


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file exclusion rules.

    Concrete rules decide whether a path, given relative to the project root, should be
    left out of the export. Paths passed to exclude() are expected in normalized form
    (see normalize_relative_path); exclude_file() performs that normalization for an
    absolute path.

    Example:
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.tmp')
        >>> rules = TmpExclusionRules()
        >>> rules.exclude("build/temp.tmp")
        True
        >>> rules.exclude_file("/project/lib/main.dart", "/project")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The normalized file path, relative to the project root.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def exclude_file(self, file_path: PathType, project_root: PathType) -> bool:
        """
        Determine if a file should be excluded, given its absolute path.

        The path is made relative to project_root and normalized before being checked
        with exclude().

        Args:
            file_path: Absolute path of the candidate file.
            project_root: The directory relative paths are computed from.

        Returns:
            bool: True if the file should be excluded.
        """
        relative_path = os.path.relpath(file_path, project_root)
        return self.exclude(normalize_relative_path(relative_path))
