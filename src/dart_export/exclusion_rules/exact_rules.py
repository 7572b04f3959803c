"""Exclusion rules matching whole relative paths."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules, normalize_relative_path


class ExactPathExclusionRules(BaseExclusionRules):
    """Exclusion rules that match complete relative paths exactly.

    Each configured path is normalized once at construction. A candidate path is
    excluded only when its normalized form is equal to one of them: there is no glob,
    prefix or directory matching, so ``lib/models`` does not exclude
    ``lib/models/event.dart``.

    The rule set is immutable after construction.

    Attributes:
        paths (FrozenSet[str]): The normalized excluded paths.

    Example:
        >>> rules = ExactPathExclusionRules(["lib/firebase_options.dart"])
        >>> rules.exclude("lib/firebase_options.dart")
        True
        >>> rules.exclude("lib/main.dart")
        False
        >>> rules.exclude_file("/app/lib/firebase_options.dart", "/app")
        True
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        """Initialize the rules with the paths to exclude.

        Args:
            paths: Paths relative to the project root. Any separator convention
                understood by the platform is accepted.
        """
        self._paths: FrozenSet[str] = frozenset(normalize_relative_path(p) for p in paths)

    @property
    def paths(self) -> FrozenSet[str]:
        return self._paths

    def exclude(self, path: str) -> bool:
        return path in self._paths

    def __repr__(self) -> str:
        return f"ExactPathExclusionRules({sorted(self._paths)!r})"
