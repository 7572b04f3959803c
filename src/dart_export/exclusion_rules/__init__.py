"""Exclusion rules for filtering source files."""

from .base_rules import BaseExclusionRules, normalize_relative_path
from .exact_rules import ExactPathExclusionRules

__all__ = [
    "BaseExclusionRules",
    "ExactPathExclusionRules",
    "normalize_relative_path",
]
