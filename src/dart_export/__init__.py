"""Dart source export utilities.

This package walks the ``lib`` folder of a Dart/Flutter project and writes a
single text file containing a directory tree followed by the line-numbered
contents of every Dart source file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dart-export")
except PackageNotFoundError:
    __version__ = "unknown"
