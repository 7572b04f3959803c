"""Command-line argument parsing for dart-export.

The export itself takes no options: it always reads ``lib`` and writes
``dart_export.txt`` in the current directory. The parser exists for ``--help``
and ``--version``.
"""

import argparse

from dart_export import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dart-export's options.
    """
    description = """
    dart-export: write the directory tree and the line-numbered contents of every
    Dart file in ./lib to ./dart_export.txt.

    Generated files (build info, Firebase options, json_serializable output and the
    Flutter plugin registrant) are left out. Run the command from the project root.
    """

    parser = argparse.ArgumentParser(
        prog="dart-export",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"dart-export {__version__}", help="Show the version and exit"
    )
    return parser
