"""Command-line interface for dart-export.

Run from the root of a Dart/Flutter project, the command writes the directory tree of
``lib`` and the line-numbered contents of its Dart files to ``dart_export.txt``,
overwriting any previous export.

Exit Codes:
    0: Successful completion
    1: Source directory missing, or runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    $ cd my_flutter_app
    $ dart-export
    Directory structure and file contents were exported to dart_export.txt.
"""

import sys
from pathlib import Path
from typing import List, Optional

from dart_export.cli.argparser import create_parser
from dart_export.cli.safe_writer import ExportInterrupted, SafeWriter
from dart_export.cli.signal_handler import setup_signal_handling
from dart_export.dart_export import DEFAULT_OUTPUT_FILE, StreamingDartExport


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dart-export command-line interface.

    Args:
        argv: Command-line arguments, without the program name. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Source directory missing, or runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    setup_signal_handling()
    create_parser().parse_args(argv)

    project_root = Path.cwd()
    output_file = Path(DEFAULT_OUTPUT_FILE)

    try:
        # Raises SourceDirectoryNotFoundError before the output file is opened
        exporter = StreamingDartExport(project_root)

        with SafeWriter(output_file) as safe_writer:
            for chunk in exporter.stream_document():
                safe_writer.write(chunk)

    except ExportInterrupted:
        print("Export interrupted.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Directory structure and file contents were exported to {output_file}.")


if __name__ == "__main__":
    main()
