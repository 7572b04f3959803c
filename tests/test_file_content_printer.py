"""Unit tests for the FileContentPrinter class."""

import os
from unittest.mock import patch

import pytest

from dart_export.exclusion_rules.exact_rules import ExactPathExclusionRules
from dart_export.file_content_printer import FileContentPrinter
from dart_export.file_system_tree.file_system_tree import FileSystemTree


@pytest.fixture
def temp_project(tmp_path):
    """Create a project with a nested Dart file, an excluded file and a text file."""
    lib = tmp_path / "lib"
    (lib / "a").mkdir(parents=True)
    (lib / "a" / "x.dart").write_bytes(b"import 'y.dart';\nvoid main() {}")
    (lib / "a" / "excluded.dart").write_bytes(b"// generated")
    (lib / "b.txt").write_bytes(b"not dart")
    (lib / "main.dart").write_bytes(b"void main() {}\n")
    return tmp_path


@pytest.fixture
def printer(temp_project):
    fs_tree = FileSystemTree(
        temp_project / "lib",
        project_root=temp_project,
        exclusion_rules=ExactPathExclusionRules(["lib/a/excluded.dart"]),
    )
    return FileContentPrinter(fs_tree)


def test_format_header():
    assert FileContentPrinter.format_header("lib/main.dart") == "\n// ==== lib/main.dart ====\n\n"


def test_stream_contents(printer):
    expected = (
        "\n// ==== lib/a/x.dart ====\n\n"
        "1: import 'y.dart';\n"
        "2: void main() {}\n"
        "\n// ==== lib/main.dart ====\n\n"
        "1: void main() {}\n"
        "2: \n"
    )
    assert "".join(printer.stream_contents()) == expected


def test_yield_file_contents(printer, temp_project):
    results = [(abs_path, rel_path, "".join(content)) for abs_path, rel_path, content in printer.yield_file_contents()]
    assert [rel_path for _, rel_path, _ in results] == ["lib/a/x.dart", "lib/main.dart"]
    assert results[0][0] == str(temp_project / "lib/a/x.dart")
    assert results[0][2].startswith("\n// ==== lib/a/x.dart ====\n\n")


def test_numbered_line_count_matches_source(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    source = "\n".join(f"line {i}" for i in range(1, 13)) + "\n"
    (lib / "long.dart").write_bytes(source.encode("utf-8"))

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path))
    chunks = list(printer.stream_contents())
    numbered_lines = chunks[1:]

    assert len(numbered_lines) == source.count("\n") + 1
    assert numbered_lines[0] == " 1: line 1\n"
    assert numbered_lines[11] == "12: line 12\n"
    assert numbered_lines[12] == "13: \n"


def test_only_excluded_files_gives_empty_content(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "firebase_options.dart").write_text("// generated")
    rules = ExactPathExclusionRules(["lib/firebase_options.dart"])

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path, exclusion_rules=rules))
    assert list(printer.stream_contents()) == []


def test_utf8_content(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "i18n.dart").write_bytes("const greeting = 'Grüße 👋';".encode("utf-8"))

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path))
    assert "".join(printer.stream_contents()).endswith("1: const greeting = 'Grüße 👋';\n")


def test_invalid_utf8_is_replaced(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "latin1.dart").write_bytes(b"// caf\xe9")

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path))
    assert "".join(printer.stream_contents()).endswith("1: // caf\ufffd\n")


def test_invalid_utf8_strict_raises(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "latin1.dart").write_bytes(b"// caf\xe9")

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path), errors="strict")
    with pytest.raises(ValueError) as excinfo:
        list(printer.stream_contents())
    assert "Failed to decode 'lib/latin1.dart'" in str(excinfo.value)


def test_crlf_preserved(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "windows.dart").write_bytes(b"a\r\nb")

    printer = FileContentPrinter(FileSystemTree(lib, project_root=tmp_path))
    assert list(printer.stream_contents())[1:] == ["1: a\r\n", "2: b\n"]


def test_unreadable_file_is_fatal(printer):
    with patch("builtins.open", side_effect=PermissionError("denied")):
        with pytest.raises(OSError) as excinfo:
            list(printer.stream_contents())
    assert "Failed to read 'lib/a/x.dart'" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_file_deleted_during_export_is_fatal(printer, temp_project):
    printer.fs_tree.get_tree()
    os.remove(temp_project / "lib" / "main.dart")
    with pytest.raises(OSError):
        list(printer.stream_contents())


def test_invalid_errors_parameter(tmp_path):
    with pytest.raises(ValueError) as excinfo:
        FileContentPrinter(FileSystemTree(tmp_path), errors="bogus")
    assert "Invalid error handler 'bogus'" in str(excinfo.value)


def test_invalid_encoding(tmp_path):
    with pytest.raises(LookupError):
        FileContentPrinter(FileSystemTree(tmp_path), encoding="no-such-encoding")
