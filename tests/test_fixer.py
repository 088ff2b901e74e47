"""Tests for fixing source text and files."""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, strategies as st

from typofixer.config import Settings
from typofixer.engine.tokens import Position
from typofixer.errors import SourcePathError
from typofixer.fixer import fix_source, iter_source_files, process_paths, read_source
from typofixer.source.tokenizer import LANGUAGES
from typofixer.table.loader import default_table
from typofixer.table.model import LookupTable

PHP_SOURCE = """<?php
function run($begining, $statment) {
    $previuos = $begining; // keep 'previuos' in comments
    echo "previuos";
    return $previuos . $statment;
}
"""

PHP_FIXED = """<?php
function run($beginning, $statement) {
    $previous = $beginning; // keep 'previuos' in comments
    echo "previuos";
    return $previous . $statement;
}
"""


class TestFixSource:
    def test_fixes_identifiers_only(self, blog_table):
        result = fix_source(PHP_SOURCE, blog_table)

        assert result.rewritten_text == PHP_FIXED
        assert len(result.changes) == 6
        assert result.changes[0].position == Position(2, 15)
        assert result.changed

    def test_unchanged_text_is_returned_as_is(self, blog_table):
        result = fix_source(PHP_FIXED, blog_table)

        assert result.rewritten_text == PHP_FIXED
        assert result.changes == ()
        assert not result.changed
        assert result.display_path == "<string>"

    def test_variables_only_leaves_bare_names(self, blog_table):
        text = "previuos($previuos);"
        assert fix_source(text, blog_table).rewritten_text == "previous($previous);"
        assert fix_source(text, blog_table, variables_only=True).rewritten_text == "previuos($previous);"

    @given(
        st.text(alphabet="$ previuos statment'\"/*#\n;{}`f<", max_size=80),
        st.sampled_from(LANGUAGES),
    )
    def test_fixing_twice_changes_nothing(self, text, language):
        table = default_table()
        once = fix_source(text, table, language=language)
        twice = fix_source(once.rewritten_text, table, language=language)

        assert twice.changes == ()
        assert twice.rewritten_text == once.rewritten_text


class TestFixSourceLanguages:
    def test_python_docstring_is_left_alone(self, blog_table):
        text = 'def f(previuos):\n    """Uses "previuos" here."""\n    return previuos\n'

        result = fix_source(text, blog_table, path=Path("mod.py"))

        assert result.rewritten_text == 'def f(previous):\n    """Uses "previuos" here."""\n    return previous\n'

    def test_python_floor_division_operand_is_renamed(self, blog_table):
        result = fix_source("previuos = 4\nx = 8 // previuos\n", blog_table, path=Path("calc.py"))

        assert result.rewritten_text == "previous = 4\nx = 8 // previous\n"

    def test_php_interpolated_variable_renamed_with_assignment(self, blog_table):
        text = '$previuos = 1;\necho "value: $previuos";\n'

        result = fix_source(text, blog_table, path=Path("page.php"))

        assert result.rewritten_text == '$previous = 1;\necho "value: $previous";\n'
        assert [c.position for c in result.changes] == [Position(1, 2), Position(2, 15)]

    def test_explicit_language_overrides_extension(self, blog_table):
        text = "x = 8 // previuos"

        assert fix_source(text, blog_table, path=Path("calc.php")).rewritten_text == text
        assert fix_source(text, blog_table, path=Path("calc.php"), language="python").rewritten_text == "x = 8 // previous"


class TestSourceFiles:
    def test_walks_directories_by_extension(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / "src").mkdir()
            (root / ".git").mkdir()
            (root / "src" / "a.php").write_text("$x;", encoding="utf-8")
            (root / "src" / "b.txt").write_text("$x;", encoding="utf-8")
            (root / ".git" / "c.php").write_text("$x;", encoding="utf-8")
            explicit = root / "notes.txt"
            explicit.write_text("$x;", encoding="utf-8")

            files = list(iter_source_files([root, explicit], Settings()))

            assert files == [root / "src" / "a.php", explicit]

    def test_missing_path_raises(self):
        with pytest.raises(SourcePathError, match="does not exist"):
            list(iter_source_files([Path("no/such/path")], Settings()))

    def test_read_source_falls_back_to_latin1(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "legacy.php"
            path.write_bytes("$previuos = 'caf\xe9';".encode("latin-1"))

            text, encoding = read_source(path)

            assert encoding == "latin-1"
            assert text == "$previuos = 'caf\xe9';"


class TestProcessPaths:
    def test_rewrites_files_in_place(self, blog_table):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "app.php"
            path.write_text(PHP_SOURCE, encoding="utf-8")

            results = process_paths([Path(temp_dir)], blog_table, Settings())

            assert len(results) == 1
            assert results[0].changed
            assert path.read_text(encoding="utf-8") == PHP_FIXED

    def test_dry_run_leaves_files_alone(self, blog_table):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "app.php"
            path.write_text(PHP_SOURCE, encoding="utf-8")

            results = process_paths([path], blog_table, Settings(dry_run=True))

            assert results[0].rewritten_text == PHP_FIXED
            assert path.read_text(encoding="utf-8") == PHP_SOURCE

    def test_preserves_encoding_and_line_endings(self, blog_table):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "legacy.php"
            path.write_bytes("$previuos = 'caf\xe9';\r\n".encode("latin-1"))

            process_paths([path], blog_table, Settings())

            assert path.read_bytes() == "$previous = 'caf\xe9';\r\n".encode("latin-1")

    def test_language_follows_each_file_extension(self, blog_table):
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / "calc.py").write_text("x = 8 // previuos\n", encoding="utf-8")
            (root / "calc.php").write_text("$x = 8; // previuos\n", encoding="utf-8")

            process_paths([root], blog_table, Settings())

            assert (root / "calc.py").read_text(encoding="utf-8") == "x = 8 // previous\n"
            assert (root / "calc.php").read_text(encoding="utf-8") == "$x = 8; // previuos\n"

    def test_unencodable_correction_raises_source_path_error(self):
        table = LookupTable.build({"delta_δ": ["dlta"]})
        original = "$dlta = 'caf\xe9';".encode("latin-1")

        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "legacy.php"
            path.write_bytes(original)

            with pytest.raises(SourcePathError, match="Cannot encode"):
                process_paths([path], table, Settings())

            assert path.read_bytes() == original
