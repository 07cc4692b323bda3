"""
Content extractor tests

Tests line range selection, file extension detection and language mapping.
"""

import pytest

from codeimport.lib.extractor import (
    LANGUAGE_MAP,
    extension_toLanguage,
    fileExtension_get,
    lines_extract,
)


FIVE_LINES = "line 0\nline 1\nline 2\nline 3\nline 4"


class TestLinesExtract:
    """Test line range selection"""

    def test_no_bounds_is_identity(self):
        assert lines_extract(FIVE_LINES) == FIVE_LINES

    def test_identity_keeps_trailing_newline(self):
        content = "a\nb\n"
        assert lines_extract(content) == content

    def test_negative_end(self):
        assert lines_extract(FIVE_LINES, 0, -2) == "line 0\nline 1\nline 2"

    def test_begin_and_end(self):
        assert lines_extract(FIVE_LINES, 1, 3) == "line 1\nline 2"

    def test_begin_only(self):
        assert lines_extract(FIVE_LINES, 3) == "line 3\nline 4"

    def test_end_only(self):
        assert lines_extract(FIVE_LINES, line_end=1) == "line 0"

    def test_minus_one_excludes_last_line(self):
        assert lines_extract(FIVE_LINES, line_end=-1) == "line 0\nline 1\nline 2\nline 3"

    def test_trailing_newline_counts_as_line(self):
        """'a\\nb\\n' has three segments, -1 drops the empty one"""
        assert lines_extract("a\nb\n", line_end=-1) == "a\nb"

    def test_negative_begin_clamped(self):
        assert lines_extract(FIVE_LINES, -3, 1) == "line 0"

    def test_end_clamped_to_length(self):
        assert lines_extract(FIVE_LINES, 4, 100) == "line 4"

    @pytest.mark.parametrize("begin,end", [(3, 3), (4, 2), (10, None), (0, -5), (0, -9), (2, 0)])
    def test_empty_range(self, begin, end):
        assert lines_extract(FIVE_LINES, begin, end) == ""

    def test_empty_content(self):
        assert lines_extract("") == ""

    @pytest.mark.parametrize("k", [0, 1, 2, 3, 4, 5])
    def test_negative_end_equals_positive_complement(self, k):
        n = len(FIVE_LINES.split("\n"))
        assert lines_extract(FIVE_LINES, 1, -k if k else None) == lines_extract(FIVE_LINES, 1, n - k)

    def test_reapplying_resolved_bounds_is_stable(self):
        start, end = 1, 4
        once = lines_extract(FIVE_LINES, start, end)
        assert lines_extract(once, 0, end - start) == once


class TestFileExtension:
    """Test extension detection"""

    @pytest.mark.parametrize("path,expected", [
        ("Makefile", ""),
        ("a.tar.gz", "gz"),
        ("path/to/file.py", "py"),
        ("Main.JAVA", "java"),
        ("trailing.", ""),
        ("v1.2/README", ""),
        (".bashrc", "bashrc"),
        ("", ""),
    ])
    def test_extension(self, path, expected):
        assert fileExtension_get(path) == expected


class TestLanguageMapping:
    """Test extension to language tag mapping"""

    def test_empty_is_text(self):
        assert extension_toLanguage("") == "text"

    def test_identity_entries(self):
        assert extension_toLanguage("go") == "go"

    def test_unknown_passes_through(self):
        assert extension_toLanguage("xyz") == "xyz"

    @pytest.mark.parametrize("ext,language", [
        ("py", "python"),
        ("ts", "typescript"),
        ("yml", "yaml"),
        ("sh", "bash"),
        ("ps1", "powershell"),
        ("tf", "hcl"),
        ("h", "c"),
        ("hpp", "cpp"),
    ])
    def test_known(self, ext, language):
        assert extension_toLanguage(ext) == language

    def test_table_keys_are_lowercase(self):
        assert all(key == key.lower() for key in LANGUAGE_MAP)
