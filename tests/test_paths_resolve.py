"""
Path resolution tests

Tests relative, absolute and '..' resolution against the document path, and
vault path normalisation.
"""

import pytest

from codeimport.lib.paths import path_resolve, segments_normalize, sourceDir_get
from codeimport.lib.vault import VaultPathNormalizer


@pytest.fixture
def normalizer():
    return VaultPathNormalizer()


class TestPathResolve:
    """Test directive path resolution"""

    def test_relative_to_document_directory(self, normalizer):
        assert path_resolve("main.go", "notes/go/index.md", normalizer) == "notes/go/main.go"

    def test_parent_traversal(self, normalizer):
        assert path_resolve("../src/main.go", "notes/go/index.md", normalizer) == "notes/src/main.go"

    def test_absolute_is_vault_root_relative(self, normalizer):
        assert path_resolve("/src/main.go", "notes/go/index.md", normalizer) == "src/main.go"

    def test_document_at_vault_root(self, normalizer):
        assert path_resolve("src/main.go", "index.md", normalizer) == "src/main.go"

    def test_excess_parent_segments_absorbed(self, normalizer):
        assert path_resolve("../../../main.go", "notes/index.md", normalizer) == "main.go"

    def test_dot_and_empty_segments_dropped(self, normalizer):
        assert path_resolve("./src//lib/./a.py", "notes/index.md", normalizer) == "notes/src/lib/a.py"

    def test_backslashes_normalized(self, normalizer):
        assert path_resolve("/src\\main.go", "index.md", normalizer) == "src/main.go"


class TestHelpers:
    """Test the segment helpers"""

    def test_source_dir(self):
        assert sourceDir_get("a/b/c.md") == "a/b"
        assert sourceDir_get("c.md") == ""

    def test_segments_normalize(self):
        assert segments_normalize("a/b/../c/./d") == "a/c/d"
        assert segments_normalize("..") == ""


class TestVaultPathNormalizer:
    """Test vault path canonicalisation"""

    def test_collapses_and_strips_slashes(self, normalizer):
        assert normalizer.normalize("//notes//src/main.go/") == "notes/src/main.go"

    def test_root(self, normalizer):
        assert normalizer.normalize("") == "/"

    def test_non_breaking_space(self, normalizer):
        assert normalizer.normalize("my\u00a0notes/a.py") == "my notes/a.py"

    def test_nfc(self, normalizer):
        assert normalizer.normalize("cafe\u0301.py") == "caf\u00e9.py"
