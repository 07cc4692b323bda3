"""
End-to-end rendering tests

Tests the full path: HTML document on disk → HtmlDocument → DirectiveResolver
(FileSystemVault + PygmentsBlockRenderer) → rendered HTML, and the CLI
pipeline stages over a temporary vault.
"""

import asyncio
from argparse import Namespace
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from codeimport.lib.document import HtmlDocument
from codeimport.lib.renderer import PygmentsBlockRenderer
from codeimport.lib.resolver import DirectiveResolver
from codeimport.lib.vault import FileSystemVault, VaultPathNormalizer, VaultReadError
from codeimport.models import ProgramState, RenderOptions, pipeline


MAIN_GO = """package main

import "fmt"

func main() {
\tfmt.Println("hello")
}
"""


@pytest.fixture
def vault(tmp_path):
    """Vault with a document and some source files"""
    root = tmp_path / "vault"
    (root / "notes").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "src" / "main.go").write_text(MAIN_GO, encoding="utf-8")
    (root / "notes" / "util.py").write_text("def add(a, b):\n    return a + b\n", encoding="utf-8")
    (root / "notes" / "index.html").write_text(
        "<h1>Notes</h1>\n"
        '<p>Entry point: @import "../src/main.go" {line_begin=4 line_end=-2}</p>\n'
        '<p>Helper @import "util.py" and @import "missing.txt" done.</p>\n'
        '<pre><code>@import "util.py"</code></pre>\n',
        encoding="utf-8",
    )
    return root


def resolver_make(root, **options):
    return DirectiveResolver(
        reader=FileSystemVault(root),
        renderer=PygmentsBlockRenderer(),
        normalizer=VaultPathNormalizer(),
        options=RenderOptions(**options),
    )


class TestFileSystemVault:
    """Test plain file reads"""

    def test_reads_file(self, vault):
        content = asyncio.run(FileSystemVault(vault).plainFile_read("src/main.go"))
        assert content == MAIN_GO

    def test_missing_is_none(self, vault):
        assert asyncio.run(FileSystemVault(vault).plainFile_read("src/nope.go")) is None

    def test_directory_is_none(self, vault):
        assert asyncio.run(FileSystemVault(vault).plainFile_read("src")) is None

    def test_outside_root_is_none(self, vault):
        (vault.parent / "secret.txt").write_text("x", encoding="utf-8")
        assert asyncio.run(FileSystemVault(vault).plainFile_read("../secret.txt")) is None

    def test_undecodable_raises(self, vault):
        (vault / "blob.bin").write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(VaultReadError, match="blob.bin"):
            asyncio.run(FileSystemVault(vault).plainFile_read("blob.bin"))


class TestDocumentRendering:
    """Test rendering a real document"""

    def test_directives_replaced(self, vault):
        document = HtmlDocument((vault / "notes" / "index.html").read_text(encoding="utf-8"))
        report = asyncio.run(resolver_make(vault).region_process(document, "notes/index.html"))

        assert report.blocks == 2
        assert report.errors == 1
        assert report.failures == ["File not found: missing.txt"]

        soup = BeautifulSoup(document.render(), "html.parser")
        blocks = soup.select(".code-import-block")
        assert len(blocks) == 2

        go_block = blocks[0]
        assert go_block.select_one(".code-import-filename").get_text() == "../src/main.go"
        assert go_block.select_one(".code-import-line-info").get_text() == "L5-L-2"
        code = go_block.select_one("pre").get_text()
        assert 'func main() {' in code
        assert 'fmt.Println("hello")' in code
        assert "package main" not in code

        error = soup.select_one(".code-import-error")
        assert "File not found: missing.txt" in error.get_text()
        assert '@import "missing.txt"' in error.get_text()

    def test_surrounding_text_preserved(self, vault):
        document = HtmlDocument((vault / "notes" / "index.html").read_text(encoding="utf-8"))
        asyncio.run(resolver_make(vault).region_process(document, "notes/index.html"))

        paragraphs = BeautifulSoup(document.render(), "html.parser").find_all("p")
        direct_text = ["".join(paragraph.find_all(string=True, recursive=False)) for paragraph in paragraphs]

        assert direct_text[0] == "Entry point: "
        assert direct_text[1] == "Helper  and  done."

    def test_code_blocks_untouched(self, vault):
        document = HtmlDocument((vault / "notes" / "index.html").read_text(encoding="utf-8"))
        asyncio.run(resolver_make(vault).region_process(document, "notes/index.html"))

        assert '<pre><code>@import "util.py"</code></pre>' in document.render()

    def test_second_pass_is_noop(self, vault):
        document = HtmlDocument((vault / "notes" / "index.html").read_text(encoding="utf-8"))
        resolver = resolver_make(vault)
        asyncio.run(resolver.region_process(document, "notes/index.html"))
        first = document.render()

        report = asyncio.run(resolver.region_process(document, "notes/index.html"))

        assert report.leaves_replaced == 0
        assert document.render() == first

    def test_wrap_style(self, vault):
        document = HtmlDocument('<p>@import "/notes/util.py"</p>')
        asyncio.run(resolver_make(vault, wrap_code=True).region_process(document, "index.html"))

        assert "pre-wrap" in document.render()


class TestPipeline:
    """Test the CLI pipeline stages"""

    def test_full_pipeline(self, vault, tmp_path):
        from codeimport.__main__ import env_check, documents_find, documents_render, results_report

        outputdir = tmp_path / "out"
        options = Namespace(pattern="**/*.html", noFileName=True, wrapCode=False, style=None, verbosity=0)
        state = ProgramState.state_createFromNamespace(options, inputdir=vault, outputdir=outputdir)

        final = pipeline(state, env_check, documents_find, documents_render, results_report)

        assert final.envOK is True
        assert final.documents == [Path("notes/index.html")]
        assert final.renderReport.blocks == 2
        assert final.renderReport.errors == 1

        rendered = (outputdir / "notes" / "index.html").read_text(encoding="utf-8")
        assert "code-import-block" in rendered
        assert "code-import-header" not in rendered

    def test_missing_inputdir_exits(self, tmp_path):
        from codeimport.__main__ import env_check

        state = ProgramState(inputdir=tmp_path / "nope", outputdir=tmp_path / "out", verbosity=0)
        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1

    def test_unknown_style_exits(self, vault, tmp_path):
        from codeimport.__main__ import env_check

        state = ProgramState(inputdir=vault, outputdir=tmp_path / "out", verbosity=0, style="nosuchstyle")
        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1
        assert not (tmp_path / "out").exists()

    def test_default_style_resolved(self, vault, tmp_path):
        from codeimport.__main__ import env_check
        from codeimport.config import appsettings

        state = ProgramState(inputdir=vault, outputdir=tmp_path / "out", verbosity=0)
        checked = env_check(state)

        assert checked.envOK is True
        assert checked.style == appsettings.pygments_style
