"""
HTML rendering for imported code and import errors

PygmentsBlockRenderer highlights extracted file content. The block
builders wrap rendered code (or an error report) in the container markup
that replaces a directive in the document:

    <div class="code-import-container">
      <div class="code-import-block">
        <div class="code-import-header">
          <span class="code-import-filename">src/main.go</span>
          <span class="code-import-line-info">L5-L14</span>
        </div>
        ...highlighted code...
      </div>
    </div>
"""

import html
from typing import Optional

from pygments import highlight
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.lexer import Lexer
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from ..models.directives import ImportDirective, RenderOptions
from .lexer import CodeImportLexer
from .log import LOG


WRAP_STYLE = "white-space: pre-wrap; overflow-wrap: anywhere;"
SCROLL_STYLE = "white-space: pre; overflow-x: auto;"


def lexer_get(language: str) -> Lexer:
    """
    Pygments lexer for a language tag, plain text when unknown.

    Leading and trailing blank lines of the excerpt are kept, so the block
    shows exactly the lines its range label names.
    """
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        LOG(f"No lexer for '{language}', using plain text", level=3)
        return TextLexer(stripnl=False)


class PygmentsBlockRenderer:
    """
    Block renderer backed by Pygments

    Produces a self-contained ``<div class="highlight"><pre>`` block with
    inline styles, so rendered documents need no extra stylesheet.
    """

    def __init__(self, style: str = "default"):
        """
        Args:
            style: Pygments style name (e.g. "default", "monokai")
        """
        self.style = style

    def render(self, language: str, text: str, options: RenderOptions) -> str:
        """
        Highlight ``text`` as ``language``.

        Args:
            language: Highlighter language tag (see extension_toLanguage)
            text: Code to highlight
            options: wrap_code selects soft wrapping over horizontal scroll

        Returns:
            HTML for the highlighted block
        """
        formatter = HtmlFormatter(
            style=self.style,
            noclasses=True,
            prestyles=WRAP_STYLE if options.wrap_code else SCROLL_STYLE,
        )
        return highlight(text, lexer_get(language), formatter)


def header_build(directive: ImportDirective) -> str:
    """File name header, with the line range label when bounds were given"""
    parts = [
        '<div class="code-import-header">',
        f'<span class="code-import-filename">{html.escape(directive.file_path)}</span>',
    ]
    if directive.range_has():
        parts.append(f'<span class="code-import-line-info">{directive.rangeLabel_make()}</span>')
    parts.append('</div>')
    return ''.join(parts)


def codeBlock_build(directive: ImportDirective, code_html: str, options: RenderOptions) -> str:
    """
    Wrap renderer output in the import container.

    Args:
        directive: Directive being replaced
        code_html: Output of BlockRenderer.render
        options: show_file_name controls the header, wrap_code adds the
                 code-import-wrap class

    Returns:
        Container HTML
    """
    block_class = "code-import-block"
    if options.wrap_code:
        block_class += " code-import-wrap"

    header = header_build(directive) if options.show_file_name else ''
    return (
        '<div class="code-import-container">'
        f'<div class="{block_class}">{header}{code_html}</div>'
        '</div>'
    )


def directiveSource_highlight(raw: str) -> str:
    """Inline-highlighted directive source, for error reports"""
    formatter = HtmlFormatter(nowrap=True, noclasses=True)
    return highlight(raw, CodeImportLexer(stripnl=False, ensurenl=False), formatter).rstrip("\n")


def errorBlock_build(message: str, directive: ImportDirective, title: Optional[str] = None) -> str:
    """
    Inline error report standing in for a directive that could not render.

    Args:
        message: What went wrong (e.g. "File not found: src/main.go")
        directive: Directive whose raw source is shown
        title: Header text, "Import error" by default

    Returns:
        Container HTML
    """
    return (
        '<div class="code-import-container">'
        '<div class="code-import-error">'
        f'<div class="code-import-error-header">{html.escape(title or "Import error")}</div>'
        f'<div class="code-import-error-details">{html.escape(message)}</div>'
        f'<div class="code-import-error-source"><code>{directiveSource_highlight(directive.raw)}</code></div>'
        '</div>'
        '</div>'
    )
