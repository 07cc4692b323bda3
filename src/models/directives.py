"""
Directive data models

Value objects produced by the directive parser and consumed by the
resolver. All of them are frozen: once a scan produces them they never
change.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ImportDirective:
    """
    A single @import directive as written in the document

    Attributes:
        file_path: Path exactly as written between the quotes (may be
                   relative, absolute or contain ``..`` segments)
        line_begin: 0-based inclusive first line, or None
        line_end: 0-based exclusive end line, or None. Negative values
                  count from the end of the file (-1 drops the last line)
        raw: The full matched source text, from ``@import`` through the
             closing brace (or closing quote when there are no options)

    Example:
        For source '@import "main.go" {line_begin=4 line_end=14}':
        ImportDirective(
            file_path="main.go",
            line_begin=4,
            line_end=14,
            raw='@import "main.go" {line_begin=4 line_end=14}'
        )
    """
    file_path: str
    line_begin: Optional[int] = None
    line_end: Optional[int] = None
    raw: str = ""

    def range_has(self) -> bool:
        """True if either line bound was given"""
        return self.line_begin is not None or self.line_end is not None

    def rangeLabel_make(self) -> str:
        """
        Human readable line range label for block headers.

        ``line_begin`` is shown 1-based. ``line_end`` is shown as written:
        a negative end is relative anyway, and a positive exclusive 0-based
        end equals the 1-based number of the last included line.

        Example:
            >>> ImportDirective("a.py", 4, 14).rangeLabel_make()
            'L5-L14'
            >>> ImportDirective("a.py", None, -2).rangeLabel_make()
            'L-2'
        """
        parts = []
        if self.line_begin is not None:
            parts.append(f"L{self.line_begin + 1}")
        if self.line_end is not None:
            parts.append(f"L{self.line_end}")
        return "-".join(parts)


@dataclass(frozen=True)
class ParseResult:
    """
    A directive occurrence located in scanned text

    Attributes:
        directive: The parsed directive
        start_index: Offset of the first character of the occurrence
        end_index: Offset one past the last character (half-open span)

    Invariant: ``text[start_index:end_index] == directive.raw``
    """
    directive: ImportDirective
    start_index: int
    end_index: int


@dataclass(frozen=True)
class RenderOptions:
    """
    Presentation options threaded into the resolver at call time

    Attributes:
        show_file_name: Attach a header with the file name to code blocks
        wrap_code: Soft-wrap long lines instead of scrolling horizontally
    """
    show_file_name: bool = True
    wrap_code: bool = False
