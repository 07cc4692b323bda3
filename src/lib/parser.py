"""
Parser for @import directives

Scans text for directive occurrences and returns them with their source
offsets:

    @import "path/to/file"
    @import "path/to/file" {line_begin=4 line_end=14}

The path is any non-empty run of characters other than a double quote.
The optional options block is free text; only ``line_begin`` and
``line_end`` with an integer value are recognised, in any order. Unknown
keys and unparseable values are ignored. Text that does not match the
grammar is simply not reported, the parser never raises.

Example:
    >>> results = Parser('See @import "main.go" {line_end=-1} here').parse()
    >>> results[0].directive.file_path
    'main.go'
    >>> results[0].directive.line_end
    -1
    >>> results[0].start_index, results[0].end_index
    (4, 35)
"""

import re
from typing import Dict, List, Optional

from ..models.directives import ImportDirective, ParseResult


# (1) file path, (2) options block interior (optional)
IMPORT_PATTERN = re.compile(r'@import\s+"([^"]+)"(?:\s+\{([^}]*)\})?')

OPTION_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    'line_begin': re.compile(r'(?<![\w-])line_begin\s*=\s*(-?\d+)'),
    'line_end': re.compile(r'(?<![\w-])line_end\s*=\s*(-?\d+)'),
}


def options_parse(options: Optional[str]) -> Dict[str, Optional[int]]:
    """
    Extract the recognised line bounds from an options block interior.

    Args:
        options: Text between the braces, or None when there is no block

    Returns:
        Dict with ``line_begin`` and ``line_end`` keys, each an int or None

    Example:
        >>> options_parse("line_end=14 color=red line_begin=4")
        {'line_begin': 4, 'line_end': 14}
        >>> options_parse("line_begin=abc")
        {'line_begin': None, 'line_end': None}
    """
    bounds: Dict[str, Optional[int]] = {key: None for key in OPTION_PATTERNS}
    if not options:
        return bounds

    for key, pattern in OPTION_PATTERNS.items():
        match = pattern.search(options)
        if match:
            bounds[key] = int(match.group(1))
    return bounds


class Parser:
    """
    Parser for @import directive syntax

    Stateless apart from the text it was given; every call to parse()
    rescans from the beginning.
    """

    def __init__(self, text: str):
        """
        Args:
            text: Raw text to scan (a document text leaf)
        """
        self.text = text

    def parse(self) -> List[ParseResult]:
        """
        Find every directive occurrence in the text.

        Returns:
            ParseResults in ascending start_index order. Spans never
            overlap and ``text[start_index:end_index]`` is the directive's
            raw text. Empty list when nothing matches.
        """
        results: List[ParseResult] = []

        for match in IMPORT_PATTERN.finditer(self.text):
            bounds = options_parse(match.group(2))
            directive = ImportDirective(
                file_path=match.group(1),
                line_begin=bounds['line_begin'],
                line_end=bounds['line_end'],
                raw=match.group(0),
            )
            results.append(ParseResult(
                directive=directive,
                start_index=match.start(),
                end_index=match.end(),
            ))

        return results


def importDirectives_parse(text: str) -> List[ParseResult]:
    """Convenience wrapper: ``Parser(text).parse()``"""
    return Parser(text).parse()
