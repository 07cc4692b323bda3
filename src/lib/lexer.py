"""
Custom Pygments lexer for @import directive source

Used to display the offending directive inside error blocks.

Token types:
- Keyword.Namespace: the @import token
- String.Double: the quoted file path
- Punctuation: option block braces
- Name.Attribute: option keys (line_begin, line_end, unknown keys)
- Operator: '='
- Number.Integer: integer option values
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Whitespace,
    Punctuation,
    Name,
    String,
    Keyword,
    Number,
    Operator,
)


class CodeImportLexer(RegexLexer):
    """
    Lexer for @import directives

    Example:
        @import "src/main.go" {line_begin=4 line_end=-1}

    Tokens:
        @import → Keyword.Namespace
        "src/main.go" → String.Double
        { → Punctuation
        line_begin → Name.Attribute
        = → Operator
        4 → Number.Integer
    """

    name = 'CodeImport'
    aliases = ['codeimport']
    filenames = []

    tokens = {
        'root': [
            (r'@import\b', Keyword.Namespace),
            (r'"[^"]*"', String.Double),
            (r'\{', Punctuation, 'options'),
            (r'\s+', Whitespace),
            (r'[^@"{\s]+', Text),
            (r'[@"]', Text),
        ],
        'options': [
            (r'\}', Punctuation, '#pop'),
            (r'\s+', Whitespace),
            (r'([\w-]+)(\s*)(=)(\s*)(-?\d+)\b',
             bygroups(Name.Attribute, Whitespace, Operator, Whitespace, Number.Integer)),
            (r'([\w-]+)(\s*)(=)',
             bygroups(Name.Attribute, Whitespace, Operator)),
            (r'[^}\s]+', Text),
        ],
    }
