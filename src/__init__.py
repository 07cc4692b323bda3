"""
codeimport - Inline code imports for rendered documents

Replaces @import "path" {line_begin=N line_end=M} directives in rendered
HTML with syntax-highlighted excerpts of the referenced vault files.
"""

__version__ = "1.0.0"

from .lib import (
    Parser,
    DirectiveResolver,
    HtmlDocument,
    FileSystemVault,
    PygmentsBlockRenderer,
    VaultPathNormalizer,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Parser",
    "DirectiveResolver",
    "HtmlDocument",
    "FileSystemVault",
    "PygmentsBlockRenderer",
    "VaultPathNormalizer",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
