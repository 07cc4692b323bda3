"""
codeimport library

Directive parsing, line extraction, path resolution and splicing, plus the
vault, renderer and HTML document implementations used by the CLI.
"""

from .parser import Parser, importDirectives_parse
from .extractor import lines_extract, fileExtension_get, extension_toLanguage, LANGUAGE_MAP
from .paths import path_resolve
from .resolver import DirectiveResolver
from .vault import FileSystemVault, VaultPathNormalizer, VaultReadError
from .renderer import PygmentsBlockRenderer
from .document import HtmlDocument
from .log import LOG, state_connectToLogger

__all__ = [
    "Parser",
    "importDirectives_parse",
    "lines_extract",
    "fileExtension_get",
    "extension_toLanguage",
    "LANGUAGE_MAP",
    "path_resolve",
    "DirectiveResolver",
    "FileSystemVault",
    "VaultPathNormalizer",
    "VaultReadError",
    "PygmentsBlockRenderer",
    "HtmlDocument",
    "LOG",
    "state_connectToLogger",
]
