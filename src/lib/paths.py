"""
Vault path resolution for import directives
"""

from typing import List

from .interfaces import PathNormalizer


def sourceDir_get(source_path: str) -> str:
    """Directory part of a vault path, '' for files at the vault root"""
    slash = source_path.rfind('/')
    return source_path[:slash] if slash != -1 else ''


def segments_normalize(path: str) -> str:
    """
    Collapse '.', '..' and empty segments of a '/' separated path.

    A '..' with nothing left to pop is dropped, so a path can never climb
    above the vault root.

    Example:
        >>> segments_normalize("notes/./a//../src/main.go")
        'notes/src/main.go'
        >>> segments_normalize("../../main.go")
        'main.go'
    """
    stack: List[str] = []
    for part in path.split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            if stack:
                stack.pop()
            continue
        stack.append(part)
    return '/'.join(stack)


def path_resolve(file_path: str, source_path: str, normalizer: PathNormalizer) -> str:
    """
    Resolve a directive's file path against the document being rendered.

    A leading '/' makes the path relative to the vault root. Anything else
    is relative to the directory containing ``source_path``.

    Args:
        file_path: Path as written in the directive
        source_path: Vault path of the document containing the directive
        normalizer: Host path canonicalisation

    Example:
        >>> path_resolve("../src/main.go", "notes/go/index.md", normalizer)
        'notes/src/main.go'
        >>> path_resolve("/src/main.go", "notes/go/index.md", normalizer)
        'src/main.go'
    """
    if file_path.startswith('/'):
        return normalizer.normalize(file_path[1:])

    source_dir = sourceDir_get(source_path)
    combined = f"{source_dir}/{file_path}" if source_dir else file_path
    return normalizer.normalize(segments_normalize(combined))
