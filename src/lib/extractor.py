"""
Content extraction for imported files

Line range selection plus the file extension to language tag mapping
handed to the syntax highlighter.
"""

from typing import Dict, Optional


# Extension -> highlighter language tag. Unknown extensions pass through.
LANGUAGE_MAP: Dict[str, str] = {
    # Common languages
    'js': 'javascript',
    'mjs': 'javascript',
    'cjs': 'javascript',
    'jsx': 'jsx',
    'ts': 'typescript',
    'tsx': 'tsx',
    'py': 'python',
    'pyi': 'python',
    'rb': 'ruby',
    'go': 'go',
    'rs': 'rust',
    'java': 'java',
    'kt': 'kotlin',
    'kts': 'kotlin',
    'scala': 'scala',
    'swift': 'swift',
    'cs': 'csharp',
    'fs': 'fsharp',
    'cpp': 'cpp',
    'cc': 'cpp',
    'cxx': 'cpp',
    'c': 'c',
    'h': 'c',
    'hpp': 'cpp',
    'm': 'objectivec',
    'dart': 'dart',
    'zig': 'zig',
    'nim': 'nim',
    'jl': 'julia',

    # Web
    'html': 'html',
    'htm': 'html',
    'css': 'css',
    'scss': 'scss',
    'sass': 'sass',
    'less': 'less',
    'vue': 'vue',
    'svelte': 'svelte',

    # Data / config
    'json': 'json',
    'yaml': 'yaml',
    'yml': 'yaml',
    'toml': 'toml',
    'xml': 'xml',
    'ini': 'ini',
    'cfg': 'ini',
    'csv': 'text',
    'proto': 'protobuf',

    # Shell scripting
    'sh': 'bash',
    'bash': 'bash',
    'zsh': 'bash',
    'fish': 'fish',
    'ps1': 'powershell',
    'bat': 'batch',
    'cmd': 'batch',

    # Other
    'sql': 'sql',
    'graphql': 'graphql',
    'gql': 'graphql',
    'md': 'markdown',
    'markdown': 'markdown',
    'rst': 'rst',
    'tex': 'latex',
    'dockerfile': 'dockerfile',
    'makefile': 'makefile',
    'mk': 'makefile',
    'cmake': 'cmake',
    'lua': 'lua',
    'r': 'r',
    'php': 'php',
    'pl': 'perl',
    'ex': 'elixir',
    'exs': 'elixir',
    'erl': 'erlang',
    'clj': 'clojure',
    'hs': 'haskell',
    'ml': 'ocaml',
    'vim': 'vim',
    'tf': 'hcl',
    'hcl': 'hcl',
    'nix': 'nix',
    'diff': 'diff',
    'patch': 'diff',
}


def lines_extract(content: str, line_begin: Optional[int] = None, line_end: Optional[int] = None) -> str:
    """
    Select a line range from file content.

    Lines are the segments of ``content.split('\\n')``, so a trailing
    newline counts as a final empty line.

    Args:
        content: Full file text
        line_begin: 0-based inclusive start (default 0, negatives clamp to 0)
        line_end: 0-based exclusive end (default: end of file). A negative
                  value counts from the end: -1 drops the last line, -4 the
                  last four.

    Returns:
        Selected lines joined with '\\n' (no trailing newline added), or
        '' when the range is empty.

    Example:
        >>> lines_extract("line 0\\nline 1\\nline 2\\nline 3\\nline 4", 0, -2)
        'line 0\\nline 1\\nline 2'
        >>> lines_extract("a\\nb\\nc", 2, 1)
        ''
    """
    lines = content.split('\n')
    total_lines = len(lines)

    start = max(0, line_begin) if line_begin is not None else 0

    if line_end is None:
        end = total_lines
    elif line_end < 0:
        end = total_lines + line_end
    else:
        end = line_end

    end = min(end, total_lines)
    start = max(start, 0)
    if start >= end:
        return ''

    return '\n'.join(lines[start:end])


def fileExtension_get(path: str) -> str:
    """
    Lower-cased extension of the final path segment.

    Example:
        >>> fileExtension_get("path/to/file.PY")
        'py'
        >>> fileExtension_get("a.tar.gz")
        'gz'
        >>> fileExtension_get("Makefile")
        ''
        >>> fileExtension_get("v1.2/README")
        ''
    """
    name = path.rsplit('/', 1)[-1]
    dot = name.rfind('.')
    if dot == -1 or dot == len(name) - 1:
        return ''
    return name[dot + 1:].lower()


def extension_toLanguage(ext: str) -> str:
    """
    Map a file extension to a highlighter language tag.

    Unknown extensions are returned unchanged so the highlighter can still
    try them; the empty extension maps to 'text'.
    """
    return LANGUAGE_MAP.get(ext) or ext or 'text'
