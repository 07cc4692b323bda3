"""
Directory-backed vault: path normalisation and plain file reads

A vault is a directory whose contents are addressed by '/' separated paths
relative to its root. Reads go through asyncio.to_thread so a render pass
can suspend on I/O without blocking other passes.
"""

import asyncio
import re
import unicodedata
from pathlib import Path
from typing import Optional, Union

from .log import LOG


class VaultReadError(OSError):
    """Raised when an existing vault file cannot be read or decoded"""


class VaultPathNormalizer:
    """
    Canonical vault path form.

    Backslashes become '/', runs of '/' collapse, leading and trailing
    slashes are stripped, non-breaking spaces become spaces and the result
    is Unicode NFC. The vault root itself is '/'.

    Example:
        >>> VaultPathNormalizer().normalize("//notes\\\\src//main.go/")
        'notes/src/main.go'
    """

    _slashes = re.compile(r'/+')

    def normalize(self, path: str) -> str:
        path = path.replace('\\', '/').replace('\u00a0', ' ').replace('\u202f', ' ')
        path = self._slashes.sub('/', path).strip('/')
        path = unicodedata.normalize('NFC', path)
        return path or '/'


class FileSystemVault:
    """
    Read-only plain file access under a root directory.

    Paths that do not exist, are not regular files, or point outside the
    root resolve to None. Anything else that stops a read raises
    VaultReadError.
    """

    def __init__(self, root: Union[str, Path], encoding: str = 'utf-8'):
        """
        Args:
            root: Vault root directory
            encoding: Text encoding of vault files
        """
        self.root = Path(root).resolve()
        self.encoding = encoding

    def path_locate(self, path: str) -> Optional[Path]:
        """Filesystem path for a vault path, None if it escapes the root"""
        candidate = (self.root / path.lstrip('/')).resolve()
        try:
            candidate.relative_to(self.root)
        except ValueError:
            return None
        return candidate

    def plainFile_readSync(self, path: str) -> Optional[str]:
        """Blocking read; see plainFile_read"""
        target = self.path_locate(path)
        if target is None or not target.is_file():
            LOG(f"Vault has no plain file at '{path}'", level=3)
            return None

        try:
            return target.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise VaultReadError(f"'{path}' is not valid {self.encoding} text: {e.reason}") from e
        except OSError as e:
            raise VaultReadError(f"cannot read '{path}': {e.strerror or e}") from e

    async def plainFile_read(self, path: str) -> Optional[str]:
        """
        Read a vault file as text.

        Returns:
            File content, or None when there is no plain file at ``path``

        Raises:
            VaultReadError: The file exists but could not be read
        """
        return await asyncio.to_thread(self.plainFile_readSync, path)
