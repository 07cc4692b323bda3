"""
Collaborator protocols

The resolver only talks to its host through these narrow interfaces, so it
can be exercised with in-memory fakes. Concrete implementations live in
vault.py, renderer.py and document.py.
"""

from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from ..models.directives import RenderOptions
from ..models.segments import Segment


@runtime_checkable
class PathNormalizer(Protocol):
    """Canonicalises vault paths (separators, redundant slashes)"""

    def normalize(self, path: str) -> str:
        ...


@runtime_checkable
class FileReader(Protocol):
    """
    Read-only access to plain files in the vault.

    plainFile_read returns the file text, None when the path does not exist
    or is not a plain file, and raises on I/O failure.
    """

    async def plainFile_read(self, path: str) -> Optional[str]:
        ...


@runtime_checkable
class BlockRenderer(Protocol):
    """Turns (language, text) into displayable HTML"""

    def render(self, language: str, text: str, options: RenderOptions) -> str:
        ...


@runtime_checkable
class DocumentTree(Protocol):
    """
    Text-bearing leaves of a rendered document region.

    textLeaves_find returns leaves outside verbatim containers whose text
    contains the import token, in document order. leaf_replace substitutes
    a leaf with a segment stream and returns False when the leaf has no
    attachment point.
    """

    def textLeaves_find(self) -> List[Any]:
        ...

    def leaf_text(self, leaf: Any) -> str:
        ...

    def leaf_replace(self, leaf: Any, segments: Sequence[Segment]) -> bool:
        ...
