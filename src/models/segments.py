"""
Replacement stream models

A text leaf containing directives is replaced by an ordered list of
segments: literal text copied from the leaf and rendered blocks standing
in for each directive.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .directives import ImportDirective


class BlockKind(Enum):
    """What a rendered block represents"""
    CODE = "code"      # successfully imported file content
    ERROR = "error"    # file not found or read failure


@dataclass(frozen=True)
class TextSegment:
    """Literal text copied verbatim from the original leaf"""
    text: str


@dataclass(frozen=True)
class BlockSegment:
    """
    Rendered block standing in for one directive

    Attributes:
        kind: BlockKind.CODE or BlockKind.ERROR
        html: Rendered HTML for the block container
        directive: The directive this block replaces
        message: Error message for ERROR blocks, None otherwise
    """
    kind: BlockKind
    html: str
    directive: ImportDirective
    message: Optional[str] = None


Segment = Union[TextSegment, BlockSegment]


@dataclass
class ResolveReport:
    """
    Counters for one render pass over a document region

    Attributes:
        leaves_scanned: Candidate text leaves inspected
        leaves_replaced: Leaves replaced by a segment stream
        blocks: Code blocks rendered
        errors: Error blocks rendered
        failures: Error messages, in document order
    """
    leaves_scanned: int = 0
    leaves_replaced: int = 0
    blocks: int = 0
    errors: int = 0
    failures: List[str] = field(default_factory=list)

    def merge(self, other: "ResolveReport") -> None:
        """Accumulate another report into this one"""
        self.leaves_scanned += other.leaves_scanned
        self.leaves_replaced += other.leaves_replaced
        self.blocks += other.blocks
        self.errors += other.errors
        self.failures.extend(other.failures)
