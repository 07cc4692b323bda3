"""
Models package for codeimport

Contains data structures and type definitions for directive resolution.
"""

from .state import ProgramState, pipeline
from .directives import ImportDirective, ParseResult, RenderOptions
from .segments import BlockKind, TextSegment, BlockSegment, Segment, ResolveReport

__all__ = [
    "ProgramState",
    "pipeline",
    "ImportDirective",
    "ParseResult",
    "RenderOptions",
    "BlockKind",
    "TextSegment",
    "BlockSegment",
    "Segment",
    "ResolveReport",
]
