"""
Rendered HTML document tree

Adapts a BeautifulSoup tree to the DocumentTree protocol: finds the text
leaves that may hold directives and swaps a leaf for its replacement
stream.
"""

from typing import Iterable, List, Sequence, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..models.segments import BlockSegment, Segment, TextSegment


# Text under these tags is never document prose
NON_TEXT_TAGS = frozenset({'script', 'style', 'textarea', 'template'})


class HtmlDocument:
    """
    Directive-bearing text leaves of an HTML region.

    Example:
        >>> doc = HtmlDocument('<p>See @import "a.py"</p><pre>@import "b.py"</pre>')
        >>> [doc.leaf_text(leaf) for leaf in doc.textLeaves_find()]
        ['See @import "a.py"']
    """

    def __init__(
        self,
        markup: Union[str, Tag],
        verbatim_tags: Iterable[str] = ('code', 'pre'),
        import_token: str = '@import',
    ):
        """
        Args:
            markup: HTML source, or an existing tag to operate on in place
            verbatim_tags: Containers rendered as code; their text is skipped
            import_token: Literal a leaf must contain to be a candidate
        """
        self.root: Tag = BeautifulSoup(markup, 'html.parser') if isinstance(markup, str) else markup
        self.excluded = frozenset(tag.lower() for tag in verbatim_tags) | NON_TEXT_TAGS
        self.import_token = import_token

    def leaf_isVerbatim(self, leaf: NavigableString) -> bool:
        """True if any ancestor of ``leaf`` is a verbatim or non-text container"""
        return any(parent.name in self.excluded for parent in leaf.parents if parent.name)

    def textLeaves_find(self) -> List[NavigableString]:
        """Candidate leaves in document order"""
        candidates = []
        for leaf in self.root.find_all(string=True):
            if isinstance(leaf, PreformattedString):
                continue
            if self.import_token not in leaf:
                continue
            if self.leaf_isVerbatim(leaf):
                continue
            candidates.append(leaf)
        return candidates

    def leaf_text(self, leaf: NavigableString) -> str:
        return str(leaf)

    def segment_toNodes(self, segment: Segment) -> list:
        """BeautifulSoup nodes for one stream segment"""
        if isinstance(segment, TextSegment):
            return [NavigableString(segment.text)]
        if isinstance(segment, BlockSegment):
            fragment = BeautifulSoup(segment.html, 'html.parser')
            return [node.extract() for node in list(fragment.contents)]
        raise TypeError(f"Unknown segment type: {type(segment).__name__}")

    def leaf_replace(self, leaf: NavigableString, segments: Sequence[Segment]) -> bool:
        """
        Replace ``leaf`` with the nodes of ``segments``, in order.

        Returns:
            False (and leaves the tree untouched) when the leaf is detached
        """
        if leaf.parent is None:
            return False

        nodes = []
        for segment in segments:
            nodes.extend(self.segment_toNodes(segment))

        if nodes:
            leaf.replace_with(*nodes)
        else:
            leaf.extract()
        return True

    def render(self) -> str:
        """Serialized HTML of the region"""
        return str(self.root)
