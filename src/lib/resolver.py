"""
Directive resolver and text splicer

Walks the text leaves of a rendered document region, replaces each
@import directive with a rendered code block (or an inline error block)
and leaves all surrounding text exactly as it was.

Processing order is strict: leaves one at a time in document order, and
within a leaf each directive is fetched and rendered before the next one
starts. Offsets always refer to the original leaf text; the leaf is only
replaced once its whole segment stream is built.

Example:
    resolver = DirectiveResolver(
        reader=FileSystemVault("vault/"),
        renderer=PygmentsBlockRenderer(),
        normalizer=VaultPathNormalizer(),
        options=RenderOptions(show_file_name=True, wrap_code=False),
    )
    document = HtmlDocument(html_text)
    report = await resolver.region_process(document, "notes/index.md")
    html_out = document.render()
"""

from typing import List, Sequence

from ..models.directives import ImportDirective, ParseResult, RenderOptions
from ..models.segments import BlockKind, BlockSegment, ResolveReport, Segment, TextSegment
from .extractor import extension_toLanguage, fileExtension_get, lines_extract
from .interfaces import BlockRenderer, DocumentTree, FileReader, PathNormalizer
from .log import LOG, LOG_warning
from .parser import Parser
from .paths import path_resolve
from .renderer import codeBlock_build, errorBlock_build


class DirectiveResolver:
    """
    Resolves @import directives against a vault and splices the results
    into a document.

    Holds only its collaborators and options; all per-pass state is local,
    so one resolver can serve concurrent passes over different documents.
    """

    def __init__(
        self,
        reader: FileReader,
        renderer: BlockRenderer,
        normalizer: PathNormalizer,
        options: RenderOptions,
    ) -> None:
        """
        Args:
            reader: Plain file access (content, None for missing, raises on I/O failure)
            renderer: Highlights (language, text) into HTML
            normalizer: Canonicalises resolved vault paths
            options: Presentation options for every block of the pass
        """
        self.reader = reader
        self.renderer = renderer
        self.normalizer = normalizer
        self.options = options

    def errorSegment_make(self, message: str, directive: ImportDirective) -> BlockSegment:
        """ERROR block reporting ``message`` for ``directive``"""
        LOG_warning(f"{message} ({directive.raw})")
        return BlockSegment(
            kind=BlockKind.ERROR,
            html=errorBlock_build(message, directive),
            directive=directive,
            message=message,
        )

    async def directive_resolve(self, directive: ImportDirective, source_path: str) -> BlockSegment:
        """
        Fetch and render one directive.

        Args:
            directive: Parsed directive
            source_path: Vault path of the document containing it

        Returns:
            CODE block on success, ERROR block when the file is missing,
            the read fails or the renderer fails. Never raises for those.
        """
        resolved = path_resolve(directive.file_path, source_path, self.normalizer)
        LOG(f"Resolved '{directive.file_path}' -> '{resolved}'", level=3)

        try:
            content = await self.reader.plainFile_read(resolved)
        except Exception as e:
            return self.errorSegment_make(f"Error reading file: {e}", directive)

        if content is None:
            LOG(f"'{directive.file_path}' resolved to '{resolved}'", level=2)
            return self.errorSegment_make(f"File not found: {directive.file_path}", directive)

        extracted = lines_extract(content, directive.line_begin, directive.line_end)
        language = extension_toLanguage(fileExtension_get(directive.file_path))
        try:
            code_html = self.renderer.render(language, extracted, self.options)
        except Exception as e:
            return self.errorSegment_make(f"Error rendering file: {e}", directive)
        LOG(f"Rendered '{resolved}' as {language} ({len(extracted)} chars)", level=2)

        return BlockSegment(
            kind=BlockKind.CODE,
            html=codeBlock_build(directive, code_html, self.options),
            directive=directive,
        )

    async def text_splice(self, text: str, results: Sequence[ParseResult], source_path: str) -> List[Segment]:
        """
        Build the replacement stream for one text leaf.

        Args:
            text: Original leaf text (the text ``results`` were parsed from)
            results: Parse results in ascending start_index order
            source_path: Vault path of the document

        Returns:
            Alternating literal text and block segments in document order.
            Empty literal runs (directive at the very start, end, or two
            adjacent directives) produce no TextSegment.
        """
        segments: List[Segment] = []
        cursor = 0

        for result in results:
            if result.start_index > cursor:
                segments.append(TextSegment(text[cursor:result.start_index]))

            segments.append(await self.directive_resolve(result.directive, source_path))
            cursor = result.end_index

        if cursor < len(text):
            segments.append(TextSegment(text[cursor:]))

        return segments

    async def region_process(self, tree: DocumentTree, source_path: str) -> ResolveReport:
        """
        Replace every directive in a document region.

        Args:
            tree: Document region (see DocumentTree)
            source_path: Vault path of the document being rendered

        Returns:
            Counters for the pass
        """
        report = ResolveReport()
        leaves = tree.textLeaves_find()
        LOG(f"{len(leaves)} candidate text leaves in '{source_path}'", level=2)

        for leaf in leaves:
            report.leaves_scanned += 1
            text = tree.leaf_text(leaf)
            results = Parser(text).parse()
            if not results:
                continue

            LOG(f"{len(results)} directives in leaf", level=3)
            segments = await self.text_splice(text, results, source_path)

            if not tree.leaf_replace(leaf, segments):
                LOG("Skipping detached text leaf", level=2)
                continue

            report.leaves_replaced += 1
            for segment in segments:
                if not isinstance(segment, BlockSegment):
                    continue
                if segment.kind is BlockKind.CODE:
                    report.blocks += 1
                else:
                    report.errors += 1
                    report.failures.append(segment.message or segment.directive.raw)

        return report
