#!/usr/bin/env python3
"""
codeimport - Inline code imports for rendered documents

Renders every HTML document under an input directory, replacing
@import directives with highlighted excerpts of files from the same
directory tree, and writes the results to an output directory.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directive syntax:
    @import "relative/to/document.go"
    @import "/relative/to/inputdir.py" {line_begin=4 line_end=-1}

    line_begin is 0-based inclusive, line_end 0-based exclusive; a negative
    line_end counts back from the end of the file.

Usage:
    codeimport inputdir/ outputdir/ [--pattern '**/*.html']

    inputdir is the vault root: absolute directive paths start there and
    relative ones start at the directory of the document being rendered.

Examples:
    # Render all HTML documents
    codeimport site/ rendered/

    # Only the notes, soft-wrapped, no file name headers
    codeimport site/ rendered/ --pattern 'notes/**/*.html' --wrapCode --noFileName

    # Verbose output
    codeimport site/ rendered/ -vv
"""

import sys
import asyncio
from pathlib import Path
from typing import List, Tuple
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from . import __version__
from .config import appsettings
from .lib import (
    DirectiveResolver,
    FileSystemVault,
    HtmlDocument,
    PygmentsBlockRenderer,
    VaultPathNormalizer,
    LOG,
    state_connectToLogger,
)
from .models import ProgramState, ResolveReport, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="codeimport - splice @import'ed source files into rendered documents",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default=appsettings.document_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting the documents to render",
)

parser.add_argument(
    "--noFileName",
    action="store_true",
    default=False,
    help="Do not show the file name above imported code blocks",
)

parser.add_argument(
    "--wrapCode",
    action="store_true",
    default=False,
    help="Wrap long lines instead of horizontal scrolling",
)

parser.add_argument(
    "--style",
    default=None,
    type=str,
    help="Pygments style for highlighting (defaults to CODEIMPORT_PYGMENTS_STYLE)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the vault directory and highlight style, then create the
    output directory.

    Returns:
        ProgramState with envOK set and style resolved

    Exits:
        1 if inputdir is not a directory or the style is unknown
    """
    state = inputstate.copy()
    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.style = state.style or appsettings.pygments_style
    try:
        get_style_by_name(state.style)
    except ClassNotFound:
        print(f"Error: Unknown Pygments style: {state.style}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Highlight style: {state.style}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Vault root: {state.inputdir}", level=2)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def documents_find(inputstate: ProgramState) -> ProgramState:
    """
    Collect the documents selected by --pattern.

    Returns:
        ProgramState with documents (paths relative to inputdir, sorted)
    """
    state = inputstate.copy()

    state.documents = sorted(
        path.relative_to(state.inputdir)
        for path in state.inputdir.glob(state.pattern)
        if path.is_file()
    )
    LOG(f"Found {len(state.documents)} documents matching '{state.pattern}'", level=1)
    return state


def resolver_make(state: ProgramState) -> DirectiveResolver:
    """Resolver wired to the vault at inputdir with settings + CLI overrides"""
    options = appsettings.renderOptions_make(
        show_file_name=appsettings.show_file_name and not state.noFileName,
        wrap_code=appsettings.wrap_code or state.wrapCode,
    )
    return DirectiveResolver(
        reader=FileSystemVault(state.inputdir),
        renderer=PygmentsBlockRenderer(style=state.style or appsettings.pygments_style),
        normalizer=VaultPathNormalizer(),
        options=options,
    )


async def document_render(
    resolver: DirectiveResolver, source: Path, target: Path, source_path: str
) -> ResolveReport:
    """Render one document from ``source`` into ``target``"""
    markup = await asyncio.to_thread(source.read_text, encoding="utf-8")
    document = HtmlDocument(
        markup,
        verbatim_tags=appsettings.verbatim_tags,
        import_token=appsettings.import_token,
    )
    report = await resolver.region_process(document, source_path)

    await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread(target.write_text, document.render(), encoding="utf-8")
    LOG(f"{source_path}: {report.blocks} blocks, {report.errors} errors", level=1)
    return report


async def documents_renderAll(state: ProgramState) -> Tuple[ResolveReport, List[Path]]:
    """Render all documents; each document is an independent pass"""
    resolver = resolver_make(state)
    targets = [state.outputdir / relative for relative in state.documents]

    reports = await asyncio.gather(*(
        document_render(resolver, state.inputdir / relative, target, relative.as_posix())
        for relative, target in zip(state.documents, targets)
    ))

    total = ResolveReport()
    for report in reports:
        total.merge(report)
    return total, targets


def documents_render(inputstate: ProgramState) -> ProgramState:
    """
    Resolve directives in every document and write the results.

    Returns:
        ProgramState with renderReport and documentsWritten

    Exits:
        1 if a document cannot be read or written
    """
    state = inputstate.copy()
    LOG("Rendering documents...", level=1)

    try:
        state.renderReport, state.documentsWritten = asyncio.run(documents_renderAll(state))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error rendering documents: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarise the render pass.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderReport is None
    """
    state: ProgramState = inputstate.copy()
    if state.renderReport is None:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    report = state.renderReport
    LOG(f"\n✓ Rendered {len(state.documentsWritten)} documents", level=1)
    LOG(f"  Code blocks: {report.blocks}", level=1)
    LOG(f"  Import errors: {report.errors}", level=1)
    for failure in report.failures:
        LOG(f"    {failure}", level=2)
    return state


@chris_plugin(
    parser=parser,
    title="codeimport - inline code imports for rendered documents",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render documents under inputdir into outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate the vault and output directories
        2. documents_find: Select documents with --pattern
        3. documents_render: Resolve directives and write documents
        4. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, documents_find, documents_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
