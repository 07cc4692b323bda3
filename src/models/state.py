"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field

from .segments import ResolveReport


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the render pipeline (state bus pattern).

    Each stage receives a copy of the state, adds its own fields and hands
    it to the next stage.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, noFileName,
          wrapCode, style
        - env_check: envOK
        - documents_find: documents
        - documents_render: renderReport, documentsWritten
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Vault root; documents and imported files live under it
        outputdir: Directory receiving the rendered documents
        verbosity: Logging verbosity level (1-3)
        pattern: Glob selecting documents relative to inputdir
        noFileName: Suppress the file name header on code blocks
        wrapCode: Soft-wrap long lines in code blocks
        style: Pygments style name used for highlighting
        envOK: Environment validation passed
        documents: Documents to render, relative to inputdir
        documentsWritten: Output paths written by documents_render
        renderReport: Accumulated resolver counters over all documents
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="**/*.html")
    noFileName: bool = field(default=False)
    wrapCode: bool = field(default=False)
    style: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    documents: List[Path] = field(default_factory=list)
    documentsWritten: List[Path] = field(default_factory=list)
    renderReport: Optional[ResolveReport] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are dropped.

        Args:
            options: Parsed CLI arguments
            inputdir: Vault root directory
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            documents_find,
            documents_render,
            results_report
        )

    This is equivalent to:
        results_report(documents_render(documents_find(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
