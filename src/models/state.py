"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field

from .references import ConversionResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the conversion progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, recursive,
          hugoDir, language
        - env_check: postOutputdir, mediaInputdir, publicMediaDir, envOK
        - sources_find: sourceFiles
        - markdown_convert: conversions
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing annotated source files
        outputdir: Base output directory (ignored in Hugo layout)
        verbosity: Logging verbosity level (1-3)
        inputFile: Single source file to convert (relative to inputdir)
        recursive: Convert every <name>/<name>.go below inputdir
        hugoDir: Hugo root directory; switches to the Hugo layout
        language: Code fence language override
        envOK: Environment validation passed
        postOutputdir: Directory the Markdown files are written to
        mediaInputdir: Directory holding one media subdirectory per post
        publicMediaDir: Media directory as the web server sees it
        sourceFiles: Resolved source files to convert
        conversions: Per-file conversion results
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    recursive: bool = field(default=False)
    hugoDir: str = field(default="")
    language: str = field(default="")

    # Pipeline state
    envOK: bool = field(default=False)
    postOutputdir: Path = field(default=Path("/"))
    mediaInputdir: Path = field(default=Path("/"))
    publicMediaDir: str = field(default="")
    sourceFiles: List[Path] = field(default_factory=list)
    conversions: List[ConversionResult] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the conversion pipeline.

        Args:
            options: Parsed CLI arguments (inputFile, hugoDir, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for conversion output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

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

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_find,
            markdown_convert,
            results_report
        )

    This is equivalent to:
        results_report(markdown_convert(sources_find(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
