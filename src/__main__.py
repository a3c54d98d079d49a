#!/usr/bin/env python3
"""
hugodown - Commented source to Hugo Markdown converter

Converts annotated source files into Hugo posts. Comments (which may
contain Markdown) become text, code becomes fenced code blocks, and Hugo
shortcodes are inserted around comment/code pairs for a side-by-side
layout.

As with its sibling tools, this codebase leverages the ChRIS "plugin"
concept/pattern as general purpose python app development framework.

Conventions for source files:
    - Front matter (+++ or ---) comes first; anything before it is dropped
    - Exactly one <!--more--> summary divider, inside the first /* */ comment
    - // comments must be followed by code (comment/code pairs)
    - /* */ comments after code are rendered as single-column documentation
    - Images and HYPE animation exports live in a subdirectory named after
      the post (mypost/mypost.go -> media in <media>/mypost/)

Usage:
    hugodown inputdir/ outputdir/ --inputFile mypost/mypost.go
    hugodown inputdir/ outputdir/ --recursive
    hugodown inputdir/ ignored/ --recursive --hugoDir ~/blog

Examples:
    # Convert one post into outputdir/mypost.md
    hugodown . out/ --inputFile mypost/mypost.go

    # Convert every <name>/<name>.go below the current directory into a
    # Hugo site (content/post/<name>.md, media from static/media/<name>/)
    HUGODIR=~/blog hugodown . out/ --recursive -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Converter, fenceLanguage_guess, __version__, LOG, LOG_warn, state_connectToLogger
from .models import ProgramState, ConversionResult, pipeline
from .config import appsettings


DISPLAY_TITLE = r"""
  _                         _
 | |__  _   _  __ _  ___   __| | _____      ___ __
 | '_ \| | | |/ _` |/ _ \ / _` |/ _ \ \ /\ / / '_ \
 | | | | |_| | (_| | (_) | (_| | (_) \ V  V /| | | |
 |_| |_|\__,_|\__, |\___/ \__,_|\___/ \_/\_/ |_| |_|
              |___/
  Commented source to Hugo Markdown
"""

# Define CLI arguments
parser = ArgumentParser(
    description="hugodown - convert commented source files to Hugo Markdown",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile",
    default="",
    type=str,
    help="Annotated source file to convert (relative to inputdir)",
)

parser.add_argument(
    "--recursive",
    default=False,
    action="store_true",
    help="Convert every <name>/<name><suffix> file directly below inputdir",
)

parser.add_argument(
    "--hugoDir",
    default="",
    type=str,
    help="Hugo root directory. Overrides outputdir and $HUGODIR",
)

parser.add_argument(
    "--language",
    default="",
    type=str,
    help="Language tag for code fences. Guessed from the file name if empty",
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
    Validate environment and resolve the output layout.

    Without a Hugo root, posts are written to outputdir and media are
    looked up in outputdir/<basename>/. With a Hugo root (--hugoDir or
    $HUGODIR), posts go to <hugo>/content/post/ and media are looked up
    in <hugo>/static/media/<basename>/ and published as /media/<basename>/.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - postOutputdir: Created directory for Markdown files
            - mediaInputdir: Directory holding per-post media directories
            - publicMediaDir: Media directory as the web server sees it
            - envOK: True if environment is valid

    Exits:
        1 if inputdir does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not Path(state.inputdir).is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    hugo_dir = state.hugoDir or appsettings.hugo_dir
    if hugo_dir:
        root = Path(hugo_dir).expanduser()
        state.postOutputdir = root / appsettings.post_subdir
        state.mediaInputdir = root / appsettings.media_subdir
        state.publicMediaDir = appsettings.public_media_dir
        LOG(f"Hugo root: {root}", level=2)
    else:
        state.postOutputdir = Path(state.outputdir or "out")
        state.mediaInputdir = state.postOutputdir
        state.publicMediaDir = ""

    state.postOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.postOutputdir}", level=2)
    LOG(f"Media directory: {state.mediaInputdir}", level=2)

    state.envOK = True
    return state


def sources_find(inputstate: ProgramState) -> ProgramState:
    """
    Collect the source files to convert.

    --inputFile names a single file relative to inputdir. --recursive adds
    every <name>/<name><suffix> found directly below inputdir; project
    directories without such a file are skipped.

    Args:
        inputstate: Program state after env_check

    Returns:
        ProgramState with added field:
            - sourceFiles: List of source file paths

    Exits:
        1 if an explicitly named input file does not exist
    """
    state = inputstate.copy()
    inputdir = Path(state.inputdir)
    sources = []

    if state.inputFile:
        input_file = inputdir / state.inputFile
        if not input_file.is_file():
            print(f"Error: Input file not found: {input_file}", file=sys.stderr)
            sys.exit(1)
        sources.append(input_file)

    if state.recursive:
        for entry in sorted(inputdir.iterdir()):
            if not entry.is_dir():
                continue
            candidate = appsettings.sourcePath_make(entry)
            if not candidate.is_file():
                LOG(f"Skipping {entry}: no {candidate.name}", level=3)
                continue
            if candidate not in sources:
                sources.append(candidate)

    LOG(f"Found {len(sources)} source file(s)", level=2)
    state.sourceFiles = sources
    return state


def markdown_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert every source file and write the Markdown output.

    The document base name is the source file name without extension; it
    names the output file and the media subdirectory.

    Args:
        inputstate: Program state with sourceFiles

    Returns:
        ProgramState with added field:
            - conversions: List[ConversionResult], one per source file

    Exits:
        1 if a source file cannot be read or an output file cannot be written
    """
    state = inputstate.copy()
    conversions = []

    for source_file in state.sourceFiles:
        basename = source_file.stem
        LOG(f"Converting {source_file}...", level=1)

        try:
            source = source_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading input file {source_file}: {e}", file=sys.stderr)
            sys.exit(1)

        language = (
            state.language
            or appsettings.fence_language
            or fenceLanguage_guess(source_file.name)
        )
        converter = Converter(
            basename,
            media_dir=state.mediaInputdir,
            public_media_dir=state.publicMediaDir,
            language=language,
        )
        markdown = converter.convert(source)

        output_file = state.postOutputdir / appsettings.outputName_make(basename)
        try:
            output_file.write_text(markdown, encoding="utf-8")
        except OSError as e:
            print(f"Error writing output file {output_file}: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Wrote {output_file}", level=2)

        conversions.append(
            ConversionResult(
                source_file=source_file,
                output_file=output_file,
                basename=basename,
                errors=list(converter.errors),
            )
        )

    state.conversions = conversions
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results.

    Args:
        inputstate: Program state with conversions populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if nothing was converted or any document reported errors
    """
    state: ProgramState = inputstate.copy()
    if not state.conversions:
        print("Error: Nothing to convert (use --inputFile or --recursive)", file=sys.stderr)
        sys.exit(1)

    for result in state.conversions:
        LOG(f"  {result.source_file} -> {result.output_file}", level=1)
        for error in result.errors:
            LOG_warn(f"{result.source_file}: {error}")

    failed = [result for result in state.conversions if not result.ok]
    if failed:
        print(f"Error: {len(failed)} document(s) converted with errors", file=sys.stderr)
        sys.exit(1)

    LOG(f"\n✓ Converted {len(state.conversions)} document(s)", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="hugodown - Commented source to Hugo Markdown",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert annotated source files to Hugo Markdown.

    Orchestrates the full pipeline:
        1. env_check: Validate paths and resolve the output layout
        2. sources_find: Collect source files to convert
        3. markdown_convert: Convert and write each file
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Single source file
            - recursive: bool - Convert all <name>/<name>.go files
            - hugoDir: str - Hugo root directory
            - language: str - Code fence language override
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing annotated source files
        outputdir: Directory where Markdown files are written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )
    if appsettings.debug_mode:
        state.verbosity = max(state.verbosity, 3)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_find, markdown_convert, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
