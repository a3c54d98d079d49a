"""
Converter for commented source files to Hugo Markdown

Turns a source file whose comments contain Markdown into a Markdown
document, in a single forward pass without lookahead:

- Everything before the front matter is dropped.
- Front matter is copied, then the document wrapper and the summary open.
- <!--more--> ends the summary; the announcement shortcode and the intro
  follow. The first */ ends the intro.
- Runs of // comments followed by code become comment/code pairs, laid
  out side by side by the Hugo theme.
- /* ... */ comments after code become single-column documentation.
- Image paths are expanded to the post's media directory, HYPE tags are
  replaced by the exported animation snippet.

Regions are wrapped in Hugo shortcodes:

    {{< div NAME >}}
    ...
    {{< divend >}} <!--NAME-->

Every opened region is closed again, also when the input ends in the
middle of a region.

Example:
    >>> md = convert(source, "mypost", public_media_dir="media")
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..models.markers import (
    ConversionState,
    REFERENCE_STATES,
    ANNOUNCEMENT,
    MARKER_WRAPPER,
    MARKER_SUMMARY,
    MARKER_INTRO,
    MARKER_SOURCE,
    MARKER_CCPAIR,
    MARKER_COMMENT,
    MARKER_CODE,
    MARKER_DOC,
)
from . import classifier
from .snippet import snippet_load
from .log import LOG, LOG_warn


NOSCRIPT_NOTICE = (
    '<noscript class="nohype"><em>Please enable JavaScript to view the animation.</em></noscript>\n'
)
FENCE_CLOSE = "```\n"


class AnimationReferenceError(Exception):
    """Raised when a HYPE tag carries no usable path"""
    pass


def shortcode_open(name: str) -> str:
    """Hugo shortcode that opens a named div"""
    return "{{< div " + name + " >}}\n"


def shortcode_close(name: str) -> str:
    """Hugo shortcode that closes a div; the name is kept as HTML comment"""
    return "{{< divend >}} <!--" + name + "-->\n"


class Converter:
    """
    Line-by-line state machine converting one annotated source document

    Responsibilities:
    - Classify each line and switch between ConversionStates
    - Strip comment delimiters and fence code
    - Expand image paths and resolve HYPE animation tags
    - Emit balanced region shortcodes
    """

    def __init__(
        self,
        basename: str,
        media_dir: Union[str, Path] = ".",
        public_media_dir: str = "",
        language: str = "go",
    ) -> None:
        """
        Initialize converter

        Args:
            basename: Document base name; media live in <media_dir>/<basename>/
                      and are published under /<public_media_dir>/<basename>/
            media_dir: Directory (on disk) holding one media subdirectory per post
            public_media_dir: Media directory as the web server sees it
            language: Language tag for opening code fences
        """
        self.basename = basename
        self.media_dir = Path(media_dir)
        self.public_media_dir = public_media_dir
        self.language = language

        self.handlers: Dict[ConversionState, Callable[[str], None]] = {
            ConversionState.BEFORE_METADATA: self.beforeMetadata_handle,
            ConversionState.METADATA: self.metadata_handle,
            ConversionState.SUMMARY: self.summary_handle,
            ConversionState.INTRO: self.intro_handle,
            ConversionState.NEUTRAL: self.neutral_handle,
            ConversionState.COMMENT: self.comment_handle,
            ConversionState.CODE: self.code_handle,
            ConversionState.PROSE: self.prose_handle,
        }
        self.state_reset()

    def state_reset(self) -> None:
        """Reset per-document state before a conversion"""
        self.state = ConversionState.BEFORE_METADATA
        self.output: List[str] = []
        self.markers: List[str] = []
        self.errors: List[str] = []

    def convert(self, source: str) -> str:
        """
        Convert an annotated source document to Markdown

        Never fails on malformed documents: the transition table decides
        where every line goes. Problems with HYPE tags are written into
        the output and collected in self.errors.

        Args:
            source: Complete document text (any line ending convention)

        Returns:
            Markdown text with balanced region shortcodes
        """
        self.state_reset()

        lines = source.replace('\r', '').split('\n')
        LOG(f"Converting {len(lines)} lines of '{self.basename}'", level=2)

        for line in lines:
            self.line_process(line)

        self.document_finish()
        LOG(f"Conversion of '{self.basename}' ended in state {self.state.name}", level=3)
        return ''.join(self.output)

    def line_process(self, line: str) -> None:
        """
        Rewrite references in the line, then hand it to the current
        state's handler.
        """
        if self.state in REFERENCE_STATES:
            line = classifier.imagePaths_extend(line, self.basename, self.public_media_dir)
            if self.animation_replace(line):
                return

        self.handlers[self.state](line)

    def emit(self, text: str) -> None:
        self.output.append(text)

    def line_emit(self, line: str) -> None:
        self.output.append(line + "\n")

    def marker_open(self, name: str) -> None:
        """Emit an opening shortcode and remember it"""
        self.markers.append(name)
        self.emit(shortcode_open(name))

    def marker_close(self, name: str) -> None:
        """
        Emit the closing shortcode for the innermost open region.

        Raises:
            RuntimeError: If name is not the innermost open region
        """
        if not self.markers or self.markers[-1] != name:
            raise RuntimeError(
                f"Cannot close '{name}', open regions are {self.markers}"
            )
        self.markers.pop()
        self.emit(shortcode_close(name))

    def animation_replace(self, line: str) -> bool:
        """
        Replace a line holding a HYPE tag by the animation snippet.

        Returns:
            True if the line was replaced and needs no further processing
        """
        if classifier.preformatted_is(line):
            return False

        try:
            snippet = self.animationSnippet_get(line)
        except AnimationReferenceError as e:
            message = f"Failed generating Hype tag from line {line}: {e}"
            LOG_warn(message)
            self.errors.append(message)
            self.line_emit(message)
            return False

        if snippet is None:
            return False
        self.emit(snippet)
        return True

    def animationSnippet_get(self, line: str) -> Optional[str]:
        """
        Load the snippet for the HYPE tag in a line.

        Returns:
            The snippet followed by the noscript notice, or None if the
            line has no HYPE tag

        Raises:
            AnimationReferenceError: If the tag has an empty path
        """
        reference = classifier.animationReference_find(line)
        if reference is None:
            return None
        if not reference.path:
            raise AnimationReferenceError(f"Found Hype tag but no valid path: {reference.match}")

        path = self.media_dir / self.basename / reference.path
        LOG(f"Embedding Hype animation {path}", level=2)
        return snippet_load(path, self.basename, self.public_media_dir) + NOSCRIPT_NOTICE

    # State handlers

    def beforeMetadata_handle(self, line: str) -> None:
        # Anything before the front matter is not part of the post
        if classifier.metadataDelimiter_is(line):
            self.line_emit(line)
            self.state = ConversionState.METADATA

    def metadata_handle(self, line: str) -> None:
        self.line_emit(line)
        if classifier.metadataDelimiter_is(line):
            self.marker_open(MARKER_WRAPPER)
            self.marker_open(MARKER_SUMMARY)
            self.state = ConversionState.SUMMARY

    def summary_handle(self, line: str) -> None:
        if classifier.summaryDivider_is(line):
            self.marker_close(MARKER_SUMMARY)
            self.emit("\n" + line + "\n\n")
            self.line_emit(ANNOUNCEMENT)
            self.marker_open(MARKER_INTRO)
            self.state = ConversionState.INTRO
            return
        self.line_emit(line)

    def intro_handle(self, line: str) -> None:
        # The intro ends where the first multiline comment ends
        if classifier.blockCommentEnd_is(line):
            self.marker_close(MARKER_INTRO)
            self.state = ConversionState.NEUTRAL
            return
        self.line_emit(line)

    def neutral_handle(self, line: str) -> None:
        if classifier.lineComment_is(line):
            self.comment_enter(line)
            return
        self.line_emit(line)

    def comment_handle(self, line: str) -> None:
        if classifier.lineComment_is(line):
            self.line_emit(classifier.lineComment_strip(line))
            return
        self.marker_close(MARKER_COMMENT)
        self.marker_open(MARKER_CODE)
        self.emit("\n```" + self.language + "\n")
        self.line_emit(line)
        self.state = ConversionState.CODE

    def code_handle(self, line: str) -> None:
        if classifier.lineComment_is(line):
            self.comment_enter(line)
            return

        # A multiline comment switches to single-column layout
        if classifier.blockCommentStart_is(line):
            self.codePair_close()
            self.marker_close(MARKER_SOURCE)
            self.marker_open(MARKER_DOC)
            self.line_emit(classifier.blockCommentStart_strip(line))
            self.state = ConversionState.PROSE
            return
        self.line_emit(line)

    def prose_handle(self, line: str) -> None:
        if classifier.blockCommentEnd_is(line):
            self.marker_close(MARKER_DOC)
            self.state = ConversionState.NEUTRAL
            return
        self.line_emit(line)

    def comment_enter(self, line: str) -> None:
        """Start a comment run after code or outside any region"""
        if self.state == ConversionState.CODE:
            self.codePair_close()
        elif self.state == ConversionState.NEUTRAL:
            self.marker_open(MARKER_SOURCE)
        self.marker_open(MARKER_CCPAIR)
        self.marker_open(MARKER_COMMENT)
        self.line_emit(classifier.lineComment_strip(line))
        self.state = ConversionState.COMMENT

    def codePair_close(self) -> None:
        """Close the code fence and the current comment/code pair"""
        self.emit(FENCE_CLOSE + "\n")
        self.marker_close(MARKER_CODE)
        self.marker_close(MARKER_CCPAIR)

    def document_finish(self) -> None:
        """
        Close whatever is still open at the end of the input.

        A document ending in code gets its closing fence; afterwards all
        open regions are closed innermost first, the wrapper last. The
        wrapper close is always the final line, also for a document whose
        front matter never ended and so never opened the wrapper.
        """
        if self.state == ConversionState.CODE:
            self.emit("\n" + FENCE_CLOSE)

        while self.markers:
            self.marker_close(self.markers[-1])

        if self.state in (ConversionState.BEFORE_METADATA, ConversionState.METADATA):
            self.emit(shortcode_close(MARKER_WRAPPER))


def convert(
    source: str,
    basename: str,
    media_dir: Union[str, Path] = ".",
    public_media_dir: str = "",
    language: str = "go",
) -> str:
    """
    Convert an annotated source document to Hugo Markdown

    Convenience wrapper creating a fresh Converter for each call, so
    separate documents never share state.

    Args:
        source: Complete document text
        basename: Document base name used for media paths
        media_dir: Directory (on disk) holding one media subdirectory per post
        public_media_dir: Media directory as the web server sees it
        language: Language tag for opening code fences

    Returns:
        Markdown text. HYPE tags without a usable path are reported in the
        text only; callers that need the error list use a Converter and
        read Converter.errors after converting.
    """
    converter = Converter(
        basename,
        media_dir=media_dir,
        public_media_dir=public_media_dir,
        language=language,
    )
    return converter.convert(source)
