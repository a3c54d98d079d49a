"""
Conversion states and structural marker vocabulary

Defines the closed set of scanner states and the fixed marker names
emitted around document regions for the downstream Hugo renderer.
"""

from enum import Enum
from typing import Set


class ConversionState(Enum):
    """
    States of the line scanner

    Exactly one state is active while a document is converted. The scanner
    starts in BEFORE_METADATA; there is no terminal state.
    """
    BEFORE_METADATA = "before_metadata"  # discard everything up to the front matter
    METADATA = "metadata"                # +++ ... +++ or --- ... ---
    SUMMARY = "summary"                  # text up to <!--more-->
    INTRO = "intro"                      # text after <!--more--> up to */
    PROSE = "prose"                      # /* ... */ documentation block
    COMMENT = "comment"                  # run of // comment lines
    CODE = "code"                        # code following a comment run
    NEUTRAL = "neutral"                  # outside any region


# Document-wide wrapper, opened after the front matter
MARKER_WRAPPER = "gotohugo"

MARKER_SUMMARY = "summary doc"
MARKER_INTRO = "intro doc"
MARKER_SOURCE = "source"    # a sequence of comment/code pairs
MARKER_CCPAIR = "ccpair"    # one comment/code pair
MARKER_COMMENT = "comment"
MARKER_CODE = "code"
MARKER_DOC = "doc"          # single-column documentation

# Emitted once, right after the summary divider
ANNOUNCEMENT = "{{< announcement >}}"

MARKERS: Set[str] = {
    MARKER_WRAPPER,
    MARKER_SUMMARY,
    MARKER_INTRO,
    MARKER_SOURCE,
    MARKER_CCPAIR,
    MARKER_COMMENT,
    MARKER_CODE,
    MARKER_DOC,
}

# States in which image and animation references are resolved
REFERENCE_STATES: Set[ConversionState] = {
    ConversionState.PROSE,
    ConversionState.COMMENT,
    ConversionState.INTRO,
}
