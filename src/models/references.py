"""
Classifier and converter data models

Type-safe structures returned by the line classifier and the converter.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class ImageReference:
    """
    Markdown image tag found in a line

    Returned by imageReference_find() for the first image tag on a line.

    Attributes:
        match: The complete matched tag text
        path: The path portion (may contain spaces, no surrounding blanks)
        tail: Everything after the path up to and including the closing
              parenthesis (optional title, blanks)

    Example:
        For '![Logo](my logo.png "Title")':
        ImageReference(
            match='![Logo](my logo.png "Title")',
            path='my logo.png',
            tail=' "Title")'
        )
    """
    match: str
    path: str
    tail: str


@dataclass
class AnimationReference:
    """
    HYPE animation tag found in a line

    Attributes:
        match: The complete matched tag text
        path: Path of the exported animation HTML, relative to the
              document's media directory

    Example:
        For 'HYPE[Demo](demo.html)':
        AnimationReference(match='HYPE[Demo](demo.html)', path='demo.html')
    """
    match: str
    path: str


@dataclass
class ConversionResult:
    """
    Outcome of converting one source file

    Attributes:
        source_file: The annotated source file that was read
        output_file: The Markdown file that was written
        basename: Document base name used for media paths
        errors: Per-document errors reported by the converter
                (output is still written when this is non-empty)
    """
    source_file: Path
    output_file: Path
    basename: str
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
