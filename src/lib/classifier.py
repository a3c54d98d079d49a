"""
Line classifier for annotated source files

Stateless predicates and extractors that test a single line of text
against the lexical conventions hugodown understands:

- // line comments and /* ... */ block comments
- +++ / --- front matter delimiters
- the <!--more--> summary divider
- preformatted text (backticks, 4-space or tab indentation)
- Markdown image tags:  ![alt](path "title")
- HYPE animation tags:  HYPE[alt](export.html)
- src="....hyperesources/" attributes inside exported animation HTML

All patterns are compiled once at import time. No function keeps state
between calls, so they are safe to call in any order and from any thread.

Example:
    >>> lineComment_is("  // a comment")
    True
    >>> lineComment_strip("// a comment")
    'a comment'
    >>> imagePaths_extend("![Logo](logo.png)", "intro", "media")
    '![Logo](/media/intro/logo.png)'
"""

import re
from typing import Optional

from ..models.references import ImageReference, AnimationReference


PREFORMATTED = re.compile(r'`|^ {4,}|^\t')
LINE_COMMENT = re.compile(r'^(?:\s*//\s?)+')
BLOCK_COMMENT_START = re.compile(r'^\s*/\*\s?')
BLOCK_COMMENT_END = re.compile(r'\s*\*/\s*$')
METADATA_DELIMITER = re.compile(r'^\s*(\+\+\+|---)\s*$')
IMAGE_TAG = re.compile(r'(?P<head>!\[[^\]]+\]\( *)(?P<path>[^"\)]*?)(?P<tail> *(?:"[^"]*" *)?\))')
ANIMATION_TAG = re.compile(r'HYPE\[[^\]]+\]\( *(?P<path>[^\)]+?) *\)')
RESOURCE_ATTRIBUTE = re.compile(r'(src=")(.*\.hyperesources/)')

SUMMARY_DIVIDER = "<!--more-->"


def lineComment_is(line: str) -> bool:
    """True if the line starts with // (after optional whitespace)"""
    return LINE_COMMENT.match(line) is not None


def lineComment_strip(line: str) -> str:
    """
    Remove the leading comment delimiter(s) and one following blank.

    Stacked delimiters ("// // text") are removed together, so stripping
    a stripped line changes nothing. Indentation beyond the first blank is
    kept, which preserves Markdown code blocks inside comments.

    Example:
        >>> lineComment_strip("//     indented")
        '    indented'
    """
    return LINE_COMMENT.sub('', line, count=1)


def blockCommentStart_is(line: str) -> bool:
    """Detect the start of a multiline comment"""
    return BLOCK_COMMENT_START.match(line) is not None


def blockCommentStart_strip(line: str) -> str:
    """Remove the /* delimiter and one following blank"""
    return BLOCK_COMMENT_START.sub('', line, count=1)


def blockCommentEnd_is(line: str) -> bool:
    """Detect the end of a multiline comment"""
    return BLOCK_COMMENT_END.search(line) is not None


def metadataDelimiter_is(line: str) -> bool:
    """
    Detect a front matter delimiter line (+++ for TOML, --- for YAML).

    Opening and closing delimiters look the same; the caller keeps track
    of which one it is looking at.
    """
    return METADATA_DELIMITER.match(line) is not None


def summaryDivider_is(line: str) -> bool:
    """Detect Hugo's summary divider"""
    return SUMMARY_DIVIDER in line


def preformatted_is(line: str) -> bool:
    """
    Detect text that is shown literally.

    Lines containing a backtick, or indented by four spaces or a tab, are
    treated as code so that tags quoted in the documentation are left
    alone.
    """
    return PREFORMATTED.search(line) is not None


def imageReference_find(line: str) -> Optional[ImageReference]:
    """
    Find the first Markdown image tag in a line.

    Returns:
        ImageReference with the full match, the path and the trailing text
        (title and closing parenthesis), or None if there is no image tag
    """
    match = IMAGE_TAG.search(line)
    if not match:
        return None
    return ImageReference(
        match=match.group(0),
        path=match.group('path'),
        tail=match.group('tail'),
    )


def animationReference_find(line: str) -> Optional[AnimationReference]:
    """
    Find a HYPE[description](export.html) tag in a line.

    The path may be blank (e.g. "HYPE[x](  )"); callers must treat that
    as an error.

    Returns:
        AnimationReference or None if the line contains no HYPE tag
    """
    match = ANIMATION_TAG.search(line)
    if not match:
        return None
    return AnimationReference(match=match.group(0), path=match.group('path').strip())


def mediaPrefix_make(basename: str, public_media_dir: str = "") -> str:
    """
    Build the public path prefix for a document's media files.

    Empty components are left out.

    Example:
        >>> mediaPrefix_make("intro", "media")
        '/media/intro/'
        >>> mediaPrefix_make("intro")
        '/intro/'
    """
    parts = [part.strip('/') for part in (public_media_dir, basename)]
    parts = [part for part in parts if part]
    if not parts:
        return '/'
    return '/' + '/'.join(parts) + '/'


def imagePaths_extend(line: str, basename: str, public_media_dir: str = "") -> str:
    """
    Prefix the path of every image tag in a line with the media prefix.

    Preformatted lines are returned unchanged. The optional image title
    is kept verbatim.

    Example:
        >>> imagePaths_extend('![A](an image.png "Title")', "post", "media")
        '![A](/media/post/an image.png "Title")'
    """
    if preformatted_is(line):
        return line
    prefix = mediaPrefix_make(basename, public_media_dir)
    return IMAGE_TAG.sub(
        lambda m: m.group('head') + prefix + m.group('path') + m.group('tail'),
        line,
    )


def resourceAttribute_rewrite(fragment: str, prefix: str) -> str:
    """
    Prefix the src="....hyperesources/" attribute of an HTML fragment.

    Example:
        >>> resourceAttribute_rewrite('<script src="demo.hyperesources/x.js">', '/media/p/')
        '<script src="/media/p/demo.hyperesources/x.js">'
    """
    return RESOURCE_ATTRIBUTE.sub(lambda m: m.group(1) + prefix + m.group(2), fragment)
