"""
Snippet loader for Tumult Hype animation exports

Hype's "Export as HTML5 > Also save .html file" writes an HTML page that
contains the embed snippet between two marker comments:

    <!-- copy these lines to your document: -->
    <div id="demo_hype_container" ...>
        <script type="text/javascript" charset="utf-8" src="demo.hyperesources/demo_hype_generated_script.js?123"></script>
    </div>
    <!-- end copy -->

snippet_load() extracts those lines and points the script's src attribute
at the post's public media directory.
"""

from pathlib import Path
from typing import List, Union

from .classifier import mediaPrefix_make, resourceAttribute_rewrite
from .log import LOG, LOG_warn


SNIPPET_START = "<!-- copy these lines to your document: -->"
SNIPPET_END = "<!-- end copy -->"


def missingSnippet_message(path: Union[str, Path], reason: str) -> str:
    """Warning text that replaces a snippet which cannot be read"""
    return (
        f"**No Hype file found at {path}.** "
        f"Please run hugodown again after creating the Hype animation HTML export. "
        f"({reason})\n"
    )


def snippetLines_extract(html: str) -> List[str]:
    """
    Return the lines strictly between the first start marker and the
    next end marker.

    An end marker seen before any start marker is ignored, as export
    files may contain several unrelated marked regions. A missing end
    marker keeps everything up to the end of the file.
    """
    lines: List[str] = []
    in_snippet = False

    for line in html.replace('\r', '').split('\n'):
        if SNIPPET_START in line:
            in_snippet = True
            continue
        if SNIPPET_END in line:
            if in_snippet:
                break
            continue
        if in_snippet:
            lines.append(line)

    return lines


def snippet_load(path: Union[str, Path], basename: str, public_media_dir: str = "") -> str:
    """
    Read a Hype HTML export and return the embeddable snippet.

    Never raises for I/O problems: an unreadable file yields a warning
    text instead, so that the problem shows up on the rendered page, and
    the warning is logged for the developer.

    Args:
        path: Location of the exported Hype HTML file
        basename: Document base name, used for the src prefix
        public_media_dir: Media directory as the web server sees it

    Returns:
        Snippet lines with rewritten src attributes and leading tabs
        removed, each newline-terminated, followed by one blank line
    """
    try:
        html = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        message = missingSnippet_message(path, reason)
        LOG_warn(message.strip())
        return message

    prefix = mediaPrefix_make(basename, public_media_dir)
    lines = snippetLines_extract(html)
    LOG(f"Extracted {len(lines)} snippet lines from {path}", level=3)

    out = ''.join(resourceAttribute_rewrite(line, prefix).lstrip('\t') + '\n' for line in lines)
    return out + '\n'
