"""
hugodown - Commented source to Hugo Markdown converter

Comments become Markdown text, code becomes fenced code blocks, and Hugo
shortcodes are inserted for a side-by-side comment/code layout.
"""

__version__ = "1.0.0"

from .lib import Converter, AnimationReferenceError, convert, snippet_load, LOG, state_connectToLogger

__all__ = [
    "Converter",
    "AnimationReferenceError",
    "convert",
    "snippet_load",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
