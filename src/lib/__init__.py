"""
hugodown - Commented source to Hugo Markdown converter

Converts source files whose comments carry Markdown into Hugo posts with
side-by-side comment/code layout.
"""

__version__ = "1.0.0"

from .converter import Converter, AnimationReferenceError, convert
from .snippet import snippet_load
from .language import fenceLanguage_guess
from .log import LOG, LOG_warn, state_connectToLogger

__all__ = [
    "Converter",
    "AnimationReferenceError",
    "convert",
    "snippet_load",
    "fenceLanguage_guess",
    "LOG",
    "LOG_warn",
    "state_connectToLogger",
    "__version__",
]
