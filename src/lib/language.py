"""
Code fence language detection

Asks Pygments which lexer handles a source file and uses that lexer's
primary alias as the language tag of the Markdown code fences, so Hugo's
highlighter picks the right syntax for .go, .rs, .c, ... sources alike.
"""

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .log import LOG


def fenceLanguage_guess(filename: str, default: str = "go") -> str:
    """
    Guess the code fence language for a source file name.

    Args:
        filename: Source file name (only the name/extension is inspected)
        default: Language returned when Pygments knows no lexer

    Returns:
        Primary Pygments alias (e.g. 'go', 'python', 'rust') or default

    Example:
        >>> fenceLanguage_guess("gotohugo.go")
        'go'
        >>> fenceLanguage_guess("notes.unknownext")
        'go'
    """
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        LOG(f"No lexer for {filename}, using '{default}' code fences", level=2)
        return default

    if not lexer.aliases:
        return default
    return lexer.aliases[0]
