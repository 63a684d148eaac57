"""
LaTeX Escaping

Converts plain text into text that can be embedded verbatim in a LaTeX
document. Every control character is rendered as its literal glyph.

Self-contained module with no project dependencies.
"""

import re
from typing import Iterable, List

# Characters replaced by a text-mode glyph command. The trailing space ends the
# command name so the next letter is not absorbed into it.
GLYPH_REPLACEMENTS = {
    "\\": r"\textbackslash ",
    "~": r"\textasciitilde ",
    "^": r"\textasciicircum ",
}

# Characters that only need a control prefix
PREFIXED_CHARACTERS = "#%&_{}$"

SPECIAL_CHARACTERS = re.compile(r"[\\~^#%&_{}$]")


def _replace(match: re.Match) -> str:
    char = match.group(0)
    if char in GLYPH_REPLACEMENTS:
        return GLYPH_REPLACEMENTS[char]
    return "\\" + char


def escape_latex(text: str) -> str:
    """
    Escape LaTeX special characters in plain text.

    Conversions:
    - \\ → \\textbackslash (visible backslash)
    - ~ → \\textasciitilde
    - ^ → \\textasciicircum
    - # % & _ { } $ → prefixed with a backslash

    All substitutions happen in a single pass, so the backslashes inserted
    for one character are never escaped again. Leading and trailing
    whitespace is stripped from the result.

    Escaping is not idempotent: text that already contains LaTeX escapes
    (e.g. "\\%") is escaped a second time. Inputs must be plain text.

    Args:
        text: Plain text string

    Returns:
        LaTeX-safe string

    Example:
        >>> escape_latex("100%")
        '100\\\\%'
        >>> escape_latex("  R&D  ")
        'R\\\\&D'
    """
    if not text:
        return ""

    return SPECIAL_CHARACTERS.sub(_replace, text).strip()


def escape_lines(lines: Iterable[str]) -> List[str]:
    """Escape each line of a description list, preserving order."""
    return [escape_latex(line) for line in lines]
