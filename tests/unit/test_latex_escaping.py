"""Unit tests for LaTeX escaping."""

import re

import pytest

from texresume.utils.latex_escaping import escape_latex, escape_lines

SPECIAL_CHARACTERS = set("\\~^#%&_{}$")


def _remove_escapes(latex: str) -> str:
    """Drop every escape sequence escape_latex can produce."""
    latex = re.sub(r"\\text(?:backslash|asciitilde|asciicircum) ?", "", latex)
    return re.sub(r"\\[#%&_{}$]", "", latex)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_empty_and_whitespace_escape_to_empty(text):
    assert escape_latex(text) == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("100%", r"100\%"),
        ("a_b", r"a\_b"),
        ("C++", "C++"),
        ("R&D", r"R\&D"),
        ("#1", r"\#1"),
        ("$5", r"\$5"),
        ("{x}", r"\{x\}"),
        ("x^2", r"x\textasciicircum 2"),
        ("~user", r"\textasciitilde user"),
        ("a\\b", r"a\textbackslash b"),
    ],
)
def test_escape_examples(text, expected):
    assert escape_latex(text) == expected


@pytest.mark.unit
def test_surrounding_whitespace_is_trimmed():
    assert escape_latex("  Acme & Co \n") == r"Acme \& Co"


@pytest.mark.unit
def test_trailing_glyph_command_is_trimmed():
    """The space ending a glyph command is whitespace and goes when trailing."""
    assert escape_latex("home~") == r"home\textasciitilde"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "a\\b~c^d#e%f&g_h{i}j$k",
        "\\\\",
        "\\{",
        "}{",
        "~~^^",
        "\\textbackslash",
        "$$ math $$",
        "plain text",
    ],
)
def test_no_unescaped_special_characters(text):
    escaped = escape_latex(text)
    leftover = SPECIAL_CHARACTERS & set(_remove_escapes(escaped))
    assert not leftover, f"Unescaped {leftover} in {escaped!r}"


@pytest.mark.unit
def test_inserted_escapes_are_not_escaped_again():
    """Backslashes added for one character are never re-escaped."""
    assert escape_latex("\\%") == r"\textbackslash \%"
    assert escape_latex("^{}") == r"\textasciicircum \{\}"


@pytest.mark.unit
def test_escaping_is_not_idempotent():
    once = escape_latex("50%")
    assert escape_latex(once) != once


@pytest.mark.unit
def test_escape_lines_preserves_order():
    assert escape_lines(["first 1%", " second_2 ", ""]) == [r"first 1\%", r"second\_2", ""]
