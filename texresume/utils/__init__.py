"""
Shared utilities for texresume.

Common functionality used across contexts:
- LaTeX escaping
- Text processing
- Logging setup
- Timestamps and PDF inspection
"""

from texresume.utils.latex_escaping import escape_latex, escape_lines
from texresume.utils.timestamp import now

__all__ = ["escape_latex", "escape_lines", "now"]
