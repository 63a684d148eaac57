"""
Rendering Context

Responsibilities:
- Compiles LaTeX to PDF bytes with an external engine
- Parses engine logs for errors and warnings

Owns: LaTeX compilation
Never: Modifies LaTeX content or writes output files
"""

from texresume.contexts.rendering.compiler import (
    CompilationResult,
    compile_latex,
    compile_to_pdf,
)

__all__ = ["CompilationResult", "compile_latex", "compile_to_pdf"]
