"""
LaTeX Compilation Module

Compiles LaTeX source text to PDF bytes with an external engine (tectonic by
default, or xelatex/lualatex/pdflatex). The engine runs in a throwaway
directory; callers only ever see text in and bytes out.
"""

import os
import re
import subprocess
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from texresume.contexts.rendering.logger import log_compilation_result, log_compilation_start
from texresume.exceptions import CompilationError
from texresume.utils.pdf_processing import page_count

load_dotenv()

LATEX_COMPILER = os.getenv("LATEX_COMPILER", "tectonic")

# Name of the source file inside the compilation directory
JOB_NAME = "resume"


@dataclass
class CompilationResult:
    """
    Result of LaTeX compilation.

    Attributes:
        success: Whether compilation succeeded
        pdf_bytes: Generated PDF (None if failed)
        stdout: Standard output from the engine
        stderr: Standard error from the engine
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
        page_count: Number of pages in generated PDF (None if not available)
    """

    success: bool
    pdf_bytes: Optional[bytes] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    page_count: Optional[int] = None


def _parse_latex_log(log_content: str) -> Tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = []
    warnings = []

    # LaTeX error pattern: "! Error message"
    error_pattern = re.compile(r"^! (.+)$", re.MULTILINE)
    for match in error_pattern.finditer(log_content):
        errors.append(match.group(1).strip())

    # Error patterns that don't start with "!"
    additional_error_patterns = [
        r"Undefined control sequence",
        r"File ended while scanning use of",
        r"Emergency stop",
    ]
    for pattern in additional_error_patterns:
        match = re.search(rf"({pattern}.*?)$", log_content, re.MULTILINE)
        if match and match.group(1) not in errors and not any(
            match.group(1) in err for err in errors
        ):
            errors.append(match.group(1))

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]
    for pattern in warning_patterns:
        compiled = re.compile(pattern, re.MULTILINE)
        for match in compiled.finditer(log_content):
            warnings.append(match.group(1).strip())

    return errors, warnings


def _parse_engine_errors(stderr: str) -> List[str]:
    """Extract "error: ..." lines printed by tectonic."""
    return [
        match.group(1).strip()
        for match in re.finditer(r"^error: (.+)$", stderr, re.MULTILINE)
    ]


def build_command(compiler: str, tex_name: str) -> List[str]:
    """
    Build the engine command line for compiling tex_name in the current directory.

    tectonic keeps its .log only when asked to; the TeX engines get
    nonstop mode so that a broken document fails instead of prompting.
    """
    if Path(compiler).name == "tectonic":
        return [compiler, "--keep-logs", "--chatter", "minimal", tex_name]

    return [
        compiler,
        "-interaction=nonstopmode",
        "-halt-on-error",
        "-file-line-error",
        tex_name,
    ]


def compile_latex(tex: str, compiler: str = None) -> CompilationResult:
    """
    Compile LaTeX source to PDF.

    Pure compilation function: nothing outside a temporary directory is read
    or written.

    Args:
        tex: Complete LaTeX document
        compiler: Engine executable (default: LATEX_COMPILER env, "tectonic")

    Returns:
        CompilationResult with success status and diagnostic information
    """
    compiler = compiler or LATEX_COMPILER

    with tempfile.TemporaryDirectory(prefix="texresume_") as tmp:
        compile_dir = Path(tmp)
        tex_file = compile_dir / f"{JOB_NAME}.tex"
        tex_file.write_text(tex, encoding="utf-8")

        cmd = build_command(compiler, tex_file.name)

        try:
            result = subprocess.run(
                cmd,
                cwd=compile_dir,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
            )
        except FileNotFoundError:
            return CompilationResult(
                success=False,
                errors=[f"LaTeX compiler not found: {compiler} (set LATEX_COMPILER)"],
            )
        except OSError as e:
            return CompilationResult(
                success=False,
                errors=[f"Cannot run LaTeX compiler {compiler}: {e}"],
            )

        errors = []
        warnings = []
        log_file = compile_dir / f"{JOB_NAME}.log"
        if log_file.exists():
            # TeX writes log files in latin-1 (font metadata contains non-UTF-8)
            errors, warnings = _parse_latex_log(log_file.read_text(encoding="latin-1"))

        for err in _parse_engine_errors(result.stderr):
            if err not in errors:
                errors.append(err)

        pdf_file = compile_dir / f"{JOB_NAME}.pdf"
        pdf_bytes = pdf_file.read_bytes() if pdf_file.exists() else None

    success = result.returncode == 0 and pdf_bytes is not None
    if pdf_bytes is None and not errors:
        errors.append("PDF file was not generated")
    elif result.returncode != 0 and not errors:
        errors.append(f"{compiler} exited with status {result.returncode}")

    return CompilationResult(
        success=success,
        pdf_bytes=pdf_bytes if success else None,
        stdout=result.stdout,
        stderr=result.stderr,
        errors=errors,
        warnings=warnings,
        page_count=page_count(pdf_bytes) if success else None,
    )


def compile_to_pdf(tex: str, compiler: str = None, verbose: bool = False) -> bytes:
    """
    Compile LaTeX source and return the PDF bytes.

    This is the compiler capability used by build sessions: a function from
    LaTeX text to PDF bytes that raises on failure.

    Args:
        tex: Complete LaTeX document
        compiler: Engine executable (default: LATEX_COMPILER env, "tectonic")
        verbose: Log all warnings and the engine output

    Returns:
        PDF file content

    Raises:
        CompilationError: If the engine fails or produces no PDF
    """
    compiler = compiler or LATEX_COMPILER
    log_compilation_start(compiler)

    start_time = time.time()
    result = compile_latex(tex, compiler=compiler)
    log_compilation_result(result, time.time() - start_time, verbose=verbose)

    if not result.success:
        raise CompilationError(f"{compiler} failed to compile the résumé", errors=result.errors)

    return result.pdf_bytes
