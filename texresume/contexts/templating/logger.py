"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_resume_loaded(source: Path, resume) -> None:
    """Log a summary of the parsed résumé."""
    _log_info(f"Loaded {source}")
    _log_debug(
        f"  Entries: {len(resume.education)} education, {len(resume.experience)} experience, "
        f"{len(resume.projects)} projects, {len(resume.skills)} skills"
    )


def log_document_generated(num_chars: int, num_lines: int) -> None:
    """Log the size of the generated LaTeX document."""
    _log_debug(f"Generated LaTeX: {num_lines} lines, {num_chars} characters")
