"""
Session context logger.

Provides logging interface for build sessions with automatic [session] prefix.
"""

from pathlib import Path
from typing import List

from loguru import logger

from texresume.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[session]"


def _log_info(message: str) -> None:
    """Log info message with [session] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [session] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [session] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [session] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [session] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(src: Path, emit_pdf: bool) -> None:
    _log_info(f"Building {src}" + ("" if emit_pdf else " (LaTeX only)"))


def log_output_written(path: Path, num_bytes: int) -> None:
    _log_info(f"Wrote {path} ({num_bytes} bytes)")


def log_build_result(result, elapsed_time: float) -> None:
    """Log a successful build (BuildResult)."""
    _log_success(f"Build finished ({format_elapsed(elapsed_time)})")
    if result.page_count is not None:
        _log_debug(f"  Pages: {result.page_count}")


def log_build_failed(error: Exception, elapsed_time: float) -> None:
    _log_error(f"Build failed ({format_elapsed(elapsed_time)})")
    for line in str(error).splitlines():
        _log_error(f"  {line}")


def log_build_crashed(error: Exception) -> None:
    """Log an unexpected build error with its traceback."""
    logger.opt(exception=error).error(
        f"{CONTEXT_PREFIX} Build crashed: {type(error).__name__}: {error}"
    )


def log_stale_outputs(paths: List[Path]) -> None:
    """Warn that outputs from an earlier build were left untouched."""
    for path in paths:
        _log_warning(f"Output from a previous build is now stale: {path}")


def log_watch_start(src: Path) -> None:
    _log_info(f"Watching for changes in: {src}")


def log_change_detected(src: Path) -> None:
    _log_info(f"{src.name} modified. Rebuilding...")


def log_watch_stopped() -> None:
    _log_info("Stopped watching.")
