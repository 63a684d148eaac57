"""Exceptions raised while building a résumé."""

from pathlib import Path
from typing import List, Optional


class BuildError(Exception):
    """
    Base class for every error that aborts a build attempt.

    Attributes:
        message: Error description
        path: File involved in the failure, if any
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class FileReadError(BuildError):
    """Raised when the YAML source cannot be read."""

    pass


class SchemaError(BuildError, ValueError):
    """
    Raised when the YAML source does not match the résumé schema.

    Covers malformed YAML, a missing or unknown field, and a field of the
    wrong type. No partial résumé is ever returned.
    """

    pass


class CompilationError(BuildError):
    """
    Raised when the LaTeX engine fails to produce a PDF.

    Attributes:
        errors: LaTeX errors parsed from the engine's log
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None, path: Optional[Path] = None):
        self.errors = errors or []

        if self.errors:
            shown = "\n".join(f"  - {err}" for err in self.errors[:5])
            if len(self.errors) > 5:
                shown += f"\n  ... and {len(self.errors) - 5} more errors"
            message = f"{message}\n{shown}"

        super().__init__(message, path=path)


class FileWriteError(BuildError):
    """Raised when a rendered output file cannot be written."""

    pass
