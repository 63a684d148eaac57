"""
Session Context

Responsibilities:
- Runs one-shot builds from a YAML source to .tex (and .pdf) siblings
- Watches the source and rebuilds on every save

Owns: File input/output, build and watch loops
Never: Builds LaTeX itself or runs the engine directly
"""

from texresume.contexts.session.orchestrator import BuildResult, BuildSession

__all__ = ["BuildResult", "BuildSession"]
