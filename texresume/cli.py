#!/usr/bin/env python3
"""
Résumé Build CLI

Builds a LaTeX (and optionally PDF) résumé from a YAML source, once or on
every save.

Commands:
    build - Build the résumé once (default when no command is given)
    watch - Rebuild every time the source file is saved

Examples:\n

    texresume                                # Build resume.yaml to resume.tex and resume.pdf

    texresume build cv.yaml --tex-only       # Only write cv.tex

    texresume watch cv.yaml                  # Rebuild cv.tex/cv.pdf on every save
"""

import os
from functools import partial
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from texresume import __version__
from texresume.contexts.rendering.compiler import LATEX_COMPILER, compile_to_pdf
from texresume.contexts.session import BuildSession
from texresume.exceptions import BuildError
from texresume.utils.logger import setup_logger
from texresume.utils.timestamp import now

load_dotenv()
DEFAULT_SOURCE = os.getenv("RESUME_SOURCE", "resume.yaml")
LOGS_PATH = os.getenv("LOGS_PATH")


app = typer.Typer(
    help="Build a LaTeX/PDF résumé from YAML",
    add_completion=False,
    invoke_without_command=True,
)

SourceArgument = Annotated[
    Optional[Path],
    typer.Argument(help=f"YAML résumé source (default: {DEFAULT_SOURCE})"),
]
PdfOption = Annotated[
    bool,
    typer.Option(
        "--pdf/--tex-only",
        help="Compile the LaTeX to PDF, or only write the .tex file",
    ),
]
LogDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--log-dir",
        "-l",
        help="Write a detailed log under this directory (default: LOGS_PATH env)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug output and LaTeX engine output"),
]


def _setup_logging(context_name: str, log_dir: Optional[Path], verbose: bool) -> None:
    if log_dir is None and LOGS_PATH:
        log_dir = Path(LOGS_PATH)
    session_dir = log_dir / f"{context_name}_{now()}" if log_dir is not None else None

    log_file = setup_logger(
        context_name=context_name,
        log_dir=session_dir,
        extra_provenance={"LaTeX compiler": LATEX_COMPILER, "texresume": __version__},
        verbose=verbose,
    )
    if log_file is not None:
        typer.echo(f"Log: {log_file}")


def _make_session(src: Optional[Path], pdf: bool, verbose: bool) -> BuildSession:
    compiler = partial(compile_to_pdf, verbose=verbose)
    try:
        return BuildSession(src=src or Path(DEFAULT_SOURCE), emit_pdf=pdf, compiler=compiler)
    except BuildError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Build resume.yaml when no command is provided."""
    if ctx.invoked_subcommand is None:
        build_command(src=None, pdf=True, log_dir=None, verbose=False)


@app.command("build")
def build_command(
    src: SourceArgument = None,
    pdf: PdfOption = True,
    log_dir: LogDirOption = None,
    verbose: VerboseOption = False,
):
    """
    Build the résumé once.

    Writes <name>.tex next to the source, and <name>.pdf unless --tex-only
    is given. Exits with status 1 if any step fails.

    Examples:\n

        $ texresume build                        # Build resume.yaml

        $ texresume build cv.yaml --tex-only     # LaTeX only
    """
    _setup_logging("build", log_dir, verbose)
    session = _make_session(src, pdf, verbose)

    try:
        result = session.build()
    except BuildError as e:
        typer.secho(f"\n✗ Build failed: {e.message}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    typer.secho("\n✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  LaTeX: {result.tex_path}")
    if result.pdf_path is not None:
        typer.echo(f"  PDF: {result.pdf_path}")
    if result.page_count is not None:
        typer.echo(f"  Pages: {result.page_count}")


@app.command("watch")
def watch_command(
    src: SourceArgument = None,
    pdf: PdfOption = True,
    log_dir: LogDirOption = None,
    verbose: VerboseOption = False,
):
    """
    Build the résumé, then rebuild it every time the source is saved.

    Failed rebuilds are reported and watching continues. Stop with Ctrl-C.

    Examples:\n

        $ texresume watch                        # Watch resume.yaml

        $ texresume watch cv.yaml --tex-only     # Rebuild LaTeX only
    """
    _setup_logging("watch", log_dir, verbose)
    session = _make_session(src, pdf, verbose)
    session.watch()


if __name__ == "__main__":
    app()
