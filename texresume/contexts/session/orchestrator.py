"""
Build Session

Reads a résumé YAML file, renders it to LaTeX, optionally compiles it to PDF,
and writes the results next to the source. In watch mode the build is
repeated every time the source file is saved.

Outputs are produced in memory first and only then written, each one
atomically, so a failed build never leaves a half-written file behind.
"""

import os
import queue
import shutil
import tempfile
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from dotenv import load_dotenv

from texresume.contexts.rendering.compiler import compile_to_pdf
from texresume.contexts.session.logger import (
    log_build_crashed,
    log_build_failed,
    log_build_result,
    log_build_start,
    log_change_detected,
    log_output_written,
    log_stale_outputs,
    log_watch_start,
    log_watch_stopped,
)
from texresume.contexts.session.watcher import start_observer
from texresume.contexts.templating.latex_generator import to_document
from texresume.contexts.templating.logger import log_resume_loaded
from texresume.contexts.templating.resume_data_structure import load_resume_file
from texresume.exceptions import BuildError, FileWriteError
from texresume.utils.pdf_processing import page_count

load_dotenv()

DEFAULT_SOURCE = os.getenv("RESUME_SOURCE", "resume.yaml")

TEX_SUFFIX = ".tex"
PDF_SUFFIX = ".pdf"
OUTPUT_MODE = 0o644

# Seconds between checks of the stop event while waiting for a change
WATCH_POLL_INTERVAL = 0.5


@dataclass
class BuildResult:
    """
    Result of a successful build.

    Attributes:
        source: YAML source that was built
        tex_path: Written LaTeX file
        pdf_path: Written PDF file (None when compilation was not requested)
        page_count: Pages in the compiled PDF (None if not compiled or unreadable)
        elapsed_s: Wall time of the build in seconds
    """

    source: Path
    tex_path: Path
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    elapsed_s: float = 0.0


def write_atomic(path: Path, content: bytes) -> None:
    """
    Write content to path so readers see either the old file or the new one.

    Raises:
        FileWriteError: If the file cannot be written
    """
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        # Temporary files are created 0600; keep the mode of the file being replaced
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, OUTPUT_MODE)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileWriteError(f"Cannot write output: {e}", path=path) from e


class BuildSession:
    """
    Builds one résumé source, once or on every change.

    Args:
        src: YAML source path (default: RESUME_SOURCE env, "resume.yaml")
        emit_pdf: Compile to PDF in addition to writing LaTeX
        compiler: Function from LaTeX text to PDF bytes, raising
                  CompilationError on failure

    Raises:
        BuildError: If the source has an output extension and would be
                    overwritten by its own build
    """

    def __init__(
        self,
        src: Path = None,
        emit_pdf: bool = True,
        compiler: Callable[[str], bytes] = compile_to_pdf,
    ):
        self.src = Path(src or DEFAULT_SOURCE)
        self.emit_pdf = emit_pdf
        self.compiler = compiler

        if self.src.suffix.lower() in (TEX_SUFFIX, PDF_SUFFIX):
            raise BuildError(
                f"Source must not have a {self.src.suffix} extension (it would be overwritten)",
                path=self.src,
            )

        self.tex_path = self.src.with_suffix(TEX_SUFFIX)
        self.pdf_path = self.src.with_suffix(PDF_SUFFIX)

    def _existing_outputs(self) -> List[Path]:
        candidates = [self.tex_path, self.pdf_path] if self.emit_pdf else [self.tex_path]
        return [path for path in candidates if path.exists()]

    def build(self) -> BuildResult:
        """
        Run one build: read, parse, render, optionally compile, then write.

        Returns:
            BuildResult describing the written files

        Raises:
            FileReadError: Source unreadable
            SchemaError: Source does not match the résumé schema
            CompilationError: LaTeX engine failed
            FileWriteError: An output could not be written
        """
        log_build_start(self.src, self.emit_pdf)
        start_time = time.time()

        try:
            resume = load_resume_file(self.src)
            log_resume_loaded(self.src, resume)

            tex = to_document(resume)
            outputs: Dict[Path, bytes] = {self.tex_path: tex.encode("utf-8")}

            pdf = None
            if self.emit_pdf:
                pdf = self.compiler(tex)
                outputs[self.pdf_path] = pdf

            for path, content in outputs.items():
                write_atomic(path, content)
                log_output_written(path, len(content))
        except BuildError as e:
            log_build_failed(e, time.time() - start_time)
            log_stale_outputs(self._existing_outputs())
            raise

        result = BuildResult(
            source=self.src,
            tex_path=self.tex_path,
            pdf_path=self.pdf_path if self.emit_pdf else None,
            page_count=page_count(pdf) if pdf else None,
            elapsed_s=time.time() - start_time,
        )
        log_build_result(result, result.elapsed_s)
        return result

    def try_build(self) -> Optional[BuildResult]:
        """
        Build, reporting failures through the log instead of raising them.

        Used by watch mode, which must survive any failed rebuild. Exceptions
        other than BuildError are logged with their traceback.
        """
        try:
            return self.build()
        except BuildError:
            # Already logged by build()
            return None
        except Exception as e:
            log_build_crashed(e)
            log_stale_outputs(self._existing_outputs())
            return None

    def watch(self, stop_event: threading.Event = None) -> None:
        """
        Build now, then rebuild every time the source is saved.

        Build errors are logged and the loop keeps watching. Events are handled
        one at a time on the calling thread, so builds never overlap. Returns
        when stop_event is set or on KeyboardInterrupt.

        Args:
            stop_event: Optional event that ends the loop when set
        """
        events: queue.Queue = queue.Queue()
        observer = start_observer(self.src, events)
        log_watch_start(self.src)

        try:
            self.try_build()
            while stop_event is None or not stop_event.is_set():
                try:
                    events.get(timeout=WATCH_POLL_INTERVAL)
                except queue.Empty:
                    continue
                log_change_detected(self.src)
                self.try_build()
        except KeyboardInterrupt:
            pass
        finally:
            observer.stop()
            observer.join()
            log_watch_stopped()
