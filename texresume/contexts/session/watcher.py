"""
Source file watcher.

Forwards filesystem notifications for a single source file onto a queue.
The watchdog observer thread only enqueues; builds run on the thread that
consumes the queue, one at a time.
"""

import os
import queue
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class SourceChangeHandler(FileSystemEventHandler):
    """
    Enqueues an event whenever the source file is closed after writing.

    Editors that save by writing a temporary file and renaming it over the
    original produce a move event instead; those are forwarded too.
    """

    def __init__(self, src: Path, events: queue.Queue):
        super().__init__()
        self.src = Path(src).resolve()
        self.events = events

    def _is_source(self, path) -> bool:
        return Path(os.fsdecode(path)).resolve() == self.src

    def on_closed(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_source(event.src_path):
            self.events.put(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_source(event.dest_path):
            self.events.put(event)


def start_observer(src: Path, events: queue.Queue) -> Observer:
    """
    Start a watchdog observer for the directory holding src.

    The directory is watched instead of the file so that rename-into-place
    saves are still seen.
    """
    handler = SourceChangeHandler(src, events)
    observer = Observer()
    observer.schedule(handler, str(Path(src).resolve().parent), recursive=False)
    observer.start()
    return observer
