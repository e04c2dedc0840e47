"""
File system subscription for the watched file, using watchdog.
"""

import logging
import os

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from config import log_event
from models import WatchTarget
from services.queue_processor import QueueProcessor


class TargetFileHandler(FileSystemEventHandler):
    """
    Forwards events for the target file onto the processing queue.
    The parent directory is what gets scheduled, so events for sibling files
    and subdirectories are dropped here. Event types are filtered by the
    queue processor.
    """

    def __init__(self, target: WatchTarget, processor: QueueProcessor):
        super().__init__()
        self.target = target
        self.processor = processor
        self._target_path = os.path.normcase(str(target.path))

    def is_target(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        src_path = os.fsdecode(event.src_path)
        return os.path.normcase(os.path.abspath(src_path)) == self._target_path

    def on_any_event(self, event: FileSystemEvent):
        if not self.is_target(event):
            return
        self.processor.enqueue_change(event.event_type, os.fsdecode(event.src_path))


def start_observer(target: WatchTarget, processor: QueueProcessor) -> Observer:
    """Subscribe to changes of the target file. OSError propagates to the caller."""
    handler = TargetFileHandler(target, processor)
    observer = Observer()
    observer.schedule(handler, str(target.directory), recursive=False)
    observer.start()
    log_event(logging.INFO, "observer_started",
              observer=type(observer).__name__,
              path=str(target.path))
    return observer


def stop_observer(observer: Observer, timeout: float = 5.0):
    observer.stop()
    observer.join(timeout=timeout)
    log_event(logging.INFO, "observer_stopped")
