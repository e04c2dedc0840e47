"""
Queue processor for file change notifications.
Notifications are handled one at a time, in the order they were received,
so the watched file is never repaired concurrently.
"""

import logging
import queue
import threading
import time
import uuid
from typing import Callable, Optional
from dataclasses import dataclass
from datetime import datetime

from watchdog.events import EVENT_TYPE_MODIFIED

from config import log_event
from exceptions import RepairFailedError
from models import WatchSettings, WatchTarget
from state import CooldownState
from services.repair_engine import repair, print_notice

EXIT_REPAIR_FAILED = 2


@dataclass
class QueueItem:
    """Item in the processing queue."""
    request_id: str
    event_type: str
    path: str
    timestamp: datetime


class QueueProcessor:
    """Single background worker that turns change notifications into repairs."""

    def __init__(
        self,
        target: WatchTarget,
        cooldown: CooldownState,
        settings: WatchSettings,
        on_fatal: Optional[Callable[[], None]] = None,
    ):
        self.target = target
        self.cooldown = cooldown
        self.settings = settings
        self.on_fatal = on_fatal
        self.exit_code = 0
        self._queue: queue.Queue = queue.Queue()
        self._worker_thread: Optional[threading.Thread] = None
        self._worker_running = False

    def enqueue_change(self, event_type: str, path: str) -> str:
        """
        Add a change notification to the processing queue.
        Returns a request_id for log correlation.
        """
        request_id = str(uuid.uuid4())[:8]
        item = QueueItem(
            request_id=request_id,
            event_type=event_type,
            path=path,
            timestamp=datetime.now(),
        )
        self._queue.put(item)

        log_event(logging.DEBUG, "queue_enqueue",
                  request_id=request_id,
                  event_type=event_type,
                  queue_size=self._queue.qsize())
        return request_id

    def handle_change(self, item: QueueItem) -> bool:
        """
        Repair the target for a genuine modification.
        Returns False when the notification was ignored.
        """
        if item.event_type != EVENT_TYPE_MODIFIED:
            log_event(logging.DEBUG, "change_ignored_type",
                      request_id=item.request_id,
                      event_type=item.event_type)
            return False

        if self.cooldown.is_cooling_down(self.settings.debounce_seconds):
            log_event(logging.DEBUG, "change_discarded_cooldown",
                      request_id=item.request_id,
                      elapsed=round(self.cooldown.elapsed(), 3))
            return False

        print_notice(f"File: {item.path} {item.event_type}")
        log_event(logging.INFO, "change_accepted",
                  request_id=item.request_id,
                  path=item.path,
                  queued_at=item.timestamp.isoformat())

        # Let the external writer finish flushing
        time.sleep(self.settings.settle_seconds)
        repair(self.target, self.cooldown, self.settings)
        return True

    def _process_queue(self):
        """Background worker that processes queue items in FIFO order."""
        log_event(logging.INFO, "queue_worker_started")

        while self._worker_running:
            try:
                # Block for up to 1 second waiting for items
                item = self._queue.get(timeout=1.0)
            except queue.Empty:
                continue

            try:
                self.handle_change(item)
            except RepairFailedError as e:
                log_event(logging.ERROR, "queue_repair_fatal",
                          request_id=item.request_id,
                          attempts=e.attempts,
                          error=e.reason)
                self.exit_code = EXIT_REPAIR_FAILED
                self._worker_running = False
                if self.on_fatal is not None:
                    self.on_fatal()
            except Exception as e:
                log_event(logging.ERROR, "queue_process_error",
                          request_id=item.request_id,
                          error=str(e))
            finally:
                self._queue.task_done()

        log_event(logging.INFO, "queue_worker_stopped")

    def start(self):
        """Start the background queue processing worker."""
        if self._worker_thread is not None and self._worker_thread.is_alive():
            log_event(logging.WARNING, "queue_worker_already_running")
            return

        self._worker_running = True
        self._worker_thread = threading.Thread(target=self._process_queue, daemon=True)
        self._worker_thread.start()
        log_event(logging.INFO, "queue_worker_thread_started")

    def stop(self):
        """
        Stop the background worker. Waits for an in-flight repair to finish
        so the file is never left half written.
        """
        self._worker_running = False
        if self._worker_thread is not None:
            self._worker_thread.join()
        log_event(logging.INFO, "queue_worker_thread_stopped")

