"""
JSON Autovalidator
Watches a single JSON file and keeps it valid: every external edit is
re-serialized, and stray characters that break parsing are removed.
"""

import os
import sys
import signal
import logging
import threading
from typing import List, Optional

from colorama import just_fix_windows_console
from watchdog.events import EVENT_TYPE_MODIFIED

from config import log_event, DEFAULT_SETTINGS
from exceptions import WatchTargetMissingError
from models import WatchSettings
from state import CooldownState
from services.json_file import resolve_target
from services.queue_processor import QueueProcessor
from services.repair_engine import print_error
from services.watcher import start_observer, stop_observer

EXIT_SETUP_FAILED = 1


def run(
    raw_path: str,
    settings: WatchSettings = DEFAULT_SETTINGS,
    stop_event: Optional[threading.Event] = None,
) -> int:
    """Watch raw_path until interrupted or a repair fails. Returns the exit code."""
    print(f"Watching file {raw_path} for changes...")

    try:
        target = resolve_target(raw_path)
    except WatchTargetMissingError as e:
        print_error(str(e))
        log_event(logging.ERROR, "target_missing", path=raw_path)
        return EXIT_SETUP_FAILED

    if stop_event is None:
        stop_event = threading.Event()

    cooldown = CooldownState()
    processor = QueueProcessor(target, cooldown, settings, on_fatal=stop_event.set)
    processor.start()

    try:
        observer = start_observer(target, processor)
    except OSError as e:
        print_error(f"Could not watch {target.path}: {e}")
        log_event(logging.ERROR, "observer_start_failed", path=str(target.path), error=str(e))
        processor.stop()
        return EXIT_SETUP_FAILED

    log_event(
        logging.INFO,
        "watch_startup",
        path=str(target.path),
        debounce=settings.debounce_seconds,
        settle=settings.settle_seconds,
        max_retries=settings.max_retries,
    )

    # Launch counts as a change so an already broken file gets fixed
    processor.enqueue_change(EVENT_TYPE_MODIFIED, str(target.path))

    try:
        while not stop_event.wait(1.0):
            pass
    except KeyboardInterrupt:
        print("Exiting...")
    finally:
        stop_observer(observer)
        processor.stop()

    log_event(logging.INFO, "watch_shutdown", exit_code=processor.exit_code)
    return processor.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "json-autovalidator"
        print_error(f"usage: {prog} <path>")
        return EXIT_SETUP_FAILED

    just_fix_windows_console()

    stop_event = threading.Event()
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, lambda signum, frame: stop_event.set())

    return run(args[0], stop_event=stop_event)


if __name__ == '__main__':
    sys.exit(main())
