"""Services package for the JSON autovalidator."""

from services.json_file import (
    resolve_target,
    read_target_file,
    write_target_file,
    parse_document,
    serialize_document,
)

from services.repair_engine import (
    repair,
    offending_line,
    format_diagnostic,
    remove_offending_character,
)

from services.queue_processor import (
    QueueItem,
    QueueProcessor,
)

from services.watcher import (
    TargetFileHandler,
    start_observer,
    stop_observer,
)

__all__ = [
    # JSON file
    "resolve_target",
    "read_target_file",
    "write_target_file",
    "parse_document",
    "serialize_document",
    # Repair
    "repair",
    "offending_line",
    "format_diagnostic",
    "remove_offending_character",
    # Queue
    "QueueItem",
    "QueueProcessor",
    # Watcher
    "TargetFileHandler",
    "start_observer",
    "stop_observer",
]
