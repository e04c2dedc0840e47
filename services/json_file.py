"""
Target file operations and JSON parse/serialize primitives.
"""

import json
import logging
from pathlib import Path
from typing import Any

from config import log_event, UNDEFINED_ARTIFACT
from exceptions import ParseError, WatchTargetMissingError
from models import WatchTarget


def resolve_target(raw_path: str) -> WatchTarget:
    """Resolve a command-line path to an absolute watch target that must exist."""
    path = Path(raw_path.strip('"')).expanduser().resolve()
    if not path.is_file():
        raise WatchTargetMissingError(raw_path)
    log_event(logging.DEBUG, "target_resolved", path=str(path))
    return WatchTarget(path=path)


def read_target_file(target: WatchTarget) -> str:
    """Read the current content of the watched file."""
    content = target.path.read_text(encoding='utf-8')
    log_event(logging.DEBUG, "target_file_read", path=str(target.path), bytes=len(content))
    return content


def write_target_file(target: WatchTarget, content: str):
    """Overwrite the watched file. Errors propagate to the caller."""
    target.path.write_text(content, encoding='utf-8')
    log_event(logging.INFO, "target_file_written", path=str(target.path), bytes=len(content))


def parse_document(content: str) -> Any:
    """
    Parse JSON text into a document.
    Raises ParseError with a 1-indexed line and a 0-indexed column.
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(e.lineno, e.colno - 1, e.msg) from e


def serialize_document(document: Any) -> str:
    """Serialize a document to canonical compact JSON with the undefined artifact stripped."""
    text = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return text.replace(UNDEFINED_ARTIFACT, "")
