"""
Data structures (dataclasses) for the JSON autovalidator.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class WatchTarget:
    """The single file being watched. Always an absolute, resolved path."""
    path: Path

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class WatchSettings:
    """Timing and budget knobs for the watch loop and repair engine."""
    debounce_seconds: float  # ignore changes this soon after our own write
    settle_seconds: float  # wait before reading an externally changed file
    retry_delay_seconds: float
    max_retries: int  # budget for non-positional failures
    max_edits: int  # ceiling for single-character deletions


@dataclass
class RepairAttempt:
    """Loop state for one repair chain."""
    content: Optional[str] = None
    attempts: int = 0  # every pass, edits and retries alike
    edits: int = 0  # since the last read from disk
    retries: int = 0
