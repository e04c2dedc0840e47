"""
Repair engine: parse the watched file, fix single bad characters, and write
the normalized JSON back.
"""

import sys
import time
import logging
from typing import List, Optional

from colorama import Fore, Style

from config import log_event
from exceptions import ParseError, RepairFailedError
from models import RepairAttempt, WatchSettings, WatchTarget
from state import CooldownState
from services.json_file import (
    read_target_file,
    write_target_file,
    parse_document,
    serialize_document,
)


# --- CONSOLE ---

def print_error(message: str):
    print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)


def print_notice(message: str):
    print(f"{Fore.YELLOW}{message}{Style.RESET_ALL}")


# --- POSITIONAL FIXES ---

def offending_line(content: str, error: ParseError) -> Optional[str]:
    """
    Return the line a parse error points into.
    None when there is no character at the reported column (e.g. the error
    sits at the end of the line or of the document), since nothing can be
    deleted there.
    """
    lines = content.split('\n')
    if not 1 <= error.line <= len(lines):
        return None
    line = lines[error.line - 1]
    if not 0 <= error.column < len(line):
        return None
    return line


def format_diagnostic(line: str, error: ParseError) -> List[str]:
    """The offending line prefixed with its number, plus a caret under the column."""
    prefix = f"Line {error.line}: "
    return [
        f"{prefix}{line}",
        " " * (len(prefix) + error.column) + "^",
    ]


def remove_offending_character(content: str, error: ParseError) -> str:
    """Delete exactly the character at the error position, keeping every line break."""
    lines = content.split('\n')
    index = error.line - 1
    line = lines[index]
    fixed_line = line[:error.column] + line[error.column + 1:]
    return '\n'.join(lines[:index] + [fixed_line] + lines[index + 1:])


def _apply_edit(attempt: RepairAttempt, line: str, error: ParseError, settings: WatchSettings):
    if attempt.edits >= settings.max_edits:
        print_error(f"Giving up after {attempt.edits} character deletions")
        log_event(logging.ERROR, "repair_failed", reason="edit_ceiling", edits=attempt.edits)
        raise RepairFailedError(attempt.attempts, f"edit ceiling reached: {error}")

    print_error(f"Error parsing JSON: {error}")
    for diagnostic in format_diagnostic(line, error):
        print(diagnostic)

    attempt.content = remove_offending_character(attempt.content, error)
    attempt.edits += 1
    attempt.attempts += 1
    log_event(logging.INFO, "repair_positional_edit",
              line=error.line,
              column=error.column,
              edits=attempt.edits,
              error=error.message)


def _retry_or_fail(attempt: RepairAttempt, failure: Exception, settings: WatchSettings):
    print_error(f"Error fixing file: {failure}")

    if attempt.retries >= settings.max_retries:
        print_error(f"Failed to fix file after {attempt.retries} retries")
        log_event(logging.ERROR, "repair_failed",
                  reason="retry_budget",
                  attempts=attempt.attempts,
                  error=str(failure))
        raise RepairFailedError(attempt.attempts, str(failure))

    print_notice("Retrying...")
    log_event(logging.WARNING, "repair_retry",
              retry=attempt.retries + 1,
              delay=settings.retry_delay_seconds,
              error=str(failure))
    time.sleep(settings.retry_delay_seconds)

    # Force a fresh read on the next pass; the edit ceiling applies per read
    attempt.content = None
    attempt.edits = 0
    attempt.retries += 1
    attempt.attempts += 1


# --- MAIN REPAIR LOOP ---

def repair(
    target: WatchTarget,
    cooldown: CooldownState,
    settings: WatchSettings,
    content: Optional[str] = None,
) -> str:
    """
    Parse, normalize and rewrite the watched file. Returns the text written.

    A parse error that points at an existing character deletes that character
    and tries again, up to settings.max_edits times per read. Any other failure (I/O,
    decode errors, a parse error with nothing to delete) re-reads the file
    after a delay, up to settings.max_retries times.

    Raises RepairFailedError once either budget is spent.
    """
    attempt = RepairAttempt(content=content)

    while True:
        # Marked before any I/O so our own write is not mistaken for an edit
        cooldown.mark()
        try:
            if not (attempt.content and attempt.content.strip()):
                attempt.content = read_target_file(target)
            fixed = serialize_document(parse_document(attempt.content))
            write_target_file(target, fixed)
            cooldown.mark()
        except ParseError as e:
            line = offending_line(attempt.content, e)
            if line is not None:
                _apply_edit(attempt, line, e, settings)
                continue
            failure = e
        except (OSError, ValueError, RecursionError) as e:
            failure = e
        else:
            print("Fixed file")
            log_event(logging.INFO, "repair_success",
                      path=str(target.path),
                      attempts=attempt.attempts,
                      edits=attempt.edits,
                      retries=attempt.retries)
            return fixed

        _retry_or_fail(attempt, failure, settings)
