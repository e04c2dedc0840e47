"""JSON autovalidator exception hierarchy.

All autovalidator-specific exceptions inherit from AutovalidatorError.
"""


class AutovalidatorError(Exception):
    """Base exception for all autovalidator errors."""


class WatchTargetMissingError(AutovalidatorError):
    """Raised when the file to watch does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File {path} does not exist or is not a regular file")


class ParseError(AutovalidatorError):
    """Raised when the watched content is not valid JSON.

    ``line`` is 1-indexed, ``column`` is the 0-indexed character offset
    within that line.
    """

    def __init__(self, line: int, column: int, message: str) -> None:
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"{message}: line {line} column {column + 1}")


class RepairFailedError(AutovalidatorError):
    """Raised when a repair chain runs out of retries or edits."""

    def __init__(self, attempts: int, reason: str) -> None:
        self.attempts = attempts
        self.reason = reason
        super().__init__(f"Failed to fix file after {attempts} attempts: {reason}")
