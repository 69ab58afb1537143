"""Custom exceptions for the scanner package.

Contains exception classes for failure modes that require explicit handling
rather than generic error propagation.
"""


class DbgcError(Exception):
    """Base class for dbgc errors."""


class MalformedStatement(DbgcError):
    """Raised when a file cannot be split into balanced statements.

    Either end of input was reached with a statement still open, or a string
    literal was left unterminated. The error is scoped to one file: the batch
    scanner records it and moves on to the next file.

    Attributes:
        reason: Human-readable description of what was unbalanced
        path: File the error occurred in (None when scanning bare lines)
        start_line: First line of the statement (or literal) left open
        end_line: Line where scanning gave up
    """

    def __init__(
        self,
        reason: str,
        start_line: int,
        end_line: int,
        path: str | None = None,
    ):
        self.reason = reason
        self.start_line = start_line
        self.end_line = end_line
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"{self.path}:" if self.path else "line "
        return f"{where}{self.start_line}-{self.end_line}: {self.reason}"


class ConfigurationError(DbgcError):
    """Raised when scan options are invalid.

    Detected while building the ScanConfig or classifier, before any file is
    read. Commands turn it into exit code 3.
    """
