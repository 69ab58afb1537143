"""Centralized exit codes for the dbgc CLI."""


class ExitCodes:
    """Standard exit codes for dbgc CLI commands."""

    SUCCESS = 0

    DEBUG_FOUND = 1
    MALFORMED_FILES = 2

    CONFIG_ERROR = 3

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success",
            cls.DEBUG_FOUND: "Debug statements detected",
            cls.MALFORMED_FILES: "One or more files could not be scanned (unbalanced delimiters)",
            cls.CONFIG_ERROR: "Invalid configuration - nothing was scanned",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")

