"""CLI commands for dbgc."""
