"""Comment out (off) or re-enable (on) debug statements.

Usage: dbgc off [PATH]
       dbgc on [PATH]
"""

import sys

import click

from dbgc.commands.options import action_options
from dbgc.config_runtime import build_scan_config, load_runtime_config
from dbgc.editor import Action
from dbgc.processor import process_path
from dbgc.utils.error_handler import handle_exceptions


def _run(action: Action, path, yes, all_, interactive, dry_run):
    cfg = load_runtime_config()
    config = build_scan_config(cfg, match_all_output=True if all_ else None)
    exit_code = process_path(
        path,
        action,
        config,
        cfg,
        yes=yes,
        interactive=interactive,
        dry_run=dry_run,
    )
    if exit_code:
        sys.exit(exit_code)


@click.command("off")
@action_options
@handle_exceptions
def off(path, yes, all_, interactive, dry_run):
    """Comment out debug statements.

    Finds output calls whose string literals contain the debug keyword
    (default "debug", any case) and prefixes every line of each statement
    with the language's line-comment marker. Multi-line calls are
    commented out as a whole.

    \b
    WHAT IS LEFT ALONE:
      - Lines that are already commented out
      - Calls inside block comments
      - Calls embedded in a larger expression (x := fmt.Sprintf(...)),
        reported as a warning instead

    \b
    EXAMPLES:
      dbgc off                  # Current directory, asks before writing
      dbgc off src/ --dry-run   # Show what would change
      dbgc off main.c -y        # No prompt
      dbgc off -a -i            # Pick from every output call

    \b
    EXIT CODES:
      0 = Done (or nothing to do)
      2 = Some files could not be scanned (unbalanced delimiters)
      3 = Invalid configuration"""
    _run(Action.COMMENT_OUT, path, yes, all_, interactive, dry_run)


@click.command("on")
@action_options
@handle_exceptions
def on(path, yes, all_, interactive, dry_run):
    """Uncomment debug statements that were commented out.

    Scans line comments for commented-out debug calls and removes the
    comment marker (plus one following space) from every line of each
    statement. Running 'dbgc off' then 'dbgc on' restores the file.

    \b
    EXAMPLES:
      dbgc on                   # Current directory, asks before writing
      dbgc on src/ -d           # Dry run
      dbgc on -i                # Choose which statements to restore

    \b
    EXIT CODES:
      0 = Done (or nothing to do)
      2 = Some files could not be scanned (unbalanced delimiters)
      3 = Invalid configuration"""
    _run(Action.UNCOMMENT, path, yes, all_, interactive, dry_run)
