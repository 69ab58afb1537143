"""Delete debug statements.

Usage: dbgc delete [PATH]
"""

import sys

import click

from dbgc.commands.options import action_options
from dbgc.config_runtime import build_scan_config, load_runtime_config
from dbgc.editor import Action
from dbgc.processor import process_path
from dbgc.utils.error_handler import handle_exceptions


@click.command("delete")
@action_options
@handle_exceptions
def delete(path, yes, all_, interactive, dry_run):
    """Delete debug statements, active and commented out.

    Removes every line of each matched statement from the file. Both live
    calls and calls that were previously commented out with 'dbgc off'
    are deleted. This cannot be undone by 'dbgc on'; use --dry-run first.

    \b
    EXAMPLES:
      dbgc delete --dry-run     # Preview
      dbgc delete src/ -y       # Delete without asking
      dbgc delete -i            # Choose which statements to delete

    \b
    EXIT CODES:
      0 = Done (or nothing to do)
      2 = Some files could not be scanned (unbalanced delimiters)
      3 = Invalid configuration"""
    cfg = load_runtime_config()
    config = build_scan_config(cfg, match_all_output=True if all_ else None)
    exit_code = process_path(
        path,
        Action.DELETE,
        config,
        cfg,
        yes=yes,
        interactive=interactive,
        dry_run=dry_run,
    )
    if exit_code:
        sys.exit(exit_code)
