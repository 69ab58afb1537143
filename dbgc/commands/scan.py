"""Report debug statements without changing any file.

Usage: dbgc scan [PATH]
"""

import json
import sys

import click

from dbgc.commands.options import PATH_ARGUMENT
from dbgc.config_runtime import build_scan_config, load_runtime_config
from dbgc.dispatcher import ActionDispatcher
from dbgc.editor import Action
from dbgc.processor import find_files, report_failures, scan_passes
from dbgc.ui import (
    console,
    display_matches,
    print_header,
    print_status_panel,
    print_success,
)
from dbgc.utils.error_handler import handle_exceptions
from dbgc.utils.exit_codes import ExitCodes


@click.command("scan")
@PATH_ARGUMENT
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--all", "-a", "all_", is_flag=True,
    help="Report every recognized output call, not just debug statements",
)
@click.option(
    "--include-commented", is_flag=True,
    help="Also report debug statements that are commented out",
)
@click.option("--fail-on-debug", is_flag=True, help="Exit 1 if any debug statement is found")
@handle_exceptions
def scan(path, output_format, all_, include_commented, fail_on_debug):
    """Find debug statements and report them.

    Reconstructs multi-line calls, skips commented-out code and classifies
    each output call: a call is a debug statement when one of its string
    literals contains the debug keyword (default "debug", any case), or
    when it is a dedicated debug call such as Rust's dbg!.

    \b
    CONFIGURATION:
      .dbgc/config.json   {"scan": {"debug_keyword": "trace", ...}}
      DBGC_SCAN_DEBUG_KEYWORD, DBGC_SCAN_OUTPUT_CALL_TARGETS,
      DBGC_SCAN_COMMENT_MARKER, DBGC_SCAN_KEYWORD_SCOPE,
      DBGC_FILES_EXCLUDE, DBGC_LIMITS_MAX_WORKERS

    \b
    EXAMPLES:
      dbgc scan                          # Current directory
      dbgc scan src/ --format json       # Machine-readable
      dbgc scan --fail-on-debug          # Pre-commit / CI gate
      dbgc scan --include-commented      # Also list disabled statements

    \b
    EXIT CODES:
      0 = Clean (or debug found without --fail-on-debug)
      1 = Debug statements found (with --fail-on-debug)
      2 = Some files could not be scanned (unbalanced delimiters)
      3 = Invalid configuration"""
    cfg = load_runtime_config()
    config = build_scan_config(cfg, match_all_output=True if all_ else None)
    dispatcher = ActionDispatcher(Action.REPORT, config)

    files = find_files(path, cfg)
    passes = (False, True) if include_commented else (False,)

    found = []
    failed = []
    for disabled in passes:
        results = scan_passes(files, config, cfg, (disabled,))
        failed.extend(r for r in results if r.failed)
        for decision in dispatcher.dispatch_all(results):
            if decision.selected:
                found.append((decision, disabled))

    if fail_on_debug and found:
        exit_code = ExitCodes.DEBUG_FOUND
    elif failed:
        exit_code = ExitCodes.MALFORMED_FILES
    else:
        exit_code = ExitCodes.SUCCESS

    if output_format == "json":
        payload = {
            "files_scanned": len(files),
            "debug_statements": [
                {
                    "path": decision.path,
                    **decision.classification.to_dict(),
                    "commented": disabled,
                    "text": decision.snippet,
                }
                for decision, disabled in found
            ],
            "failed_files": [{"path": r.path, "error": str(r.error)} for r in failed],
            "exit_code": exit_code,
            "status": ExitCodes.get_description(exit_code),
        }
        console.print_json(json.dumps(payload))
    else:
        report_failures(failed)
        if found:
            print_header("DEBUG STATEMENTS")
            display_matches([d for d, _ in found], config.debug_keyword)
            print_status_panel(
                "DEBUG FOUND",
                f"{len(found)} debug statement(s) in {len({d.path for d, _ in found})} file(s)",
                "Run 'dbgc off' to comment them out or 'dbgc delete' to remove them",
                level="error" if fail_on_debug else "warning",
            )
        else:
            print_success(f"No debug statements found in {len(files)} file(s)")

    if exit_code:
        sys.exit(exit_code)
