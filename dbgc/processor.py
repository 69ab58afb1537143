"""Command flow shared by off/on/delete and scan.

find -> scan -> display or select -> confirm -> dry-run summary or apply.
"""

from collections import defaultdict
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import click

from dbgc.dispatcher import ActionDispatcher, Decision
from dbgc.editor import Action, apply_changes
from dbgc.finder import SourceFinder
from dbgc.scanner import FileScanResult, ScanConfig, scan_batch
from dbgc.ui import console, display_matches, print_success, print_warning, select_interactive
from dbgc.utils.constants import DEFAULT_MAX_FILE_SIZE
from dbgc.utils.exit_codes import ExitCodes
from dbgc.utils.logging import logger

# Which scans each action needs: False = active code, True = commented-out code
SCAN_PASSES = {
    Action.COMMENT_OUT: (False,),
    Action.UNCOMMENT: (True,),
    Action.DELETE: (False, True),
    Action.REPORT: (False,),
}


def find_files(path: str | Path, cfg: dict[str, Any]) -> list[Path]:
    """Find scannable files under `path` using the `files`/`limits` config sections."""
    files_cfg = cfg.get("files", {})
    limits = cfg.get("limits", {})
    finder = SourceFinder(
        extensions=files_cfg.get("extensions") or None,
        exclude_patterns=files_cfg.get("exclude") or (),
        max_file_size=limits.get("max_file_size", DEFAULT_MAX_FILE_SIZE),
    )
    files = finder.find(path)
    logger.debug("File discovery stats: {stats}", stats=finder.stats)
    return files


def scan_passes(
    files: Sequence[Path],
    config: ScanConfig,
    cfg: dict[str, Any],
    passes: Sequence[bool],
) -> list[FileScanResult]:
    """Run one batch scan per pass and concatenate the results."""
    max_workers = cfg.get("limits", {}).get("max_workers")
    results: list[FileScanResult] = []
    for disabled in passes:
        results.extend(scan_batch(files, config, disabled=disabled, max_workers=max_workers))
    return results


def report_failures(results: Sequence[FileScanResult]) -> int:
    """Warn about every file that could not be scanned; return how many."""
    failed = [r for r in results if r.failed]
    for result in failed:
        print_warning(f"Skipped {result.path}: {result.error}")
    return len(failed)


def apply_decisions(
    decisions: Sequence[Decision],
    dispatcher: ActionDispatcher,
    languages: dict[str, str],
) -> int:
    """Rewrite every file touched by `decisions`; return lines changed."""
    by_path: dict[str, list[Decision]] = defaultdict(list)
    for decision in decisions:
        by_path[decision.path].append(decision)

    changed = 0
    for path, group in sorted(by_path.items()):
        marker = dispatcher.marker_for(languages[path])
        statements = [d.classification.statement for d in group]
        changed += apply_changes(path, statements, dispatcher.action, marker)
    return changed


def process_path(
    path: str | Path,
    action: Action,
    config: ScanConfig,
    cfg: dict[str, Any],
    yes: bool = False,
    interactive: bool = False,
    dry_run: bool = False,
) -> int:
    """Run one off/on/delete command against `path`.

    Args:
        path: File or directory to process
        action: COMMENT_OUT, UNCOMMENT or DELETE
        config: Validated scan options
        cfg: Runtime config dict (file filters, limits)
        yes: Skip the confirmation prompt
        interactive: Pick statements from a numbered list
        dry_run: Report what would change without writing

    Returns:
        Exit code (SUCCESS, or MALFORMED_FILES if any file could not be scanned)
    """
    files = find_files(path, cfg)
    results = scan_passes(files, config, cfg, SCAN_PASSES[action])
    failures = report_failures(results)
    exit_code = ExitCodes.MALFORMED_FILES if failures else ExitCodes.SUCCESS

    dispatcher = ActionDispatcher(action, config)
    decisions = dispatcher.dispatch_all(results)

    embedded = [d for d in decisions if d.note]
    for decision in embedded:
        stmt = decision.classification.statement
        print_warning(f"Left {decision.path}:{stmt.start_line} alone: {decision.note}")

    matches = [d for d in decisions if d.selected]
    if not matches:
        console.print("No matching debug statements found.")
        return exit_code

    if interactive:
        if action == Action.DELETE:
            console.print("Select statements to DELETE:")
        selected = select_interactive(matches, config.debug_keyword)
    else:
        display_matches(matches, config.debug_keyword)
        if not yes and not dry_run:
            if not click.confirm(f"Do you want to {action.verb} these statements?", default=False):
                console.print("\nOperation cancelled.")
                return exit_code
        selected = matches

    if not selected:
        console.print("\nNo statements selected.")
        return exit_code

    if dry_run:
        console.print(f"\n[DRY RUN] Would {action.verb} {len(selected)} statement(s).", markup=False)
        return exit_code

    languages = {r.path: r.language for r in results}
    changed = apply_decisions(selected, dispatcher, languages)
    logger.info("Changed {n} line(s) across {files} file(s)", n=changed,
                files=len({d.path for d in selected}))

    if action == Action.DELETE:
        print_success(f"Successfully deleted {len(selected)} statement(s).")
    else:
        print_success(f"Successfully processed {len(selected)} statement(s).")
    return exit_code
