"""Scan engine - runs the line classifier, reconstructor and classifier per file.

Every file gets its own classifier and reconstructor; nothing mutable is
shared, so files can be scanned on a thread pool without locks. A
MalformedStatement fails only the file it came from.
"""

import os
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from dbgc.utils.constants import DEFAULT_MAX_WORKERS
from dbgc.utils.logging import logger

from .classifier import DebugClassifier
from .config import ScanConfig
from .exceptions import MalformedStatement
from .line_classifier import classify_lines
from .models import Classification, FileScanResult, SourceLine
from .profiles import LanguageProfile, profile_for_path
from .reconstructor import reconstruct


def read_source_lines(path: str | Path) -> list[SourceLine]:
    """Read a file as 1-based SourceLines (UTF-8, undecodable bytes replaced)."""
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()
    return to_source_lines(content)


def to_source_lines(content: str) -> list[SourceLine]:
    """Split text into SourceLines, dropping line terminators."""
    return [SourceLine(i, text) for i, text in enumerate(content.splitlines(), start=1)]


def scan_lines(
    lines: Sequence[SourceLine],
    profile: LanguageProfile,
    classifier: DebugClassifier,
    path: str | None = None,
) -> Iterator[Classification]:
    """Lazily classify every statement in `lines`, in file order."""
    states = classify_lines(lines, profile)
    call_targets = classifier.recognized_targets | profile.stream_targets
    for stmt in reconstruct(lines, states, profile, path=path, call_targets=call_targets):
        yield classifier.classify(stmt)


def _disabled_lines(
    lines: Sequence[SourceLine], profile: LanguageProfile
) -> list[tuple[SourceLine, bool]]:
    """Pair each view line with whether it came from a marker-commented line."""
    marker = profile.line_comment
    paired = []
    prev = None
    for line, state in zip(lines, classify_lines(lines, profile)):
        text = ""
        commented = False
        if state.is_fully_commented:
            stripped = line.text.lstrip()
            if stripped.startswith(marker):
                indent = line.text[: len(line.text) - len(stripped)]
                text = indent + stripped[len(marker):]
                commented = True
            elif prev is not None and prev.continues_line_comment:
                text = line.text
                commented = True
        paired.append((SourceLine(line.index, text), commented))
        prev = state
    return paired


def disabled_view(lines: Sequence[SourceLine], profile: LanguageProfile) -> list[SourceLine]:
    """Build a view of the commented-out code in `lines`.

    Lines commented with the line marker have the marker removed; lines
    spliced onto such a comment are kept as they are; every other line
    (active code, block comments, blank lines) is blanked. Line numbers are
    preserved.
    """
    return [line for line, _ in _disabled_lines(lines, profile)]


def _runs(paired: Sequence[tuple[SourceLine, bool]]) -> Iterator[list[SourceLine]]:
    """Split a disabled view into runs of consecutive commented lines.

    A line holding only the marker stays inside its run, so a statement
    commented out across a blank line is still read as one.
    """
    run: list[SourceLine] = []
    for line, commented in paired:
        if commented:
            run.append(line)
        elif run:
            yield run
            run = []
    if run:
        yield run


def _scan_run(
    run: list[SourceLine],
    profile: LanguageProfile,
    classifier: DebugClassifier,
    path: str | None,
) -> list[Classification]:
    """Scan one comment run, restarting after any line that does not parse as code."""
    found: list[Classification] = []
    while run:
        try:
            for classification in scan_lines(run, profile, classifier, path=path):
                found.append(classification)
            break
        except MalformedStatement as e:
            # Everything found so far starts at or before the failing line
            logger.debug("Skipping comment text that is not code: {err}", err=str(e))
            run = [line for line in run if line.index > e.start_line]
    return found


def scan_disabled_lines(
    lines: Sequence[SourceLine],
    profile: LanguageProfile,
    classifier: DebugClassifier,
    path: str | None = None,
) -> tuple[list[SourceLine], list[Classification]]:
    """Classify statements that exist wholly inside line comments.

    Each run of consecutive commented lines is scanned on its own. Prose in a
    run (an apostrophe, an unclosed parenthesis) fails only from the line it
    opens on; scanning resumes on the next line.

    Returns:
        (view, classifications) - the view is what the statements index into
    """
    paired = _disabled_lines(lines, profile)
    found: list[Classification] = []
    for run in _runs(paired):
        found.extend(_scan_run(run, profile, classifier, path))
    return [line for line, _ in paired], found


def scan_file(
    path: str | Path,
    config: ScanConfig,
    disabled: bool = False,
) -> FileScanResult:
    """Scan one file and return its classifications, or the error that stopped it.

    Args:
        path: Source file; its extension selects the language profile
        config: Validated scan options
        disabled: Scan commented-out statements instead of active ones
    """
    path_str = str(path)
    base_profile = profile_for_path(path)
    if base_profile is None:
        raise ValueError(f"No language profile for {path_str}")

    profile = config.resolve_profile(base_profile)
    result = FileScanResult(path=path_str, language=profile.name)

    try:
        lines = read_source_lines(path)
    except OSError as e:
        logger.warning("Could not read {path}: {err}", path=path_str, err=str(e))
        result.error = e
        return result

    classifier = config.build_classifier(profile)

    try:
        if disabled:
            view, classifications = scan_disabled_lines(lines, profile, classifier, path=path_str)
            result.lines = view
        else:
            classifications = list(scan_lines(lines, profile, classifier, path=path_str))
            result.lines = lines
    except MalformedStatement as e:
        logger.debug("Malformed statement in {path}: {err}", path=path_str, err=e.reason)
        result.error = e
        result.lines = lines
        return result

    result.classifications = classifications
    logger.debug(
        "Scanned {path}: {total} statements, {debug} debug",
        path=path_str,
        total=len(classifications),
        debug=len(result.debug_statements),
    )
    return result


def scan_batch(
    paths: Iterable[str | Path],
    config: ScanConfig,
    disabled: bool = False,
    max_workers: int | None = None,
) -> list[FileScanResult]:
    """Scan many files concurrently; a failure in one file never affects another.

    Returns:
        One FileScanResult per path, sorted by path
    """
    paths = list(paths)
    if not paths:
        return []

    workers = max_workers or min(DEFAULT_MAX_WORKERS, os.cpu_count() or 4)
    results: list[FileScanResult] = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(scan_file, p, config, disabled): p for p in paths}

        for future in as_completed(futures):
            results.append(future.result())

    results.sort(key=lambda r: r.path)
    failed = sum(1 for r in results if r.failed)
    logger.info("Scanned {n} files ({failed} failed)", n=len(results), failed=failed)
    return results
