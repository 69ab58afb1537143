"""Line-level rewriting of classified statements.

Every action works on whole line ranges [start_line, end_line] of a
statement. Line endings of untouched lines are preserved byte for byte.
"""

import re
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path

from dbgc.scanner.models import SourceLine, Statement
from dbgc.utils.logging import logger


class Action(Enum):
    """What to do with a classified statement."""

    COMMENT_OUT = "off"
    UNCOMMENT = "on"
    DELETE = "delete"
    REPORT = "report"
    SKIP = "skip"

    @property
    def verb(self) -> str:
        return {
            Action.COMMENT_OUT: "comment out",
            Action.UNCOMMENT: "uncomment",
            Action.DELETE: "delete",
            Action.REPORT: "report",
            Action.SKIP: "skip",
        }[self]


def comment_line(line: str, marker: str = "//") -> str:
    """Insert the comment marker after the line's indentation."""
    body = line.lstrip()
    if not body:
        return line
    indent = line[: len(line) - len(body)]
    return f"{indent}{marker} {body}"


def uncomment_line(line: str, marker: str = "//") -> str:
    """Remove a leading comment marker (and the one space after it)."""
    m = re.match(rf"^(\s*){re.escape(marker)} ?(.*)$", line, re.DOTALL)
    if not m:
        return line
    return m.group(1) + m.group(2)


def is_standalone(stmt: Statement, lines: Sequence[SourceLine], marker: str = "//") -> bool:
    """True if the statement owns its whole line range.

    Only whitespace may precede the call target on the first line, and only
    a ';', whitespace or a trailing comment may follow the closing delimiter
    on the last line. Anything else (an assignment, a return, a second call)
    would be damaged by a line-level rewrite.
    """
    by_index = {line.index: line.text for line in lines}
    first = by_index.get(stmt.start_line)
    last = by_index.get(stmt.end_line)
    if first is None or last is None:
        return False

    if first[: stmt.start_column].strip():
        return False

    tail = last[stmt.end_column :]
    return re.match(rf"^\s*;?\s*(?:(?:{re.escape(marker)}|/\*).*)?$", tail) is not None


def _split_ending(line: str) -> tuple[str, str]:
    body = line.rstrip("\r\n")
    return body, line[len(body) :]


def rewrite_lines(
    lines: Sequence[str],
    statements: Iterable[Statement],
    action: Action,
    marker: str = "//",
) -> list[str]:
    """Apply an action to the line ranges of `statements`.

    `lines` may carry their line endings (as from splitlines(keepends=True)).
    Overlapping ranges are rewritten once.
    """
    targets: set[int] = set()
    for stmt in statements:
        targets.update(range(stmt.start_line - 1, stmt.end_line))
    targets = {i for i in targets if 0 <= i < len(lines)}

    if action == Action.DELETE:
        return [line for i, line in enumerate(lines) if i not in targets]

    if action not in (Action.COMMENT_OUT, Action.UNCOMMENT):
        return list(lines)

    edit = comment_line if action == Action.COMMENT_OUT else uncomment_line
    out = list(lines)
    for i in sorted(targets):
        body, ending = _split_ending(out[i])
        if action == Action.COMMENT_OUT and not body.strip():
            # Bare marker keeps the commented statement in one comment run
            out[i] = body + marker + ending
        else:
            out[i] = edit(body, marker) + ending
    return out


def apply_changes(
    path: str | Path,
    statements: Sequence[Statement],
    action: Action,
    marker: str = "//",
) -> int:
    """Rewrite one file in place.

    Returns:
        Number of physical lines changed or removed
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()

    lines = content.splitlines(keepends=True)
    new_lines = rewrite_lines(lines, statements, action, marker)

    changed = (
        len(lines) - len(new_lines)
        if action == Action.DELETE
        else sum(1 for old, new in zip(lines, new_lines) if old != new)
    )

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write("".join(new_lines))

    logger.debug(
        "{action} {n} line(s) in {path}", action=action.verb, n=changed, path=str(path)
    )
    return changed
