"""Line classifier - decides which physical lines are already disabled.

A line is fully commented when, after trimming leading whitespace, it starts
with the line-comment marker. Blank lines, lines wholly inside a block comment
and lines spliced onto a backslash-terminated line comment (C/C++) count as
fully commented too. Fully-commented lines never reach the reconstructor.

Lines inside a multi-line string literal (template strings, raw strings, text
blocks) are code, whatever they contain.
"""

from collections.abc import Iterable

from .lexing import match_literal, skip_char_literal
from .models import CommentState, SourceLine
from .profiles import LanguageProfile, LiteralRule


def _splices(line: str, profile: LanguageProfile) -> bool:
    return profile.splices_comments and line.rstrip().endswith("\\")


def _skip_literal(line: str, pos: int, rule: LiteralRule) -> tuple[int | None, bool]:
    """Find the end of a literal whose body starts at `pos`.

    Returns (index past the closing delimiter or None, ends in backslash-newline).
    """
    i = pos
    n = len(line)
    while i < n:
        if rule.escapes and line[i] == "\\":
            if i + 1 >= n:
                return None, True
            i += 2
            continue
        if line.startswith(rule.delimiter, i):
            return i + len(rule.delimiter), False
        i += 1
    return None, False


def _carried(rule: LiteralRule, continued: bool) -> str | None:
    return rule.delimiter if rule.multiline or continued else None


def _scan_code_tail(
    line: str, pos: int, profile: LanguageProfile
) -> tuple[bool, bool, str | None]:
    """Scan the code part of a line for a trailing comment.

    Returns (opens_block_comment, splices_next_line, open_literal).
    """
    marker = profile.line_comment
    block = profile.block_comment
    i = pos
    n = len(line)

    while i < n:
        if line.startswith(marker, i):
            return False, _splices(line, profile), None

        if block and line.startswith(block[0], i):
            end = line.find(block[1], i + len(block[0]))
            if end == -1:
                return True, False, None
            i = end + len(block[1])
            continue

        rule = match_literal(line, i, profile)
        if rule is not None:
            end, continued = _skip_literal(line, i + len(rule.delimiter), rule)
            if end is None:
                return False, False, _carried(rule, continued)
            i = end
            continue

        if line[i] == "'" and profile.char_literals:
            end = skip_char_literal(line, i)
            i = end if end is not None else i + 1
            continue

        i += 1

    return False, False, None


def _literal_rule(profile: LanguageProfile, delimiter: str) -> LiteralRule | None:
    for rule in profile.literals:
        if rule.delimiter == delimiter:
            return rule
    return None


def classify_line(
    line: str,
    prior_state: CommentState | None,
    profile: LanguageProfile,
) -> CommentState:
    """Classify one physical line given the state carried from the previous one."""
    prior = prior_state or CommentState()

    if prior.continues_line_comment:
        return CommentState(
            is_fully_commented=True,
            continues_line_comment=_splices(line, profile),
        )

    rule = _literal_rule(profile, prior.open_literal) if prior.open_literal else None
    if rule is not None:
        end, continued = _skip_literal(line, 0, rule)
        if end is None:
            return CommentState(open_literal=_carried(rule, continued))
        opens_block, splices, open_literal = _scan_code_tail(line, end, profile)
        return CommentState(
            in_block_comment=opens_block,
            continues_line_comment=splices,
            open_literal=open_literal,
        )

    marker = profile.line_comment
    block = profile.block_comment
    pos = 0

    if prior.in_block_comment and block:
        end = line.find(block[1])
        if end == -1:
            return CommentState(is_fully_commented=True, in_block_comment=True)
        pos = end + len(block[1])

    # Leading block comments (possibly several) before any code
    while True:
        rest = line[pos:]
        stripped = rest.lstrip()
        offset = pos + len(rest) - len(stripped)

        if not stripped:
            return CommentState(is_fully_commented=True, code_start=pos)

        if stripped.startswith(marker):
            return CommentState(
                is_fully_commented=True,
                continues_line_comment=_splices(line, profile),
                code_start=pos,
            )

        if block and stripped.startswith(block[0]):
            end = line.find(block[1], offset + len(block[0]))
            if end == -1:
                return CommentState(
                    is_fully_commented=True,
                    in_block_comment=True,
                    code_start=pos,
                )
            pos = end + len(block[1])
            continue

        break

    opens_block, splices, open_literal = _scan_code_tail(line, pos, profile)
    return CommentState(
        is_fully_commented=False,
        in_block_comment=opens_block,
        continues_line_comment=splices,
        code_start=pos,
        open_literal=open_literal,
    )


def classify_lines(lines: Iterable[SourceLine], profile: LanguageProfile) -> list[CommentState]:
    """Classify every line of a file, threading state from line to line."""
    states = []
    state = None
    for line in lines:
        state = classify_line(line.text, state, profile)
        states.append(state)
    return states
