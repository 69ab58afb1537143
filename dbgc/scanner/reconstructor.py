"""Statement reconstructor - groups physical lines into logical calls.

Works on delimiter-balanced text, not a grammar. One depth counter covers
(), {} and []; string literals suppress counting; escapes inside a literal
skip the next character. A statement starts at a qualified identifier followed
by '(' (or, for stream targets, '<<') and closes when depth returns to zero
(or, for streams, at the first ';' at depth zero).

Fully-commented lines are skipped outright: they never start or extend a
statement.
"""

from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass, field

from dbgc.utils.logging import logger

from .exceptions import MalformedStatement
from .lexing import (
    CALL_START_RE,
    IDENTIFIER_CHAIN_RE,
    is_token_boundary,
    match_literal,
    skip_char_literal,
)
from .models import CommentState, SourceLine, Statement
from .profiles import NON_CALL_KEYWORDS, LanguageProfile, LiteralRule

OPENERS = "([{"
CLOSERS = ")]}"


@dataclass
class _OpenStatement:
    """Mutable accumulator for the statement currently being reconstructed."""

    call_target: str
    start_line: int
    start_column: int
    is_stream: bool
    depth: int
    fragments: list[str] = field(default_factory=list)
    literals: list[str] = field(default_factory=list)


@dataclass
class _OpenLiteral:
    rule: LiteralRule
    start_line: int
    chars: list[str] = field(default_factory=list)
    continued: bool = False


class StatementReconstructor:
    """Single-use reconstructor for one file.

    Create one per file; `statements()` may be iterated exactly once.
    """

    def __init__(
        self,
        lines: Sequence[SourceLine],
        comment_states: Sequence[CommentState],
        profile: LanguageProfile,
        path: str | None = None,
        call_targets: Collection[str] | None = None,
    ):
        if len(lines) != len(comment_states):
            raise ValueError(
                f"lines and comment_states differ in length ({len(lines)} != {len(comment_states)})"
            )
        self.lines = lines
        self.comment_states = comment_states
        self.profile = profile
        self.path = path
        self.call_targets = call_targets

        self._stmt: _OpenStatement | None = None
        self._literal: _OpenLiteral | None = None
        self._consumed = False

    def statements(self) -> Iterator[Statement]:
        """Yield statements in file order; raise MalformedStatement at the end if unbalanced."""
        if self._consumed:
            raise RuntimeError("StatementReconstructor can only be iterated once")
        self._consumed = True

        last_line = 0
        for line, state in zip(self.lines, self.comment_states):
            last_line = line.index
            if state.is_fully_commented:
                continue
            yield from self._scan_line(line, state.code_start)

        if self._literal is not None:
            raise MalformedStatement(
                "unterminated string literal",
                self._literal.start_line,
                last_line,
                path=self.path,
            )
        if self._stmt is not None:
            raise MalformedStatement(
                f"unbalanced delimiters in call to '{self._stmt.call_target}' "
                f"(depth {self._stmt.depth} at end of input)",
                self._stmt.start_line,
                last_line,
                path=self.path,
            )

    def _scan_line(self, line: SourceLine, start: int) -> Iterator[Statement]:
        text = line.text
        n = len(text)
        profile = self.profile
        block = profile.block_comment
        i = start
        frag_start = start
        code_end = n

        if self._literal is not None:
            self._literal.continued = False

        while i < n:
            if self._literal is not None:
                i = self._consume_literal(text, i)
                continue

            ch = text[i]

            if text.startswith(profile.line_comment, i):
                code_end = i
                break

            if block and text.startswith(block[0], i):
                end = text.find(block[1], i + len(block[0]))
                if end == -1:
                    code_end = i
                    break
                i = end + len(block[1])
                continue

            rule = match_literal(text, i, profile)
            if rule is not None:
                self._literal = _OpenLiteral(rule=rule, start_line=line.index)
                i += len(rule.delimiter)
                continue

            if ch == "'" and profile.char_literals:
                end = skip_char_literal(text, i)
                i = end if end is not None else i + 1
                continue

            if self._stmt is None:
                started = self._try_start(text, i, line.index)
                if started is None:
                    i += 1
                elif started < 0:
                    # Not a call: skip the whole identifier chain
                    m = IDENTIFIER_CHAIN_RE.match(text, i)
                    i = m.end() if m else i + 1
                else:
                    i = frag_start = started
                continue

            stmt = self._stmt
            if ch in OPENERS:
                stmt.depth += 1
            elif ch in CLOSERS:
                stmt.depth -= 1
                if stmt.depth == 0 and not stmt.is_stream:
                    yield self._close(text[frag_start:i], line.index, i + 1)
                    i += 1
                    continue
                if stmt.depth < 0:
                    # Stream expression ended by an enclosing ')'
                    yield self._close(text[frag_start:i], line.index, i)
                    continue
            elif ch == ";" and stmt.is_stream and stmt.depth == 0:
                yield self._close(text[frag_start:i], line.index, i + 1)
                i += 1
                continue
            i += 1

        if self._literal is not None:
            lit = self._literal
            if lit.rule.multiline:
                lit.chars.append("\n")
            elif not lit.continued:
                raise MalformedStatement(
                    "unterminated string literal",
                    lit.start_line,
                    line.index,
                    path=self.path,
                )

        if self._stmt is not None:
            self._stmt.fragments.append(text[frag_start:code_end])

    def _try_start(self, text: str, pos: int, line_no: int) -> int | None:
        """Try to open a statement at `pos`.

        Returns the scan position after the opening delimiter, -1 if an
        identifier starts here but is not a call, or None if nothing does.
        """
        if not is_token_boundary(text, pos):
            return None
        ch = text[pos]
        if not (ch.isalpha() or ch in "_$"):
            return None

        m = CALL_START_RE.match(text, pos)
        if m is None:
            return -1

        target = m.group("target")
        is_stream = m.group("open") == "<<"
        if target in NON_CALL_KEYWORDS:
            return -1
        if is_stream and target not in self.profile.stream_targets:
            return -1
        if self.call_targets is not None and target not in self.call_targets:
            return -1

        self._stmt = _OpenStatement(
            call_target=target,
            start_line=line_no,
            start_column=pos,
            is_stream=is_stream,
            depth=0 if is_stream else 1,
        )
        logger.trace("Statement start {target} at line {line}", target=target, line=line_no)
        return m.end()

    def _consume_literal(self, text: str, i: int) -> int:
        """Advance through literal content; close the literal if its delimiter is found."""
        lit = self._literal
        rule = lit.rule
        n = len(text)

        while i < n:
            if rule.escapes and text[i] == "\\":
                if i + 1 >= n:
                    # Backslash-newline: the literal continues on the next line
                    lit.continued = True
                    return n
                lit.chars.append(text[i : i + 2])
                i += 2
                continue
            if text.startswith(rule.delimiter, i):
                if self._stmt is not None:
                    self._stmt.literals.append("".join(lit.chars))
                self._literal = None
                return i + len(rule.delimiter)
            lit.chars.append(text[i])
            i += 1
        return i

    def _close(self, last_fragment: str, end_line: int, end_column: int) -> Statement:
        stmt = self._stmt
        self._stmt = None
        stmt.fragments.append(last_fragment)
        return Statement(
            start_line=stmt.start_line,
            end_line=end_line,
            call_target=stmt.call_target,
            raw_argument_text="\n".join(stmt.fragments),
            literals=tuple(stmt.literals),
            start_column=stmt.start_column,
            end_column=end_column,
        )


def reconstruct(
    lines: Sequence[SourceLine],
    comment_states: Sequence[CommentState],
    profile: LanguageProfile,
    path: str | None = None,
    call_targets: Collection[str] | None = None,
) -> Iterator[Statement]:
    """Lazily reconstruct the statements of one file.

    With `call_targets`, only those names open statements; any other call is
    read as plain text, so output calls nested in callbacks are still found.
    """
    return StatementReconstructor(
        lines, comment_states, profile, path=path, call_targets=call_targets
    ).statements()
