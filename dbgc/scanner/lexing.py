"""Token-level helpers shared by the line classifier and the reconstructor."""

import re

from .profiles import LanguageProfile, LiteralRule

# 'a', '\n', '\x41', 'é' - anything else starting with ' is a lifetime or label
CHAR_LITERAL_RE = re.compile(r"'(?:\\[^']{1,10}|[^\\'\n])'")

# Qualified identifier (a.b.c, std::cout, println!) followed by '(' or '<<'
CALL_START_RE = re.compile(
    r"(?P<target>[A-Za-z_$][\w$]*(?:(?:\.|::)[A-Za-z_$][\w$]*)*!?)[ \t]*(?P<open>\(|<<)"
)

IDENTIFIER_CHAIN_RE = re.compile(r"[A-Za-z_$][\w$]*(?:(?:\.|::)[A-Za-z_$][\w$]*)*!?")


def match_literal(text: str, pos: int, profile: LanguageProfile) -> LiteralRule | None:
    """Return the literal rule whose opening delimiter starts at `pos`."""
    for rule in profile.literals:
        if text.startswith(rule.delimiter, pos):
            return rule
    return None


def skip_char_literal(text: str, pos: int) -> int | None:
    """Return the index just past a character literal at `pos`, or None."""
    m = CHAR_LITERAL_RE.match(text, pos)
    return m.end() if m else None


def is_token_boundary(text: str, pos: int) -> bool:
    """True if an identifier starting at `pos` is not the tail of a longer token."""
    if pos == 0:
        return True
    prev = text[pos - 1]
    return not (prev.isalnum() or prev in "_$.:")
