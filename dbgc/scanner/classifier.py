"""Debug classifier - decides whether a reconstructed statement is debug output.

Call-target filtering always comes first: a statement whose target is not a
recognized output call is never examined further, so debug-looking text inside
unrelated calls is not flagged.
"""

from collections.abc import Iterable
from typing import Literal

from .exceptions import ConfigurationError
from .models import Classification, ClassificationReason, Statement

KeywordScope = Literal["literal", "arguments"]
KEYWORD_SCOPES = ("literal", "arguments")


class DebugClassifier:
    """Classify statements by call target and argument content.

    Args:
        output_targets: Qualified call names treated as output-emitting
        debug_keyword: Keyword marking debug output (case-insensitive)
        debug_targets: Call names that are debug output by themselves (dbg!)
        match_all_output: Treat every recognized output call as debug
        keyword_scope: "literal" inspects string-literal text only;
            "arguments" inspects the whole raw argument text
    """

    def __init__(
        self,
        output_targets: Iterable[str],
        debug_keyword: str = "debug",
        debug_targets: Iterable[str] = (),
        match_all_output: bool = False,
        keyword_scope: KeywordScope = "literal",
    ):
        if not debug_keyword or not debug_keyword.strip():
            raise ConfigurationError("debug keyword must be a non-empty string")
        if keyword_scope not in KEYWORD_SCOPES:
            raise ConfigurationError(
                f"keyword scope must be one of {', '.join(KEYWORD_SCOPES)}, got '{keyword_scope}'"
            )

        self.output_targets = frozenset(output_targets)
        self.debug_targets = frozenset(debug_targets)
        self.keyword = debug_keyword.strip().lower()
        self.match_all_output = match_all_output
        self.keyword_scope = keyword_scope

    @property
    def recognized_targets(self) -> frozenset[str]:
        return self.output_targets | self.debug_targets

    def classify(self, stmt: Statement) -> Classification:
        target = stmt.call_target

        if target in self.debug_targets:
            return Classification(stmt, True, ClassificationReason.CALL_TARGET_MATCH)

        if target not in self.output_targets:
            return Classification(stmt, False, ClassificationReason.NONE)

        if self._has_keyword(stmt):
            return Classification(stmt, True, ClassificationReason.CONTENT_KEYWORD_MATCH)

        if self.match_all_output:
            return Classification(stmt, True, ClassificationReason.CALL_TARGET_MATCH)

        return Classification(stmt, False, ClassificationReason.NONE)

    def _has_keyword(self, stmt: Statement) -> bool:
        if self.keyword_scope == "arguments":
            return self.keyword in stmt.raw_argument_text.lower()
        return any(self.keyword in literal.lower() for literal in stmt.literals)
