"""Scan configuration - the recognized options of the scanning engine."""

import dataclasses
from dataclasses import dataclass, field

from .classifier import KEYWORD_SCOPES, DebugClassifier
from .exceptions import ConfigurationError
from .profiles import LanguageProfile


@dataclass(frozen=True)
class ScanConfig:
    """Options shared by every file in a run.

    Validated on construction so a bad option fails before any file is read.

    Attributes:
        debug_keyword: Keyword marking debug output, matched case-insensitively
        output_call_targets: Extra output-emitting call names, added to the
            language profile's defaults
        comment_marker: Line-comment marker override (None keeps the
            profile's marker)
        match_all_output: Treat every recognized output call as debug
        keyword_scope: "literal" or "arguments" (see DebugClassifier)
    """

    debug_keyword: str = "debug"
    output_call_targets: frozenset[str] = field(default_factory=frozenset)
    comment_marker: str | None = None
    match_all_output: bool = False
    keyword_scope: str = "literal"

    def __post_init__(self):
        if not isinstance(self.debug_keyword, str) or not self.debug_keyword.strip():
            raise ConfigurationError("debug_keyword must be a non-empty string")
        if self.comment_marker is not None and not self.comment_marker.strip():
            raise ConfigurationError("comment_marker must not be empty")
        if self.keyword_scope not in KEYWORD_SCOPES:
            raise ConfigurationError(
                f"keyword_scope must be one of {', '.join(KEYWORD_SCOPES)}, "
                f"got '{self.keyword_scope}'"
            )
        object.__setattr__(self, "output_call_targets", frozenset(self.output_call_targets))

    def resolve_profile(self, profile: LanguageProfile) -> LanguageProfile:
        """Apply the comment marker override to a language profile."""
        if self.comment_marker is None or self.comment_marker == profile.line_comment:
            return profile
        return dataclasses.replace(profile, line_comment=self.comment_marker.strip())

    def build_classifier(self, profile: LanguageProfile) -> DebugClassifier:
        """Create a fresh classifier for one file of the given language."""
        return DebugClassifier(
            output_targets=profile.output_targets | profile.stream_targets | self.output_call_targets,
            debug_keyword=self.debug_keyword,
            debug_targets=profile.debug_targets,
            match_all_output=self.match_all_output,
            keyword_scope=self.keyword_scope,
        )
