"""Action dispatcher - turns classifications into final per-statement actions.

The dispatcher is called once per Classification, in file order, and hands
each final decision to a rewrite hook. It never sees fully-commented lines
(they have no Classification) and never dispatches a file that failed to scan.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from dbgc.editor import Action, is_standalone
from dbgc.scanner import Classification, FileScanResult, ScanConfig, get_profile
from dbgc.utils.logging import logger

EMBEDDED_NOTE = "embedded in a larger expression"


@dataclass(frozen=True)
class Decision:
    """Final action for one classified statement."""

    path: str
    classification: Classification
    action: Action
    note: str = ""
    snippet: str = ""

    @property
    def selected(self) -> bool:
        return self.action != Action.SKIP


RewriteHook = Callable[[Decision], None]


class ActionDispatcher:
    """Decide the final action for each classification and call the hook.

    Args:
        action: Requested action for debug statements
        config: Scan options (for the comment marker override)
        hook: Called with every Decision, SKIP decisions included
    """

    def __init__(self, action: Action, config: ScanConfig, hook: RewriteHook | None = None):
        self.action = action
        self.config = config
        self.hook = hook

    def marker_for(self, language: str) -> str:
        return self.config.resolve_profile(get_profile(language)).line_comment

    def dispatch(self, result: FileScanResult) -> list[Decision]:
        if result.failed:
            return []

        marker = self.marker_for(result.language)
        texts = {line.index: line.text for line in result.lines}
        decisions = []
        for classification in result.classifications:
            decision = self._decide(result, classification, marker, texts)
            if self.hook is not None:
                self.hook(decision)
            decisions.append(decision)
        return decisions

    def dispatch_all(self, results: Iterable[FileScanResult]) -> list[Decision]:
        decisions = []
        for result in results:
            decisions.extend(self.dispatch(result))
        return decisions

    def _decide(
        self, result: FileScanResult, c: Classification, marker: str, texts: dict[int, str]
    ) -> Decision:
        snippet = texts.get(c.statement.start_line, "").strip()
        if not c.is_debug:
            return Decision(result.path, c, Action.SKIP, snippet=snippet)

        if self.action in (Action.REPORT, Action.SKIP):
            return Decision(result.path, c, self.action, snippet=snippet)

        if not is_standalone(c.statement, result.lines, marker):
            logger.debug(
                "Not rewriting {target} at {path}:{line}: {note}",
                target=c.statement.call_target,
                path=result.path,
                line=c.statement.start_line,
                note=EMBEDDED_NOTE,
            )
            return Decision(result.path, c, Action.SKIP, note=EMBEDDED_NOTE, snippet=snippet)

        return Decision(result.path, c, self.action, snippet=snippet)
