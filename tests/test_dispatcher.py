"""Tests for the action dispatcher."""

from dbgc.dispatcher import EMBEDDED_NOTE, ActionDispatcher
from dbgc.editor import Action
from dbgc.scanner import MalformedStatement, ScanConfig, scan_file
from dbgc.scanner.models import FileScanResult
from conftest import SAMPLE_C, SAMPLE_GO


class TestDispatch:
    """Final action per classification."""

    def test_hook_sees_every_classification(self, write_source):
        path = write_source("main.c", SAMPLE_C)
        seen = []
        dispatcher = ActionDispatcher(Action.COMMENT_OUT, ScanConfig(), hook=seen.append)
        decisions = dispatcher.dispatch(scan_file(path, ScanConfig()))

        assert seen == decisions
        assert [d.action for d in decisions] == [Action.COMMENT_OUT, Action.SKIP, Action.COMMENT_OUT]
        assert decisions[0].snippet == 'printf("Debug: x = %d\\n", x);'

    def test_embedded_statement_skipped(self, write_source):
        path = write_source("main.go", SAMPLE_GO)
        dispatcher = ActionDispatcher(Action.DELETE, ScanConfig())
        decisions = dispatcher.dispatch(scan_file(path, ScanConfig()))

        by_target = {d.classification.statement.call_target: d for d in decisions if d.classification.is_debug}
        assert by_target["fmt.Println"].action == Action.DELETE
        assert by_target["fmt.Sprintf"].action == Action.SKIP
        assert by_target["fmt.Sprintf"].note == EMBEDDED_NOTE
        assert not by_target["fmt.Sprintf"].selected

    def test_report_keeps_embedded(self, write_source):
        path = write_source("main.go", SAMPLE_GO)
        decisions = ActionDispatcher(Action.REPORT, ScanConfig()).dispatch(scan_file(path, ScanConfig()))
        assert sum(1 for d in decisions if d.selected) == 2

    def test_failed_file_not_dispatched(self):
        calls = []
        result = FileScanResult(
            path="x.c",
            language="c",
            error=MalformedStatement("unbalanced", 1, 2, path="x.c"),
        )
        dispatcher = ActionDispatcher(Action.COMMENT_OUT, ScanConfig(), hook=calls.append)
        assert dispatcher.dispatch(result) == []
        assert calls == []

    def test_dispatch_all(self, write_source):
        results = [
            scan_file(write_source("main.c", SAMPLE_C), ScanConfig()),
            scan_file(write_source("main.go", SAMPLE_GO), ScanConfig()),
        ]
        decisions = ActionDispatcher(Action.REPORT, ScanConfig()).dispatch_all(results)
        assert len(decisions) == 3 + 4

    def test_marker_override(self):
        dispatcher = ActionDispatcher(Action.COMMENT_OUT, ScanConfig(comment_marker=";;"))
        assert dispatcher.marker_for("c") == ";;"
        assert ActionDispatcher(Action.COMMENT_OUT, ScanConfig()).marker_for("python") == "#"
