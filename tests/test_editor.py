"""Tests for line-level rewriting."""

from dbgc.editor import (
    Action,
    apply_changes,
    comment_line,
    is_standalone,
    rewrite_lines,
    uncomment_line,
)
from dbgc.scanner import ScanConfig, Statement, scan_file
from conftest import SAMPLE_C, lines_of, statements_of


class TestLineEdits:
    """Single-line comment and uncomment."""

    def test_comment_keeps_indentation(self):
        assert comment_line('    printf("debug");') == '    // printf("debug");'
        assert comment_line("\tx();", "#") == "\t# x();"

    def test_comment_blank_line_untouched(self):
        assert comment_line("   ") == "   "

    def test_uncomment(self):
        assert uncomment_line('    // printf("debug");') == '    printf("debug");'
        assert uncomment_line("//x();") == "x();"
        assert uncomment_line("x(); // y") == "x(); // y"

    def test_round_trip(self):
        for line in ['    printf("a");', "\t\tfoo(1,", '            "debug\\n");']:
            assert uncomment_line(comment_line(line)) == line


class TestRewriteLines:
    """Applying actions to statement line ranges."""

    LINES = ["a();\n", "printf(\"debug\",\n", "       x);\n", "b();\n"]
    STMT = Statement(2, 3, "printf", '"debug",\n       x', ("debug",))

    def test_comment_out_range(self):
        out = rewrite_lines(self.LINES, [self.STMT], Action.COMMENT_OUT)
        assert out == ["a();\n", "// printf(\"debug\",\n", "       // x);\n", "b();\n"]

    def test_delete_range(self):
        out = rewrite_lines(self.LINES, [self.STMT], Action.DELETE)
        assert out == ["a();\n", "b();\n"]

    def test_overlapping_ranges_edited_once(self):
        out = rewrite_lines(self.LINES, [self.STMT, self.STMT], Action.COMMENT_OUT)
        assert out[1] == "// printf(\"debug\",\n"

    def test_report_changes_nothing(self):
        assert rewrite_lines(self.LINES, [self.STMT], Action.REPORT) == self.LINES

    def test_crlf_preserved(self):
        stmt = Statement(1, 1, "x", "", ())
        out = rewrite_lines(["x();\r\n", "y();\r\n"], [stmt], Action.COMMENT_OUT)
        assert out == ["// x();\r\n", "y();\r\n"]

    def test_blank_line_in_range_gets_bare_marker(self):
        lines = ["printf(\"debug\",\n", "\n", "       x);\n"]
        stmt = Statement(1, 3, "printf", "", ("debug",))
        out = rewrite_lines(lines, [stmt], Action.COMMENT_OUT)
        assert out == ["// printf(\"debug\",\n", "//\n", "       // x);\n"]
        assert rewrite_lines(out, [stmt], Action.UNCOMMENT) == lines


class TestStandalone:
    """Only statements that own their lines can be rewritten."""

    def _first(self, source, language="go"):
        return statements_of(source, language)[0], lines_of(source)

    def test_plain_statement(self):
        stmt, lines = self._first('\tfmt.Println("debug") // note\n')
        assert is_standalone(stmt, lines)

    def test_assignment_is_embedded(self):
        stmt, lines = self._first('\tmsg := fmt.Sprintf("debug %d", v)\n')
        assert not is_standalone(stmt, lines)

    def test_trailing_code_is_embedded(self):
        stmt, lines = self._first('printf("debug\\n"); x++;\n', "c")
        assert not is_standalone(stmt, lines)


class TestApplyChanges:
    """In-place file rewriting."""

    def test_off_then_on_restores_file(self, write_source):
        path = write_source("main.c", SAMPLE_C)
        result = scan_file(path, ScanConfig())
        statements = [c.statement for c in result.debug_statements]

        changed = apply_changes(path, statements, Action.COMMENT_OUT)
        assert changed == 4
        content = path.read_text(encoding="utf-8")
        assert '    // printf("Debug: x = %d\\n", x);' in content
        assert '    printf("Result: %d\\n", x);' in content

        disabled = scan_file(path, ScanConfig(), disabled=True)
        apply_changes(path, [c.statement for c in disabled.debug_statements], Action.UNCOMMENT)
        assert path.read_text(encoding="utf-8") == SAMPLE_C

    def test_delete(self, write_source):
        path = write_source("main.c", SAMPLE_C)
        result = scan_file(path, ScanConfig())
        removed = apply_changes(path, [c.statement for c in result.debug_statements], Action.DELETE)
        assert removed == 4
        content = path.read_text(encoding="utf-8")
        assert "debug" not in content.lower()
        assert "Result" in content

    def test_off_then_on_with_blank_line_inside_call(self, write_source):
        source = 'func main() {\n\tfmt.Printf("debug %d",\n\n\t\tx)\n}\n'
        path = write_source("gap.go", source)
        result = scan_file(path, ScanConfig())
        apply_changes(path, [c.statement for c in result.debug_statements], Action.COMMENT_OUT)
        assert path.read_text(encoding="utf-8") == (
            'func main() {\n\t// fmt.Printf("debug %d",\n//\n\t\t// x)\n}\n'
        )

        disabled = scan_file(path, ScanConfig(), disabled=True)
        assert [c.statement.start_line for c in disabled.debug_statements] == [2]
        apply_changes(path, [c.statement for c in disabled.debug_statements], Action.UNCOMMENT)
        assert path.read_text(encoding="utf-8") == source
