"""Tests for statement reconstruction across physical lines."""

import pytest

from dbgc.scanner import (
    MalformedStatement,
    StatementReconstructor,
    classify_lines,
    get_profile,
    reconstruct,
)
from dbgc.scanner.profiles import JAVASCRIPT_OUTPUT_TARGETS, RUST_DEBUG_TARGETS, RUST_OUTPUT_TARGETS
from conftest import SAMPLE_RUST, lines_of, statements_of


class TestSingleLine:
    """Calls that open and close on one line."""

    def test_simple_call(self):
        (stmt,) = statements_of('printf("debug %d\\n", x);')
        assert stmt.call_target == "printf"
        assert (stmt.start_line, stmt.end_line) == (1, 1)
        assert stmt.literals == ("debug %d\\n",)
        assert stmt.start_column == 0
        assert stmt.end_column == len('printf("debug %d\\n", x)')

    def test_nested_calls_are_one_statement(self):
        (stmt,) = statements_of('printf("debug %d\\n", compute(a, (b + c)));')
        assert stmt.call_target == "printf"
        assert "compute(a, (b + c))" in stmt.raw_argument_text

    def test_delimiters_inside_string_ignored(self):
        (stmt,) = statements_of('printf("debug ) ( ] %d\\n", x);')
        assert stmt.end_line == 1
        assert stmt.literals == ("debug ) ( ] %d\\n",)

    def test_escaped_quote(self):
        (stmt,) = statements_of('printf("say \\"debug)\\" now\\n");')
        assert stmt.end_column == len('printf("say \\"debug)\\" now\\n")')

    def test_two_calls_on_one_line(self):
        first, second = statements_of('printf("a\\n"); printf("debug b\\n");')
        assert first.start_column == 0
        assert second.start_column == len('printf("a\\n"); ')
        assert first.start_line == second.start_line == 1

    def test_trailing_comment_with_paren(self):
        (stmt,) = statements_of('printf("debug\\n"); // )\nint y = 2;\n')
        assert stmt.end_line == 1

    def test_inline_block_comment_inside_call(self):
        (stmt,) = statements_of('printf(/* ) */ "debug\\n");')
        assert stmt.literals == ("debug\\n",)

    def test_char_literal_paren(self):
        (stmt,) = statements_of("putchar(')');")
        assert stmt.call_target == "putchar"
        assert stmt.end_line == 1

    def test_control_keywords_are_not_calls(self):
        stmts = statements_of("if (x) { return (y); }")
        assert stmts == []


class TestMultiLine:
    """Calls spanning several physical lines."""

    def test_arguments_on_following_lines(self):
        (stmt,) = statements_of(
            """\
            printf("debug: %d %d\\n",
                   a,
                   b);
            """
        )
        assert (stmt.start_line, stmt.end_line) == (1, 3)
        assert stmt.line_span == 3
        assert stmt.raw_argument_text.count("\n") == 2

    def test_commented_line_inside_call_is_skipped(self):
        (stmt,) = statements_of(
            """\
            printf("debug %d\\n",
                   // a,
                   b);
            """
        )
        assert (stmt.start_line, stmt.end_line) == (1, 3)
        assert "// a" not in stmt.raw_argument_text

    def test_string_continued_with_backslash(self):
        (stmt,) = statements_of('printf("debug \\\nvalue %d\\n", x);\n')
        assert (stmt.start_line, stmt.end_line) == (1, 2)
        assert stmt.literals[0].startswith("debug ")

    def test_statements_in_file_order(self):
        stmts = statements_of(
            """\
            printf("one\\n");
            fprintf(stderr,
                    "two\\n");
            puts("three");
            """
        )
        assert [s.start_line for s in stmts] == [1, 2, 4]
        assert [s.end_line for s in stmts] == [1, 3, 4]


class TestMalformed:
    """Unbalanced input raises MalformedStatement."""

    def test_unbalanced_at_end_of_input(self):
        with pytest.raises(MalformedStatement) as excinfo:
            statements_of('printf("debug %d\\n", x;\nint y = 2;\n')
        err = excinfo.value
        assert err.start_line == 1
        assert err.end_line == 2
        assert "unbalanced" in err.reason

    def test_unterminated_string(self):
        with pytest.raises(MalformedStatement) as excinfo:
            statements_of('printf("debug);\nint y = 2;\n')
        assert excinfo.value.reason == "unterminated string literal"
        assert excinfo.value.start_line == 1

    def test_earlier_statements_are_yielded_first(self):
        profile = get_profile("c")
        lines = lines_of('puts("ok");\nprintf("debug",\n')
        stmts = reconstruct(lines, classify_lines(lines, profile), profile, path="x.c")
        assert next(stmts).call_target == "puts"
        with pytest.raises(MalformedStatement) as excinfo:
            next(stmts)
        assert str(excinfo.value).startswith("x.c:2-2:")

    def test_single_use(self):
        profile = get_profile("c")
        lines = lines_of('puts("ok");\n')
        rec = StatementReconstructor(lines, classify_lines(lines, profile), profile)
        assert len(list(rec.statements())) == 1
        with pytest.raises(RuntimeError):
            list(rec.statements())


class TestLanguageRules:
    """Language-specific literal and call forms."""

    def test_cpp_stream_statement(self):
        (stmt,) = statements_of('std::cout << "debug " << x << std::endl;', "cpp")
        assert stmt.call_target == "std::cout"
        assert stmt.literals == ("debug ",)
        assert stmt.end_column == len('std::cout << "debug " << x << std::endl;')

    def test_cpp_stream_over_lines(self):
        (stmt,) = statements_of(
            """\
            std::cerr << "debug: "
                      << value
                      << std::endl;
            """,
            "cpp",
        )
        assert (stmt.start_line, stmt.end_line) == (1, 3)

    def test_shift_on_non_stream_is_not_a_statement(self):
        assert statements_of("mask << 2;", "cpp") == []

    def test_go_raw_string_spans_lines(self):
        (stmt,) = statements_of("fmt.Printf(`debug\nvalue %d`, x)\n", "go")
        assert (stmt.start_line, stmt.end_line) == (1, 2)
        assert stmt.literals == ("debug\nvalue %d",)

    def test_rust_lifetimes_and_char_literals(self):
        targets = RUST_OUTPUT_TARGETS | RUST_DEBUG_TARGETS
        stmts = statements_of(SAMPLE_RUST, "rust", call_targets=targets)
        assert [(s.call_target, s.start_line) for s in stmts] == [("dbg!", 3), ("println!", 4)]

    def test_java_text_block(self):
        (stmt,) = statements_of(
            'System.out.println("""\n    debug block\n    """);\n', "java"
        )
        assert stmt.call_target == "System.out.println"
        assert "debug block" in stmt.literals[0]

    def test_output_call_nested_in_callback(self):
        source = 'promise.then(() => {\n  console.log("debug");\n});\n'
        (outer,) = statements_of(source, "javascript")
        assert outer.call_target == "promise.then"

        (inner,) = statements_of(source, "javascript", call_targets=JAVASCRIPT_OUTPUT_TARGETS)
        assert inner.call_target == "console.log"
        assert inner.start_line == 2

    def test_python_single_quotes(self):
        (stmt,) = statements_of("print('debug )', x)  # trailing (\n", "python")
        assert stmt.literals == ("debug )",)
