"""Pytest configuration and fixtures."""
import textwrap
from pathlib import Path

import pytest

from dbgc.scanner import classify_lines, get_profile, reconstruct, to_source_lines

SAMPLE_C = """\
#include <stdio.h>

int main(void) {
    int x = 42;
    printf("Debug: x = %d\\n", x);
    printf("Result: %d\\n", x);
    fprintf(stderr,
            "debug: multi %d\\n",
            x);
    return 0;
}
"""

SAMPLE_GO = """\
package main

import "fmt"

func main() {
\tvalue := 7
\tfmt.Println("DEBUG: starting")
\tfmt.Printf("total %d\\n", value)
\tmsg := fmt.Sprintf("debug %d", value)
\tfmt.Println(msg)
}
"""

SAMPLE_RUST = """\
fn longest<'a>(x: &'a str, y: &'a str) -> &'a str {
    let c = '(';
    dbg!(x.len());
    println!("debug: comparing {} and {}", x, y);
    if x.len() > y.len() { x } else { y }
}
"""


def lines_of(source: str):
    """Dedent `source` and split it into SourceLines."""
    return to_source_lines(textwrap.dedent(source))


def statements_of(source: str, language: str = "c", call_targets=None):
    """Reconstruct every statement of `source`."""
    profile = get_profile(language)
    lines = lines_of(source)
    return list(reconstruct(lines, classify_lines(lines, profile), profile, call_targets=call_targets))


@pytest.fixture
def write_source(tmp_path):
    """Factory fixture: write a source file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def sample_project(tmp_path):
    """Small multi-language project with debug output in every file."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.c").write_text(SAMPLE_C, encoding="utf-8", newline="")
    (tmp_path / "src" / "main.go").write_text(SAMPLE_GO, encoding="utf-8", newline="")
    (tmp_path / "src" / "lib.rs").write_text(SAMPLE_RUST, encoding="utf-8", newline="")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text('console.log("debug");\n', encoding="utf-8")
    return tmp_path
