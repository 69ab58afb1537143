"""Central UI handler for dbgc.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from dbgc.ui import console, print_header, print_warning

    console.print("[success]All files clean[/success]")
    print_header("DEBUG STATEMENTS")
    print_warning("File skipped")
"""

import re
import sys
from collections.abc import Sequence
from itertools import groupby

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from dbgc.dispatcher import Decision

DBGC_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "magenta",
    "lineno": "green",
    "keyword": "bold red",
    "cmd": "bold magenta",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=DBGC_THEME,
    force_terminal=sys.stdout.isatty(),
    highlight=False,
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {msg}")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")


def print_status_panel(status: str, message: str, detail: str, level: str = "info") -> None:
    """Print a status panel with colored border.

    Args:
        status: Status label (e.g., "DEBUG FOUND", "CLEAN")
        message: Main message line
        detail: Additional detail line
        level: One of "error", "warning", "success", "info"
    """
    style_map = {
        "error": ("bold red", "red"),
        "warning": ("bold yellow", "yellow"),
        "success": ("bold green", "green"),
        "info": ("bold cyan", "cyan"),
    }
    text_style, border_style = style_map.get(level, ("white", "white"))

    panel = Panel(
        Text.assemble(
            (f"STATUS: [{status}]\n", text_style),
            (f"{message}\n", border_style),
            (detail, border_style),
        ),
        border_style=border_style,
        expand=False,
    )
    console.print(panel)


def highlight_keyword(line: str, keyword: str) -> Text:
    """Return `line` as Rich Text with every case-insensitive keyword hit styled."""
    text = Text(line)
    text.highlight_regex(re.compile(re.escape(keyword), re.IGNORECASE), style="keyword")
    return text


def _match_line(decision: Decision, keyword: str) -> Text:
    stmt = decision.classification.statement
    line = Text.assemble((str(stmt.start_line), "lineno"), ":")
    line.append_text(highlight_keyword(decision.snippet, keyword))
    if stmt.line_span > 1:
        line.append(f"  (+{stmt.line_span - 1} lines)", style="dim")
    if decision.note:
        line.append(f"  [{decision.note}]", style="warning")
    return line


def display_matches(decisions: Sequence[Decision], keyword: str = "debug") -> None:
    """Print matches grouped by file: path, then line:content per statement."""
    console.print(f"\nFound {len(decisions)} debug statement(s):\n")

    ordered = sorted(decisions, key=lambda d: (d.path, d.classification.statement.start_line))
    for path, group in groupby(ordered, key=lambda d: d.path):
        console.print(Text(path, style="path"))
        for decision in group:
            console.print(_match_line(decision, keyword))
        console.print()


def parse_selection(value: str, count: int) -> list[int]:
    """Parse '1,3-5', 'all' or 'none' into sorted zero-based indices.

    Raises:
        click.BadParameter: on malformed input or out-of-range numbers
    """
    value = value.strip().lower()
    if value in ("", "none", "q"):
        return []
    if value in ("all", "a", "*"):
        return list(range(count))

    picked: set[int] = set()
    for part in value.replace(" ", "").split(","):
        if not part:
            continue
        m = re.fullmatch(r"(\d+)(?:-(\d+))?", part)
        if not m:
            raise click.BadParameter(f"'{part}' is not a number or range")
        lo = int(m.group(1))
        hi = int(m.group(2) or lo)
        if lo > hi:
            lo, hi = hi, lo
        if lo < 1 or hi > count:
            raise click.BadParameter(f"'{part}' is outside 1-{count}")
        picked.update(range(lo - 1, hi))
    return sorted(picked)


def select_interactive(decisions: Sequence[Decision], keyword: str = "debug") -> list[Decision]:
    """Let the user pick statements from a numbered list."""
    console.print(f"\nFound {len(decisions)} debug statement(s)\n")

    for number, decision in enumerate(decisions, start=1):
        entry = Text.assemble((f"{number:>4}  ", "cmd"), (decision.path, "path"), " ")
        entry.append_text(_match_line(decision, keyword))
        console.print(entry)

    console.print(
        "\nEnter numbers or ranges (e.g. 1,3-5), 'all' to select everything, "
        "or press Enter to cancel\n"
    )
    indices = click.prompt(
        "Select statements",
        default="",
        show_default=False,
        value_proc=lambda v: parse_selection(v, len(decisions)),
    )
    return [decisions[i] for i in indices]
