"""dbgc CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click
from rich.table import Table

from dbgc import __version__
from dbgc.ui import console


class VerboseGroup(click.Group):
    """Help system that lists registered commands by category."""

    def format_commands(self, ctx, formatter):
        """Override to suppress default command listing (we use categorized format in format_help)."""
        pass

    COMMAND_CATEGORIES = {
        "REPORTING": {
            "title": "REPORTING",
            "description": "Find debug statements without touching files",
            "commands": ["scan"],
            "command_meta": {
                "scan": {
                    "use_when": "Pre-commit hook or CI gate (--fail-on-debug)",
                },
            },
        },
        "EDITING": {
            "title": "EDITING",
            "description": "Rewrite source files in place",
            "commands": ["off", "on", "delete"],
            "command_meta": {
                "off": {
                    "use_when": "Silence debug output before a commit",
                },
                "on": {
                    "use_when": "Bring back statements disabled by 'off'",
                },
                "delete": {
                    "run_when": "Debug output is no longer needed",
                },
            },
        },
    }

    def format_help(self, ctx, formatter):
        """Generate Rich-styled categorized help."""
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not name.startswith("_") and not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for _category_id, category_data in self.COMMAND_CATEGORIES.items():
            console.print(f"\n[bold cyan]{category_data['title']}[/bold cyan]")
            console.print(f"[dim]{category_data['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=10)
            table.add_column("Description", style="white")
            table.add_column("When", style="dim", width=44)

            for cmd_name in category_data["commands"]:
                if cmd_name not in registered:
                    continue
                cmd = registered[cmd_name]

                first_line = (cmd.help or "").split("\n")[0].strip()
                period_idx = first_line.find(".")
                short_help = first_line[:period_idx] if period_idx > 0 else first_line

                cmd_meta = category_data.get("command_meta", {}).get(cmd_name, {})
                hint = ""
                if "use_when" in cmd_meta:
                    hint = f"USE: {cmd_meta['use_when']}"
                elif "run_when" in cmd_meta:
                    hint = f"RUN: {cmd_meta['run_when']}"

                table.add_row(cmd_name, short_help, hint)

            console.print(table)

        console.print()
        console.rule()
        console.print("For detailed options: [cmd]dbgc <command> --help[/cmd]")


@click.group(cls=VerboseGroup)
@click.version_option(version=__version__, prog_name="dbgc")
@click.help_option("-h", "--help")
def cli():
    """dbgc - find, comment out and delete leftover debug statements

    \b
    QUICK START:
      dbgc scan                 # List debug statements
      dbgc off                  # Comment them out
      dbgc on                   # Bring them back
      dbgc delete --dry-run     # Preview deletion

    \b
    Languages: C, C++, Go, Rust, Java, JavaScript/TypeScript, Python
    For detailed options: dbgc <command> --help"""
    pass


from dbgc.commands.delete import delete
from dbgc.commands.scan import scan
from dbgc.commands.toggle import off, on

cli.add_command(scan)
cli.add_command(off)
cli.add_command(on)
cli.add_command(delete)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
