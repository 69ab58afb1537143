"""Options shared by the off, on and delete commands."""

import click

PATH_ARGUMENT = click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=True, dir_okay=True)
)


def action_options(func):
    """Attach PATH and the --yes/--all/--interactive/--dry-run flags."""
    func = click.option(
        "--dry-run", "-d", is_flag=True,
        help="Show what would be changed without modifying files",
    )(func)
    func = click.option(
        "--interactive", "-i", is_flag=True,
        help="Pick specific statements from a numbered list",
    )(func)
    func = click.option(
        "--all", "-a", "all_", is_flag=True,
        help="Match every recognized output call, not just debug statements",
    )(func)
    func = click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")(func)
    return PATH_ARGUMENT(func)
