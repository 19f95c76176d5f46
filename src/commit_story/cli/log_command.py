"""Command subcommand — print the git log invocation to run."""

import typer

from ..command import build_log_command
from . import app
from ._common import console


@app.command()
def command(
    repo_name: str = typer.Argument(..., help="Repository name, used for the output file name"),
) -> None:
    """Print the git log command that produces an uploadable export."""
    console.print(build_log_command(repo_name), markup=False, highlight=False, soft_wrap=True)
