"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="commit-story",
    help="commit-story - turn an exported git log into structured, chapterable commits",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"commit-story {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Parse git log exports and prepare them for storytelling."""


# Import subcommands to register them
from .parse import parse as _parse  # noqa: F401, E402
from .log_command import command as _command  # noqa: F401, E402
from .chapters import chapters as _chapters  # noqa: F401, E402
