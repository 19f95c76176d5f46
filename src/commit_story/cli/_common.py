"""Shared CLI helpers."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ParserConfig, load_config
from ..exceptions import CommitStoryError
from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> ParserConfig:
    """Build config from CLI options and set up logging to match."""
    try:
        cfg = load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
    except CommitStoryError as e:
        fail(e)
    setup_logging(cfg.verbosity)
    return cfg


def fail(error: CommitStoryError) -> NoReturn:
    """Print a domain error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)
