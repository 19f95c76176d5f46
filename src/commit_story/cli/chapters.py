"""Chapters command — fixed-size fallback chapters for a log export."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..chapters import group_commits
from ..exceptions import CommitStoryError
from ..upload import ingest_upload, read_log_file
from . import app
from ._common import fail, resolve_config


@app.command()
def chapters(
    log_file: Path = typer.Argument(
        ...,
        help="Git log export (.txt) to group",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    batch_size: Optional[int] = typer.Option(
        None,
        "--batch-size",
        "-n",
        help="Commits per chapter (default from config: 5)",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
) -> None:
    """Group parsed commits into fallback chapters and print them as JSON."""
    cfg = resolve_config(config, verbose=verbose, chapter_batch_size=batch_size)

    try:
        outcome = ingest_upload(read_log_file(log_file, cfg), config=cfg)
    except CommitStoryError as e:
        fail(e)

    grouped = group_commits(outcome.commits, batch_size=cfg.chapter_batch_size)
    print(json.dumps([c.to_dict() for c in grouped], indent=2, ensure_ascii=False))
