"""Parse command — read a log export and report what it contains."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CommitStoryError, NoCommitsParsedError
from ..formatters import OutputContext, get_formatter
from ..gitlog import GitLogParser
from ..upload import read_log_file
from . import app
from ._common import err_console, fail, resolve_config

FORMATS = ("rich", "json", "github")


@app.command()
def parse(
    log_file: Path = typer.Argument(
        ...,
        help="Git log export (.txt) to parse",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default), json, github",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write json/github output to this file instead of stdout",
        dir_okay=False,
    ),
    repo_url: Optional[str] = typer.Option(
        None,
        "--repo-url",
        help="Repository URL used to build html_url links (github format)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit 1 if any commit block was rejected",
    ),
    require_date: Optional[bool] = typer.Option(
        None,
        "--require-date/--no-require-date",
        help="Reject commit blocks without a Date: line",
    ),
    include_patches: Optional[bool] = typer.Option(
        None,
        "--patches/--no-patches",
        help="Keep per-file diff text in the output",
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
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
) -> None:
    """Parse a git log export into commits and rejected blocks."""
    if fmt not in FORMATS:
        err_console.print(f"[red]Unknown format {fmt!r}[/red]. Choose from: {', '.join(FORMATS)}")
        raise typer.Exit(code=2)
    if output is not None and fmt == "rich":
        err_console.print("[red]--output needs --format json or github[/red]")
        raise typer.Exit(code=2)

    cfg = resolve_config(
        config,
        verbose=verbose,
        quiet=quiet,
        require_date=require_date,
        include_patches=include_patches,
    )

    try:
        text = read_log_file(log_file, cfg)
    except CommitStoryError as e:
        fail(e)

    result = GitLogParser(cfg).parse(text)
    formatter = get_formatter(fmt)
    context = OutputContext(source=str(log_file), repo_url=repo_url)

    if output is not None:
        output.write_text(formatter.format(result, context) + "\n", encoding="utf-8")
        err_console.print(
            f"Wrote {result.successfully_parsed} commits to {output}", highlight=False, soft_wrap=True
        )
    else:
        formatter.render(result, context)

    if result.successfully_parsed == 0:
        fail(NoCommitsParsedError(result.total_commits, len(result.errors)))
    if strict and result.errors:
        err_console.print(f"[red]{len(result.errors)} commit block(s) rejected[/red]")
        raise typer.Exit(code=1)
