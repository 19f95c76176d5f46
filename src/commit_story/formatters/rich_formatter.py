"""Rich terminal formatter for parse results."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..gitlog import ParseResult
from .base import BaseFormatter, OutputContext

console = Console()

MAX_COMMIT_ROWS = 50


def _status_label(result: ParseResult) -> str:
    if result.total_commits == 0:
        return "[red bold]no commit blocks found[/red bold]"
    if result.successfully_parsed == 0:
        return "[red bold]nothing parsed[/red bold]"
    if result.errors:
        return "[yellow]partial[/yellow]"
    return "[green]ok[/green]"


class RichFormatter(BaseFormatter):
    """Summary panel, commits table and rejected-blocks table."""

    def render(self, result: ParseResult, context: OutputContext) -> None:
        self._print_summary(result, context)
        if result.commits:
            self._print_commits(result)
        if result.errors:
            self._print_errors(result)

    def format(self, result: ParseResult, context: OutputContext) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result, context)
        return ""

    def _print_summary(self, result: ParseResult, context: OutputContext) -> None:
        files = sum(len(c.files) for c in result.commits)
        authors = len({c.author.email.lower() for c in result.commits})
        body = (
            f"[bold]{escape(context.source)}[/bold]\n"
            f"Blocks: {result.total_commits}   "
            f"Parsed: {result.successfully_parsed}   "
            f"Rejected: {len(result.errors)}   "
            f"Authors: {authors}   "
            f"Files touched: {files}\n"
            f"Status: {_status_label(result)}"
        )
        console.print(Panel(body, title="[bold cyan]Git log[/bold cyan]", expand=False))

    def _print_commits(self, result: ParseResult) -> None:
        table = Table(title="Commits", show_lines=False)
        table.add_column("SHA", style="cyan", no_wrap=True)
        table.add_column("Author")
        table.add_column("Date", no_wrap=True)
        table.add_column("Message")
        table.add_column("Files", justify="right")
        table.add_column("+/-", justify="right", no_wrap=True)

        for commit in result.commits[:MAX_COMMIT_ROWS]:
            added = sum(f.additions for f in commit.files)
            deleted = sum(f.deletions for f in commit.files)
            table.add_row(
                commit.sha[:10],
                escape(commit.author.name),
                escape(commit.date),
                escape(commit.message),
                str(len(commit.files)),
                f"[green]+{added}[/green] [red]-{deleted}[/red]",
            )
        console.print(table)

        hidden = result.successfully_parsed - MAX_COMMIT_ROWS
        if hidden > 0:
            console.print(f"[dim]... and {hidden} more commits[/dim]")

    def _print_errors(self, result: ParseResult) -> None:
        table = Table(title="Rejected blocks")
        table.add_column("Block", justify="right")
        table.add_column("Reason", style="red")
        table.add_column("Excerpt", overflow="fold")

        for error in result.errors:
            excerpt = error.raw_excerpt.splitlines()[0] if error.raw_excerpt else ""
            table.add_row(str(error.record_index + 1), error.reason.value, escape(excerpt))
        console.print(table)
