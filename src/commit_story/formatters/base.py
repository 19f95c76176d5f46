"""Base formatter interface for parse result rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..gitlog import ParseResult


@dataclass(frozen=True)
class OutputContext:
    """Where a result came from and how to link its commits."""

    source: str = "<stdin>"
    repo_url: Optional[str] = None


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: ParseResult, context: OutputContext) -> None:
        """Render the result to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, result: ParseResult, context: OutputContext) -> str:
        """Return formatted string representation of the result."""
