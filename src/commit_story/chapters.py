"""Chapter grouping with a fixed-size batching fallback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence

from .exceptions import ChapterGroupingError
from .logging_config import get_logger

logger = get_logger(__name__)

FALLBACK_REASONING = "Fallback grouping"
DEFAULT_BATCH_SIZE = 5


class HasSha(Protocol):
    sha: str


@dataclass(frozen=True)
class Chapter:
    title: str
    commit_shas: tuple[str, ...] = field(default_factory=tuple)
    reasoning: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "commitShas": list(self.commit_shas),
            "reasoning": self.reasoning,
        }


ChapterGrouper = Callable[[Sequence[HasSha]], Sequence[Chapter]]


def fallback_chapters(
    commits: Sequence[HasSha], batch_size: int = DEFAULT_BATCH_SIZE
) -> list[Chapter]:
    """Group commits in order into chapters of ``batch_size``."""
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")
    return [
        Chapter(
            title=f"Chapter {start // batch_size + 1}",
            commit_shas=tuple(c.sha for c in commits[start : start + batch_size]),
            reasoning=FALLBACK_REASONING,
        )
        for start in range(0, len(commits), batch_size)
    ]


def group_commits(
    commits: Sequence[HasSha],
    grouper: Optional[ChapterGrouper] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[Chapter]:
    """Group commits with ``grouper``, falling back to fixed-size batches.

    The fallback is used when there is no grouper, when it raises
    ChapterGroupingError, or when it returns no chapters for a non-empty
    commit list.
    """
    if grouper is None:
        return fallback_chapters(commits, batch_size)

    try:
        chapters = list(grouper(commits))
    except ChapterGroupingError as e:
        logger.warning("%s; using fallback grouping", e)
        return fallback_chapters(commits, batch_size)

    if commits and not chapters:
        logger.warning("Chapter grouper returned no chapters; using fallback grouping")
        return fallback_chapters(commits, batch_size)
    return chapters


def fallback_summary(chapter_title: str) -> str:
    """Summary text used when a chapter summary cannot be generated."""
    return f"Summary of {chapter_title}: Multiple commits were made to improve the codebase."
