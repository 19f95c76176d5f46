"""Parse an uploaded git log export into a ParseResult."""

from typing import Optional, Union

from ..config import DEFAULT_CONFIG, ParserConfig
from ..logging_config import get_logger
from .fields import build_record
from .models import CommitRecord, ParseError, ParseResult
from .splitter import iter_blocks

logger = get_logger(__name__)


class GitLogParser:
    """Fold every delimited block of a log export into commits and errors.

    Parsing never raises on content: a block that fails validation becomes a
    ParseError carrying its position and an excerpt, and the remaining blocks
    are parsed as usual.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def parse(self, raw: Union[str, bytes]) -> ParseResult:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")

        commits: list[CommitRecord] = []
        errors: list[ParseError] = []
        total = 0

        for block in iter_blocks(raw):
            total += 1
            outcome = build_record(block, self.config)
            if isinstance(outcome, ParseError):
                logger.debug(
                    "Rejected commit block %d: %s", outcome.record_index, outcome.reason.value
                )
                errors.append(outcome)
            else:
                commits.append(outcome)

        logger.info(
            "Parsed %d of %d commit blocks (%d rejected)", len(commits), total, len(errors)
        )
        return ParseResult(commits=tuple(commits), errors=tuple(errors), total_commits=total)


def parse_git_log(raw: Union[str, bytes], config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse ``raw`` log text. See GitLogParser."""
    return GitLogParser(config).parse(raw)
