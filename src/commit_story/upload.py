"""Accepting uploaded log files and turning parse results into outcomes.

The parser itself never raises on content. This module is where a log
that yields nothing usable becomes an error, and where a partially parsed
log becomes a warning alongside the commits that did parse.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG, ParserConfig
from .exceptions import NoCommitsParsedError, UnsupportedFileTypeError, UploadTooLargeError
from .gitlog import GitHubShapedCommit, GitLogParser, ParseResult, transform_to_external_format
from .logging_config import get_logger

logger = get_logger(__name__)

ALLOWED_MIME_TYPE = "text/plain"
ALLOWED_EXTENSION = ".txt"


@dataclass(frozen=True)
class UploadOutcome:
    """Usable commits from an upload, with a warning when some blocks failed."""

    result: ParseResult
    commits: tuple[GitHubShapedCommit, ...]
    warning: Optional[str] = None


def check_upload(
    filename: str,
    size: int,
    content_type: Optional[str] = None,
    config: ParserConfig = DEFAULT_CONFIG,
) -> None:
    """Reject uploads that are too large or not plain text.

    Raises:
        UploadTooLargeError: If size exceeds config.max_upload_bytes
        UnsupportedFileTypeError: If neither the MIME type nor the extension is text
    """
    if size > config.max_upload_bytes:
        raise UploadTooLargeError(size, config.max_upload_bytes, filename)
    if content_type == ALLOWED_MIME_TYPE:
        return
    if Path(filename).suffix.lower() != ALLOWED_EXTENSION:
        raise UnsupportedFileTypeError(filename, content_type)


def decode_upload(data: bytes) -> str:
    """Decode upload bytes as UTF-8, replacing undecodable sequences."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8) :]
    return data.decode("utf-8", errors="replace")


def read_log_file(path: Path, config: ParserConfig = DEFAULT_CONFIG) -> str:
    """Check and decode a log file from disk."""
    check_upload(path.name, path.stat().st_size, config=config)
    return decode_upload(path.read_bytes())


def ingest_upload(
    raw_text: str,
    repo_url: Optional[str] = None,
    config: ParserConfig = DEFAULT_CONFIG,
) -> UploadOutcome:
    """Parse an uploaded log and shape its commits for chaptering.

    Raises:
        NoCommitsParsedError: If no block produced a commit
    """
    result = GitLogParser(config).parse(raw_text)

    if result.successfully_parsed == 0:
        raise NoCommitsParsedError(result.total_commits, len(result.errors))

    warning = None
    if result.errors:
        warning = (
            f"{len(result.errors)} of {result.total_commits} commits could not be parsed "
            "and were skipped"
        )
        logger.warning(warning)

    commits = transform_to_external_format(result.commits, repo_url=repo_url)
    return UploadOutcome(result=result, commits=tuple(commits), warning=warning)
