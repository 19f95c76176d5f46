"""Header extraction and validation for a single commit block."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, ParserConfig
from .models import CommitAuthor, CommitRecord, ParseError, ParseFailure, RawBlock
from .stats import DIFF_PREFIX, collect_file_changes, is_stat_paragraph

SHA_KEY = "SHA:"
AUTHOR_KEY = "Author:"
DATE_KEY = "Date:"
MESSAGE_KEY = "Message:"

_HEADER_KEYS = (SHA_KEY, AUTHOR_KEY, DATE_KEY)
_SHA_RE = re.compile(r"[0-9a-fA-F]{40}")


@dataclass(frozen=True)
class BlockFields:
    """Raw header values of one block; None where a line was absent."""

    sha: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    message: Optional[str] = None
    body: str = ""
    tail: tuple[str, ...] = ()


def extract_fields(text: str) -> BlockFields:
    """Pull header lines, message, body and stat tail out of block text.

    Header keys are matched at the start of a line and the first occurrence
    wins. Scanning stops at ``Message:``; the lines after it are the message
    body until the first ``diff --git`` line or stat paragraph, which opens
    the tail.
    """
    lines = text.splitlines()
    found: dict[str, str] = {}
    message: Optional[str] = None
    pos = 0

    while pos < len(lines):
        line = lines[pos].strip()
        pos += 1
        if line.startswith(MESSAGE_KEY):
            message = line[len(MESSAGE_KEY) :].strip()
            break
        if line.startswith(DIFF_PREFIX):
            pos -= 1
            break
        for key in _HEADER_KEYS:
            if line.startswith(key) and key not in found:
                found[key] = line[len(key) :].strip()
                break

    body_start = pos
    pos = _tail_start(lines, body_start)
    body = "\n".join(line.rstrip() for line in lines[body_start:pos]).strip("\n")

    return BlockFields(
        sha=found.get(SHA_KEY),
        author=found.get(AUTHOR_KEY),
        date=found.get(DATE_KEY),
        message=message,
        body=body if message is not None else "",
        tail=tuple(lines[pos:]),
    )


def _tail_start(lines: list[str], start: int) -> int:
    """Index of the first patch line or stat paragraph at or after ``start``.

    Stat paragraphs only open after a blank line (or right at ``start``).
    """
    for pos in range(start, len(lines)):
        if lines[pos].startswith(DIFF_PREFIX):
            return pos
        after_break = pos == start or not lines[pos - 1].strip()
        if after_break and is_stat_paragraph(lines, pos):
            return pos
    return len(lines)


def is_valid_sha(value: str) -> bool:
    """Exactly 40 hex characters, either case."""
    return _SHA_RE.fullmatch(value) is not None


def parse_author(value: str) -> Optional[CommitAuthor]:
    """Split ``Name <email>`` at the last angle-bracket pair."""
    open_at = value.rfind("<")
    if open_at < 0:
        return None
    close_at = value.find(">", open_at)
    if close_at < 0:
        return None
    name = value[:open_at].strip()
    email = value[open_at + 1 : close_at].strip()
    if not name or not email:
        return None
    return CommitAuthor(name=name, email=email)


def build_record(
    block: RawBlock, config: ParserConfig = DEFAULT_CONFIG
) -> Union[CommitRecord, ParseError]:
    """Turn one block into a CommitRecord, or a ParseError describing why not."""
    fields = extract_fields(block.text)

    if fields.sha is None:
        return _reject(block, ParseFailure.MISSING_SHA, config)
    if not is_valid_sha(fields.sha):
        return _reject(block, ParseFailure.INVALID_SHA, config)
    if fields.author is None:
        return _reject(block, ParseFailure.MISSING_AUTHOR, config)
    author = parse_author(fields.author)
    if author is None:
        return _reject(block, ParseFailure.INVALID_AUTHOR, config)
    if not fields.message:
        return _reject(block, ParseFailure.MISSING_MESSAGE, config)
    if fields.date is None and config.require_date:
        return _reject(block, ParseFailure.MISSING_DATE, config)

    files = collect_file_changes(
        [list(fields.tail), block.trailer.splitlines()],
        include_patches=config.include_patches,
    )
    return CommitRecord(
        sha=fields.sha,
        author=author,
        date=fields.date or "",
        message=fields.message,
        body=fields.body,
        files=files,
    )


def _reject(block: RawBlock, reason: ParseFailure, config: ParserConfig) -> ParseError:
    return ParseError(
        record_index=block.index,
        reason=reason,
        raw_excerpt=block.text.strip()[: config.excerpt_length],
    )
