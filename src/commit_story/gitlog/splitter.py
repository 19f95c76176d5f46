"""Split a raw log export into COMMIT_START/COMMIT_END blocks."""

import re
from typing import Iterator

from .models import RawBlock


# A delimiter owns its whole line and starts at column 0, so patch lines
# (always prefixed by " ", "+" or "-") never match. With --stat, git appends
# its "---" separator to the COMMIT_END line.
_DELIMITER_RE = re.compile(
    r"^(?:(?P<start>COMMIT_START)|COMMIT_END(?:---)?)[ \t]*\r?$", re.MULTILINE
)


def iter_blocks(raw: str) -> Iterator[RawBlock]:
    """Yield complete blocks in input order.

    Walks the delimiter lines once. A COMMIT_START that is followed by
    another COMMIT_START (or by the end of input) before any COMMIT_END is
    dropped; a COMMIT_END with no open block is ignored. Each yielded block
    is numbered by its position among complete blocks.
    """
    index = 0
    open_at = -1  # offset just past the open COMMIT_START line
    pending: tuple[str, int] | None = None  # closed block awaiting its trailer

    for match in _DELIMITER_RE.finditer(raw):
        if match.group("start"):
            if pending is not None:
                yield RawBlock(index, pending[0], raw[pending[1] : match.start()])
                index += 1
                pending = None
            open_at = _line_end(raw, match.end())
        elif open_at >= 0:
            pending = (raw[open_at : match.start()], _line_end(raw, match.end()))
            open_at = -1

    if pending is not None:
        yield RawBlock(index, pending[0], raw[pending[1] :])


def split_records(raw: str) -> list[RawBlock]:
    """Return every complete block in ``raw``; empty input gives []."""
    if not raw:
        return []
    return list(iter_blocks(raw))


def _line_end(raw: str, pos: int) -> int:
    """Offset of the first character after the line ending at ``pos``."""
    if raw.startswith("\n", pos):
        return pos + 1
    return pos
