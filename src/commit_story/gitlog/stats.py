"""Per-file change extraction from --stat, --numstat and -p output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from .models import FileChange, FileStatus

# " src/auth.ts | 45 +++++-----" (graph optional: mode-only changes print "| 0")
_STAT_RE = re.compile(r"^\s*(?P<path>\S.*?)\s+\|\s+(?P<count>\d+)(?:\s+(?P<graph>[+-]+))?\s*$")
# " logo.png | Bin 0 -> 1534 bytes"
_BINARY_STAT_RE = re.compile(r"^\s*(?P<path>\S.*?)\s+\|\s+Bin\b.*$")
# "12\t3\tsrc/auth.ts" ("-" for binary files)
_NUMSTAT_RE = re.compile(r"^(?P<add>\d+|-)\t(?P<del>\d+|-)\t(?P<path>.+)$")
# " 3 files changed, 10 insertions(+), 2 deletions(-)"
_SUMMARY_RE = re.compile(r"^\s*\d+ files? changed\b")
_DIFF_HEADER_RE = re.compile(r"^diff --git a/(?P<old>.+?) b/(?P<new>.+)$")

DIFF_PREFIX = "diff --git "


@dataclass(frozen=True)
class StatEntry:
    """One stat line before patch details are applied."""

    path: str
    additions: int
    deletions: int
    changes: int
    renamed: bool = False


@dataclass(frozen=True)
class PatchSection:
    path: str
    status: FileStatus
    additions: int
    deletions: int
    text: str


def is_stat_paragraph(lines: Sequence[str], pos: int) -> bool:
    """True when the paragraph starting at ``lines[pos]`` is git stat output.

    The paragraph runs to the next blank or ``diff --git`` line. It counts as
    stat output when every line is a numstat line, or when it is diffstat
    lines closed by git's "N files changed" summary. A lone ``see table | 3``
    line in a commit message is neither.
    """
    end = pos
    while end < len(lines) and lines[end].strip() and not lines[end].startswith(DIFF_PREFIX):
        end += 1
    if end == pos:
        return False

    paragraph = lines[pos:end]
    if all(_NUMSTAT_RE.match(line) for line in paragraph):
        return True
    return _SUMMARY_RE.match(paragraph[-1]) is not None and all(
        parse_stat_line(line) is not None for line in paragraph[:-1]
    )


def normalize_renamed_path(path: str) -> str:
    """Resolve ``old => new`` and ``dir/{old => new}/f`` to the new path."""
    if "=>" not in path:
        return path
    if "{" in path and "}" in path:
        prefix, rest = path.split("{", 1)
        rename_part, suffix = rest.split("}", 1)
        _, new_part = rename_part.split("=>", 1)
        return f"{prefix}{new_part.strip()}{suffix}".replace("//", "/").strip()
    return path.split("=>", 1)[1].strip()


def parse_stat_line(line: str) -> Optional[StatEntry]:
    """Parse one diffstat or numstat line; None for anything else."""
    if _SUMMARY_RE.match(line):
        return None

    match = _NUMSTAT_RE.match(line)
    if match:
        added = int(match.group("add")) if match.group("add") != "-" else 0
        deleted = int(match.group("del")) if match.group("del") != "-" else 0
        return _entry(match.group("path"), added, deleted, added + deleted)

    match = _BINARY_STAT_RE.match(line)
    if match:
        return _entry(match.group("path"), 0, 0, 0)

    match = _STAT_RE.match(line)
    if match:
        count = int(match.group("count"))
        graph = match.group("graph") or ""
        additions, deletions = _split_graph(count, graph.count("+"), graph.count("-"))
        return _entry(match.group("path"), additions, deletions, count)

    return None


def parse_patches(lines: Iterable[str]) -> list[PatchSection]:
    """Split ``diff --git`` output into per-file sections."""
    sections: list[PatchSection] = []
    current: list[str] = []

    for line in lines:
        if line.startswith(DIFF_PREFIX):
            if current:
                sections.append(_build_section(current))
            current = [line]
        elif current:
            current.append(line)

    if current:
        sections.append(_build_section(current))
    return sections


def collect_file_changes(
    regions: Iterable[list[str]], include_patches: bool = False
) -> tuple[FileChange, ...]:
    """Build FileChange entries from the stat/patch tails of a commit.

    Each region is read as stat lines up to its first ``diff --git`` line,
    then patches. Stat lines decide which files are reported and in what
    order; a file's patch, when present, supplies its exact line counts and
    status. With no stat lines at all, the patches alone describe the files.
    """
    entries: list[StatEntry] = []
    patches: dict[str, PatchSection] = {}
    for lines in regions:
        for line in _stat_lines(lines):
            entry = parse_stat_line(line)
            if entry is not None:
                entries.append(entry)
        for patch in parse_patches(lines):
            patches.setdefault(patch.path, patch)

    if not entries:
        return tuple(_from_patch(p, include_patches) for p in patches.values())

    changes = []
    for entry in entries:
        patch = patches.get(entry.path)
        if patch is None:
            status = FileStatus.RENAMED if entry.renamed else FileStatus.MODIFIED
            changes.append(
                FileChange(
                    filename=entry.path,
                    additions=entry.additions,
                    deletions=entry.deletions,
                    changes=entry.changes,
                    status=status,
                )
            )
        else:
            changes.append(_from_patch(patch, include_patches))
    return tuple(changes)


def _stat_lines(lines: list[str]) -> Iterator[str]:
    for line in lines:
        if line.startswith(DIFF_PREFIX):
            return
        yield line


def _entry(raw_path: str, additions: int, deletions: int, changes: int) -> StatEntry:
    path = raw_path.strip()
    return StatEntry(
        path=normalize_renamed_path(path),
        additions=additions,
        deletions=deletions,
        changes=changes,
        renamed="=>" in path,
    )


def _split_graph(count: int, plus: int, minus: int) -> tuple[int, int]:
    """Apportion ``count`` between additions and deletions.

    git scales the +/- graph down for wide changes, so the symbols give the
    ratio and ``count`` gives the total.
    """
    symbols = plus + minus
    if symbols == 0:
        return 0, 0
    if symbols == count:
        return plus, minus
    additions = round(count * plus / symbols)
    return additions, count - additions


def _build_section(lines: list[str]) -> PatchSection:
    header = _DIFF_HEADER_RE.match(lines[0])
    path = header.group("new") if header else lines[0][len(DIFF_PREFIX) :].strip()
    status = FileStatus.MODIFIED
    additions = deletions = 0
    in_hunk = False

    for line in lines[1:]:
        if in_hunk:
            if line.startswith("+"):
                additions += 1
            elif line.startswith("-"):
                deletions += 1
            continue
        if line.startswith("@@"):
            in_hunk = True
        elif line.startswith("new file mode"):
            status = FileStatus.ADDED
        elif line.startswith("deleted file mode"):
            status = FileStatus.REMOVED
        elif line.startswith("rename from"):
            status = FileStatus.RENAMED
        elif line.startswith("rename to "):
            path = line[len("rename to ") :].strip()

    return PatchSection(
        path=path,
        status=status,
        additions=additions,
        deletions=deletions,
        text="\n".join(lines).strip("\n"),
    )


def _from_patch(patch: PatchSection, include_patches: bool) -> FileChange:
    return FileChange(
        filename=patch.path,
        additions=patch.additions,
        deletions=patch.deletions,
        changes=patch.additions + patch.deletions,
        status=patch.status,
        patch=patch.text if include_patches else None,
    )
