"""Data models for uploaded git log parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ParseFailure(str, Enum):
    """Why a commit block was rejected."""

    MISSING_SHA = "missing SHA"
    INVALID_SHA = "invalid SHA format"
    MISSING_AUTHOR = "missing author"
    INVALID_AUTHOR = "invalid author format"
    MISSING_MESSAGE = "missing message"
    MISSING_DATE = "missing date"


class FileStatus(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    RENAMED = "renamed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class RawBlock:
    """One delimited commit block from the raw log.

    ``text`` is everything strictly between COMMIT_START and COMMIT_END.
    ``trailer`` is whatever follows COMMIT_END up to the next COMMIT_START;
    git writes --stat and -p output there when the delimiters live in the
    pretty format.
    """

    index: int
    text: str
    trailer: str = ""


@dataclass(frozen=True)
class CommitAuthor:
    name: str
    email: str


@dataclass(frozen=True)
class FileChange:
    filename: str
    additions: int
    deletions: int
    changes: int
    status: FileStatus = FileStatus.MODIFIED
    patch: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "filename": self.filename,
            "status": self.status.value,
            "additions": self.additions,
            "deletions": self.deletions,
            "changes": self.changes,
        }
        if self.patch is not None:
            data["patch"] = self.patch
        return data


@dataclass(frozen=True)
class CommitRecord:
    """A validated commit parsed from one block."""

    sha: str
    author: CommitAuthor
    date: str  # verbatim, "" when the block had no Date: line
    message: str  # summary line only
    body: str = ""
    files: tuple[FileChange, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "sha": self.sha,
            "author": {"name": self.author.name, "email": self.author.email},
            "date": self.date,
            "message": self.message,
            "body": self.body,
            "files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True)
class ParseError:
    """A block that failed validation."""

    record_index: int  # position among all blocks, not among errors
    reason: ParseFailure
    raw_excerpt: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "recordIndex": self.record_index,
            "reason": self.reason.value,
            "rawExcerpt": self.raw_excerpt,
        }


@dataclass(frozen=True)
class ParseResult:
    commits: tuple[CommitRecord, ...] = ()
    errors: tuple[ParseError, ...] = ()
    total_commits: int = 0

    @property
    def successfully_parsed(self) -> int:
        return len(self.commits)

    @property
    def is_partial(self) -> bool:
        """Some blocks parsed and some did not."""
        return bool(self.commits) and bool(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "commits": [c.to_dict() for c in self.commits],
            "errors": [e.to_dict() for e in self.errors],
            "totalCommits": self.total_commits,
            "successfullyParsed": self.successfully_parsed,
        }


@dataclass(frozen=True)
class GitHubCommitAuthor:
    name: str
    email: str
    date: str


@dataclass(frozen=True)
class GitHubCommitDetail:
    message: str
    author: GitHubCommitAuthor
    body: str = ""


@dataclass(frozen=True)
class GitHubShapedCommit:
    """A commit in the shape returned by the GitHub commits API."""

    sha: str
    commit: GitHubCommitDetail
    files: tuple[FileChange, ...] = field(default_factory=tuple)
    html_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "sha": self.sha,
            "commit": {
                "message": self.commit.message,
                "body": self.commit.body,
                "author": {
                    "name": self.commit.author.name,
                    "email": self.commit.author.email,
                    "date": self.commit.author.date,
                },
            },
            "files": [f.to_dict() for f in self.files],
        }
        if self.html_url is not None:
            data["html_url"] = self.html_url
        return data
