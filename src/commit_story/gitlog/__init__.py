"""Git log ingestion — splitting, validation and GitHub-shaped output."""

from .models import (
    CommitAuthor,
    CommitRecord,
    FileChange,
    FileStatus,
    GitHubShapedCommit,
    ParseError,
    ParseFailure,
    ParseResult,
    RawBlock,
)
from .parser import GitLogParser, parse_git_log
from .splitter import iter_blocks, split_records
from .transform import transform_to_external_format

__all__ = [
    "CommitAuthor",
    "CommitRecord",
    "FileChange",
    "FileStatus",
    "GitHubShapedCommit",
    "GitLogParser",
    "ParseError",
    "ParseFailure",
    "ParseResult",
    "RawBlock",
    "iter_blocks",
    "parse_git_log",
    "split_records",
    "transform_to_external_format",
]
