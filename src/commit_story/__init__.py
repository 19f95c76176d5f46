"""
commit-story - git log ingestion for narrated repository histories

Parses the text export of a custom ``git log`` invocation into validated
commits, reports malformed blocks without failing the batch, and reshapes
the commits into the GitHub commits-API form used for chaptering.
"""

__version__ = "0.1.0"

from .chapters import Chapter, fallback_chapters, group_commits
from .command import build_log_command
from .config import ParserConfig, load_config
from .gitlog import (
    CommitAuthor,
    CommitRecord,
    FileChange,
    GitHubShapedCommit,
    GitLogParser,
    ParseError,
    ParseFailure,
    ParseResult,
    parse_git_log,
    transform_to_external_format,
)
from .upload import UploadOutcome, ingest_upload

__all__ = [
    "parse_git_log",  # Main entry point
    "transform_to_external_format",
    "GitLogParser",
    "ParseResult",
    "ParseError",
    "ParseFailure",
    "CommitRecord",
    "CommitAuthor",
    "FileChange",
    "GitHubShapedCommit",
    "ParserConfig",
    "load_config",
    "ingest_upload",
    "UploadOutcome",
    "build_log_command",
    "Chapter",
    "fallback_chapters",
    "group_commits",
]
