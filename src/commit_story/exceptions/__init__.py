"""Exception hierarchy for commit-story."""

from .base import CommitStoryError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError
from .upload import (
    ChapterGroupingError,
    NoCommitsParsedError,
    UnsupportedFileTypeError,
    UploadError,
    UploadTooLargeError,
)

__all__ = [
    "CommitStoryError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
    "UploadError",
    "UploadTooLargeError",
    "UnsupportedFileTypeError",
    "NoCommitsParsedError",
    "ChapterGroupingError",
]
