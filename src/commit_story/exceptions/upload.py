"""Upload-boundary exceptions: file checks and unusable logs."""

from typing import Optional

from .base import CommitStoryError


class UploadError(CommitStoryError):
    """Base class for errors raised while accepting an uploaded log."""

    pass


class UploadTooLargeError(UploadError):
    """Raised when an upload exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int, filename: Optional[str] = None):
        details: dict = {"size": size, "limit": limit}
        if filename:
            details["filename"] = filename
        super().__init__(
            f"File too large: {size} bytes (maximum {limit} bytes)", details=details
        )
        self.size = size
        self.limit = limit
        self.filename = filename


class UnsupportedFileTypeError(UploadError):
    """Raised when an upload is neither text/plain nor a .txt file."""

    def __init__(self, filename: str, content_type: Optional[str] = None):
        details = {"filename": filename}
        if content_type:
            details["content_type"] = content_type
        super().__init__("Only .txt files are allowed", details=details)
        self.filename = filename
        self.content_type = content_type


class NoCommitsParsedError(UploadError):
    """Raised when a log yields no usable commits."""

    def __init__(self, total_commits: int, error_count: int):
        super().__init__(
            "Could not parse any commits — check the command you used to generate this file",
            details={"total_commits": total_commits, "errors": error_count},
        )
        self.total_commits = total_commits
        self.error_count = error_count


class ChapterGroupingError(CommitStoryError):
    """Raised by a chapter grouper whose output cannot be used."""

    def __init__(self, reason: str):
        super().__init__(f"Chapter grouping failed: {reason}", details={"reason": reason})
        self.reason = reason
