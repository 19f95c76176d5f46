"""Base exception for commit-story."""

from typing import Any, Mapping, Optional


class CommitStoryError(Exception):
    """Root of every error commit-story raises at its boundaries.

    ``details`` holds the values that explain a failure, such as sizes,
    paths or block counts, stored as strings. ``str()`` appends them to the
    message so CLI errors carry them without extra formatting.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"
