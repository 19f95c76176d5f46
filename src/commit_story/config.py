"""Configuration loading and management for commit-story.

Configuration sources are merged in priority order:
    1. Defaults (defined in ParserConfig)
    2. Global config (~/.commit-story.toml)
    3. Project config (./commit-story.toml)
    4. Explicit config file
    5. Environment variables (COMMIT_STORY_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(require_date=True)
    >>> config.require_date
    True
    >>> config.max_upload_bytes
    104857600
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigFileError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "COMMIT_STORY_"
GLOBAL_CONFIG_NAME = ".commit-story.toml"
PROJECT_CONFIG_NAME = "commit-story.toml"


@dataclass(frozen=True)
class ParserConfig:
    """Settings for parsing uploaded git logs.

    Attributes:
        Upload limits:
            max_upload_mb: Largest accepted upload, in megabytes

        Parsing policy:
            excerpt_length: Characters of a rejected block kept in its ParseError
            require_date: Reject blocks without a ``Date:`` line
            include_patches: Keep per-file diff text on FileChange.patch

        Chaptering:
            chapter_batch_size: Commits per chapter when falling back to batching

        Output control:
            verbosity: Logging verbosity level
    """

    max_upload_mb: float = 100.0

    excerpt_length: int = 200
    require_date: bool = False
    include_patches: bool = False

    chapter_batch_size: int = 5

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_upload_mb <= 0:
            raise InvalidConfigError("max_upload_mb", self.max_upload_mb, "must be positive")
        if self.excerpt_length < 1:
            raise InvalidConfigError("excerpt_length", self.excerpt_length, "must be at least 1")
        if self.chapter_batch_size < 1:
            raise InvalidConfigError(
                "chapter_batch_size", self.chapter_batch_size, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_upload_bytes(self) -> int:
        """Get the upload ceiling in bytes."""
        return int(self.max_upload_mb * 1024 * 1024)


DEFAULT_CONFIG = ParserConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ParserConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``.

    Returns:
        Validated ParserConfig instance

    Raises:
        ConfigFileError: If a config file is missing or unreadable
        InvalidConfigError: If a value is unknown or out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(ParserConfig)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown setting")

    return ParserConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMMIT_STORY_* environment variables.

    Supported environment variables:
        COMMIT_STORY_MAX_UPLOAD_MB: float
        COMMIT_STORY_EXCERPT_LENGTH: int
        COMMIT_STORY_REQUIRE_DATE: bool (true/false/1/0/yes/no)
        COMMIT_STORY_INCLUDE_PATCHES: bool
        COMMIT_STORY_CHAPTER_BATCH_SIZE: int
        COMMIT_STORY_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any COMMIT_STORY_* vars found.
    """
    type_hints = get_type_hints(ParserConfig)

    result: dict[str, Any] = {}

    for field_name in ParserConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigFileError: If TOML support is missing or parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigFileError(
                path, "TOML support requires Python 3.11+ or the 'tomli' package"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e))
