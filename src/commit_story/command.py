"""The git log invocation users run to produce an uploadable export."""

import re

LOG_FORMAT = "COMMIT_START%nSHA: %H%nAuthor: %an <%ae>%nDate: %ad%nMessage: %s%n%b%nCOMMIT_END"

_UNSAFE_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def log_filename(repo_name: str) -> str:
    """``My-Repo`` -> ``my_repo_git-log.txt``"""
    return f"{_UNSAFE_RE.sub('_', repo_name).lower()}_git-log.txt"


def build_log_command(repo_name: str) -> str:
    return (
        f'git log --all --pretty=format:"{LOG_FORMAT}" --date=iso --stat -p'
        f" > {log_filename(repo_name)}"
    )
