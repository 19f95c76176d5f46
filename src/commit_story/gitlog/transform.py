"""Map parsed commits onto the GitHub commits-API shape."""

from typing import Iterable, Optional

from .models import CommitRecord, GitHubCommitAuthor, GitHubCommitDetail, GitHubShapedCommit


def to_github_commit(record: CommitRecord, repo_url: Optional[str] = None) -> GitHubShapedCommit:
    html_url = f"{repo_url.rstrip('/')}/commit/{record.sha}" if repo_url else None
    return GitHubShapedCommit(
        sha=record.sha,
        commit=GitHubCommitDetail(
            message=record.message,
            body=record.body,
            author=GitHubCommitAuthor(
                name=record.author.name,
                email=record.author.email,
                date=record.date,
            ),
        ),
        files=record.files,
        html_url=html_url,
    )


def transform_to_external_format(
    commits: Iterable[CommitRecord], repo_url: Optional[str] = None
) -> list[GitHubShapedCommit]:
    """Convert commits to GitHub-shaped commits, same length and order.

    Every CommitRecord field has a destination, so consumers that accept
    API-fetched commits can take these unchanged.
    """
    return [to_github_commit(record, repo_url) for record in commits]
