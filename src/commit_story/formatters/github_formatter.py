"""GitHub-shaped commit output, as consumed by chapter grouping."""

import json

from ..gitlog import ParseResult, transform_to_external_format
from .base import BaseFormatter, OutputContext


class GithubFormatter(BaseFormatter):
    """Output parsed commits in the GitHub commits-API shape.

    Rejected blocks are not part of this shape; use the json formatter to
    see them.
    """

    def render(self, result: ParseResult, context: OutputContext) -> None:
        print(self.format(result, context))

    def format(self, result: ParseResult, context: OutputContext) -> str:
        commits = transform_to_external_format(result.commits, repo_url=context.repo_url)
        return json.dumps([c.to_dict() for c in commits], indent=2, ensure_ascii=False)
