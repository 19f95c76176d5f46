"""JSON formatter for parse results."""

import json

from ..gitlog import ParseResult
from .base import BaseFormatter, OutputContext


class JsonFormatter(BaseFormatter):
    """Render the full ParseResult as JSON."""

    def render(self, result: ParseResult, context: OutputContext) -> None:
        print(self.format(result, context))

    def format(self, result: ParseResult, context: OutputContext) -> str:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
