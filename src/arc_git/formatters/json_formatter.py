"""JSON formatter for arc-git."""

import json

from ..models import RunSummary
from ..exceptions import OutputEncodingError
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the run summary as indented JSON."""

    def render(self, summary: RunSummary) -> None:
        print(self.format(summary))

    def format(self, summary: RunSummary) -> str:
        try:
            return json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise OutputEncodingError("json", str(e))
