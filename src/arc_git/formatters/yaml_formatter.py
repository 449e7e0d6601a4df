"""YAML formatter for arc-git."""

import yaml

from ..models import RunSummary
from ..exceptions import OutputEncodingError
from .base import BaseFormatter


class YamlFormatter(BaseFormatter):
    """Render the run summary as block-style YAML, keys in summary order."""

    def render(self, summary: RunSummary) -> None:
        print(self.format(summary), end="")

    def format(self, summary: RunSummary) -> str:
        try:
            return yaml.safe_dump(
                summary.to_dict(),
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as e:
            raise OutputEncodingError("yaml", str(e))
