"""Output formatters for arc-git."""

from enum import Enum
from typing import Union

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .text_formatter import TextFormatter
from .yaml_formatter import YamlFormatter


class OutputMode(str, Enum):
    TEXT = "text"
    TABLE = "table"  # alias for text
    JSON = "json"
    YAML = "yaml"
    QUIET = "quiet"

    @property
    def is_structured(self) -> bool:
        return self in (OutputMode.JSON, OutputMode.YAML)

    @property
    def shows_progress(self) -> bool:
        return self in (OutputMode.TEXT, OutputMode.TABLE)


_FORMATTERS = {
    OutputMode.TEXT: TextFormatter,
    OutputMode.TABLE: TextFormatter,
    OutputMode.JSON: JsonFormatter,
    OutputMode.YAML: YamlFormatter,
    OutputMode.QUIET: QuietFormatter,
}


def get_formatter(mode: Union[str, OutputMode]) -> BaseFormatter:
    """Get a formatter instance by output mode.

    Args:
        mode: One of "text", "table", "json", "yaml", "quiet"

    Returns:
        Formatter instance

    Raises:
        ValueError: If mode is not recognized
    """
    try:
        mode = OutputMode(mode)
    except ValueError:
        choices = ", ".join(m.value for m in OutputMode)
        raise ValueError(f"Unknown output mode: {mode!r}. Choose from: {choices}")
    return _FORMATTERS[mode]()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "OutputMode",
    "QuietFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
