"""Report formatters for mlcheck."""

from mlcheck.output.base import ReportFormatter
from mlcheck.output.console_formatter import ConsoleFormatter
from mlcheck.output.yaml_formatter import YamlFormatter

__all__ = ["ReportFormatter", "ConsoleFormatter", "YamlFormatter"]
