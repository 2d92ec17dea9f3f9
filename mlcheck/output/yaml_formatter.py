"""YAML report formatter."""

import yaml

from mlcheck.models import CheckResult
from mlcheck.output.base import ReportFormatter


class YamlFormatter(ReportFormatter):
    """Output formatter producing a machine-readable YAML report."""

    def __init__(self, include_lines: bool = True) -> None:
        self._include_lines = include_lines

    def render(self, result: CheckResult) -> str:
        data = result.to_dict()
        if self._include_lines:
            data["lines"] = [line.to_dict() for line in result.lines]
        return yaml.dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
