from __future__ import annotations

import yaml

from mlcheck.models import CheckResult, LineMatch
from mlcheck.output import ConsoleFormatter, YamlFormatter


def _result() -> CheckResult:
    return CheckResult(
        success=True,
        lines=[
            LineMatch(index=0, text="[INFO] start", matched=True),
            LineMatch(index=1, text="  detail", matched=False),
            LineMatch(index=2, text="[INFO] next", matched=True),
        ],
        total_groups=1,
        metrics={"total_groups": 1},
    )


def test_console_report_lists_lines_and_total() -> None:
    text = ConsoleFormatter().render(_result())

    assert "Pattern Match?" in text
    assert "[INFO] start" in text
    assert "false" in text
    assert "Total Matches: 1" in text


def test_console_report_line_numbers() -> None:
    text = ConsoleFormatter(show_line_numbers=True).render(_result())
    assert "#" in text


def test_yaml_report() -> None:
    report = yaml.safe_load(YamlFormatter().render(_result()))

    assert report["success"] is True
    assert report["total_groups"] == 1
    assert report["matched_count"] == 2
    assert report["lines"][1] == {"index": 1, "matched": False, "text": "  detail"}


def test_yaml_report_without_lines() -> None:
    report = yaml.safe_load(YamlFormatter(include_lines=False).render(_result()))
    assert "lines" not in report
