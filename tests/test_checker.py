from __future__ import annotations

from pathlib import Path

from mlcheck import MultilineChecker, MultilineConfig
from mlcheck.models import CountingMode

STACKTRACE = "\n".join(
    [
        "2023-01-01 ERROR start",
        "  caused by: x",
        "  at y",
        "2023-01-01 ERROR next",
    ]
)


def _checker(**kwargs) -> MultilineChecker:
    kwargs.setdefault("pattern", r"^\s")
    kwargs.setdefault("negate", True)
    return MultilineChecker(config=MultilineConfig(**kwargs))


def test_stacktrace_sample_counts_one_group() -> None:
    result = _checker().check_text(STACKTRACE)

    assert result.success
    assert [line.matched for line in result.lines] == [True, False, False, True]
    assert result.total_groups == 1
    assert result.matched_count == 2
    assert result.metrics["total_groups"] == 1


def test_check_reads_sample_file(tmp_path: Path) -> None:
    sample = tmp_path / "sample.log"
    sample.write_text(STACKTRACE, encoding="utf-8")

    result = _checker().check(str(sample))
    assert result.success
    assert result.line_count == 4
    assert result.total_groups == 1
    assert result.metrics["source"] == str(sample)


def test_trailing_newline_is_classified(tmp_path: Path) -> None:
    sample = tmp_path / "sample.log"
    sample.write_text("A\n  b\nA\n", encoding="utf-8")

    result = _checker().check(str(sample))
    assert [line.text for line in result.lines] == ["A", "  b", "A", ""]
    assert [line.matched for line in result.lines] == [True, False, True, True]
    assert result.total_groups == 1


def test_carriage_returns_are_kept(tmp_path: Path) -> None:
    sample = tmp_path / "sample.log"
    sample.write_bytes(b"A\r\n  b\r\nA")

    result = _checker().check(str(sample))
    assert [line.text for line in result.lines] == ["A\r", "  b\r", "A"]


def test_latin1_sample_is_read(tmp_path: Path) -> None:
    sample = tmp_path / "sample.log"
    sample.write_bytes("caf\xe9 start\n  more".encode("latin-1"))

    result = _checker().check(str(sample))
    assert result.success
    assert result.lines[0].text == "caf\xe9 start"


def test_empty_sample_warns_and_counts_zero(tmp_path: Path) -> None:
    sample = tmp_path / "empty.log"
    sample.write_text("", encoding="utf-8")

    result = _checker().check(str(sample))
    assert result.success
    assert result.total_groups == 0
    assert result.line_count == 1
    assert result.warnings == ["Sample string contents is empty."]


def test_invalid_pattern_aborts_before_reading(tmp_path: Path) -> None:
    result = _checker(pattern="(unclosed").check(str(tmp_path / "missing.log"))

    assert not result.success
    assert result.lines == []
    assert result.total_groups == 0
    assert len(result.errors) == 1
    assert "Failed to compile pattern" in result.errors[0]


def test_missing_sample_file(tmp_path: Path) -> None:
    result = _checker().check(str(tmp_path / "missing.log"))
    assert not result.success
    assert "Could not read file" in result.errors[0]


def test_missing_sample_path() -> None:
    result = _checker().check()
    assert not result.success
    assert result.errors == ["Must specify a file name."]


def test_run_start_mode() -> None:
    result = _checker(counting_mode=CountingMode.RUN_START).check_text(STACKTRACE)
    assert result.total_groups == 2
    assert result.metrics["counting_mode"] == "run_start"


def test_repeated_checks_do_not_share_state() -> None:
    checker = _checker()
    first = checker.check_text(STACKTRACE)
    second = checker.check_text(STACKTRACE)
    assert first.total_groups == second.total_groups == 1


def test_empty_sample_counts_zero_in_run_start_mode(tmp_path: Path) -> None:
    sample = tmp_path / "empty.log"
    sample.write_text("", encoding="utf-8")

    checker = _checker(counting_mode=CountingMode.RUN_START)
    for result in (checker.check(str(sample)), checker.check_text("")):
        assert result.success
        assert result.warnings == ["Sample string contents is empty."]
        assert result.line_count == 1
        assert result.total_groups == 0


def test_check_path_does_not_stick_to_config(tmp_path: Path) -> None:
    sample = tmp_path / "sample.log"
    sample.write_text(STACKTRACE, encoding="utf-8")

    checker = _checker()
    assert checker.check(str(sample)).total_groups == 1
    assert checker.config.sample_path is None

    result = checker.check()
    assert not result.success
    assert result.errors == ["Must specify a file name."]


def test_check_path_overrides_configured_path(tmp_path: Path) -> None:
    configured = tmp_path / "configured.log"
    configured.write_text("", encoding="utf-8")
    sample = tmp_path / "sample.log"
    sample.write_text(STACKTRACE, encoding="utf-8")

    checker = _checker(sample_path=str(configured))
    assert checker.check(str(sample)).total_groups == 1
    assert checker.check().warnings == ["Sample string contents is empty."]
