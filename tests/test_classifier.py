from __future__ import annotations

import pytest

from mlcheck.exceptions import MlcheckConfigError
from mlcheck.grouping import classify, compile_pattern


def test_classify_without_negate_returns_raw_match() -> None:
    predicate = compile_pattern(r"^\s")
    assert classify("  at y", predicate, False) is True
    assert classify("2023-01-01 ERROR", predicate, False) is False


def test_classify_with_negate_inverts_match() -> None:
    predicate = compile_pattern(r"^\s")
    assert classify("  at y", predicate, True) is False
    assert classify("2023-01-01 ERROR", predicate, True) is True


def test_classify_is_deterministic() -> None:
    predicate = compile_pattern(r"^\[")
    line = "[2023-01-01] boot"
    assert classify(line, predicate, True) == classify(line, predicate, True)


def test_pattern_matches_anywhere_in_line() -> None:
    predicate = compile_pattern("ERROR")
    assert predicate("2023-01-01 ERROR start")
    assert not predicate("2023-01-01 INFO start")


def test_empty_line_is_classified() -> None:
    predicate = compile_pattern(r"^\s")
    assert classify("", predicate, False) is False
    assert classify("", predicate, True) is True


def test_empty_pattern_is_config_error() -> None:
    with pytest.raises(MlcheckConfigError) as exc:
        compile_pattern("")
    assert exc.value.config_key == "pattern"


def test_invalid_pattern_is_config_error() -> None:
    with pytest.raises(MlcheckConfigError, match="Failed to compile pattern"):
        compile_pattern("(unclosed")
