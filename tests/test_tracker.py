from __future__ import annotations

from typing import List

import pytest

from mlcheck.grouping import BoolStack, GroupBoundaryTracker
from mlcheck.models import CountingMode

T, F = True, False


def _run(sequence: List[bool], mode: CountingMode = CountingMode.CONFIRMED) -> GroupBoundaryTracker:
    tracker = GroupBoundaryTracker(mode=mode)
    for matched in sequence:
        tracker.record_and_maybe_count(matched)
    return tracker


def test_empty_sequence_counts_nothing() -> None:
    assert _run([]).total_groups() == 0


@pytest.mark.parametrize("value", [True, False])
def test_uniform_sequence_is_not_a_group(value: bool) -> None:
    tracker = _run([value] * 6)
    assert tracker.total_groups() == 0
    assert len(tracker.tail) == 0
    assert tracker.head.peek() is value


def test_head_return_after_tail_confirms_group() -> None:
    tracker = _run([T, F, T])
    assert tracker.total_groups() == 1
    assert tracker.head.peek() is True
    assert len(tracker.head) == 1
    assert len(tracker.tail) == 0


def test_tail_run_length_does_not_matter() -> None:
    assert _run([T, F, F, T]).total_groups() == 1
    assert _run([T, F, F, F, F, T]).total_groups() == 1


@pytest.mark.parametrize("start", [True, False])
@pytest.mark.parametrize("k", [0, 1, 2, 5])
def test_alternating_sequence_counts_every_return(start: bool, k: int) -> None:
    sequence = [start if i % 2 == 0 else not start for i in range(2 * k + 1)]
    assert _run(sequence).total_groups() == k


def test_dangling_tail_is_not_counted() -> None:
    tracker = _run([T, F, T, F, F])
    assert tracker.total_groups() == 1
    assert tracker.has_pending_tail


def test_count_never_decreases() -> None:
    tracker = GroupBoundaryTracker()
    seen = []
    for matched in [T, T, F, T, F, F, F, T, T, F, T, F]:
        tracker.record_and_maybe_count(matched)
        seen.append(tracker.total_groups())
    assert all(count >= 0 for count in seen)
    assert seen == sorted(seen)
    assert seen[-1] == 3


def test_run_start_mode_counts_first_run() -> None:
    assert _run([], CountingMode.RUN_START).total_groups() == 0
    assert _run([T, T, T], CountingMode.RUN_START).total_groups() == 1
    assert _run([T, F, T], CountingMode.RUN_START).total_groups() == 2


@pytest.mark.parametrize(
    "sequence",
    [
        [T],
        [F, F],
        [T, F, T, F, T],
        [T, F, F, T, T, F],
        [F, T, T, T, F, F, T, F],
    ],
)
def test_run_start_is_confirmed_plus_one(sequence: List[bool]) -> None:
    confirmed = _run(sequence, CountingMode.CONFIRMED).total_groups()
    run_start = _run(sequence, CountingMode.RUN_START).total_groups()
    assert run_start == confirmed + 1


def test_mode_accepts_string_value() -> None:
    assert GroupBoundaryTracker("run-start").mode == CountingMode.RUN_START
    assert GroupBoundaryTracker("confirmed").mode == CountingMode.CONFIRMED


def test_unknown_mode_rejected() -> None:
    with pytest.raises(ValueError):
        GroupBoundaryTracker("sometimes")


def test_reset_allows_reuse() -> None:
    tracker = _run([T, F, T, F])
    tracker.reset()
    assert tracker.total_groups() == 0
    assert len(tracker.head) == 0
    assert not tracker.has_pending_tail

    for matched in [F, T, F]:
        tracker.record_and_maybe_count(matched)
    assert tracker.total_groups() == 1


def test_bool_stack_is_lifo() -> None:
    stack = BoolStack()
    assert stack.pop() is None
    with pytest.raises(IndexError):
        stack.peek()

    stack.push(True)
    stack.push(False)
    assert len(stack) == 2
    assert stack.peek() is False
    assert stack.pop() is False
    assert stack.peek() is True

    stack.reset()
    assert stack.is_empty
