"""Group boundary tracking over a stream of line classifications."""

from typing import Union

from mlcheck.grouping.stack import BoolStack
from mlcheck.models.enums import CountingMode


class GroupBoundaryTracker:
    """Counts completed line groups from per-line match results.

    The head stack holds the current run of identical results; results
    that differ from the head run accumulate on the tail stack. When a
    result equal to the head value arrives after a non-empty tail, a full
    group (head run, tail run, return to head) is confirmed and both stacks
    start over. A tail still pending at the end of input is not counted.

    Counting modes:
        CONFIRMED: increment once per confirmed head-return after a tail.
        RUN_START: increment every time a new head run is seeded, i.e. on
            the first result and on every confirmed head-return. This is
            always one more than CONFIRMED for non-empty input. Reseeding
            an unbroken run (a repeat with no tail) is not counted.

    A tracker serves a single ordered pass; call ``reset`` before reusing it.
    """

    def __init__(
        self, mode: Union[CountingMode, str] = CountingMode.CONFIRMED
    ) -> None:
        """Initialize the tracker.

        Args:
            mode: Counting policy, as a CountingMode or its string value
        """
        if not isinstance(mode, CountingMode):
            mode = CountingMode.from_string(mode)
        self._mode = mode
        self._head = BoolStack()
        self._tail = BoolStack()
        self._count = 0

    def record_and_maybe_count(self, matched: bool) -> None:
        """Record the next line's match result.

        Must be called exactly once per line, in input order.
        """
        if self._head.is_empty:
            self._head.push(matched)
            if self._mode == CountingMode.RUN_START:
                self._count += 1
            return

        if matched == self._head.peek():
            if len(self._tail) >= 1:
                self._count += 1
            self._head.reset()
            self._head.push(matched)
            self._tail.reset()
        else:
            self._tail.push(matched)

    def total_groups(self) -> int:
        """Return the number of groups counted so far."""
        return self._count

    def reset(self) -> None:
        """Clear all state so the tracker can process a new sequence."""
        self._head.reset()
        self._tail.reset()
        self._count = 0

    @property
    def mode(self) -> CountingMode:
        return self._mode

    @property
    def head(self) -> BoolStack:
        return self._head

    @property
    def tail(self) -> BoolStack:
        return self._tail

    @property
    def has_pending_tail(self) -> bool:
        """Check if a group is still waiting for its head-return."""
        return not self._tail.is_empty
