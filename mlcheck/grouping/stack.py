"""LIFO buffer of match results."""

from typing import List, Optional


class BoolStack:
    """Last-in-first-out stack specialised to boolean match results."""

    def __init__(self) -> None:
        self._items: List[bool] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: bool) -> None:
        """Push a match result onto the stack."""
        self._items.append(value)

    def pop(self) -> Optional[bool]:
        """Remove and return the top value, or None if the stack is empty."""
        if self._items:
            return self._items.pop()
        return None

    def peek(self) -> bool:
        """Return the top value without modifying the stack.

        Raises:
            IndexError: If the stack is empty
        """
        if not self._items:
            raise IndexError("peek from empty stack")
        return self._items[-1]

    def reset(self) -> None:
        """Drop every element."""
        self._items.clear()

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __repr__(self) -> str:
        return f"BoolStack({self._items!r})"
