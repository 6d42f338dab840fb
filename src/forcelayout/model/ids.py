from __future__ import annotations


class IdAllocator:
    """
    Issues monotonically increasing identifiers.

    Identifiers are never recycled, even after the entity they were issued to
    is removed. Only :meth:`reset` rewinds the counter to its base value.
    """
    def __init__(self, base: int = 1) -> None:
        self.base = base
        self._next = base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self.base}, next={self._next})"

    def issue(self) -> int:
        """Return the next identifier."""
        issued = self._next
        self._next += 1
        return issued

    def peek(self) -> int:
        """Identifier the next call to :meth:`issue` will return."""
        return self._next

    def reset(self) -> None:
        self._next = self.base
