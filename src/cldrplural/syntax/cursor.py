"""Shared mutable cursor for backtracking rule parsing.

One Cursor is created per rule evaluation and shared by reference between
every combinator and production built for that evaluation. Combinators
advance it on success and restore a saved position on backtrack.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is call-local: never stored at module level, so concurrent
      evaluations never interfere
    - Position moves forward only through advance(); backtracking goes
      through reset() with a position previously obtained from mark()
    - The high-water mark (furthest) survives backtracking and is what
      error reports point at
"""

from dataclasses import dataclass, field

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Mutable source position tracker.

    Example:
        >>> cursor = Cursor("n is 1")
        >>> cursor.startswith("n")
        True
        >>> cursor.advance(1)
        >>> cursor.pos
        1
        >>> saved = cursor.mark()
        >>> cursor.advance(3)
        >>> cursor.reset(saved)
        >>> cursor.pos, cursor.furthest
        (1, 4)
    """

    source: str
    pos: int = 0
    furthest: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate the starting position and seed the high-water mark."""
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)
        self.furthest = self.pos

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> str:
        """Unconsumed source text from the current position."""
        return self.source[self.pos :]

    def startswith(self, text: str) -> bool:
        """Check whether the source continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def advance(self, count: int) -> None:
        """Move forward by count characters, clamped to end of input."""
        self.pos = min(self.pos + count, len(self.source))
        if self.pos > self.furthest:
            self.furthest = self.pos

    def mark(self) -> int:
        """Return the current position for a later reset()."""
        return self.pos

    def reset(self, position: int) -> None:
        """Rewind to a position previously returned by mark().

        The high-water mark is left untouched.
        """
        self.pos = position

    def compute_line_col(self, position: int | None = None) -> tuple[int, int]:
        """Compute line and column for a position (defaults to current).

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("n is 1\\nor n is 2", 8).compute_line_col()
            (2, 2)
        """
        pos = self.pos if position is None else position
        line = self.source.count("\n", 0, pos) + 1
        last_newline = self.source.rfind("\n", 0, pos)
        col = pos - last_newline if last_newline >= 0 else pos + 1
        return (line, col)
