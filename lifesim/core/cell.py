"""Cell state enumeration."""

from enum import IntEnum


class Cell(IntEnum):
    """State of a single grid position.

    Stored as one bit in a BitGrid, so only two values exist.
    """

    DEAD = 0
    """Empty position (bit cleared)."""

    ALIVE = 1
    """Populated position (bit set)."""
