"""Constants and utility values for the simulator."""


class GridDefaults:
    """Default universe geometry and storage constants."""

    WIDTH = 128
    """Default universe width in cells."""

    HEIGHT = 128
    """Default universe height in cells."""

    BITS_PER_BYTE = 8
    """Cells packed into each byte of BitGrid storage."""


# Text rendering symbols
ALIVE_CHAR = "\u25a0"  # ■
DEAD_CHAR = "\u25a1"  # □

# Name of the built-in seed pattern
GRIDER_GUN = "GriderGun"


def packed_size(length: int) -> int:
    """Return the number of bytes needed to hold ``length`` packed cells."""
    per_byte = GridDefaults.BITS_PER_BYTE
    return (length + per_byte - 1) // per_byte
