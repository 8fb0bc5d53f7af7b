"""Bit-packed cell storage.

Cells are kept in a flat bytearray addressed by linear index. Cell ``i``
lives in byte ``i // 8`` at bit position ``i % 8`` (least significant bit
first), so the raw view can be handed to a renderer without conversion.
"""

from __future__ import annotations

from typing import Iterator

from lifesim.core.cell import Cell
from lifesim.core.exceptions import GridBoundsError
from lifesim.interfaces.grid import CellStorage
from lifesim.utils.consts import packed_size


class BitGrid(CellStorage):
    """Fixed-capacity grid of one-bit cells."""

    def __init__(self, length: int, data: bytearray | None = None):
        if length < 0:
            raise ValueError("grid length must be non-negative")
        if data is not None and len(data) != packed_size(length):
            raise ValueError(
                f"backing buffer holds {len(data)} bytes, expected {packed_size(length)}"
            )
        self._length = length
        self._data = data if data is not None else bytearray(packed_size(length))

    @classmethod
    def with_capacity(cls, length: int) -> BitGrid:
        """Create a grid of ``length`` cells, all dead."""
        return cls(length)

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitGrid):
            return NotImplemented
        return self._length == other._length and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitGrid(length={self._length}, live={self.count_ones()})"

    # ==========================================================
    # Cell access
    # ==========================================================

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise GridBoundsError(index, self._length)

    def contains(self, index: int) -> bool:
        """Return True if the cell at ``index`` is alive."""
        self._check_index(index)
        return bool(self._data[index >> 3] & (1 << (index & 7)))

    def get(self, index: int) -> Cell:
        return Cell.ALIVE if self.contains(index) else Cell.DEAD

    def set(self, index: int, cell: Cell | bool) -> None:
        self._check_index(index)
        mask = 1 << (index & 7)
        if cell:
            self._data[index >> 3] |= mask
        else:
            self._data[index >> 3] &= ~mask & 0xFF

    def clear(self) -> None:
        """Mark every cell dead without reallocating."""
        self._data[:] = bytes(len(self._data))

    # ==========================================================
    # Bulk helpers
    # ==========================================================

    def clone(self) -> BitGrid:
        return BitGrid(self._length, bytearray(self._data))

    def ones(self) -> Iterator[int]:
        """Yield the linear index of every live cell in increasing order."""
        for byte_index, byte in enumerate(self._data):
            if not byte:
                continue
            base = byte_index << 3
            for bit in range(8):
                if byte >> bit & 1:
                    yield base + bit

    def count_ones(self) -> int:
        """Number of live cells."""
        return sum(bin(byte).count("1") for byte in self._data)

    def as_contiguous_view(self) -> memoryview:
        """Read-only view of the packed bytes.

        The view shares memory with this grid; it reflects later writes and
        must not outlive it.
        """
        return memoryview(self._data).toreadonly()
