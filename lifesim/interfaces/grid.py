"""Abstract cell storage interface for the simulator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lifesim.core.cell import Cell


class CellStorage(ABC):
    """Abstract interface for flat, linearly indexed cell storage.

    Responsibilities:
    - Hold exactly one Cell per linear index
    - O(1) get/set with bounds checking
    - Produce independent copies for double-buffered updates
    - Pure storage - knows nothing about rows, columns or rules
    """

    @abstractmethod
    def __len__(self) -> int:
        """Number of cells held."""
        raise NotImplementedError

    @abstractmethod
    def get(self, index: int) -> Cell:
        """Read the cell at a linear index.

        Args:
            index: Linear index in ``[0, len(self))``

        Returns:
            Cell state at that index
        """

        raise NotImplementedError

    @abstractmethod
    def set(self, index: int, cell: Cell | bool) -> None:
        """Write the cell at a linear index.

        Args:
            index: Linear index in ``[0, len(self))``
            cell: New state; truthy values mean alive
        """
        raise NotImplementedError

    @abstractmethod
    def clone(self) -> CellStorage:
        """Return an independent copy sharing no storage with this one."""
        raise NotImplementedError
