"""Clock interface for generation counting and pub/sub tick propagation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ClockSubscriber(Protocol):
    """Anything that can advance by one generation."""

    def tick(self) -> None:
        """Advance the subscriber by a single generation."""
        ...


class IClock(ABC):
    """Clock interface used by the simulation engine."""

    @property
    @abstractmethod
    def generation(self) -> int:
        """Total number of generations elapsed."""
        ...

    @abstractmethod
    def subscribe(self, subscriber: ClockSubscriber) -> None:
        """Subscribe a component to generation ticks."""
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        """Unsubscribe a component from generation ticks."""
        ...

    @abstractmethod
    def tick(self, generations: int = 1) -> None:
        """Advance the clock and notify subscribers."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset generation count to zero."""
        ...
