"""Generation clock for driving universes and observers."""

from __future__ import annotations

from typing import List

from lifesim.interfaces.clock import ClockSubscriber, IClock


class Clock(IClock):
    """Simple pub/sub clock that notifies subscribers once per generation."""

    def __init__(self):
        self._generation = 0
        self._subscribers: List[ClockSubscriber] = []

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def _validate_generations(self, generations: int) -> None:
        if generations < 0:
            raise ValueError("generations must be >= 0")

    def tick(self, generations: int = 1) -> None:
        self._validate_generations(generations)

        for _ in range(generations):
            self._generation += 1
            # Subscribers may unsubscribe themselves while being notified
            for subscriber in list(self._subscribers):
                subscriber.tick()

    def reset(self) -> None:
        self._generation = 0
