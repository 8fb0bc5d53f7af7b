"""Simulation engine for stepping a universe and notifying observers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from lifesim.core.clock import Clock
from lifesim.interfaces.clock import IClock

if TYPE_CHECKING:
    from lifesim.core.universe import Universe

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Minimal simulation engine.

    Each generation ticks the universe first, then the clock, so clock
    subscribers (renderers, recorders) always observe the finished generation.
    """

    def __init__(self, clock: Optional[IClock] = None):
        self._clock = clock if clock is not None else Clock()

    @property
    def clock(self) -> IClock:
        return self._clock

    @property
    def generation(self) -> int:
        return self._clock.generation

    def run(self, universe: "Universe", generations: int = 1) -> None:
        """Run the universe for the given number of generations."""
        self.step(universe, generations)
        logger.debug(
            "Ran %d generations, now at generation %d (population %d)",
            generations,
            self._clock.generation,
            universe.population,
        )

    def step(self, universe: "Universe", generations: int = 1) -> None:
        """Advance the universe by a number of generations."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            universe.tick()
            self._clock.tick()

    def reset(self, universe: "Universe", template: Optional[str] = None) -> None:
        """Clear (or reseed) the universe and restart the generation count."""
        if template is None:
            universe.reset_cells()
        else:
            universe.set_template(template)
        self._clock.reset()
