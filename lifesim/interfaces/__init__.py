"""Interface abstractions for the simulator.

- CellStorage: linearly indexed cell storage (abstract base class)
- IClock, ClockSubscriber: generation clock and its subscribers
"""

from lifesim.interfaces.clock import ClockSubscriber, IClock
from lifesim.interfaces.grid import CellStorage

__all__ = [
    "CellStorage",
    "ClockSubscriber",
    "IClock",
]
