"""Core modules for the simulator.

- cell: two-valued cell state
- bitgrid: bit-packed cell storage
- universe: toroidal grid, B3/S23 tick, seeding and rendering
- templates: named seed pattern registry
- clock / simulation_engine: generation stepping
- exceptions: error hierarchy
"""

from lifesim.core.bitgrid import BitGrid
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.core.templates import GRIDER_GUN_POINTS, TemplateRegistry
from lifesim.core.universe import Universe, next_state

__all__ = [
    "BitGrid",
    "Cell",
    "Clock",
    "SimulationEngine",
    "GRIDER_GUN_POINTS",
    "TemplateRegistry",
    "Universe",
    "next_state",
]
