"""Conway's Game of Life on a wrap-around grid.

The package simulates the B3/S23 rule on a toroidal rectangular universe
and exposes the evolving grid to a caller one generation at a time.

Architecture:
- BitGrid: flat, bit-packed cell storage addressed by linear index
- Universe: dimensions, neighbor counting, generation tick, seeding, rendering
- Template registry: named seed patterns (GriderGun built in)
- SimulationEngine + Clock: stepping with generation counting and observers

Getting started:
    from lifesim import Universe

    universe = Universe()
    universe.set_template("GriderGun")
    universe.tick()
    print(universe.render())
"""

from lifesim.core.bitgrid import BitGrid
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.exceptions import (
    ConfigurationError,
    GridBoundsError,
    GridSizeError,
    LifeSimError,
)
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.core.templates import (
    TemplateRegistry,
    get_template,
    list_templates,
    register_template,
)
from lifesim.core.universe import Universe
from lifesim.utils.config_loader import get_config, load_config, register_config_templates

__all__ = [
    # Core
    "BitGrid",
    "Cell",
    "Universe",
    "Clock",
    "SimulationEngine",
    # Templates
    "TemplateRegistry",
    "get_template",
    "list_templates",
    "register_template",
    # Configuration
    "get_config",
    "load_config",
    "register_config_templates",
    # Errors
    "LifeSimError",
    "ConfigurationError",
    "GridBoundsError",
    "GridSizeError",
]
