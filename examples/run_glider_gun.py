import argparse
import logging

from lifesim import SimulationEngine, Universe, load_config, register_config_templates


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Game of Life universe in the terminal.")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config (defaults to the bundled lifesim/config.yaml)",
    )
    parser.add_argument(
        "--template",
        default=None,
        help="Template to seed with (overrides the config)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate",
    )
    parser.add_argument(
        "--every",
        type=int,
        default=1,
        help="Print the grid every N generations",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    return parser.parse_args()


class GridPrinter:
    """Clock subscriber that prints the universe every N generations."""

    def __init__(self, engine: SimulationEngine, universe: Universe, every: int, alive: str, dead: str):
        self.engine = engine
        self.universe = universe
        self.every = max(1, every)
        self.alive = alive
        self.dead = dead

    def tick(self) -> None:
        if self.engine.generation % self.every == 0:
            self.show()

    def show(self) -> None:
        print(f"generation {self.engine.generation}, population {self.universe.population}")
        print(self.universe.render(self.alive, self.dead))


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper())

    config = load_config(args.config)
    register_config_templates(config)

    universe = Universe.from_config(config)
    if args.template is not None:
        universe.set_template(args.template)

    engine = SimulationEngine()
    printer = GridPrinter(engine, universe, args.every, config.render.alive, config.render.dead)
    engine.clock.subscribe(printer)

    printer.show()
    engine.run(universe, args.generations)


if __name__ == "__main__":
    main()
