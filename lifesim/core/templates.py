"""Seed pattern registry.

Templates are named, fixed lists of ``(row, col)`` coordinates used to seed a
universe. The global registry ships with a single built-in pattern,
``GriderGun``; hosts may register more (for instance from the YAML config)
without touching the engine.
"""

from __future__ import annotations

from typing import Iterable, Optional

from lifesim.utils.consts import GRIDER_GUN

Point = tuple[int, int]
Pattern = tuple[Point, ...]

# Glider gun plus a travelling glider in the far corner; needs a 112x126 grid.
GRIDER_GUN_POINTS: Pattern = (
    (2, 35), (3, 35), (3, 37), (4, 1), (4, 23), (4, 25), (4, 35), (4, 36),
    (5, 1), (5, 3), (5, 23), (5, 24), (6, 1), (6, 2), (6, 9), (6, 11),
    (6, 24), (6, 37), (6, 38), (6, 39), (7, 9), (7, 10), (7, 37), (8, 3),
    (8, 4), (8, 5), (8, 10), (8, 24), (8, 25), (8, 38), (9, 3), (9, 24),
    (9, 26), (9, 30), (10, 4), (10, 10), (10, 11), (10, 24), (10, 29), (10, 30),
    (11, 10), (11, 12), (11, 16), (11, 29), (11, 31), (12, 10), (12, 15), (12, 16),
    (12, 21), (12, 22), (13, 15), (13, 17), (13, 21), (13, 23), (14, 21), (15, 40),
    (15, 41), (16, 40), (16, 42), (17, 40), (20, 29), (20, 30), (20, 31), (21, 29),
    (22, 30), (108, 122), (108, 123), (109, 122), (109, 124), (110, 124), (111, 124), (111, 125),
)


class TemplateRegistry:
    """Registry of named seed patterns.

    THREAD SAFETY: Not thread-safe. Register templates during start-up,
    before universes are shared between threads.
    """

    def __init__(self):
        self._templates: dict[str, Pattern] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def register(self, name: str, points: Iterable[Point]) -> None:
        """Register a pattern under ``name``."""
        if name in self._templates:
            raise ValueError(f"Template '{name}' already registered")
        pattern = tuple((int(row), int(col)) for row, col in points)
        if any(row < 0 or col < 0 for row, col in pattern):
            raise ValueError(f"Template '{name}' has negative coordinates")
        self._templates[name] = pattern

    def get(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None when unknown."""
        return self._templates.get(name)

    def list_templates(self) -> list[str]:
        """List all registered template names."""
        return list(self._templates.keys())


def _default_registry() -> TemplateRegistry:
    registry = TemplateRegistry()
    registry.register(GRIDER_GUN, GRIDER_GUN_POINTS)
    return registry


# Global registry
_REGISTRY = _default_registry()


def get_registry() -> TemplateRegistry:
    """Return the global template registry."""
    return _REGISTRY


def register_template(name: str, points: Iterable[Point]) -> None:
    """Register a template globally."""
    _REGISTRY.register(name, points)


def get_template(name: str) -> Optional[Pattern]:
    """Get a globally registered pattern by name."""
    return _REGISTRY.get(name)


def list_templates() -> list[str]:
    """List all globally registered templates."""
    return _REGISTRY.list_templates()
