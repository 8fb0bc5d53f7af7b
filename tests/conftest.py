"""
Pytest configuration and shared fixtures for the lifesim test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifesim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifesim.core.templates import TemplateRegistry  # noqa: E402
from lifesim.core.universe import Universe  # noqa: E402
from lifesim.utils.config_loader import clear_config_cache  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture(autouse=True)
def fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def registry():
    """An empty template registry isolated from the global one."""
    return TemplateRegistry()


@pytest.fixture
def small_universe():
    """Factory for small universes, optionally seeded."""

    def _make(width=6, height=6, cells=()):
        universe = Universe(width=width, height=height)
        universe.set_cells(cells)
        return universe

    return _make


UNIVERSE_CFG = {"width": 16, "height": 12, "template": "Glider"}

RENDER_CFG = {"alive": "#", "dead": "."}

TEMPLATES_CFG = {
    "Glider": [[0, 1], [1, 2], [2, 0], [2, 1], [2, 2]],
    "Block": [[0, 0], [0, 1], [1, 0], [1, 1]],
}



@pytest.fixture
def valid_life_config_dict():
    """
    Fixture providing a complete valid lifesim configuration dictionary.
    """
    return {
        "universe": dict(UNIVERSE_CFG),
        "render": dict(RENDER_CFG),
        "templates": {name: [list(p) for p in pts] for name, pts in TEMPLATES_CFG.items()},
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_life_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(valid_life_config_dict, f, allow_unicode=True)

    yield temp_yaml_file


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
