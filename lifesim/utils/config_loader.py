"""Helpers for loading and validating simulator configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError
from lifesim.core.templates import Pattern, TemplateRegistry, get_registry
from lifesim.utils.consts import ALIVE_CHAR, DEAD_CHAR, GridDefaults


@dataclass(frozen=True)
class UniverseConfig:
    width: int = GridDefaults.WIDTH
    height: int = GridDefaults.HEIGHT
    template: Optional[str] = None


@dataclass(frozen=True)
class RenderConfig:
    alive: str = ALIVE_CHAR
    dead: str = DEAD_CHAR


@dataclass(frozen=True)
class LifeConfig:
    universe: UniverseConfig
    render: RenderConfig
    templates: dict[str, Pattern] = field(default_factory=dict)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives at lifesim/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top-level config must be a mapping")

    return raw


def _build_universe_cfg(universe_raw: dict[str, Any]) -> UniverseConfig:
    """Convert universe section to UniverseConfig with defaults."""
    template = universe_raw.get("template")
    return UniverseConfig(
        width=int(universe_raw.get("width", GridDefaults.WIDTH)),
        height=int(universe_raw.get("height", GridDefaults.HEIGHT)),
        template=str(template) if template is not None else None,
    )


def _build_render_cfg(render_raw: dict[str, Any]) -> RenderConfig:
    return RenderConfig(
        alive=str(render_raw.get("alive", ALIVE_CHAR)),
        dead=str(render_raw.get("dead", DEAD_CHAR)),
    )


def _build_templates(templates_raw: dict[str, Any]) -> dict[str, Pattern]:
    templates: dict[str, Pattern] = {}
    for name, points in templates_raw.items():
        pattern = []
        for point in points:
            row, col = point
            pattern.append((int(row), int(col)))
        templates[str(name)] = tuple(pattern)
    return templates


def _parse_life_cfg_from_dict(raw: dict[str, Any]) -> LifeConfig:
    try:
        cfg = LifeConfig(
            universe=_build_universe_cfg(raw.get("universe") or {}),
            render=_build_render_cfg(raw.get("render") or {}),
            templates=_build_templates(raw.get("templates") or {}),
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_universe_config(cfg.universe)
    _validate_render_config(cfg.render)
    _validate_templates(cfg.templates)
    return cfg


def _validate_universe_config(universe: UniverseConfig) -> None:
    """Basic sanity checks for universe geometry to fail fast on bad configs."""
    if universe.width < 1 or universe.height < 1:
        raise ConfigurationError("universe", "width and height must be >= 1")


def _validate_render_config(render: RenderConfig) -> None:
    if len(render.alive) != 1 or len(render.dead) != 1:
        raise ConfigurationError("render", "alive and dead must be single characters")
    if render.alive == render.dead:
        raise ConfigurationError("render", "alive and dead characters must differ")


def _validate_templates(templates: dict[str, Pattern]) -> None:
    for name, pattern in templates.items():
        if any(row < 0 or col < 0 for row, col in pattern):
            raise ConfigurationError(f"templates.{name}", "coordinates must be >= 0")


def load_config(path: Optional[str] = None) -> LifeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled lifesim/config.yaml.

    Returns:
        LifeConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_life_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> LifeConfig:
    """Return the loaded config for path, loading and caching if necessary.

    Configs are cached per resolved path; repeated calls return the cached
    instance without re-reading the YAML file.

    THREAD SAFETY: This function is thread-safe.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=key)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()


def register_config_templates(
    config: LifeConfig, registry: Optional[TemplateRegistry] = None
) -> list[str]:
    """Register configured templates, skipping names already registered.

    Returns:
        Names that were newly registered.
    """
    if registry is None:
        registry = get_registry()

    added = []
    for name, pattern in config.templates.items():
        if name in registry:
            continue
        registry.register(name, pattern)
        added.append(name)
    return added
