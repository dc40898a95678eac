"""Loading and validation of simulation settings.

Settings come from three places, later ones winning: built-in defaults, an
optional YAML file, and command-line overrides. A YAML file may contain any
of these keys::

    width: 25
    height: 25
    history_capacity: 100
    max_generations: 500
    seed:
      - [13, 12]
      - [13, 13]
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError
from .patterns.seeds import glider_pair_seed

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 25
DEFAULT_HEIGHT = 25
DEFAULT_HISTORY_CAPACITY = 100

_KNOWN_KEYS = {"width", "height", "history_capacity", "max_generations", "seed"}


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings for one simulation run.

    Attributes:
        width: Interior grid columns
        height: Interior grid rows
        history_capacity: Number of past fingerprints kept (the lookback window)
        max_generations: Optional cap on generations; None runs until halt
        seed: Live (x, y) coordinates; None means the glider pair at the centre
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    max_generations: Optional[int] = None
    seed: Optional[FrozenSet[Tuple[int, int]]] = None

    def resolved_seed(self) -> FrozenSet[Tuple[int, int]]:
        """Seed coordinates with the default pattern filled in."""
        if self.seed is None:
            return glider_pair_seed(self.width, self.height)
        return self.seed

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Copy of this config with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def validate(self) -> "SimulationConfig":
        """Fail fast on values the board cannot run with.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.width < 1:
            raise ConfigurationError("width", f"must be at least 1, got {self.width}")
        if self.height < 1:
            raise ConfigurationError("height", f"must be at least 1, got {self.height}")
        if self.history_capacity < 1:
            raise ConfigurationError("history_capacity", f"must be at least 1, got {self.history_capacity}")
        if self.max_generations is not None and self.max_generations < 0:
            raise ConfigurationError("max_generations", f"must not be negative, got {self.max_generations}")

        for x, y in self.resolved_seed():
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ConfigurationError(
                    "seed",
                    f"point ({x}, {y}) lies outside the {self.width}x{self.height} grid",
                )
        return self


def _require_int(key: str, value: Any) -> int:
    # bool is an int subclass; YAML true/false must not pass as 1/0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(key, f"must be an integer, got {value!r}")
    return value


def _parse_seed(raw_seed: Any) -> FrozenSet[Tuple[int, int]]:
    if not isinstance(raw_seed, (list, tuple)):
        raise ConfigurationError("seed", "must be a list of [x, y] pairs")

    points = set()
    for entry in raw_seed:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ConfigurationError("seed", f"invalid point {entry!r}, expected [x, y]")
        points.add((_require_int("seed", entry[0]), _require_int("seed", entry[1])))
    return frozenset(points)


def config_from_dict(raw: Dict[str, Any]) -> SimulationConfig:
    """Build a validated config from a plain mapping.

    Raises:
        ConfigurationError: On unknown keys, wrong types or invalid values
    """
    unknown = set(raw) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    max_generations = raw.get("max_generations")
    cfg = SimulationConfig(
        width=_require_int("width", raw.get("width", DEFAULT_WIDTH)),
        height=_require_int("height", raw.get("height", DEFAULT_HEIGHT)),
        history_capacity=_require_int(
            "history_capacity", raw.get("history_capacity", DEFAULT_HISTORY_CAPACITY)
        ),
        max_generations=(
            _require_int("max_generations", max_generations) if max_generations is not None else None
        ),
        seed=_parse_seed(raw["seed"]) if raw.get("seed") is not None else None,
    )

    return cfg.validate()


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return raw


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load and validate simulation settings from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        SimulationConfig instance

    Raises:
        ConfigurationError: On read, parse or validation errors
    """
    p = Path(path)
    cfg = config_from_dict(_load_yaml_file(p))
    logger.debug(f"Loaded config from {p}: {cfg.width}x{cfg.height}, history {cfg.history_capacity}")
    return cfg
