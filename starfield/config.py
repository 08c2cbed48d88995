"""Generator configuration with defaults taken from the game's balance sheet.

All config objects are frozen and validated on construction; an invalid
value raises :class:`ConfigError` before any generator is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from starfield.core.commodities import tech_level_number
from starfield.core.fixed_stations import FIXED_STATIONS
from starfield.core.models import Station
from starfield.core.station_names import CORE_NAMES, DESIGNATORS, NUMERALS, PREFIXES

DEFAULT_ECONOMY_TYPES: tuple[str, ...] = (
    "Poor Agricultural",
    "Agricultural",
    "Rich Agricultural",
    "Poor Industrial",
    "Industrial",
    "Rich Industrial",
    "High Tech",
)

DEFAULT_TECH_LEVELS: tuple[str, ...] = tuple(f"TL{n}" for n in range(8))

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(ValueError):
    """A configuration value that cannot produce a valid world."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def _check_enumeration(name: str, values: tuple[str, ...]) -> None:
    _require(len(values) > 0, f"{name} must not be empty")
    _require(all(isinstance(v, str) and v for v in values), f"{name} entries must be non-empty strings")
    _require(len(set(values)) == len(values), f"{name} contains duplicates")


def _check_range(name: str, low: float, high: float) -> None:
    _require(math.isfinite(low) and math.isfinite(high), f"{name} bounds must be finite")
    _require(0 <= low <= high, f"{name} range must satisfy 0 <= min <= max, got {low}..{high}")


@dataclass(frozen=True)
class WorldConfig:
    """Immutable configuration for procedural world generation."""

    # Grid & seeding
    cell_size: float = 350.0
    seed_prime_1: int = 73856093
    seed_prime_2: int = 19349663
    seed_prime_3: int = 83492791

    # Stars
    star_base_density: float = 0.0001      # stars per square world unit
    min_star_size: float = 0.5
    max_star_size: float = 1.8
    star_color: str = "#FFFFFF"

    # Stations
    station_probability: float = 0.05
    min_station_size: float = 45.0
    max_station_size: float = 90.0
    station_color: str = "#00FFFF"
    station_types: tuple[str, ...] = ("coriolis",)
    economy_types: tuple[str, ...] = DEFAULT_ECONOMY_TYPES
    tech_levels: tuple[str, ...] = DEFAULT_TECH_LEVELS
    fixed_stations: tuple[Station, ...] = FIXED_STATIONS

    # Station names
    station_prefixes: tuple[str, ...] = PREFIXES
    station_core_names: tuple[str, ...] = CORE_NAMES
    station_designators: tuple[str, ...] = DESIGNATORS
    station_numerals: tuple[str, ...] = NUMERALS

    # View queries
    view_buffer_factor: float = 3.0        # 3 = one extra view size around the camera
    max_cells_per_query: int = 4096

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.cell_size) and self.cell_size > 0,
            f"cell_size must be a positive finite number, got {self.cell_size}",
        )
        _require(
            math.isfinite(self.star_base_density) and self.star_base_density >= 0,
            "star_base_density must be non-negative",
        )
        _check_range("star size", self.min_star_size, self.max_star_size)
        _check_range("station size", self.min_station_size, self.max_station_size)
        _require(0.0 <= self.station_probability <= 1.0, "station_probability must lie in [0, 1]")
        _check_enumeration("station_types", self.station_types)
        _check_enumeration("economy_types", self.economy_types)
        _check_enumeration("tech_levels", self.tech_levels)
        for tl in self.tech_levels:
            try:
                tech_level_number(tl)
            except ValueError as exc:
                raise ConfigError(f"tech_levels: {exc}") from exc
        for name in ("station_prefixes", "station_core_names", "station_designators", "station_numerals"):
            _check_enumeration(name, getattr(self, name))
        _require(
            math.isfinite(self.view_buffer_factor) and self.view_buffer_factor >= 1.0,
            "view_buffer_factor must be >= 1",
        )
        _require(self.max_cells_per_query >= 1, "max_cells_per_query must be >= 1")
        ids = [s.id for s in self.fixed_stations]
        _require(len(set(ids)) == len(ids), "fixed_stations contains duplicate ids")

    @property
    def avg_stars_per_cell(self) -> float:
        return self.star_base_density * self.cell_size * self.cell_size


@dataclass(frozen=True)
class MarketConfig:
    """Immutable configuration for commodity pricing."""

    reference_min_size: float = 45.0       # station size with a 1x quantity factor
    reference_tech_level: int = 3          # tech level with no price adjustment
    tech_price_fraction: float = 0.05      # price change per tech level, as a fraction of base price
    price_jitter: float = 0.2              # std-dev of price noise, as a fraction of price
    quantity_jitter: float = 0.2           # std-dev of quantity noise, as a fraction of mean

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.reference_min_size) and self.reference_min_size > 0,
            "reference_min_size must be a positive finite number",
        )
        for name in ("tech_price_fraction", "price_jitter", "quantity_jitter"):
            value = getattr(self, name)
            _require(math.isfinite(value) and value >= 0, f"{name} must be non-negative")


@dataclass(frozen=True)
class StarfieldConfig:
    """Top-level configuration consumed by the CLI and the API service."""

    world_seed: int = 42
    world: WorldConfig = field(default_factory=WorldConfig)
    market: MarketConfig = field(default_factory=MarketConfig)

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        _require(self.log_level.upper() in _LOG_LEVELS, f"Unknown log level: {self.log_level}")
