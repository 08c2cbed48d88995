"""GalaxyService, the single owner of the world and market generators.

FastAPI runs sync endpoints on a thread pool while WorldGenerator is not
thread-safe, so every call goes through one lock. Market baselines are
memoized per (station id, visit) because regeneration is pure.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Callable

from starfield.systems.market import MarketGenerator
from starfield.systems.world import WorldGenerator

if TYPE_CHECKING:
    from starfield.config import StarfieldConfig
    from starfield.core.market import MarketSnapshot
    from starfield.core.models import BackgroundObject, Station

logger = logging.getLogger(__name__)


class GalaxyService:
    """Thread-safe facade over WorldGenerator and MarketGenerator."""

    def __init__(self, config: StarfieldConfig, clock: Callable[[], float] = time.time) -> None:
        self.config = config
        self._world = WorldGenerator(config.world, clock=clock)
        self._markets = MarketGenerator(config.market)
        self._lock = threading.Lock()
        self._baselines: dict[tuple[str, int], MarketSnapshot] = {}

    # -- public properties --

    @property
    def world_seed(self) -> int:
        return self.config.world_seed

    @property
    def market_generator(self) -> MarketGenerator:
        return self._markets

    @property
    def cached_cell_count(self) -> int:
        with self._lock:
            return self._world.cached_cell_count

    # -- queries --

    def objects_in_view(self, x: float, y: float, width: float, height: float) -> list[BackgroundObject]:
        with self._lock:
            return self._world.get_objects_in_view(x, y, width, height)

    def station(self, station_id: str) -> Station | None:
        with self._lock:
            return self._world.get_station_by_id(station_id)

    def market(self, station_id: str, visit: int = 0) -> tuple[Station, MarketSnapshot] | None:
        """Station and its baseline market for *visit*, or None if unknown."""
        with self._lock:
            station = self._world.get_station_by_id(station_id)
            if station is None:
                return None
            key = (station.id, visit)
            snapshot = self._baselines.get(key)
            if snapshot is None:
                snapshot = self._markets.generate(station, self.config.world_seed, visit)
                self._baselines[key] = snapshot
                logger.info("Generated market baseline for %s (visit %d)", station.id, visit)
            return station, snapshot
