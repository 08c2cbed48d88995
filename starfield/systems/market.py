"""Deterministic station markets.

A station's baseline commodity table is a pure function of the station
(position, tech level, economy type, size), the world seed and a visit
suffix. Nothing is persisted: the same inputs always rebuild the same
table, so only later trading deltas need saving.

Per commodity, in catalog order:
  1. tech gate       : skipped below ``min_tech_level`` (no draws consumed)
  2. economy effect  : (price delta, quantity multiplier), default (0, 1)
  3. quantity mean   : base * mult * (size / reference size)^2; omitted if it rounds to 0
  4. price           : base + delta - tech adjustment, floored at 1, then
                       Normal(0, 0.2 * price) jitter, rounded, floored at 1
  5. quantity        : mean + Normal(0, 0.2 * mean), rounded, floored at 0
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from starfield.config import MarketConfig
from starfield.core.commodities import COMMODITIES, CommodityDefinition, tech_level_number
from starfield.core.market import CommodityState, MarketSnapshot
from starfield.core.models import Station
from starfield.systems.int32 import round_half_up
from starfield.systems.prng import SeedablePRNG
from starfield.systems.seeding import combine_seed

logger = logging.getLogger(__name__)


class MarketGenerator:
    """Builds baseline commodity tables for stations."""

    __slots__ = ("_config", "_catalog")

    def __init__(
        self,
        config: MarketConfig | None = None,
        catalog: Sequence[CommodityDefinition] = COMMODITIES,
    ) -> None:
        self._config = config if config is not None else MarketConfig()
        self._catalog = tuple(catalog)

    @property
    def catalog(self) -> tuple[CommodityDefinition, ...]:
        return self._catalog

    def _size_factor(self, size: float) -> float:
        ref = self._config.reference_min_size
        effective = size if math.isfinite(size) and size > ref else ref
        return (effective / ref) ** 2

    def expected_terms(self, station: Station, commodity: CommodityDefinition) -> tuple[float, float] | None:
        """Pre-jitter (price, mean quantity), or None if the station never stocks it."""
        cfg = self._config
        station_tl = tech_level_number(station.tech_level)
        if commodity.min_tech_level is not None and station_tl < tech_level_number(commodity.min_tech_level):
            return None

        effect = commodity.effect_for(station.economy_type)
        mean_quantity = commodity.base_quantity * effect.q_mult * self._size_factor(station.size)
        if round_half_up(mean_quantity) <= 0:
            return None

        tech_adj = (station_tl - cfg.reference_tech_level) * cfg.tech_price_fraction * commodity.base_price
        price = max(1.0, commodity.base_price + effect.dp - tech_adj)
        return price, mean_quantity

    def generate(self, station: Station, world_seed: int, suffix: int = 0) -> MarketSnapshot:
        """Baseline market for *station* on visit *suffix*."""
        cfg = self._config
        seed = combine_seed(world_seed, station.position.x, station.position.y, suffix)
        rng = SeedablePRNG(seed)

        table: dict[str, CommodityState] = {}
        for commodity in self._catalog:
            terms = self.expected_terms(station, commodity)
            if terms is None:
                continue
            base_price, mean_quantity = terms

            price = max(1, round_half_up(base_price + rng.normal() * cfg.price_jitter * base_price))
            quantity = max(0, round_half_up(mean_quantity + rng.normal() * cfg.quantity_jitter * mean_quantity))
            if price > 0:
                table[commodity.key] = CommodityState(price=price, quantity=quantity)

        logger.debug(
            "Market for %s (seed=%d, suffix=%d): %d commodities",
            station.id, seed, suffix, len(table),
        )
        return MarketSnapshot(timestamp=suffix, table=table)
