"""Commodity catalog: static definitions priced by the market generator.

Key types:
  EconomyEffect       : price delta / quantity multiplier for one economy type
  CommodityDefinition : immutable blueprint for one commodity

Definitions are pydantic dataclasses so the API can serialize them
directly with a TypeAdapter.
"""

from __future__ import annotations

import re
from dataclasses import field

from pydantic.dataclasses import dataclass as pydantic_dataclass

from starfield.core.enums import Unit

_TECH_LEVEL_RE = re.compile(r"TL(\d+)")


def tech_level_number(tech_level: str) -> int:
    """Map ``"TL5"`` to ``5``. Raises ValueError on anything else."""
    parsed = _TECH_LEVEL_RE.fullmatch(tech_level) if isinstance(tech_level, str) else None
    if parsed is None:
        raise ValueError(f"Malformed tech level: {tech_level!r}")
    return int(parsed.group(1))


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class EconomyEffect:
    """How one economy type shifts a commodity's price and stock."""

    dp: float = 0.0         # additive price delta
    q_mult: float = 1.0     # quantity multiplier


NO_EFFECT = EconomyEffect()


@pydantic_dataclass(frozen=True)
class CommodityDefinition:
    """Immutable blueprint describing one tradeable commodity."""

    key: str
    base_price: float
    base_quantity: float
    unit: Unit = Unit.TONNES
    econ_effect: dict[str, EconomyEffect] = field(default_factory=dict)
    min_tech_level: str | None = None   # never stocked below this level

    def effect_for(self, economy_type: str) -> EconomyEffect:
        return self.econ_effect.get(economy_type, NO_EFFECT)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

COMMODITY_REGISTRY: dict[str, CommodityDefinition] = {}


def _reg(c: CommodityDefinition) -> None:
    COMMODITY_REGISTRY[c.key] = c


def _fx(dp: float, q_mult: float) -> EconomyEffect:
    return EconomyEffect(dp=dp, q_mult=q_mult)


_reg(CommodityDefinition(
    key="Food", base_price=10, base_quantity=40,
    econ_effect={
        "Poor Agricultural": _fx(-1, 1.3),
        "Agricultural": _fx(-1, 1.4),
        "Rich Agricultural": _fx(-2, 1.6),
        "Poor Industrial": _fx(+1, 0.7),
        "Industrial": _fx(+4, 0.6),
        "Rich Industrial": _fx(+2, 0.5),
    },
))
_reg(CommodityDefinition(
    key="Textiles", base_price=8, base_quantity=35,
    econ_effect={
        "Poor Agricultural": _fx(-1, 1.2),
        "Agricultural": _fx(-1, 1.2),
        "Rich Agricultural": _fx(-2, 1.3),
        "Industrial": _fx(+1, 0.6),
    },
))
_reg(CommodityDefinition(
    key="Radioactives", base_price=20, base_quantity=15, min_tech_level="TL3",
))
_reg(CommodityDefinition(
    key="Liquor", base_price=25, base_quantity=20,
    econ_effect={"Rich Agricultural": _fx(-3, 1.5)},
))
_reg(CommodityDefinition(
    key="Luxuries", base_price=90, base_quantity=5, min_tech_level="TL4",
    econ_effect={"Rich Industrial": _fx(-5, 1.5)},
))
_reg(CommodityDefinition(
    key="Computers", base_price=100, base_quantity=4, min_tech_level="TL3",
    econ_effect={
        "High Tech": _fx(-20, 3.0),
        "Rich Industrial": _fx(-10, 2.0),
        "Industrial": _fx(-5, 1.2),
        "Poor Agricultural": _fx(+25, 0.1),
        "Rich Agricultural": _fx(+20, 0.15),
    },
))
_reg(CommodityDefinition(
    key="Machinery", base_price=60, base_quantity=10, min_tech_level="TL2",
    econ_effect={
        "Industrial": _fx(-5, 1.8),
        "Rich Industrial": _fx(-8, 2.2),
    },
))
_reg(CommodityDefinition(
    key="Alloys", base_price=32, base_quantity=25,
    econ_effect={
        "Poor Industrial": _fx(-2, 1.3),
        "Industrial": _fx(0, 1.1),
    },
))
_reg(CommodityDefinition(
    key="Firearms", base_price=75, base_quantity=8, min_tech_level="TL4",
    econ_effect={"Rich Industrial": _fx(-8, 1.4)},
))
_reg(CommodityDefinition(
    key="Furs", base_price=70, base_quantity=6,
    econ_effect={
        "Poor Agricultural": _fx(-8, 2.2),
        "Rich Agricultural": _fx(-10, 2.5),
        "High Tech": _fx(+15, 0.2),
    },
))
_reg(CommodityDefinition(key="Minerals", base_price=12, base_quantity=30))
_reg(CommodityDefinition(
    key="Gold", base_price=160, base_quantity=1, unit=Unit.KILOGRAMS, min_tech_level="TL5",
))
_reg(CommodityDefinition(
    key="Platinum", base_price=200, base_quantity=0.5, unit=Unit.KILOGRAMS, min_tech_level="TL6",
))
_reg(CommodityDefinition(
    key="Gem-Stones", base_price=20, base_quantity=10, unit=Unit.GRAMS, min_tech_level="TL4",
))
_reg(CommodityDefinition(
    key="Alien Items", base_price=60, base_quantity=2, min_tech_level="TL7",
    econ_effect={"High Tech": _fx(-10, 1.5)},
))

COMMODITIES: tuple[CommodityDefinition, ...] = tuple(COMMODITY_REGISTRY.values())


# ---------------------------------------------------------------------------
# Cargo helpers
# ---------------------------------------------------------------------------

_TONNES_PER_UNIT: dict[Unit, float] = {
    Unit.TONNES: 1.0,
    Unit.KILOGRAMS: 0.001,
    Unit.GRAMS: 0.000001,
}


def commodity_unit(key: str) -> Unit:
    """Unit for *key*; unknown commodities count as tonnes."""
    c = COMMODITY_REGISTRY.get(key)
    return c.unit if c is not None else Unit.TONNES


def tonnes_per_unit(key: str) -> float:
    """Cargo-hold weight in tonnes of one unit of *key*."""
    return _TONNES_PER_UNIT[commodity_unit(key)]
