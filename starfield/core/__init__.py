"""Core data models, static catalogs and market output types."""

from starfield.core.enums import ObjectType, Unit
from starfield.core.models import Asteroid, BackgroundObject, Positioned, Star, Station, Vec2
from starfield.core.commodities import COMMODITIES, CommodityDefinition, EconomyEffect
from starfield.core.market import CommodityState, MarketSnapshot

__all__ = [
    "Asteroid",
    "BackgroundObject",
    "COMMODITIES",
    "CommodityDefinition",
    "CommodityState",
    "EconomyEffect",
    "MarketSnapshot",
    "ObjectType",
    "Positioned",
    "Star",
    "Station",
    "Unit",
    "Vec2",
]
