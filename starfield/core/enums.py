"""Enumerations used throughout the generator."""

from __future__ import annotations

from enum import Enum, unique


@unique
class ObjectType(str, Enum):
    """Discriminant of the background-object union."""

    STAR = "star"
    STATION = "station"
    ASTEROID = "asteroid"


@unique
class Unit(str, Enum):
    """Unit a commodity is traded in."""

    TONNES = "t"
    KILOGRAMS = "kg"
    GRAMS = "g"
