"""Core data models: Vec2 and the background-object union (Star, Station, Asteroid)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from starfield.core.enums import ObjectType

TAU = 2.0 * math.pi


def wrap_angle(angle: float) -> float:
    """Normalize *angle* into [0, 2*pi)."""
    wrapped = angle % TAU
    # -1e-17 % TAU rounds up to TAU itself
    return 0.0 if wrapped >= TAU else wrapped


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D world coordinate."""

    x: float = 0.0
    y: float = 0.0

    def dist_sq(self, other: Vec2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def __repr__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


@dataclass(frozen=True, slots=True)
class Star:
    """A static background star."""

    id: str
    position: Vec2
    size: float
    color: str
    type: ObjectType = field(default=ObjectType.STAR, init=False)


@dataclass(frozen=True, slots=True)
class Station:
    """A dockable station with a market.

    ``current_angle`` is derived from wall-clock time on every query and is
    never stored in the generator cache; cached records keep the initial
    angle.
    """

    id: str
    position: Vec2
    size: float
    color: str
    economy_type: str
    tech_level: str             # "TL0" .. "TLn"
    station_type: str
    name: str
    initial_angle: float
    rotation_speed: float       # radians per second, signed
    current_angle: float = 0.0
    is_fixed: bool = False
    type: ObjectType = field(default=ObjectType.STATION, init=False)

    @property
    def radius(self) -> float:
        return self.size / 2


@dataclass(frozen=True, slots=True)
class Asteroid:
    """One member of an asteroid cluster orbiting its cell centre."""

    id: str
    orbit_center: Vec2
    orbit_radius: float
    initial_orbit_angle: float
    orbit_angular_speed: float  # radians per second, shared by the cluster
    size: float
    spin: float                 # visual rotation, radians per second
    current_angle: float = 0.0  # orbital angle
    rotation: float = 0.0       # visual angle
    type: ObjectType = field(default=ObjectType.ASTEROID, init=False)

    @property
    def position(self) -> Vec2:
        return Vec2(
            self.orbit_center.x + math.cos(self.current_angle) * self.orbit_radius,
            self.orbit_center.y + math.sin(self.current_angle) * self.orbit_radius,
        )


BackgroundObject = Star | Station | Asteroid


class Positioned(Protocol):
    """Anything with an id and a world position, e.g. an enemy ship."""

    id: str
    x: float
    y: float
