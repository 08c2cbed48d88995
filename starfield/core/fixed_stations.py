"""Hand-placed unique stations that exist alongside the procedural ones.

Their ids carry a suffix so they never collide with ``station_{cx}_{cy}``.
"""

from __future__ import annotations

import math

from starfield.core.models import Station, Vec2

FIXED_STATIONS: tuple[Station, ...] = (
    Station(
        id="station_-10_4_fixA", name="Orion Citadel (Corp HQ)",
        position=Vec2(-3500.0, 1400.0), size=80.0, color="#FFA500",
        station_type="unique_quest", economy_type="High Tech", tech_level="TL6",
        initial_angle=math.pi / 4, rotation_speed=0.1, is_fixed=True,
    ),
    Station(
        id="station_5_-8_fixB", name="Zeta Relay (Abandoned)",
        position=Vec2(1750.0, -2800.0), size=60.0, color="#808080",
        station_type="unique_quest", economy_type="Industrial", tech_level="TL2",
        initial_angle=math.pi, rotation_speed=-0.05, is_fixed=True,
    ),
    Station(
        id="station_0_0_fixC", name="Point Alpha (Pirate Hub)",
        position=Vec2(0.0, 0.0), size=70.0, color="#FF0000",
        station_type="unique_quest", economy_type="Pirate", tech_level="TL3",
        initial_angle=0.0, rotation_speed=0.3, is_fixed=True,
    ),
)
