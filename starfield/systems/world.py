"""Infinite procedural world: lazily generated, cached grid cells.

Every cell's content is a pure function of its coordinates and the
config. Cells are generated on first touch and kept for the lifetime of
the generator. Rotation and orbit angles are recomputed from the clock
on every query and never written back to the cache.
"""

from __future__ import annotations

import logging
import math
import re
import time
from dataclasses import replace
from typing import Callable, Iterable

from starfield.config import WorldConfig
from starfield.core.models import (
    TAU, Asteroid, BackgroundObject, Positioned, Star, Station, Vec2, wrap_angle,
)
from starfield.systems.names import NameGenerator
from starfield.systems.prng import SeedablePRNG
from starfield.systems.seeding import cell_seed

logger = logging.getLogger(__name__)

CellKey = tuple[int, int]

_STATION_ID_RE = re.compile(r"station_(-?\d{1,10})_(-?\d{1,10})")

# Cell coordinates addressable by id: signed 32-bit
_CELL_MIN = -(2 ** 31)
_CELL_MAX = 2 ** 31 - 1

# Station placement: fraction of the cell, kept off the edges
_STATION_OFFSET_MIN = 0.3
_STATION_OFFSET_MAX = 0.7
_STATION_SPIN_MIN = 0.1
_STATION_SPIN_MAX = 1.6

# Asteroid clusters: (noise threshold, spawn chance when dense, when sparse)
_DENSE_NOISE_THRESHOLD = 0.45
_DENSE_SPAWN_CHANCE = 0.9
_SPARSE_SPAWN_CHANCE = 0.3
_DENSE_COUNT_MIN = 8
_DENSE_COUNT_MAX = 16
_ORBIT_SPEED_RANGE = (0.001, 0.003)
_ORBIT_RADIUS_RANGE = (2.0, 120.0)
_ASTEROID_SIZE_RANGE = (10.0, 48.0)
_ASTEROID_SPIN_RANGE = (-0.3, 0.3)


def station_id_for_cell(cell_x: int, cell_y: int) -> str:
    return f"station_{cell_x}_{cell_y}"


def parse_station_id(station_id: object) -> CellKey | None:
    """Cell coordinates encoded in a procedural station id, or None."""
    if not isinstance(station_id, str):
        return None
    parsed = _STATION_ID_RE.fullmatch(station_id)
    if parsed is None:
        return None
    cell_x, cell_y = int(parsed.group(1)), int(parsed.group(2))
    if not (_CELL_MIN <= cell_x <= _CELL_MAX and _CELL_MIN <= cell_y <= _CELL_MAX):
        return None
    return cell_x, cell_y


def refresh(obj: BackgroundObject, now: float) -> BackgroundObject:
    """Copy of *obj* with its time-dependent angles set for *now* (seconds)."""
    match obj:
        case Star():
            return obj
        case Station():
            return replace(obj, current_angle=wrap_angle(obj.initial_angle + now * obj.rotation_speed))
        case Asteroid():
            return replace(
                obj,
                current_angle=wrap_angle(obj.initial_orbit_angle + now * obj.orbit_angular_speed),
                rotation=wrap_angle(now * obj.spin),
            )
        case _:
            raise TypeError(f"Unknown background object: {obj!r}")


class WorldGenerator:
    """Generates and caches the content of world cells.

    Not thread-safe: callers sharing one instance across threads must
    serialize access. Each cell is built with its own PRNG, so separate
    instances never interfere.
    """

    __slots__ = ("_config", "_names", "_cache", "_clock", "_fixed", "_axis_cap")

    def __init__(self, config: WorldConfig | None = None, clock: Callable[[], float] = time.time) -> None:
        if config is None:
            config = WorldConfig()
        self._config = config
        self._names = NameGenerator.from_config(config)
        self._cache: dict[CellKey, tuple[BackgroundObject, ...]] = {}
        self._clock = clock
        self._fixed: dict[str, Station] = {s.id: s for s in config.fixed_stations}
        self._axis_cap = max(1, math.isqrt(config.max_cells_per_query))
        logger.info(
            "WorldGenerator ready: cell=%.0f, %.2f stars/cell, station p=%.3f, %d fixed stations",
            config.cell_size, config.avg_stars_per_cell,
            config.station_probability, len(self._fixed),
        )

    # -- public properties --

    @property
    def config(self) -> WorldConfig:
        return self._config

    @property
    def cached_cell_count(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def cell_of(self, x: float, y: float) -> CellKey:
        """Cell containing world position (*x*, *y*)."""
        size = self._config.cell_size
        return math.floor(x / size), math.floor(y / size)

    # -- generation --

    def generate_cell(self, cell_x: int, cell_y: int) -> tuple[BackgroundObject, ...]:
        """Objects of one cell, generated on first request and cached.

        Returned objects carry their initial angles; use :func:`refresh`
        for time-dependent values.
        """
        key = (cell_x, cell_y)
        objects = self._cache.get(key)
        if objects is None:
            objects = self._build_cell(cell_x, cell_y)
            self._cache[key] = objects
        return objects

    def _build_cell(self, cell_x: int, cell_y: int) -> tuple[BackgroundObject, ...]:
        cfg = self._config
        rng = SeedablePRNG(cell_seed(cell_x, cell_y, cfg.seed_prime_1, cfg.seed_prime_2, cfg.seed_prime_3))
        origin = Vec2(cell_x * cfg.cell_size, cell_y * cfg.cell_size)

        objects: list[BackgroundObject] = self._roll_stars(rng, cell_x, cell_y, origin)

        if rng.random() < cfg.station_probability:
            objects.append(self._roll_station(rng, cell_x, cell_y, origin))
        else:
            objects.extend(self._roll_asteroids(rng, cell_x, cell_y, origin))

        logger.debug("Generated cell (%d, %d): %d objects", cell_x, cell_y, len(objects))
        return tuple(objects)

    def _roll_stars(self, rng: SeedablePRNG, cell_x: int, cell_y: int, origin: Vec2) -> list[BackgroundObject]:
        cfg = self._config
        avg = cfg.avg_stars_per_cell
        count = rng.random_int(math.floor(avg * 0.5), math.ceil(avg * 1.5) + 1)
        stars: list[BackgroundObject] = []
        for i in range(count):
            offset_x = rng.random() * cfg.cell_size
            offset_y = rng.random() * cfg.cell_size
            size = rng.random_float(cfg.min_star_size, cfg.max_star_size)
            stars.append(Star(
                id=f"star_{cell_x}_{cell_y}_{i}",
                position=Vec2(origin.x + offset_x, origin.y + offset_y),
                size=size,
                color=cfg.star_color,
            ))
        return stars

    def _roll_station(self, rng: SeedablePRNG, cell_x: int, cell_y: int, origin: Vec2) -> Station:
        cfg = self._config
        offset_x = rng.random_float(_STATION_OFFSET_MIN, _STATION_OFFSET_MAX) * cfg.cell_size
        offset_y = rng.random_float(_STATION_OFFSET_MIN, _STATION_OFFSET_MAX) * cfg.cell_size
        size = rng.random_float(cfg.min_station_size, cfg.max_station_size)
        station_type = rng.pick(cfg.station_types)
        economy_type = rng.pick(cfg.economy_types)
        tech_level = rng.pick(cfg.tech_levels)
        name = self._names.generate(rng)
        initial_angle = rng.random() * TAU
        speed = rng.random_float(_STATION_SPIN_MIN, _STATION_SPIN_MAX)
        direction = 1 if rng.random() < 0.5 else -1
        return Station(
            id=station_id_for_cell(cell_x, cell_y),
            position=Vec2(origin.x + offset_x, origin.y + offset_y),
            size=size,
            color=cfg.station_color,
            economy_type=economy_type,
            tech_level=tech_level,
            station_type=station_type,
            name=name,
            initial_angle=initial_angle,
            rotation_speed=speed * direction,
            current_angle=initial_angle,
        )

    def _roll_asteroids(self, rng: SeedablePRNG, cell_x: int, cell_y: int, origin: Vec2) -> list[BackgroundObject]:
        """Zero, one (sparse) or 8-16 (dense) asteroids orbiting the cell centre together."""
        dense = rng.random() > _DENSE_NOISE_THRESHOLD
        chance = _DENSE_SPAWN_CHANCE if dense else _SPARSE_SPAWN_CHANCE
        if rng.random() >= chance:
            return []

        count = rng.random_int(_DENSE_COUNT_MIN, _DENSE_COUNT_MAX + 1) if dense else 1
        orbit_speed = rng.random_float(*_ORBIT_SPEED_RANGE)
        half = self._config.cell_size / 2
        center = Vec2(origin.x + half, origin.y + half)

        asteroids: list[BackgroundObject] = []
        for i in range(count):
            orbit_radius = rng.random_float(*_ORBIT_RADIUS_RANGE)
            angle = rng.random_float(0.0, TAU)
            asteroids.append(Asteroid(
                id=f"asteroid_{cell_x}_{cell_y}_{i}",
                orbit_center=center,
                orbit_radius=orbit_radius,
                initial_orbit_angle=angle,
                orbit_angular_speed=orbit_speed,
                size=rng.random_float(*_ASTEROID_SIZE_RANGE),
                spin=rng.random_float(*_ASTEROID_SPIN_RANGE),
                current_angle=angle,
            ))
        return asteroids

    # -- queries --

    def _cell_span(self, low: float, high: float) -> tuple[int, int]:
        size = self._config.cell_size
        first = math.floor(low / size)
        last = math.floor(high / size)
        if last - first + 1 > self._axis_cap:
            centre = (first + last) // 2
            logger.warning(
                "View spans %d cells on one axis; clamping to %d around cell %d",
                last - first + 1, self._axis_cap, centre,
            )
            first = centre - (self._axis_cap - 1) // 2
            last = first + self._axis_cap - 1
        return first, last

    def get_objects_in_view(
        self, camera_x: float, camera_y: float, view_width: float, view_height: float,
    ) -> list[BackgroundObject]:
        """Objects inside the camera rectangle grown by the view buffer.

        Each id appears at most once. Stations and asteroids come back with
        angles for the current time.
        """
        if not all(math.isfinite(v) for v in (camera_x, camera_y, view_width, view_height)):
            logger.warning(
                "Ignoring non-finite view (%s, %s, %s, %s)",
                camera_x, camera_y, view_width, view_height,
            )
            return []

        factor = self._config.view_buffer_factor
        buffer_x = view_width * (factor - 1) / 2
        buffer_y = view_height * (factor - 1) / 2
        left = camera_x - buffer_x
        top = camera_y - buffer_y
        right = camera_x + view_width + buffer_x
        bottom = camera_y + view_height + buffer_y
        if not all(math.isfinite(v) for v in (left, top, right, bottom)):
            logger.warning(
                "Ignoring view whose buffered bounds overflow (%s, %s, %s, %s)",
                camera_x, camera_y, view_width, view_height,
            )
            return []

        min_cx, max_cx = self._cell_span(left, right)
        min_cy, max_cy = self._cell_span(top, bottom)
        now = self._clock()

        def inside(obj: BackgroundObject) -> bool:
            pos = obj.position
            return left <= pos.x <= right and top <= pos.y <= bottom

        visible: list[BackgroundObject] = []
        seen: set[str] = set()
        for cx in range(min_cx, max_cx + 1):
            for cy in range(min_cy, max_cy + 1):
                for obj in self.generate_cell(cx, cy):
                    if obj.id in seen:
                        continue
                    current = refresh(obj, now)
                    if inside(current):
                        visible.append(current)
                        seen.add(current.id)

        for station in self._fixed.values():
            if station.id not in seen:
                current = refresh(station, now)
                if inside(current):
                    visible.append(current)
                    seen.add(current.id)
        return visible

    def get_station_by_id(self, station_id: str | None) -> Station | None:
        """Look up a fixed or procedural station, regenerating its cell if needed."""
        if not station_id:
            return None
        fixed = self._fixed.get(station_id) if isinstance(station_id, str) else None
        if fixed is not None:
            return refresh(fixed, self._clock())

        cell = parse_station_id(station_id)
        if cell is None:
            logger.debug("Malformed station id %r", station_id)
            return None

        for obj in self.generate_cell(*cell):
            if isinstance(obj, Station) and obj.id == station_id:
                return refresh(obj, self._clock())
        return None

    @staticmethod
    def get_enemies_to_despawn(
        enemies: Iterable[Positioned], focus_x: float, focus_y: float, despawn_radius: float,
    ) -> list[str]:
        """Ids of entities farther than *despawn_radius* from the focus point."""
        radius_sq = despawn_radius * despawn_radius
        far: list[str] = []
        for enemy in enemies:
            dx = enemy.x - focus_x
            dy = enemy.y - focus_y
            if dx * dx + dy * dy > radius_sq:
                far.append(enemy.id)
        return far
