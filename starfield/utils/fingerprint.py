"""Short content digests for generated cells and market tables.

Two generations are identical exactly when their fingerprints match,
which is how determinism is checked and how API clients tell one
baseline from another. Time-dependent angles are left out.
"""

from __future__ import annotations

from typing import Iterable

import xxhash

from starfield.core.market import MarketSnapshot
from starfield.core.models import Asteroid, BackgroundObject, Star, Station


def _describe(obj: BackgroundObject) -> str:
    match obj:
        case Star():
            return f"{obj.id}|{obj.position.x!r},{obj.position.y!r}|{obj.size!r}|{obj.color}"
        case Station():
            return (
                f"{obj.id}|{obj.position.x!r},{obj.position.y!r}|{obj.size!r}|{obj.name}"
                f"|{obj.economy_type}|{obj.tech_level}|{obj.station_type}"
                f"|{obj.initial_angle!r}|{obj.rotation_speed!r}"
            )
        case Asteroid():
            return (
                f"{obj.id}|{obj.orbit_center.x!r},{obj.orbit_center.y!r}|{obj.orbit_radius!r}"
                f"|{obj.initial_orbit_angle!r}|{obj.orbit_angular_speed!r}|{obj.size!r}|{obj.spin!r}"
            )
        case _:
            raise TypeError(f"Unknown background object: {obj!r}")


def fingerprint_objects(objects: Iterable[BackgroundObject]) -> str:
    """Order-sensitive 64-bit hex digest of the static fields of *objects*."""
    digest = xxhash.xxh64()
    for obj in objects:
        digest.update(_describe(obj).encode("utf-8"))
        digest.update(b"\n")
    return digest.hexdigest()


def fingerprint_market(snapshot: MarketSnapshot) -> str:
    """Digest of a market table, independent of insertion order."""
    digest = xxhash.xxh64()
    digest.update(f"t={snapshot.timestamp}\n".encode("utf-8"))
    for key in sorted(snapshot.table):
        state = snapshot.table[key]
        digest.update(f"{key}={state.price},{state.quantity}\n".encode("utf-8"))
    return digest.hexdigest()
