"""GET /api/v1/view: background objects around the camera (polled by the UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from starfield.api.dependencies import get_galaxy_service
from starfield.api.galaxy_service import GalaxyService
from starfield.api.schemas import AsteroidSchema, StarSchema, StationSchema, ViewResponse
from starfield.core.models import Asteroid, BackgroundObject, Star, Station

router = APIRouter()


def serialize_station(station: Station) -> StationSchema:
    return StationSchema(
        id=station.id, name=station.name,
        x=station.position.x, y=station.position.y,
        size=station.size, radius=station.radius, color=station.color,
        station_type=station.station_type, economy_type=station.economy_type,
        tech_level=station.tech_level, angle=station.current_angle,
        rotation_speed=station.rotation_speed, is_fixed=station.is_fixed,
    )


def serialize_object(obj: BackgroundObject) -> StarSchema | StationSchema | AsteroidSchema:
    match obj:
        case Star():
            return StarSchema(
                id=obj.id, x=obj.position.x, y=obj.position.y,
                size=obj.size, color=obj.color,
            )
        case Station():
            return serialize_station(obj)
        case Asteroid():
            pos = obj.position
            return AsteroidSchema(
                id=obj.id, x=pos.x, y=pos.y, size=obj.size,
                orbit_center_x=obj.orbit_center.x, orbit_center_y=obj.orbit_center.y,
                orbit_radius=obj.orbit_radius, orbit_angle=obj.current_angle,
                orbit_angular_speed=obj.orbit_angular_speed,
                rotation=obj.rotation, spin=obj.spin,
            )
        case _:
            raise TypeError(f"Unknown background object: {obj!r}")


@router.get("/view", response_model=ViewResponse)
def get_view(
    x: float = Query(0.0, description="Camera left edge in world units"),
    y: float = Query(0.0, description="Camera top edge in world units"),
    width: float = Query(800.0, gt=0, le=100_000),
    height: float = Query(600.0, gt=0, le=100_000),
    service: GalaxyService = Depends(get_galaxy_service),
) -> ViewResponse:
    objects = service.objects_in_view(x, y, width, height)
    return ViewResponse(
        count=len(objects),
        cached_cells=service.cached_cell_count,
        objects=[serialize_object(o) for o in objects],
    )
