"""Pydantic response models for the REST API."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


# --- Background objects ---

class StarSchema(BaseModel):
    type: Literal["star"] = "star"
    id: str
    x: float
    y: float
    size: float
    color: str


class StationSchema(BaseModel):
    type: Literal["station"] = "station"
    id: str
    name: str
    x: float
    y: float
    size: float
    radius: float
    color: str
    station_type: str
    economy_type: str
    tech_level: str
    angle: float                # current rotation, radians in [0, 2*pi)
    rotation_speed: float
    is_fixed: bool = False


class AsteroidSchema(BaseModel):
    type: Literal["asteroid"] = "asteroid"
    id: str
    x: float
    y: float
    size: float
    orbit_center_x: float
    orbit_center_y: float
    orbit_radius: float
    orbit_angle: float          # current orbital angle
    orbit_angular_speed: float
    rotation: float             # current visual angle
    spin: float


BackgroundObjectSchema = Annotated[
    Union[StarSchema, StationSchema, AsteroidSchema],
    Field(discriminator="type"),
]


class ViewResponse(BaseModel):
    count: int
    cached_cells: int
    objects: list[BackgroundObjectSchema] = Field(default_factory=list)


# --- Markets ---

class CommodityEntry(BaseModel):
    key: str
    price: int
    quantity: int
    unit: str
    tonnes_per_unit: float


class MarketResponse(BaseModel):
    station_id: str
    station_name: str
    visit: int
    world_seed: int
    fingerprint: str
    commodities: list[CommodityEntry] = Field(default_factory=list)


# --- Config ---

class WorldConfigResponse(BaseModel):
    world_seed: int
    cell_size: float
    avg_stars_per_cell: float
    station_probability: float
    min_station_size: float
    max_station_size: float
    view_buffer_factor: float
    max_cells_per_query: int
    station_types: list[str]
    economy_types: list[str]
    tech_levels: list[str]
    fixed_station_ids: list[str]
