"""Read-only definitions: GET /api/v1/commodities and GET /api/v1/config.

Commodity definitions are pydantic dataclasses from starfield/core/ and
are serialized directly with a TypeAdapter.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import TypeAdapter

from starfield.api.dependencies import get_galaxy_service
from starfield.api.galaxy_service import GalaxyService
from starfield.api.schemas import WorldConfigResponse
from starfield.core.commodities import CommodityDefinition

router = APIRouter()

_commodity_ta = TypeAdapter(CommodityDefinition)


@router.get("/commodities")
def get_commodities(service: GalaxyService = Depends(get_galaxy_service)) -> dict:
    return {
        "commodities": [
            _commodity_ta.dump_python(c, mode="json")
            for c in service.market_generator.catalog
        ],
    }


@router.get("/config", response_model=WorldConfigResponse)
def get_config(service: GalaxyService = Depends(get_galaxy_service)) -> WorldConfigResponse:
    cfg = service.config.world
    return WorldConfigResponse(
        world_seed=service.world_seed,
        cell_size=cfg.cell_size,
        avg_stars_per_cell=cfg.avg_stars_per_cell,
        station_probability=cfg.station_probability,
        min_station_size=cfg.min_station_size,
        max_station_size=cfg.max_station_size,
        view_buffer_factor=cfg.view_buffer_factor,
        max_cells_per_query=cfg.max_cells_per_query,
        station_types=list(cfg.station_types),
        economy_types=list(cfg.economy_types),
        tech_levels=list(cfg.tech_levels),
        fixed_station_ids=[s.id for s in cfg.fixed_stations],
    )
