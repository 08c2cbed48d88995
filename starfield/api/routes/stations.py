"""GET /api/v1/stations/{id} and its market baseline."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from starfield.api.dependencies import get_galaxy_service
from starfield.api.galaxy_service import GalaxyService
from starfield.api.routes.world import serialize_station
from starfield.api.schemas import CommodityEntry, MarketResponse, StationSchema
from starfield.core.commodities import commodity_unit, tonnes_per_unit
from starfield.utils.fingerprint import fingerprint_market

router = APIRouter(prefix="/stations")


@router.get("/{station_id}", response_model=StationSchema)
def get_station(
    station_id: str,
    service: GalaxyService = Depends(get_galaxy_service),
) -> StationSchema:
    station = service.station(station_id)
    if station is None:
        raise HTTPException(status_code=404, detail=f"Station {station_id!r} not found.")
    return serialize_station(station)


@router.get("/{station_id}/market", response_model=MarketResponse)
def get_market(
    station_id: str,
    visit: int = Query(0, ge=0, description="Visit serial; each visit rolls a fresh baseline"),
    service: GalaxyService = Depends(get_galaxy_service),
) -> MarketResponse:
    result = service.market(station_id, visit)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Station {station_id!r} not found.")
    station, snapshot = result
    return MarketResponse(
        station_id=station.id,
        station_name=station.name,
        visit=snapshot.timestamp,
        world_seed=service.world_seed,
        fingerprint=fingerprint_market(snapshot),
        commodities=[
            CommodityEntry(
                key=key, price=state.price, quantity=state.quantity,
                unit=commodity_unit(key).value, tonnes_per_unit=tonnes_per_unit(key),
            )
            for key, state in snapshot.entries()
        ],
    )
