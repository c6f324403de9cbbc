"""Navigation — fuel pumps near a route and toll / fuel estimates."""

import logging

from fastapi import APIRouter, Depends

from signo_connect.api.dependencies import get_storage
from signo_connect.config import Settings, get_settings
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.navigation import NearbyFuelPumpsRequest, RouteWithTollsRequest
from signo_connect.services import navigation

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["navigation"])


@router.post("/nearby-fuel-pumps")
async def nearby_fuel_pumps(
    body: NearbyFuelPumpsRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    pumps = await navigation.nearby_fuel_pumps(storage, body.coordinates, settings)
    return {"message": "Fuel pumps fetched successfully", "data": camelize(pumps)}


@router.post("/routes-with-tolls")
async def routes_with_tolls(
    body: RouteWithTollsRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Distance, duration, tolls along the route and a fuel estimate."""
    route = await navigation.route_with_tolls(storage, body.coordinates, settings)
    return {"message": "Route calculated successfully", "data": camelize(route)}
