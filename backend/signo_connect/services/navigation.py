"""Navigation — fuel pumps near a path and toll/fuel estimates for a route.

Invariants:
    - Demo pumps/tolls are seeded only when nothing matches and seeding is enabled
    - Route estimates use the configured speed, mileage and fuel price
"""

import logging

from signo_connect.config import Settings
from signo_connect.core.repository_protocols import Storage
from signo_connect.core.route_estimates import (
    Coordinate, estimate_route, places_near_path, places_near_points,
)
from signo_connect.core.sample_data import sample_fuel_pumps, sample_tolls

logger = logging.getLogger(__name__)


async def nearby_fuel_pumps(
    storage: Storage, coordinates: list[Coordinate], settings: Settings,
) -> list[dict]:
    radius = settings.fuel_pump_radius_km
    pumps = places_near_points(await storage.get_fuel_pumps(), coordinates, radius)
    if not pumps and settings.seed_demo_data:
        for pump in sample_fuel_pumps(coordinates[0]):
            await storage.create_fuel_pump(pump)
        logger.info("Seeded sample fuel pumps")
        pumps = places_near_points(await storage.get_fuel_pumps(), coordinates, radius)
    return pumps


async def route_with_tolls(
    storage: Storage, coordinates: list[Coordinate], settings: Settings,
) -> dict:
    corridor = settings.toll_corridor_km
    tolls = places_near_path(await storage.get_tolls(), coordinates, corridor)
    if not tolls and settings.seed_demo_data:
        for toll in sample_tolls(coordinates[0], coordinates[1]):
            await storage.create_toll(toll)
        logger.info("Seeded sample tolls")
        tolls = places_near_path(await storage.get_tolls(), coordinates, corridor)
    return estimate_route(
        coordinates,
        tolls,
        average_speed_kmph=settings.average_speed_kmph,
        mileage_kmpl=settings.fuel_mileage_kmpl,
        fuel_price=settings.fuel_price_per_liter,
    )
