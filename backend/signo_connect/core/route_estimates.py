"""Route Estimates — great-circle distances and trip estimates for a coordinate path.

Invariants:
    - Coordinates are (latitude, longitude) in decimal degrees
    - Distances are kilometres on a spherical Earth (R = 6371 km)
    - Estimates floor to whole units (hours, litres), cost = litres × price
    - Pure: no IO, no randomness

Design Decisions:
    - Haversine over a routing engine: no external dependency, good enough for
      corridor matching and rough fuel/time budgets
    - "Along the route" = within corridor_km of any path vertex or of the straight
      segment between vertices (sampled), ordered by position along the path
"""

import math
from typing import Sequence

Coordinate = tuple[float, float]

EARTH_RADIUS_KM = 6371.0
_SEGMENT_SAMPLES = 20


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lng1 = map(math.radians, a)
    lat2, lng2 = map(math.radians, b)
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def path_length_km(path: Sequence[Coordinate]) -> float:
    return sum(haversine_km(a, b) for a, b in zip(path, path[1:]))


def interpolate(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """Linear interpolation in degree space (fine for sub-1000 km segments)."""
    return (
        start[0] + (end[0] - start[0]) * fraction,
        start[1] + (end[1] - start[1]) * fraction,
    )


def _sample_path(path: Sequence[Coordinate]) -> list[tuple[float, Coordinate]]:
    """Points along the path with their cumulative distance from the start."""
    if len(path) == 1:
        return [(0.0, path[0])]
    samples: list[tuple[float, Coordinate]] = []
    travelled = 0.0
    for a, b in zip(path, path[1:]):
        leg = haversine_km(a, b)
        for i in range(_SEGMENT_SAMPLES):
            f = i / _SEGMENT_SAMPLES
            samples.append((travelled + leg * f, interpolate(a, b, f)))
        travelled += leg
    samples.append((travelled, path[-1]))
    return samples


def _position_on_path(
    point: Coordinate, samples: list[tuple[float, Coordinate]],
) -> tuple[float, float]:
    """(distance from path, distance along path) of the nearest sample."""
    best_gap, best_along = math.inf, 0.0
    for along, sample in samples:
        gap = haversine_km(point, sample)
        if gap < best_gap:
            best_gap, best_along = gap, along
    return best_gap, best_along


def places_near_path(
    places: list[dict], path: Sequence[Coordinate], radius_km: float,
) -> list[dict]:
    """Places within radius_km of the path, ordered along it.

    Each returned place gets "distance_km" (gap to the path, 1 decimal).
    """
    if not path:
        return []
    samples = _sample_path(path)
    hits = []
    for place in places:
        gap, along = _position_on_path(
            (place["latitude"], place["longitude"]), samples,
        )
        if gap <= radius_km:
            hits.append((along, gap, {**place, "distance_km": round(gap, 1)}))
    hits.sort(key=lambda h: (h[0], h[1]))
    return [h[2] for h in hits]


def places_near_points(
    places: list[dict], points: Sequence[Coordinate], radius_km: float,
) -> list[dict]:
    """Places within radius_km of any point, nearest first, with distance_km."""
    hits = []
    for place in places:
        loc = (place["latitude"], place["longitude"])
        gap = min(haversine_km(loc, p) for p in points)
        if gap <= radius_km:
            hits.append((gap, {**place, "distance_km": round(gap, 1)}))
    hits.sort(key=lambda h: h[0])
    return [h[1] for h in hits]


def total_toll_fee(tolls: list[dict]) -> float:
    return sum(t.get("fee_amount") or 0 for t in tolls)


def estimate_route(
    path: Sequence[Coordinate],
    tolls: list[dict],
    average_speed_kmph: float = 60.0,
    mileage_kmpl: float = 5.0,
    fuel_price: float = 100.0,
) -> dict:
    """Distance, duration, toll and fuel estimate for a path."""
    distance = round(path_length_km(path))
    liters = math.floor(distance / mileage_kmpl)
    return {
        "distance": {"value": distance, "unit": "kilometers"},
        "duration": {
            "value": math.floor(distance / average_speed_kmph),
            "unit": "hours",
        },
        "tolls": tolls,
        "total_toll_fee": total_toll_fee(tolls),
        "fuel_estimate": {"liters": liters, "cost": liters * fuel_price},
    }
