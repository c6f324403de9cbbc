"""Navigation Schemas — coordinate lists for fuel pump and toll lookups."""

from pydantic import Field, field_validator

from signo_connect.schemas.base import CamelModel


def _check_coordinates(points: list[tuple[float, float]]) -> list[tuple[float, float]]:
    for lat, lng in points:
        if not -90 <= lat <= 90 or not -180 <= lng <= 180:
            raise ValueError(f"coordinate out of range: [{lat}, {lng}]")
    return points


class NearbyFuelPumpsRequest(CamelModel):
    coordinates: list[tuple[float, float]] = Field(min_length=1)

    @field_validator("coordinates")
    @classmethod
    def check_range(cls, v: list[tuple[float, float]]) -> list[tuple[float, float]]:
        return _check_coordinates(v)


class RouteWithTollsRequest(CamelModel):
    coordinates: list[tuple[float, float]] = Field(min_length=2)

    @field_validator("coordinates")
    @classmethod
    def check_range(cls, v: list[tuple[float, float]]) -> list[tuple[float, float]]:
        return _check_coordinates(v)
