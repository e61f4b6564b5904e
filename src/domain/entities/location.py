"""Domain entities describing where the caller is."""

from __future__ import annotations

from dataclasses import dataclass

IPAddress = str


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude {self.longitude} outside [-180, 180]")
