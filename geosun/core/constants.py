"""
Reference tables for teaching scenes.

Cities used by the location selector and the longitude / time-zone
views. Zone offsets are civil UTC offsets in hours.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class City:
    """A named location.

    Attributes:
        name: Display name
        latitude: Latitude in degrees, north positive
        longitude: Longitude in degrees, east positive
        zone: Civil UTC offset in hours
    """
    name: str
    latitude: float
    longitude: float
    zone: float


FAMOUS_CITIES: Tuple[City, ...] = (
    # China
    City("Beijing", 39.9, 116.4, 8),
    City("Shanghai", 31.2, 121.5, 8),
    City("Guangzhou", 23.1, 113.3, 8),
    City("Harbin", 45.8, 126.5, 8),
    City("Singapore", 1.3, 103.8, 8),
    # Rest of Asia
    City("Tokyo", 35.7, 139.7, 9),
    City("Bangkok", 13.8, 100.5, 7),
    City("New Delhi", 28.6, 77.2, 5.5),
    City("Dubai", 25.3, 55.3, 4),
    City("Moscow", 55.8, 37.6, 3),
    # Europe and Africa
    City("Cairo", 30.0, 31.2, 2),
    City("Paris", 48.9, 2.3, 1),
    City("London", 51.5, 0.0, 0),
    City("Cape Town", -33.9, 18.4, 2),
    # Americas
    City("Rio de Janeiro", -22.9, -43.2, -3),
    City("New York", 40.7, -74.0, -5),
    City("Chicago", 41.9, -87.6, -6),
    City("Denver", 39.7, -104.9, -7),
    City("Los Angeles", 34.0, -118.2, -8),
    City("Honolulu", 21.3, -157.9, -10),
    # Oceania
    City("Sydney", -33.9, 151.2, 10),
    City("Wellington", -41.3, 174.8, 12),
    # Reference point
    City("Equator", 0.0, 0.0, 0),
)


def find_city(name: str) -> City:
    """
    Look up a city by name (case-insensitive).

    Raises
    ------
    KeyError
        If no city has that name
    """
    key = name.strip().lower()
    for city in FAMOUS_CITIES:
        if city.name.lower() == key:
            return city
    raise KeyError(f"Unknown city: {name}")
