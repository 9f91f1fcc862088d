"""
Day length, sunrise and sunset.

Works from the sunrise hour angle cos(H0) = -tan(phi) tan(delta), with
explicit polar-day / polar-night detection near the poles.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from geosun.utils.constants import DEGREES_PER_HOUR, SOLAR_NOON_HOUR

HOURS_PER_DAY = 24.0


@dataclass(frozen=True)
class SunriseSunset:
    """Local solar times of sunrise and sunset [hours]."""
    sunrise: float
    sunset: float

    @property
    def day_length(self) -> float:
        """Hours between sunrise and sunset."""
        return self.sunset - self.sunrise


def day_length(latitude: float, subsolar_lat: float) -> float:
    """
    Calculate the length of daylight at a latitude.

    Parameters
    ----------
    latitude : float
        Observer latitude in degrees
    subsolar_lat : float
        Subsolar latitude (declination) in degrees

    Returns
    -------
    hours : float
        Hours of daylight, 24 for polar day and 0 for polar night

    Notes
    -----
    Refraction and the solar disc size are ignored, so the equinox day
    is exactly 12 hours everywhere.
    """
    polar_limit = 90 - abs(subsolar_lat)

    # Inside a polar circle on the summer/winter side
    if abs(latitude) >= polar_limit and subsolar_lat != 0:
        same_hemisphere = (latitude >= 0) == (subsolar_lat > 0)
        return HOURS_PER_DAY if same_hemisphere else 0.0

    cos_h0 = -np.tan(np.radians(latitude)) * np.tan(np.radians(subsolar_lat))

    if cos_h0 <= -1:
        return HOURS_PER_DAY
    if cos_h0 >= 1:
        return 0.0

    h0 = np.degrees(np.arccos(cos_h0))
    return float(2 * h0 / DEGREES_PER_HOUR)


def sunrise_sunset(latitude: float, subsolar_lat: float) -> Optional[SunriseSunset]:
    """
    Local solar sunrise and sunset times.

    Returns None during polar day or polar night, when the sun does not
    cross the horizon.
    """
    length = day_length(latitude, subsolar_lat)
    if length >= HOURS_PER_DAY or length <= 0:
        return None

    return SunriseSunset(
        sunrise=SOLAR_NOON_HOUR - length / 2,
        sunset=SOLAR_NOON_HOUR + length / 2,
    )


def is_daytime(local_time: float, latitude: float, subsolar_lat: float) -> bool:
    """
    Whether the sun is up at a local solar time.

    Parameters
    ----------
    local_time : float
        Local solar time in hours (0-24)
    latitude : float
        Observer latitude in degrees
    subsolar_lat : float
        Subsolar latitude in degrees

    Returns
    -------
    daytime : bool
        True between sunrise (inclusive) and sunset (exclusive)
    """
    length = day_length(latitude, subsolar_lat)
    if length >= HOURS_PER_DAY:
        return True
    if length <= 0:
        return False

    sunrise = SOLAR_NOON_HOUR - length / 2
    sunset = SOLAR_NOON_HOUR + length / 2
    return sunrise <= local_time < sunset
