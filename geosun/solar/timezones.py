"""
Longitude and time-zone helpers.

Local solar time advances one hour per 15 deg of longitude eastward.
Civil zone time uses a fixed offset from UTC.
"""

import numpy as np

from geosun.utils.constants import (
    DEGREES_PER_HOUR,
    EASTERN_HEMISPHERE_WEST_LIMIT,
    EASTERN_HEMISPHERE_EAST_LIMIT,
)


def _wrap_hours(hours: float) -> float:
    return float(np.mod(hours, 24.0))


def local_time_from_utc(utc_hour: float, longitude: float) -> float:
    """
    Local solar time at a longitude.

    Parameters
    ----------
    utc_hour : float
        UTC clock time in hours
    longitude : float
        Longitude in degrees, east positive

    Returns
    -------
    local_time : float
        Local solar time in hours, in [0, 24)
    """
    return _wrap_hours(utc_hour + longitude / DEGREES_PER_HOUR)


def zone_time(utc_hour: float, zone_offset: float) -> float:
    """Civil time in a zone with the given UTC offset, in [0, 24)."""
    return _wrap_hours(utc_hour + zone_offset)


def zone_for_longitude(longitude: float) -> int:
    """Nominal time zone (UTC offset in whole hours) of a meridian."""
    zone = int(np.floor(longitude / DEGREES_PER_HOUR + 0.5))
    # 180°E and 180°W share the date-line zone
    return 12 if zone == -12 else zone


def time_zone_name(zone: float) -> str:
    """
    Display name for a UTC offset.

    Examples
    --------
    >>> time_zone_name(0)
    'UTC/GMT'
    >>> time_zone_name(8)
    'UTC+8'
    >>> time_zone_name(5.5)
    'UTC+5:30'
    """
    if zone == 0:
        return "UTC/GMT"

    sign = "+" if zone > 0 else "-"
    hours = int(abs(zone))
    minutes = int(round((abs(zone) - hours) * 60))
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


def time_difference(zone_a: float, zone_b: float) -> float:
    """Hours that zone_b is ahead of zone_a."""
    return zone_b - zone_a


def is_eastern_hemisphere(longitude: float) -> bool:
    """
    Whether a longitude lies in the eastern hemisphere.

    Uses the atlas convention of splitting the globe along 20°W and
    160°E.
    """
    return EASTERN_HEMISPHERE_WEST_LIMIT <= longitude <= EASTERN_HEMISPHERE_EAST_LIMIT
