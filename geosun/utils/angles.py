"""
Angular utilities: unit conversion, display formatting and compass
classification.

These functions are the leaves of the engine. They carry no state and
depend only on numpy.
"""

import numpy as np

from geosun.utils.constants import (
    COMPASS_POINTS,
    COMPASS_SECTOR_WIDTH,
    ZERO_ANGLE_TOLERANCE,
)

_DIRECTION_SUFFIXES = {
    "latitude": ("N", "S"),
    "longitude": ("E", "W"),
}


def deg_to_rad(deg):
    """
    Convert degrees to radians.

    Parameters
    ----------
    deg : float or array_like
        Angle in degrees

    Returns
    -------
    rad : float or ndarray
        Angle in radians
    """
    return np.radians(deg)


def rad_to_deg(rad):
    """
    Convert radians to degrees.

    Parameters
    ----------
    rad : float or array_like
        Angle in radians

    Returns
    -------
    deg : float or ndarray
        Angle in degrees
    """
    return np.degrees(rad)


def normalize_azimuth(azimuth):
    """Wrap an azimuth (or array of azimuths) into [0, 360)."""
    return np.mod(np.mod(azimuth, 360.0) + 360.0, 360.0)


def _split_degree_minute(value: float) -> tuple:
    """
    Split |value| into whole degrees and rounded minutes.

    Minutes that round up to 60 carry into the degrees.
    """
    magnitude = abs(float(value))
    degrees = int(np.floor(magnitude))
    minutes = int(round((magnitude - degrees) * 60))
    if minutes == 60:
        degrees += 1
        minutes = 0
    return degrees, minutes


def format_degree_minute(
    value: float,
    include_direction: bool = True,
    kind: str = "latitude",
) -> str:
    """
    Format an angle as degrees and minutes, e.g. ``23°26′N``.

    Parameters
    ----------
    value : float
        Angle in degrees (signed)
    include_direction : bool
        Append a hemisphere letter based on the sign
    kind : str
        'latitude' (N/S suffix) or 'longitude' (E/W suffix)

    Returns
    -------
    text : str
        Formatted angle

    Raises
    ------
    ValueError
        If kind is not recognised

    Notes
    -----
    Values with ``|value| < 0.01`` are treated as exactly zero (the equator
    or prime meridian): ``0°0′`` with no suffix. When the minutes round to 60
    the degree count is incremented, so 23.9999 formats as ``24°0′``.
    """
    if kind not in _DIRECTION_SUFFIXES:
        raise ValueError(f"Unknown angle kind: {kind}. Use 'latitude' or 'longitude'")

    if abs(value) < ZERO_ANGLE_TOLERANCE:
        return "0°0′"

    degrees, minutes = _split_degree_minute(value)
    text = f"{degrees}°{minutes}′"

    if not include_direction:
        return text

    positive, negative = _DIRECTION_SUFFIXES[kind]
    return text + (positive if value > 0 else negative)


def format_longitude(value: float) -> str:
    """
    Format a longitude for meridian labels.

    The prime meridian and the date line get named labels; other
    values are shown as ``D°M′E`` with the minutes dropped when they
    round to zero.
    """
    if abs(value) < ZERO_ANGLE_TOLERANCE:
        return "0° (prime meridian)"
    if abs(abs(value) - 180) < ZERO_ANGLE_TOLERANCE:
        return "180° (date line)"

    degrees, minutes = _split_degree_minute(value)
    minute_part = f"{minutes}′" if minutes > 0 else ""
    direction = "E" if value > 0 else "W"
    return f"{degrees}°{minute_part}{direction}"


def format_clock_time(hours: float) -> str:
    """Format fractional clock hours as ``HH:MM``."""
    h = int(np.floor(hours))
    m = int(round((hours - h) * 60))
    if m == 60:
        h += 1
        m = 0
    return f"{h:02d}:{m:02d}"


def format_day_length(hours: float) -> str:
    """Format a day length, naming polar day and polar night."""
    if hours >= 24:
        return "24:00 (polar day)"
    if hours <= 0:
        return "0:00 (polar night)"
    h = int(np.floor(hours))
    m = int(round((hours - h) * 60))
    if m == 60:
        h += 1
        m = 0
    return f"{h}h {m}m"


def azimuth_to_direction(azimuth: float) -> str:
    """
    Classify an azimuth into one of eight compass points.

    Parameters
    ----------
    azimuth : float
        Azimuth in degrees, clockwise from north (any real value)

    Returns
    -------
    direction : str
        One of N, NE, E, SE, S, SW, W, NW

    Notes
    -----
    Each sector is 45 deg wide and centred on its compass point, closed
    on the low edge and open on the high edge. North therefore covers
    [337.5, 360) and [0, 22.5).
    """
    normalized = float(normalize_azimuth(azimuth))
    # Shift by half a sector so every sector starts at a multiple of 45
    index = int((normalized + COMPASS_SECTOR_WIDTH / 2) // COMPASS_SECTOR_WIDTH)
    return COMPASS_POINTS[index % len(COMPASS_POINTS)]
