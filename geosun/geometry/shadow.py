"""
Shadow geometry from solar position.

A vertical object of height h casts a shadow of length h / tan(altitude)
pointing directly away from the sun's azimuth.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from geosun.solar.position import SolarPosition, _as_scalar
from geosun.utils.constants import MIN_SHADOW_ALTITUDE, NO_FINITE_SHADOW


@dataclass(frozen=True)
class ShadowVector:
    """Shadow of a vertical object on level ground.

    Attributes:
        length: Shadow length in the object's height units, or
            NO_FINITE_SHADOW (inf) when the sun is at the horizon
        direction_deg: Azimuth the shadow points to, clockwise from north
    """
    length: float
    direction_deg: float

    @property
    def is_finite(self) -> bool:
        """False when the sun is too low for a finite shadow."""
        return bool(np.isfinite(self.length))


def shadow_direction(sun_azimuth):
    """
    Azimuth of a shadow, opposite the sun.

    Parameters
    ----------
    sun_azimuth : float or array_like
        Sun azimuth in degrees

    Returns
    -------
    direction : float or ndarray
        Shadow azimuth in degrees in [0, 360)

    Notes
    -----
    Independent of altitude, so it is defined even when the shadow
    length is not.
    """
    direction = np.mod(np.asarray(sun_azimuth, dtype=float) + 180.0, 360.0)
    if np.ndim(direction) == 0:
        return float(direction)
    return direction


def shadow_length(object_height, sun_altitude):
    """
    Length of the shadow of a vertical object.

    Parameters
    ----------
    object_height : float or array_like
        Object height (any length unit)
    sun_altitude : float or array_like
        Sun altitude in degrees

    Returns
    -------
    length : float or ndarray
        Shadow length in the same unit as object_height, or
        NO_FINITE_SHADOW (inf) when the altitude is at or below
        MIN_SHADOW_ALTITUDE (1 deg)

    Notes
    -----
    No display cap is applied here. Callers that draw the shadow choose
    their own bound, e.g. with ``clamp_shadow_length``.
    """
    altitude = np.asarray(sun_altitude, dtype=float)
    with np.errstate(divide='ignore'):
        length = object_height / np.tan(np.radians(altitude))
    length = np.where(altitude <= MIN_SHADOW_ALTITUDE, NO_FINITE_SHADOW, length)
    return _as_scalar(length)


def shadow_vector(object_height: float, position: SolarPosition) -> ShadowVector:
    """Shadow length and direction for a solar position."""
    return ShadowVector(
        length=shadow_length(object_height, position.altitude_deg),
        direction_deg=shadow_direction(position.azimuth_deg),
    )


def clamp_shadow_length(length: float, limit: float) -> float:
    """
    Bound a shadow length for display.

    Parameters
    ----------
    length : float
        Shadow length, possibly inf
    limit : float
        Largest length to draw

    Returns
    -------
    length : float
        min(length, limit)
    """
    if limit <= 0:
        raise ValueError("Display limit must be positive")
    return float(min(length, limit))


def shadow_tip(
    length: float,
    direction_deg: float,
    origin: Tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> Tuple[float, float, float]:
    """
    Ground point at the end of a shadow.

    Uses the scene frame shared with the orbit and sun (north = -z,
    east = +x), so a shadow pointing north ends at negative z.

    Parameters
    ----------
    length : float
        Finite shadow length
    direction_deg : float
        Shadow azimuth in degrees
    origin : tuple of float
        Base of the object

    Returns
    -------
    x, y, z : tuple of float
        Shadow end point
    """
    d = np.radians(direction_deg)
    x0, y0, z0 = origin
    return (
        float(x0 + length * np.sin(d)),
        float(y0),
        float(z0 - length * np.cos(d)),
    )
