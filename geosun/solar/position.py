"""
Solar Position Model
====================

Sun altitude and azimuth for an observer, from the observer latitude,
the subsolar latitude (declination) and the hour angle, using the
standard horizon-coordinate transform:

    sin(h) = sin(phi) sin(delta) + cos(phi) cos(delta) cos(H)

    cos(A) = (sin(delta) - sin(phi) sin(h)) / (cos(phi) cos(h))

Azimuth is measured clockwise from true north. All functions accept
scalars or numpy arrays.

Preconditions
-------------
Latitudes are expected in [-90, 90]. They are not validated; values
outside that range give mathematically continued results.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from geosun.utils.constants import (
    DEGREES_PER_HOUR,
    SOLAR_NOON_HOUR,
    ZENITH_COS_THRESHOLD,
)


@dataclass(frozen=True)
class SolarPosition:
    """Sun position in the observer's horizon frame.

    Attributes:
        altitude_deg: Altitude above the horizon, clamped to [0, 90]
        azimuth_deg: Azimuth in [0, 360), clockwise from north
    """
    altitude_deg: float
    azimuth_deg: float


def _as_scalar(value):
    """Return a Python float for 0-d results, arrays unchanged."""
    if np.ndim(value) == 0:
        return float(value)
    return value


def _sin_altitude(observer_lat, subsolar_lat, hour_angle):
    """Unclamped sine of the altitude, plus the latitude/declination in radians."""
    lat = np.radians(observer_lat)
    decl = np.radians(subsolar_lat)
    h = np.radians(hour_angle)

    sin_h = np.sin(lat) * np.sin(decl) + np.cos(lat) * np.cos(decl) * np.cos(h)
    return sin_h, lat, decl


def hour_angle_from_local_time(hours):
    """
    Convert local solar clock time to hour angle.

    Parameters
    ----------
    hours : float or array_like
        Local solar time in hours (12 = solar noon). Values outside
        0-24 extrapolate linearly.

    Returns
    -------
    hour_angle : float or ndarray
        Hour angle in degrees, negative before noon
    """
    hour_angle = (np.asarray(hours, dtype=float) - SOLAR_NOON_HOUR) * DEGREES_PER_HOUR
    return _as_scalar(hour_angle)


def sun_altitude(observer_lat, subsolar_lat, hour_angle):
    """
    Calculate sun altitude above the horizon.

    Parameters
    ----------
    observer_lat : float or array_like
        Observer latitude in degrees
    subsolar_lat : float or array_like
        Subsolar latitude (declination) in degrees
    hour_angle : float or array_like
        Hour angle in degrees (0 at solar noon)

    Returns
    -------
    altitude : float or ndarray
        Altitude in degrees, in [0, 90]

    Notes
    -----
    A sun below the horizon is reported as exactly 0, never negative.
    Callers that need to tell night from sunset should use
    ``day_length`` / ``is_daytime`` instead of testing for 0 here.
    """
    sin_h, _, _ = _sin_altitude(observer_lat, subsolar_lat, hour_angle)
    altitude = np.degrees(np.arcsin(np.clip(sin_h, -1.0, 1.0)))
    return _as_scalar(np.maximum(altitude, 0.0))


def sun_azimuth(observer_lat, subsolar_lat, hour_angle):
    """
    Calculate sun azimuth.

    Parameters
    ----------
    observer_lat : float or array_like
        Observer latitude in degrees
    subsolar_lat : float or array_like
        Subsolar latitude (declination) in degrees
    hour_angle : float or array_like
        Hour angle in degrees (0 at solar noon, positive afternoon)

    Returns
    -------
    azimuth : float or ndarray
        Azimuth in degrees in [0, 360), clockwise from north

    Notes
    -----
    The arccos branch only covers 0-180 deg, which is the morning (east)
    half of the sky. Afternoon azimuths (hour angle > 0) are mirrored to
    360 - A. When the sun is within about 0.06 deg of the zenith
    (cos(altitude) < 0.001) the azimuth is undefined and 0 is returned.
    """
    sin_h, lat, decl = _sin_altitude(observer_lat, subsolar_lat, hour_angle)
    altitude = np.arcsin(np.clip(sin_h, -1.0, 1.0))
    cos_alt = np.cos(altitude)

    with np.errstate(divide='ignore', invalid='ignore'):
        cos_a = (np.sin(decl) - np.sin(lat) * sin_h) / (np.cos(lat) * cos_alt)
    azimuth = np.degrees(np.arccos(np.clip(cos_a, -1.0, 1.0)))

    azimuth = np.where(np.asarray(hour_angle) > 0, 360.0 - azimuth, azimuth)
    azimuth = np.where(cos_alt < ZENITH_COS_THRESHOLD, 0.0, azimuth)

    return _as_scalar(np.mod(azimuth, 360.0))


def solar_position(observer_lat: float, subsolar_lat: float, hour_angle: float) -> SolarPosition:
    """Altitude and azimuth together as a SolarPosition."""
    return SolarPosition(
        altitude_deg=sun_altitude(observer_lat, subsolar_lat, hour_angle),
        azimuth_deg=sun_azimuth(observer_lat, subsolar_lat, hour_angle),
    )


def sun_path(observer_lat: float, subsolar_lat: float, hours) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the sun's track over a set of local clock hours.

    Parameters
    ----------
    observer_lat : float
        Observer latitude in degrees
    subsolar_lat : float
        Subsolar latitude in degrees
    hours : array_like
        Local solar clock hours to sample

    Returns
    -------
    altitude, azimuth : tuple of ndarray
        Altitude and azimuth in degrees at each sample
    """
    hour_angle = hour_angle_from_local_time(np.atleast_1d(np.asarray(hours, dtype=float)))
    altitude = np.atleast_1d(sun_altitude(observer_lat, subsolar_lat, hour_angle))
    azimuth = np.atleast_1d(sun_azimuth(observer_lat, subsolar_lat, hour_angle))
    return altitude, azimuth
