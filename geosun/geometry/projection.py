"""
Projection of angular quantities into scene coordinates.

All 3D outputs share the orbit's frame: +y up (north pole / zenith),
-z north on the ground plane, +x east. Longitude increases
counterclockwise when viewed from +y, matching the orbital direction.
"""

import numpy as np
from typing import Dict, Tuple

from geosun.utils.constants import (
    OBLIQUITY,
    ARCTIC_CIRCLE_LAT,
    ANTARCTIC_CIRCLE_LAT,
)


def spherical_to_cartesian(
    altitude_deg: float,
    azimuth_deg: float,
    distance: float,
) -> Tuple[float, float, float]:
    """
    Convert horizon coordinates to a 3D point.

    Parameters
    ----------
    altitude_deg : float
        Altitude above the horizon in degrees
    azimuth_deg : float
        Azimuth in degrees, clockwise from north
    distance : float
        Distance from the origin

    Returns
    -------
    x, y, z : tuple of float
        ``(d cos(alt) sin(azi), d sin(alt), -d cos(alt) cos(azi))``
    """
    alt = np.radians(altitude_deg)
    azi = np.radians(azimuth_deg)
    return (
        float(distance * np.cos(alt) * np.sin(azi)),
        float(distance * np.sin(alt)),
        float(-distance * np.cos(alt) * np.cos(azi)),
    )


def latitude_to_sphere(latitude_deg: float, radius: float) -> Tuple[float, float]:
    """
    Height and ring radius of a parallel on a sphere.

    Parameters
    ----------
    latitude_deg : float
        Latitude in degrees
    radius : float
        Sphere radius

    Returns
    -------
    height, ring_radius : tuple of float
        Height along the rotation axis and radius of the parallel
    """
    lat = np.radians(latitude_deg)
    return float(radius * np.sin(lat)), float(radius * np.cos(lat))


def geographic_to_globe(
    latitude_deg: float,
    longitude_deg: float,
    radius: float,
) -> Tuple[float, float, float]:
    """
    Point on a globe for a latitude/longitude.

    Returns
    -------
    x, y, z : tuple of float
        ``(r cos(lat) cos(lon), r sin(lat), -r cos(lat) sin(lon))``
    """
    lat = np.radians(latitude_deg)
    lon = np.radians(longitude_deg)
    return (
        float(radius * np.cos(lat) * np.cos(lon)),
        float(radius * np.sin(lat)),
        float(-radius * np.cos(lat) * np.sin(lon)),
    )


def meridian_points(longitude_deg: float, radius: float, num_points: int = 50) -> np.ndarray:
    """
    Sample a meridian from the south pole to the north pole.

    Returns
    -------
    points : ndarray
        Array of shape (num_points + 1, 3)
    """
    if num_points < 1:
        raise ValueError("num_points must be at least 1")

    lat = np.radians(np.linspace(-90, 90, num_points + 1))
    lon = np.radians(longitude_deg)
    return np.column_stack([
        radius * np.cos(lat) * np.cos(lon),
        radius * np.sin(lat),
        -radius * np.cos(lat) * np.sin(lon),
    ])


def parallel_points(latitude_deg: float, radius: float, num_points: int = 64) -> np.ndarray:
    """
    Sample a parallel as a closed ring.

    Returns
    -------
    points : ndarray
        Array of shape (num_points + 1, 3); first and last points coincide
    """
    if num_points < 3:
        raise ValueError("A parallel needs at least 3 segments")

    height, ring = latitude_to_sphere(latitude_deg, radius)
    angles = np.linspace(0, 2 * np.pi, num_points + 1)
    return np.column_stack([
        ring * np.cos(angles),
        np.full_like(angles, height),
        -ring * np.sin(angles),
    ])


def polar_to_plane(angle_deg: float, radius: float) -> Tuple[float, float]:
    """
    2D point for a compass bearing, y pointing north (up).

    Parameters
    ----------
    angle_deg : float
        Bearing in degrees, clockwise from north
    radius : float
        Distance from the centre

    Returns
    -------
    x, y : tuple of float
    """
    a = np.radians(angle_deg)
    return float(radius * np.sin(a)), float(radius * np.cos(a))


def compass_points(radius: float, step_deg: float = 5.0) -> np.ndarray:
    """
    Ring of ground-plane points for a compass rose.

    Returns
    -------
    points : ndarray
        Array of shape (N, 3) from 0 to 360 deg inclusive
    """
    if step_deg <= 0:
        raise ValueError("step_deg must be positive")

    angles = np.radians(np.arange(0, 360 + step_deg / 2, step_deg))
    return np.column_stack([
        radius * np.sin(angles),
        np.zeros_like(angles),
        -radius * np.cos(angles),
    ])


def reference_parallels() -> Dict[str, float]:
    """Latitudes of the named parallels [deg]."""
    return {
        "arctic_circle": ARCTIC_CIRCLE_LAT,
        "tropic_of_cancer": OBLIQUITY,
        "equator": 0.0,
        "tropic_of_capricorn": -OBLIQUITY,
        "antarctic_circle": ANTARCTIC_CIRCLE_LAT,
    }
