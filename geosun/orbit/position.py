"""
Orbital Position Model
======================

Maps a revolution phase or a day of year to the subsolar latitude and to
a point on the orbit.

Coordinate frame
----------------
The orbit lies in the y = 0 plane with +y pointing to celestial north.
Positions are ``(cos a, 0, -sin a)`` so the motion is counterclockwise
when viewed from +y. With the axial tilt fixed towards +x:

- phase 0.00 -> +x   winter solstice (subsolar at -OBLIQUITY)
- phase 0.25 -> -z   spring equinox
- phase 0.50 -> -x   summer solstice (subsolar at +OBLIQUITY)
- phase 0.75 -> +z   autumn equinox

Season markers and direction arrows all depend on this sign convention.
"""

import numpy as np
from typing import Tuple

from geosun.utils.constants import (
    OBLIQUITY,
    ORBIT_RADIUS,
    DAYS_PER_YEAR,
    DECLINATION_DAY_OFFSET,
    WINTER_SOLSTICE_DAY,
)


# =============================================================================
# Subsolar latitude
# =============================================================================

def subsolar_latitude(day_of_year):
    """
    Calculate the subsolar latitude (solar declination) for a day of year.

    Parameters
    ----------
    day_of_year : float or array_like
        Day of year, nominally 1-365 (non-leap calendar)

    Returns
    -------
    latitude : float or ndarray
        Subsolar latitude in degrees, within [-OBLIQUITY, +OBLIQUITY]

    Notes
    -----
    Uses the sinusoidal approximation

        decl = OBLIQUITY * sin(2*pi * (284 + N) / 365)

    rather than an ephemeris. It is accurate to about a degree, which is
    what the teaching views need. Inputs outside 1-365 are not wrapped;
    the sine simply continues.
    """
    angle = 2 * np.pi * (DECLINATION_DAY_OFFSET + np.asarray(day_of_year)) / DAYS_PER_YEAR
    return OBLIQUITY * np.sin(angle)


def phase_from_day_of_year(day_of_year):
    """
    Convert a day of year to orbital phase in [0, 1).

    Phase 0 is pinned to the winter solstice (day 356) so the orbital
    view and the declination curve share one calendar.
    """
    return np.mod((np.asarray(day_of_year) - WINTER_SOLSTICE_DAY) / DAYS_PER_YEAR, 1.0)


def day_of_year_from_phase(phase):
    """Convert orbital phase back to a (fractional) day of year in [1, 366)."""
    day = WINTER_SOLSTICE_DAY + np.asarray(phase) * DAYS_PER_YEAR
    return np.mod(day - 1, DAYS_PER_YEAR) + 1


def subsolar_latitude_at_phase(phase):
    """Subsolar latitude for an orbital phase, via the day-of-year mapping."""
    return subsolar_latitude(WINTER_SOLSTICE_DAY + np.asarray(phase) * DAYS_PER_YEAR)


def elapsed_to_phase(elapsed_s: float, period_s: float, start_phase: float = 0.0) -> float:
    """
    Orbital phase after a given elapsed time.

    Parameters
    ----------
    elapsed_s : float
        Elapsed animation time in seconds
    period_s : float
        Time for one full revolution in seconds
    start_phase : float
        Phase at elapsed_s = 0

    Returns
    -------
    phase : float
        Orbital phase in [0, 1)

    Raises
    ------
    ValueError
        If period_s is not positive
    """
    if period_s <= 0:
        raise ValueError("Revolution period must be positive")
    return float(np.mod(start_phase + elapsed_s / period_s, 1.0))


# =============================================================================
# Orbit geometry
# =============================================================================

def orbital_position(phase: float, radius: float = ORBIT_RADIUS) -> Tuple[float, float, float]:
    """
    Position on the orbit for a given phase.

    Parameters
    ----------
    phase : float
        Orbital phase (0-1, one revolution)
    radius : float
        Orbit radius in scene units

    Returns
    -------
    x, y, z : tuple of float
        Position, with y = 0 on the orbital plane
    """
    angle = phase * 2 * np.pi
    return (
        float(radius * np.cos(angle)),
        0.0,
        float(-radius * np.sin(angle)),
    )


def orbit_tangent_rotation(angle_rad: float) -> float:
    """
    Rotation about +y that aligns an arrow with the direction of motion.

    The tangent of ``(cos a, 0, -sin a)`` is ``(-sin a, 0, -cos a)``;
    the returned angle is ``atan2(tz, tx)``.

    Parameters
    ----------
    angle_rad : float
        Orbital angle in radians

    Returns
    -------
    rotation : float
        Rotation about the y axis in radians
    """
    tangent_x = -np.sin(angle_rad)
    tangent_z = -np.cos(angle_rad)
    return float(np.arctan2(tangent_z, tangent_x))


def orbit_path(radius: float = ORBIT_RADIUS, num_points: int = 64) -> np.ndarray:
    """
    Sample the orbit as a closed polyline.

    Parameters
    ----------
    radius : float
        Orbit radius in scene units
    num_points : int
        Number of segments; the first point is repeated at the end

    Returns
    -------
    points : ndarray
        Array of shape (num_points + 1, 3)
    """
    if num_points < 3:
        raise ValueError("An orbit path needs at least 3 segments")

    angles = np.linspace(0, 2 * np.pi, num_points + 1)
    return np.column_stack([
        radius * np.cos(angles),
        np.zeros_like(angles),
        -radius * np.sin(angles),
    ])


def orbit_arrow_angles(count: int = 4, offset_rad: float = np.pi / 8) -> np.ndarray:
    """Evenly spaced orbital angles for direction indicators."""
    return np.arange(count) / count * 2 * np.pi + offset_rad
