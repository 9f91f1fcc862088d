"""
Season calendar.

Fixed lookup tables tying the four seasonal anchors to orbital phase,
day of year and subsolar latitude.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Dict, Tuple

import numpy as np

from geosun.utils.constants import OBLIQUITY

# Any non-leap year works for calendar conversion
_REFERENCE_YEAR = 2025


class Season(Enum):
    """Solstices and equinoxes, named by northern-hemisphere season."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"


@dataclass(frozen=True)
class SeasonInfo:
    """One seasonal anchor.

    Attributes:
        name: Display name of the solstice/equinox
        date: Typical calendar date
        day_of_year: Representative day of year
        subsolar_latitude: Subsolar latitude at the anchor [deg]
        phase: Orbital phase at the anchor
        description: Short explanation for the teaching view
    """
    name: str
    date: str
    day_of_year: int
    subsolar_latitude: float
    phase: float
    description: str


SEASONS: Dict[Season, SeasonInfo] = {
    Season.SPRING: SeasonInfo(
        name="Spring equinox",
        date="around Mar 21",
        day_of_year=80,
        subsolar_latitude=0.0,
        phase=0.25,
        description="Sun overhead at the equator; day and night equal everywhere",
    ),
    Season.SUMMER: SeasonInfo(
        name="Summer solstice",
        date="around Jun 21",
        day_of_year=173,
        subsolar_latitude=OBLIQUITY,
        phase=0.5,
        description="Sun overhead at the Tropic of Cancer; longest northern day",
    ),
    Season.AUTUMN: SeasonInfo(
        name="Autumn equinox",
        date="around Sep 23",
        day_of_year=266,
        subsolar_latitude=0.0,
        phase=0.75,
        description="Sun overhead at the equator; day and night equal everywhere",
    ),
    Season.WINTER: SeasonInfo(
        name="Winter solstice",
        date="around Dec 22",
        day_of_year=356,
        subsolar_latitude=-OBLIQUITY,
        phase=0.0,
        description="Sun overhead at the Tropic of Capricorn; shortest northern day",
    ),
}

SEASON_PHASES: Dict[Season, float] = {season: info.phase for season, info in SEASONS.items()}


def season_for_phase(phase: float) -> Season:
    """
    Nearest seasonal anchor to an orbital phase.

    Distances are measured around the circle, so phase 0.95 is nearest
    to the winter solstice at phase 0.
    """
    phase = float(np.mod(phase, 1.0))

    def circular_distance(season: Season) -> float:
        d = abs(phase - SEASON_PHASES[season])
        return min(d, 1.0 - d)

    return min(SEASON_PHASES, key=circular_distance)


def day_of_year_to_date(day_of_year: int) -> Tuple[int, int]:
    """
    Convert a day of year to (month, day) on a non-leap calendar.

    Parameters
    ----------
    day_of_year : int
        Day of year; values outside 1-365 roll over like a calendar

    Returns
    -------
    month, day : tuple of int
    """
    d = date(_REFERENCE_YEAR, 1, 1) + timedelta(days=int(day_of_year) - 1)
    return d.month, d.day


def format_day_of_year(day_of_year: int) -> str:
    """Format a day of year as e.g. ``Jun 22``."""
    d = date(_REFERENCE_YEAR, 1, 1) + timedelta(days=int(day_of_year) - 1)
    return f"{d:%b} {d.day}"
