"""
Orbital position model and season calendar.

Phase 0 is the winter solstice; the orbit runs counterclockwise when
viewed from celestial north (+y).
"""

from geosun.orbit.position import (
    subsolar_latitude,
    subsolar_latitude_at_phase,
    phase_from_day_of_year,
    day_of_year_from_phase,
    elapsed_to_phase,
    orbital_position,
    orbit_tangent_rotation,
    orbit_path,
    orbit_arrow_angles,
)
from geosun.orbit.seasons import (
    Season,
    SeasonInfo,
    SEASONS,
    SEASON_PHASES,
    season_for_phase,
    day_of_year_to_date,
    format_day_of_year,
)

__all__ = [
    "subsolar_latitude",
    "subsolar_latitude_at_phase",
    "phase_from_day_of_year",
    "day_of_year_from_phase",
    "elapsed_to_phase",
    "orbital_position",
    "orbit_tangent_rotation",
    "orbit_path",
    "orbit_arrow_angles",
    # Seasons
    "Season",
    "SeasonInfo",
    "SEASONS",
    "SEASON_PHASES",
    "season_for_phase",
    "day_of_year_to_date",
    "format_day_of_year",
]
