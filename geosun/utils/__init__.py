"""
Utility functions and astronomical constants.

Constants
---------
OBLIQUITY : float
    Obliquity of the ecliptic, 23°26′ (deg)
ARCTIC_CIRCLE_LAT : float
    Latitude of the Arctic Circle (deg)
ORBIT_RADIUS : float
    Orbit radius in scene units
NO_FINITE_SHADOW : float
    Sentinel shadow length when the sun is at the horizon

Functions
---------
deg_to_rad, rad_to_deg
    Angle unit conversion
format_degree_minute
    Format an angle as degrees and minutes with hemisphere letter
azimuth_to_direction
    Classify an azimuth into eight compass points

Configuration
-------------
SceneConfig
    Complete scene configuration dataclass
load_config
    Load configuration from YAML or JSON file
create_default_config
    Create and save default configuration file
validate_config
    Validate configuration and return issues list
"""

from geosun.utils.constants import (
    OBLIQUITY,
    ARCTIC_CIRCLE_LAT,
    ANTARCTIC_CIRCLE_LAT,
    TROPIC_OF_CANCER_LAT,
    TROPIC_OF_CAPRICORN_LAT,
    ORBIT_RADIUS,
    MIN_SHADOW_ALTITUDE,
    NO_FINITE_SHADOW,
)
from geosun.utils.angles import (
    deg_to_rad,
    rad_to_deg,
    normalize_azimuth,
    format_degree_minute,
    format_longitude,
    format_clock_time,
    format_day_length,
    azimuth_to_direction,
)
from geosun.utils.config import (
    SceneConfig,
    ObserverConfig,
    TimeConfig,
    ShadowConfig,
    OrbitConfig,
    OutputConfig,
    load_config,
    create_default_config,
    validate_config,
)

__all__ = [
    "OBLIQUITY",
    "ARCTIC_CIRCLE_LAT",
    "ANTARCTIC_CIRCLE_LAT",
    "TROPIC_OF_CANCER_LAT",
    "TROPIC_OF_CAPRICORN_LAT",
    "ORBIT_RADIUS",
    "MIN_SHADOW_ALTITUDE",
    "NO_FINITE_SHADOW",
    "deg_to_rad",
    "rad_to_deg",
    "normalize_azimuth",
    "format_degree_minute",
    "format_longitude",
    "format_clock_time",
    "format_day_length",
    "azimuth_to_direction",
    # Configuration
    "SceneConfig",
    "ObserverConfig",
    "TimeConfig",
    "ShadowConfig",
    "OrbitConfig",
    "OutputConfig",
    "load_config",
    "create_default_config",
    "validate_config",
]
