"""
geosun: Solar-geometry engine for geography and astronomy teaching.

Converts calendar, clock and location inputs into sun altitude, azimuth,
subsolar latitude and scene coordinates, and derives shadow geometry
from them. The numeric engine is pure: no I/O and no global state.

Modules
-------
utils
    Constants, angle conversion and formatting, configuration, output
orbit
    Subsolar latitude, orbital position and the season calendar
solar
    Sun altitude/azimuth, day length, sunrise/sunset, time zones
geometry
    Shadow length/direction and projection to 3D/2D coordinates
core
    City table and the end-to-end SolarScene
"""

__version__ = "0.1.0"
__author__ = "geosun Contributors"

from geosun.utils.constants import OBLIQUITY, ORBIT_RADIUS, ARCTIC_CIRCLE_LAT
from geosun.utils.config import SceneConfig
from geosun.core.scene import SolarScene, SceneResult

__all__ = [
    "__version__",
    "OBLIQUITY",
    "ORBIT_RADIUS",
    "ARCTIC_CIRCLE_LAT",
    "SceneConfig",
    "SolarScene",
    "SceneResult",
]
