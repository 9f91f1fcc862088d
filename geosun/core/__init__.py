"""
Scene orchestration for geosun.

- City: Named observer locations
- SolarScene: Runs the engine end to end for one observer and moment
"""

from geosun.core.constants import City, FAMOUS_CITIES, find_city
from geosun.core.scene import SolarScene, SceneResult

__all__ = [
    "City",
    "FAMOUS_CITIES",
    "find_city",
    "SolarScene",
    "SceneResult",
]
