"""
End-to-end sun and shadow scene.

Orchestrates the engine for one observer at one moment:

- Day of year -> subsolar latitude and orbital phase
- Local time -> hour angle
- Latitude, declination, hour angle -> altitude and azimuth
- Solar position -> shadow vector and scene coordinates
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from geosun.core.constants import find_city
from geosun.geometry.projection import spherical_to_cartesian
from geosun.geometry.shadow import ShadowVector, clamp_shadow_length, shadow_vector
from geosun.orbit.position import orbital_position, phase_from_day_of_year, subsolar_latitude
from geosun.orbit.seasons import Season, format_day_of_year, season_for_phase
from geosun.solar.daylight import SunriseSunset, day_length, is_daytime, sunrise_sunset
from geosun.solar.position import SolarPosition, hour_angle_from_local_time, solar_position
from geosun.utils.angles import azimuth_to_direction
from geosun.utils.config import SceneConfig, load_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneResult:
    """Complete scene results.

    Attributes:
        config: Configuration the scene was computed from
        latitude: Observer latitude [deg]
        longitude: Observer longitude [deg]
        hour_angle: Hour angle [deg]
        subsolar_latitude: Subsolar latitude [deg]
        orbital_phase: Orbital phase (0 = winter solstice)
        season: Nearest seasonal anchor
        earth_position: Earth's position on the orbit
        sun: Altitude and azimuth
        sun_direction: Compass point of the sun
        sun_position_3d: Sun position in the observer's scene frame
        shadow: Shadow length and direction (length may be inf)
        shadow_direction_label: Compass point of the shadow
        display_shadow_length: Shadow length bounded by the display limit
        day_length: Hours of daylight
        sunrise_sunset: Sunrise/sunset times, None for polar day/night
        is_daytime: Whether the sun is up
    """
    config: SceneConfig
    latitude: float
    longitude: float
    hour_angle: float
    subsolar_latitude: float
    orbital_phase: float
    season: Season
    earth_position: Tuple[float, float, float]
    sun: SolarPosition
    sun_direction: str
    sun_position_3d: Tuple[float, float, float]
    shadow: ShadowVector
    shadow_direction_label: str
    display_shadow_length: Optional[float]
    day_length: float
    sunrise_sunset: Optional[SunriseSunset]
    is_daytime: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to JSON/YAML-safe dictionary.

        An infinite shadow length is written as None.
        """
        times = self.sunrise_sunset
        return {
            "scene": self.config.name,
            "observer": {
                "name": self.config.observer.name,
                "latitude": self.latitude,
                "longitude": self.longitude,
            },
            "time": {
                "day_of_year": self.config.time.day_of_year,
                "date": format_day_of_year(self.config.time.day_of_year),
                "local_hour": self.config.time.local_hour,
                "hour_angle": self.hour_angle,
            },
            "orbit": {
                "subsolar_latitude": self.subsolar_latitude,
                "phase": self.orbital_phase,
                "season": self.season.value,
                "earth_position": list(self.earth_position),
            },
            "sun": {
                "altitude": self.sun.altitude_deg,
                "azimuth": self.sun.azimuth_deg,
                "direction": self.sun_direction,
                "position_3d": list(self.sun_position_3d),
            },
            "shadow": {
                "length": self.shadow.length if self.shadow.is_finite else None,
                "display_length": self.display_shadow_length,
                "direction": self.shadow.direction_deg,
                "direction_label": self.shadow_direction_label,
            },
            "daylight": {
                "day_length": self.day_length,
                "sunrise": times.sunrise if times else None,
                "sunset": times.sunset if times else None,
                "is_daytime": self.is_daytime,
            },
        }


class SolarScene:
    """High-level interface for a single sun/shadow scene.

    Example:
        >>> from geosun import SolarScene
        >>> scene = SolarScene({
        ...     "observer": {"name": "Beijing", "latitude": 39.9},
        ...     "time": {"day_of_year": 173, "local_hour": 12.0},
        ... })
        >>> result = scene.run()
        >>> print(f"Sun altitude: {result.sun.altitude_deg:.1f} deg")
    """

    def __init__(self, config: Union[SceneConfig, Dict[str, Any], str, Path, None] = None):
        """Initialize the scene.

        Args:
            config: SceneConfig (copied, never modified), configuration
                dictionary, or path to a YAML/JSON file. Defaults to
                SceneConfig().
        """
        if config is None:
            self.config = SceneConfig()
        elif isinstance(config, SceneConfig):
            self.config = copy.deepcopy(config)
        elif isinstance(config, dict):
            self.config = SceneConfig.from_dict(config)
        elif isinstance(config, (str, Path)):
            self.config = load_config(config)
        else:
            raise TypeError(f"Invalid config type: {type(config)}")

        if self.config.observer.city:
            city = find_city(self.config.observer.city)
            self.config.observer.name = city.name
            self.config.observer.latitude = city.latitude
            self.config.observer.longitude = city.longitude

        errors = self.config.validate()
        for error in errors:
            logger.warning(f"Configuration warning: {error}")

    def run(self) -> SceneResult:
        """Compute the scene.

        Returns:
            SceneResult with all derived quantities
        """
        observer = self.config.observer
        when = self.config.time

        logger.info(
            f"Computing scene '{self.config.name}': {observer.name} "
            f"({observer.latitude:.2f}, {observer.longitude:.2f}), "
            f"day {when.day_of_year}, {when.local_hour:.2f} h"
        )

        declination = float(subsolar_latitude(when.day_of_year))
        phase = float(phase_from_day_of_year(when.day_of_year))
        hour_angle = hour_angle_from_local_time(when.local_hour)

        sun = solar_position(observer.latitude, declination, hour_angle)
        shadow = shadow_vector(self.config.shadow.object_height, sun)

        display_length = shadow.length
        limit = self.config.shadow.display_limit
        # Non-positive limits behave like None
        if limit is not None and limit > 0:
            display_length = clamp_shadow_length(shadow.length, limit)
        elif not shadow.is_finite:
            display_length = None

        logger.debug(
            f"decl={declination:.3f} H={hour_angle:.2f} "
            f"alt={sun.altitude_deg:.3f} az={sun.azimuth_deg:.3f}"
        )

        return SceneResult(
            config=self.config,
            latitude=observer.latitude,
            longitude=observer.longitude,
            hour_angle=hour_angle,
            subsolar_latitude=declination,
            orbital_phase=phase,
            season=season_for_phase(phase),
            earth_position=orbital_position(phase, self.config.orbit.radius),
            sun=sun,
            sun_direction=azimuth_to_direction(sun.azimuth_deg),
            sun_position_3d=spherical_to_cartesian(
                sun.altitude_deg, sun.azimuth_deg, self.config.orbit.sun_distance
            ),
            shadow=shadow,
            shadow_direction_label=azimuth_to_direction(shadow.direction_deg),
            display_shadow_length=display_length,
            day_length=day_length(observer.latitude, declination),
            sunrise_sunset=sunrise_sunset(observer.latitude, declination),
            is_daytime=is_daytime(when.local_hour, observer.latitude, declination),
        )

    def save_result(
        self,
        result: SceneResult,
        output_path: Optional[str] = None,
        format: Optional[str] = None,
    ) -> str:
        """Save scene result to file.

        Args:
            result: SceneResult to save
            output_path: Output file path (defaults to config setting)
            format: Output format (json, yaml)

        Returns:
            Path to saved file
        """
        from geosun.utils.output import OutputFormatter

        if format is None:
            format = self.config.output.format

        if output_path is None:
            output_path = self.config.output.path or f"scene_result.{format}"

        formatter = OutputFormatter()
        return formatter.save(result, output_path, format)

    @classmethod
    def quick(
        cls,
        latitude: float,
        day_of_year: int,
        local_hour: float,
        object_height: float = 1.0,
    ) -> SceneResult:
        """One-liner scene for a latitude, date and local solar time.

        Args:
            latitude: Observer latitude [deg]
            day_of_year: Day of year (1-365)
            local_hour: Local solar time [hours]
            object_height: Height of the shadow-casting object

        Returns:
            SceneResult
        """
        config = {
            "observer": {"name": "custom", "latitude": latitude, "longitude": 0.0},
            "time": {"day_of_year": day_of_year, "local_hour": local_hour},
            "shadow": {"object_height": object_height, "display_limit": None},
        }
        return cls(config).run()
