"""
Solar position model.

Sun altitude and azimuth from observer latitude, subsolar latitude and
hour angle, plus day length, sunrise/sunset and time-zone helpers.
"""

from geosun.solar.position import (
    SolarPosition,
    hour_angle_from_local_time,
    sun_altitude,
    sun_azimuth,
    solar_position,
    sun_path,
)
from geosun.solar.daylight import (
    SunriseSunset,
    day_length,
    sunrise_sunset,
    is_daytime,
)
from geosun.solar.timezones import (
    local_time_from_utc,
    zone_time,
    zone_for_longitude,
    time_zone_name,
    time_difference,
    is_eastern_hemisphere,
)

__all__ = [
    "SolarPosition",
    "hour_angle_from_local_time",
    "sun_altitude",
    "sun_azimuth",
    "solar_position",
    "sun_path",
    # Daylight
    "SunriseSunset",
    "day_length",
    "sunrise_sunset",
    "is_daytime",
    # Time zones
    "local_time_from_utc",
    "zone_time",
    "zone_for_longitude",
    "time_zone_name",
    "time_difference",
    "is_eastern_hemisphere",
]
