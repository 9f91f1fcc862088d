"""
Astronomical constants for the solar-geometry engine.

All angles are in degrees unless otherwise specified. These are fixed
module-level values; nothing in the engine changes them at runtime.
"""

import numpy as np

# Obliquity of the ecliptic, 23°26′
OBLIQUITY = 23 + 26 / 60  # deg, ~23.4333

# Polar circles sit at 90° minus the obliquity
ARCTIC_CIRCLE_LAT = 90 - OBLIQUITY  # deg, ~66.57
ANTARCTIC_CIRCLE_LAT = -ARCTIC_CIRCLE_LAT

TROPIC_OF_CANCER_LAT = OBLIQUITY
TROPIC_OF_CAPRICORN_LAT = -OBLIQUITY

# Orbit radius in scene units
ORBIT_RADIUS = 8.0

# Non-leap calendar
DAYS_PER_YEAR = 365

# Day-of-year offset used by the declination approximation
DECLINATION_DAY_OFFSET = 284

# Day of year anchored to orbital phase 0
WINTER_SOLSTICE_DAY = 356

# Earth rotation rate
DEGREES_PER_HOUR = 15.0

# Local solar noon
SOLAR_NOON_HOUR = 12.0

# Below this cos(altitude) the sun is treated as at the zenith
ZENITH_COS_THRESHOLD = 0.001

# Below this altitude no finite shadow is reported
MIN_SHADOW_ALTITUDE = 1.0  # deg

# Sentinel for "no finite shadow"
NO_FINITE_SHADOW = np.inf

# Below this magnitude a latitude/longitude counts as exactly zero
ZERO_ANGLE_TOLERANCE = 0.01  # deg

# Eastern hemisphere boundaries used in the atlas convention
EASTERN_HEMISPHERE_WEST_LIMIT = -20.0  # deg (20°W)
EASTERN_HEMISPHERE_EAST_LIMIT = 160.0  # deg (160°E)

# Compass sectors, in clockwise order starting at north
COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
COMPASS_SECTOR_WIDTH = 360.0 / len(COMPASS_POINTS)  # deg
