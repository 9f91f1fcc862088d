"""
Shadow and Projection Geometry
==============================

Turns solar positions into shadow lengths and directions, and projects
angular quantities into the shared scene frame for presentation layers:

- Shadow length / direction / tip point
- Horizon coordinates to 3D points
- Parallels, meridians and globe points
- 2D compass-plane points
"""

from geosun.geometry.shadow import (
    ShadowVector,
    shadow_direction,
    shadow_length,
    shadow_vector,
    clamp_shadow_length,
    shadow_tip,
)
from geosun.geometry.projection import (
    spherical_to_cartesian,
    latitude_to_sphere,
    geographic_to_globe,
    meridian_points,
    parallel_points,
    polar_to_plane,
    compass_points,
    reference_parallels,
)

__all__ = [
    # Shadow
    "ShadowVector",
    "shadow_direction",
    "shadow_length",
    "shadow_vector",
    "clamp_shadow_length",
    "shadow_tip",
    # Projection
    "spherical_to_cartesian",
    "latitude_to_sphere",
    "geographic_to_globe",
    "meridian_points",
    "parallel_points",
    "polar_to_plane",
    "compass_points",
    "reference_parallels",
]
