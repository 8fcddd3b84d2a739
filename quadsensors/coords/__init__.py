"""Coordinate systems and transformations for the sensor models.

This module provides functions for working with the frames used by the
quadrotor simulator:
- LLH (Latitude, Longitude, Height) geodetic coordinates
- ECEF (Earth-Centered Earth-Fixed) Cartesian coordinates
- NED (North-East-Down) local tangent plane coordinates
- Direction cosine matrices (Earth-to-body attitude)
"""

from quadsensors.coords.rotations import (
    earth_to_body_rotation,
    euler_to_dcm_be,
    euler_to_rotation_matrix,
)
from quadsensors.coords.transforms import ecef_to_llh, llh_to_ecef, ned_to_ecef, ned_to_llh

__all__ = [
    # Transforms
    "llh_to_ecef",
    "ecef_to_llh",
    "ned_to_ecef",
    "ned_to_llh",
    # Rotations
    "euler_to_rotation_matrix",
    "euler_to_dcm_be",
    "earth_to_body_rotation",
]
