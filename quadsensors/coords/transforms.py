"""Coordinate transformations between LLH, ECEF and local NED frames.

This module implements the geodetic conversion used by the GPS model:
local North-East-Down displacements from a home point are converted to
latitude, longitude and altitude through Earth-Centered Earth-Fixed (ECEF)
coordinates on the WGS84 ellipsoid.

WGS84 ellipsoid parameters:
- Semi-major axis (a): 6378137.0 m
- Flattening (f): 1/298.257223563
- Semi-minor axis (b): 6356752.314245 m
- First eccentricity squared (e²): 0.00669437999014
"""

import numpy as np
from numpy.typing import NDArray

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Semi-major axis (m)
WGS84_F = 1.0 / 298.257223563  # Flattening
WGS84_B = WGS84_A * (1.0 - WGS84_F)  # Semi-minor axis (m)
WGS84_E2 = 1.0 - (WGS84_B / WGS84_A) ** 2  # First eccentricity squared


def llh_to_ecef(
    lat: float,
    lon: float,
    height: float,
) -> NDArray[np.float64]:
    """Convert geodetic coordinates (LLH) to ECEF Cartesian coordinates.

    Args:
        lat: Latitude in radians (positive north).
        lon: Longitude in radians (positive east).
        height: Height above WGS84 ellipsoid in meters.

    Returns:
        ECEF coordinates as numpy array [x, y, z] in meters.

    Example:
        >>> xyz = llh_to_ecef(np.deg2rad(47.397742), np.deg2rad(8.545594), 488.0)
    """
    # Radius of curvature in the prime vertical
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)

    x = (N + height) * cos_lat * np.cos(lon)
    y = (N + height) * cos_lat * np.sin(lon)
    z = (N * (1.0 - WGS84_E2) + height) * sin_lat

    return np.array([x, y, z], dtype=np.float64)


def ecef_to_llh(
    x: float,
    y: float,
    z: float,
    tol: float = 1e-12,
    max_iter: int = 10,
) -> NDArray[np.float64]:
    """Convert ECEF Cartesian coordinates to geodetic coordinates (LLH).

    Uses the iterative latitude/height refinement on the WGS84 ellipsoid.

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        tol: Convergence tolerance on latitude (radians).
        max_iter: Maximum number of iterations.

    Returns:
        Geodetic coordinates as numpy array [lat, lon, height] where
        lat and lon are in radians, height is in meters.
    """
    lon = np.arctan2(y, x)

    # Distance from z-axis
    p = np.sqrt(x**2 + y**2)

    # Special case: pole (p ≈ 0)
    if p < 1e-10:
        lat = np.copysign(np.pi / 2.0, z)
        height = abs(z) - WGS84_B
        return np.array([lat, lon, height], dtype=np.float64)

    # Initial latitude estimate (assumes height = 0)
    lat = np.arctan2(z, p * (1.0 - WGS84_E2))

    for _ in range(max_iter):
        sin_lat = np.sin(lat)
        N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)
        height = p / np.cos(lat) - N
        lat_new = np.arctan2(z, p * (1.0 - WGS84_E2 * N / (N + height)))

        if abs(lat_new - lat) < tol:
            lat = lat_new
            break

        lat = lat_new

    sin_lat = np.sin(lat)
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)
    height = p / np.cos(lat) - N

    return np.array([lat, lon, height], dtype=np.float64)


def ned_to_ecef(
    north: float,
    east: float,
    down: float,
    lat_ref: float,
    lon_ref: float,
    height_ref: float,
) -> NDArray[np.float64]:
    """Convert local NED coordinates to ECEF coordinates.

    Args:
        north: North coordinate in meters.
        east: East coordinate in meters.
        down: Down coordinate in meters.
        lat_ref: Reference latitude in radians (origin of NED frame).
        lon_ref: Reference longitude in radians (origin of NED frame).
        height_ref: Reference height in meters (origin of NED frame).

    Returns:
        ECEF coordinates as numpy array [x, y, z] in meters.
    """
    xyz_ref = llh_to_ecef(lat_ref, lon_ref, height_ref)

    sin_lat = np.sin(lat_ref)
    cos_lat = np.cos(lat_ref)
    sin_lon = np.sin(lon_ref)
    cos_lon = np.cos(lon_ref)

    # R_ECEF_NED (columns are the N, E, D unit vectors expressed in ECEF)
    R = np.array(
        [
            [-sin_lat * cos_lon, -sin_lon, -cos_lat * cos_lon],
            [-sin_lat * sin_lon, cos_lon, -cos_lat * sin_lon],
            [cos_lat, 0.0, -sin_lat],
        ],
        dtype=np.float64,
    )

    dxyz = R @ np.array([north, east, down], dtype=np.float64)

    return xyz_ref + dxyz


def ned_to_llh(
    pos_ned: NDArray[np.float64],
    home_lat: float,
    home_lon: float,
    home_alt: float,
) -> NDArray[np.float64]:
    """Convert a NED position relative to home into latitude/longitude/altitude.

    This is the conversion the GPS model applies to the simulator's true
    position each tick.

    Args:
        pos_ned: Position relative to home [north, east, down] in meters.
                 Shape: (3,).
        home_lat: Home latitude in degrees.
        home_lon: Home longitude in degrees.
        home_alt: Home altitude in meters.

    Returns:
        numpy array [lat, lon, alt] with lat/lon in degrees and alt in meters.

    Raises:
        ValueError: If pos_ned is not a 3-vector.

    Example:
        >>> lla = ned_to_llh(np.array([111.0, 0.0, -10.0]), 47.397742, 8.545594, 488.0)
        >>> # ~0.001° further north, 10 m higher
    """
    pos_ned = np.asarray(pos_ned, dtype=np.float64)
    if pos_ned.shape != (3,):
        raise ValueError(f"pos_ned must have shape (3,), got {pos_ned.shape}")

    lat_ref = np.deg2rad(home_lat)
    lon_ref = np.deg2rad(home_lon)

    xyz = ned_to_ecef(*pos_ned, lat_ref, lon_ref, home_alt)
    lat, lon, height = ecef_to_llh(*xyz)

    return np.array([np.rad2deg(lat), np.rad2deg(lon), height], dtype=np.float64)
