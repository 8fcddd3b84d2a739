"""
Earth magnetic field model from the embedded geomagnetic tables.

This module turns a geodetic position into the magnetic field vector a
magnetometer would measure:
    - Grid lookup with edge clamping and bilinear interpolation over the
      13 x 37 declination / inclination / strength tables
    - Conversion of (declination, inclination, strength) to an NED vector
    - Rotation of the NED vector into the body frame with the attitude DCM

Edge policy:
    - lat outside [-90, 90], lon outside [-180, 180] or NaN: the lookup returns
      exactly 0.0 (no data), it never raises
    - lat outside the table coverage [-60, 60]: clamped to the edge row

Grid cell selection truncates lat/10 and lon/10 toward zero (int() cast),
not toward -inf. For negative coordinates this selects the cell on the
zero side, where the interpolation weight then clamps to 0, so the value
is that of the cell's zero-side edge.

Frame Conventions:
    - Earth frame: NED (x=North, y=East, z=Down)
    - Body frame via dcm_be: v_body = dcm_be @ v_ned

References:
    PX4 SITL geo_mag_declination lookup tables and bilinear interpolation.
    Field components: http://geomag.nrcan.gc.ca/mag_fld/comp-en.php
"""

from typing import Tuple
import numpy as np

from quadsensors.coords.rotations import earth_to_body_rotation
from quadsensors.sensors.geomag_tables import (
    DECLINATION_TABLE,
    INCLINATION_TABLE,
    STRENGTH_TABLE,
    SAMPLING_RES,
    SAMPLING_MIN_LAT,
    SAMPLING_MAX_LAT,
    SAMPLING_MIN_LON,
    SAMPLING_MAX_LON,
)
from quadsensors.utils.angles import constrain

# Table strength units (10^3 nT) to Gauss
STRENGTH_SCALE = 0.01


def get_lookup_table_index(
    value: float,
    table_min: float,
    table_max: float,
) -> Tuple[float, int]:
    """
    Clamp a grid coordinate into the table and return its index.

    The upper bound is table_max - SAMPLING_RES so that index + 1 is always a
    valid row/column for the bilinear interpolation.

    Args:
        value: Lower grid coordinate of the cell (multiple of SAMPLING_RES).
               Units: degrees.
        table_min: First sampled coordinate of the table axis [degrees].
        table_max: Last sampled coordinate of the table axis [degrees].

    Returns:
        Tuple (clamped_value, index). The clamped value is the coordinate the
        interpolation weight must be computed against.

    Example:
        >>> get_lookup_table_index(70.0, -60.0, 60.0)  # above coverage
        (50.0, 11)
        >>> get_lookup_table_index(0.0, -180.0, 180.0)
        (0.0, 18)
    """
    clamped = constrain(value, table_min, table_max - SAMPLING_RES)
    index = int((clamped - table_min) / SAMPLING_RES)
    return clamped, index


def interpolate(lat: float, lon: float, grid: np.ndarray) -> float:
    """
    Bilinearly interpolate a geomagnetic table at (lat, lon).

    Algorithm:
        1. Reject positions outside [-90, 90] x [-180, 180] (or NaN) with 0.0
        2. min_lat = trunc(lat / 10) * 10, min_lon = trunc(lon / 10) * 10
        3. Clamp to the table and find the cell indices (row, col)
        4. Read corners sw (row, col), se (row, col+1),
           ne (row+1, col+1), nw (row+1, col)
        5. lat_scale, lon_scale = fractional offsets clamped to [0, 1]
        6. bottom = lerp(sw, se), top = lerp(nw, ne), result = lerp(bottom, top)

    Args:
        lat: Geodetic latitude [degrees].
        lon: Geodetic longitude [degrees].
        grid: One of DECLINATION_TABLE, INCLINATION_TABLE, STRENGTH_TABLE
              (shape (13, 37)).

    Returns:
        Interpolated table value (units of the table), or exactly 0.0 when the
        position is outside the valid geodetic range.

    Example:
        >>> interpolate(0.0, 0.0, DECLINATION_TABLE)  # exact sample point
        -5.0
    """
    # NaN fails every comparison, so it is rejected here too
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        return 0.0

    # Round toward zero to the sampling resolution
    min_lat = int(lat / SAMPLING_RES) * SAMPLING_RES
    min_lon = int(lon / SAMPLING_RES) * SAMPLING_RES

    min_lat, row = get_lookup_table_index(min_lat, SAMPLING_MIN_LAT, SAMPLING_MAX_LAT)
    min_lon, col = get_lookup_table_index(min_lon, SAMPLING_MIN_LON, SAMPLING_MAX_LON)

    data_sw = float(grid[row, col])
    data_se = float(grid[row, col + 1])
    data_ne = float(grid[row + 1, col + 1])
    data_nw = float(grid[row + 1, col])

    lat_scale = constrain((lat - min_lat) / SAMPLING_RES, 0.0, 1.0)
    lon_scale = constrain((lon - min_lon) / SAMPLING_RES, 0.0, 1.0)

    data_min = lon_scale * (data_se - data_sw) + data_sw
    data_max = lon_scale * (data_ne - data_nw) + data_nw

    return lat_scale * (data_max - data_min) + data_min


def get_mag_declination(lat: float, lon: float) -> float:
    """Magnetic declination at (lat, lon) [degrees]."""
    return interpolate(lat, lon, DECLINATION_TABLE)


def get_mag_inclination(lat: float, lon: float) -> float:
    """Magnetic inclination at (lat, lon) [degrees]."""
    return interpolate(lat, lon, INCLINATION_TABLE)


def get_mag_strength(lat: float, lon: float) -> float:
    """Magnetic field strength at (lat, lon) [10^3 nT]."""
    return interpolate(lat, lon, STRENGTH_TABLE)


def compute_earth_field(lat: float, lon: float) -> np.ndarray:
    """
    Compute the Earth magnetic field vector in the NED frame.

    Components:
        H = B * cos(I)
        m_ned = [H * cos(D), H * sin(D), H * tan(I)]

    where D is declination, I inclination and B the strength in Gauss
    (0.01 * table value). The vertical component H * tan(I) grows without
    bound as I approaches ±90°; no stabilisation is applied.

    Args:
        lat: Geodetic latitude [degrees].
        lon: Geodetic longitude [degrees].

    Returns:
        Field vector [north, east, down] in Gauss. Shape: (3,).
        All zeros when the position is outside the valid geodetic range.

    Example:
        >>> m_ned = compute_earth_field(47.397742, 8.545594)
        >>> # north ≈ 0.21, east ≈ 0.01, down ≈ 0.43 (Zurich)
    """
    declination_rad = np.deg2rad(get_mag_declination(lat, lon))
    inclination_rad = np.deg2rad(get_mag_inclination(lat, lon))
    strength_ga = STRENGTH_SCALE * get_mag_strength(lat, lon)

    H = strength_ga * np.cos(inclination_rad)

    return np.array(
        [
            H * np.cos(declination_rad),
            H * np.sin(declination_rad),
            H * np.tan(inclination_rad),
        ],
        dtype=np.float64,
    )


def compute_body_field(lat: float, lon: float, dcm_be: np.ndarray) -> np.ndarray:
    """
    Compute the magnetic field vector measured in the body frame.

        m_body = dcm_be @ m_ned(lat, lon)

    Args:
        lat: Geodetic latitude [degrees].
        lon: Geodetic longitude [degrees].
        dcm_be: Earth-to-body direction cosine matrix. Shape: (3, 3).
                Not modified.

    Returns:
        Field vector in the body frame [Gauss]. Shape: (3,).

    Raises:
        ValueError: If dcm_be is not 3x3.
    """
    return earth_to_body_rotation(dcm_be, compute_earth_field(lat, lon))
