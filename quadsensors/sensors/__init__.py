"""
Onboard sensor models of a simulated quadrotor.

This package turns the true vehicle state of each simulation tick into
synthetic GPS, IMU, magnetometer and barometer readings.

Modules:
    geomag_tables: Embedded declination/inclination/strength grids
    geomag: Grid interpolation and Earth magnetic field model
    types: Sensor state records and the vehicle truth state
    magnetometer: init_mag / update_mag
    gps: init_gps / update_gps
    imu: init_imu / update_imu
    environment: ISA troposphere model
    barometer: init_baro / update_baro
    suite: QuadSensorSuite bundling all four sensors

Design principles:
    - Lookup tables are read-only module data shared by every vehicle
    - Sensor states are mutable and owned by one vehicle
    - Out-of-range geodetic queries degrade to zero field, never raise
    - Noise is a runtime switch (NoiseSource), disabled by default

Example:
    >>> import numpy as np
    >>> from quadsensors.sensors import init_mag, update_mag, euler_to_dcm_be
    >>> mag = init_mag(0.005)
    >>> update_mag(mag, 47.40, 8.55, euler_to_dcm_be(0.0, 0.0, np.pi / 4))
    >>> print(mag.mag_field)
"""

from quadsensors.coords.rotations import euler_to_dcm_be

from quadsensors.sensors.types import (
    MagSensorState,
    GpsSensor,
    ImuSensor,
    BaroSensor,
    VehicleState,
)

from quadsensors.sensors.geomag import (
    get_lookup_table_index,
    interpolate,
    get_mag_declination,
    get_mag_inclination,
    get_mag_strength,
    compute_earth_field,
    compute_body_field,
)

from quadsensors.sensors.geomag_tables import (
    DECLINATION_TABLE,
    INCLINATION_TABLE,
    STRENGTH_TABLE,
)

from quadsensors.sensors.magnetometer import init_mag, update_mag
from quadsensors.sensors.gps import init_gps, update_gps
from quadsensors.sensors.imu import init_imu, update_imu
from quadsensors.sensors.environment import isa_troposphere, pressure_to_altitude
from quadsensors.sensors.barometer import init_baro, update_baro
from quadsensors.sensors.suite import QuadSensorSuite

__all__ = [
    # Data types
    "MagSensorState",
    "GpsSensor",
    "ImuSensor",
    "BaroSensor",
    "VehicleState",
    # Geomagnetic model
    "DECLINATION_TABLE",
    "INCLINATION_TABLE",
    "STRENGTH_TABLE",
    "get_lookup_table_index",
    "interpolate",
    "get_mag_declination",
    "get_mag_inclination",
    "get_mag_strength",
    "compute_earth_field",
    "compute_body_field",
    # Sensor adapters
    "init_mag",
    "update_mag",
    "init_gps",
    "update_gps",
    "init_imu",
    "update_imu",
    "init_baro",
    "update_baro",
    # Atmosphere
    "isa_troposphere",
    "pressure_to_altitude",
    # Suite
    "QuadSensorSuite",
    # Attitude helper
    "euler_to_dcm_be",
]
