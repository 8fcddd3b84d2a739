"""
Data structures for the simulated quadrotor sensors.

This module defines the state records shared by the sensor adapters:
    - Per-sensor state (GPS, IMU, magnetometer, barometer): configured noise
      levels plus the most recent reading
    - Vehicle truth state supplied by the dynamics simulator each tick

Lifecycle:
    Every sensor state is created by its init_* function (Initialized) and
    then overwritten in place by its update_* function once per tick. There
    is no way back to an uninitialized state.

Frame Conventions:
    - Earth frame: NED (x=North, y=East, z=Down)
    - Body frame: x=forward, y=right, z=down
    - dcm_be: Earth-to-body DCM, v_body = dcm_be @ v_ned

Ownership:
    Sensor states are MUTABLE (frozen=False) and owned by exactly one vehicle.
    Each state keeps a reference to the NoiseSource it was built with.
"""

from dataclasses import dataclass, field
import numpy as np

from quadsensors.config import HomeLocation
from quadsensors.sim.noise import NoiseSource


def _as_vec3(name: str, value, copy: bool = False) -> np.ndarray:
    if copy:
        value = np.array(value, dtype=np.float64)
    else:
        value = np.asarray(value, dtype=np.float64)
    if value.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {value.shape}")
    return value


@dataclass
class MagSensorState:
    """
    Magnetometer state.

    Attributes:
        mag_noise_std_dev: Per-axis noise standard deviation [Gauss].
        mag_field: Last body-frame field reading [Gauss], shape (3,).
                   This is what the autopilot/estimator consumes.
        noise: Noise source used by update_mag.

    Example:
        >>> from quadsensors.sensors.magnetometer import init_mag, update_mag
        >>> mag = init_mag(0.005)
        >>> print(mag.mag_field)  # body field at home
    """

    mag_noise_std_dev: float
    mag_field: np.ndarray
    noise: NoiseSource = field(default_factory=NoiseSource, repr=False)

    def __post_init__(self) -> None:
        if self.mag_noise_std_dev < 0:
            raise ValueError(
                f"mag_noise_std_dev must be >= 0, got {self.mag_noise_std_dev}"
            )
        self.mag_field = _as_vec3("MagSensorState.mag_field", self.mag_field)


@dataclass
class GpsSensor:
    """
    GPS receiver state.

    Attributes:
        eph: Horizontal position accuracy [m].
        epv: Vertical position accuracy [m].
        fix: Fix type (3 = 3D).
        visible_sats: Satellites in view.
        lat_lon_noise_std_dev: Latitude/longitude noise [degrees].
        alt_noise_std_dev: Altitude noise [m].
        speed_noise_std_dev: Velocity noise per NED axis [m/s].
        lat_lon_alt: Last fix [lat deg, lon deg, alt m], shape (3,).
        gps_speed: Last NED velocity [m/s], shape (3,).
        ground_speed: Horizontal speed [m/s].
        cog: Course over ground [degrees, 0..360), 0 = North.
        home: Origin of the NED frame used for the lat/lon/alt conversion.
        noise: Noise source used by update_gps.
    """

    eph: float
    epv: float
    fix: int
    visible_sats: int
    lat_lon_noise_std_dev: float
    alt_noise_std_dev: float
    speed_noise_std_dev: float
    lat_lon_alt: np.ndarray
    gps_speed: np.ndarray = field(default_factory=lambda: np.zeros(3))
    ground_speed: float = 0.0
    cog: float = 0.0
    home: HomeLocation = field(default_factory=HomeLocation)
    noise: NoiseSource = field(default_factory=NoiseSource, repr=False)

    def __post_init__(self) -> None:
        self.lat_lon_alt = _as_vec3("GpsSensor.lat_lon_alt", self.lat_lon_alt)
        self.gps_speed = _as_vec3("GpsSensor.gps_speed", self.gps_speed)


@dataclass
class ImuSensor:
    """
    IMU state (accelerometer + gyroscope).

    Attributes:
        acc_noise_std_dev: Accelerometer noise per axis [m/s²].
        gyro_noise_std_dev: Gyroscope noise per axis [rad/s].
        acc: Last specific force reading in body frame [m/s²], shape (3,).
        gyro: Last angular rate reading in body frame [rad/s], shape (3,).
        gravity: Gravity magnitude used by the model [m/s²].
        noise: Noise source used by update_imu.
    """

    acc_noise_std_dev: float
    gyro_noise_std_dev: float
    acc: np.ndarray
    gyro: np.ndarray
    gravity: float = 9.81
    noise: NoiseSource = field(default_factory=NoiseSource, repr=False)

    def __post_init__(self) -> None:
        self.acc = _as_vec3("ImuSensor.acc", self.acc)
        self.gyro = _as_vec3("ImuSensor.gyro", self.gyro)


@dataclass
class BaroSensor:
    """
    Barometer / air-data state.

    Attributes:
        baro_noise_std_dev: Static pressure noise [Pa].
        pressure: Absolute pressure [hPa].
        pressure_alt: Pressure altitude [m].
        diff_pressure: Differential (dynamic) pressure [hPa].
        temperature: Air temperature [°C].
        gravity: Gravity magnitude used by the model [m/s²].
        noise: Noise source used by update_baro.
    """

    baro_noise_std_dev: float
    pressure: float = 0.0
    pressure_alt: float = 0.0
    diff_pressure: float = 0.0
    temperature: float = 0.0
    gravity: float = 9.81
    noise: NoiseSource = field(default_factory=NoiseSource, repr=False)


@dataclass
class VehicleState:
    """
    True vehicle state produced by the dynamics simulator for one tick.

    Attributes:
        pos_ned: Position relative to home [m], shape (3,).
        vel_ned: Velocity in NED [m/s], shape (3,).
        acc_b: Kinematic acceleration in body frame [m/s²], shape (3,).
        omega_b: Angular rate in body frame [rad/s], shape (3,).
        dcm_be: Earth-to-body DCM, shape (3, 3).

    Example:
        >>> state = VehicleState()  # at rest at home, level, facing North
    """

    pos_ned: np.ndarray = field(default_factory=lambda: np.zeros(3))
    vel_ned: np.ndarray = field(default_factory=lambda: np.zeros(3))
    acc_b: np.ndarray = field(default_factory=lambda: np.zeros(3))
    omega_b: np.ndarray = field(default_factory=lambda: np.zeros(3))
    dcm_be: np.ndarray = field(default_factory=lambda: np.eye(3))

    def __post_init__(self) -> None:
        # Own copies, independent of the caller's arrays
        self.pos_ned = _as_vec3("VehicleState.pos_ned", self.pos_ned, copy=True)
        self.vel_ned = _as_vec3("VehicleState.vel_ned", self.vel_ned, copy=True)
        self.acc_b = _as_vec3("VehicleState.acc_b", self.acc_b, copy=True)
        self.omega_b = _as_vec3("VehicleState.omega_b", self.omega_b, copy=True)
        self.dcm_be = np.array(self.dcm_be, dtype=np.float64)
        if self.dcm_be.shape != (3, 3):
            raise ValueError(
                f"VehicleState.dcm_be must have shape (3, 3), got {self.dcm_be.shape}"
            )
