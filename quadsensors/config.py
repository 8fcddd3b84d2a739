"""
Sensor simulation configuration.

Frozen dataclasses holding the home location, the per-sensor noise levels and
the GPS receiver status fields, plus named presets. Defaults reproduce the
reference quadrotor parameter set (PX4 SITL home at Zurich, noise disabled).

Presets:
    deterministic: Noise disabled (bit-identical runs)
    nominal:       Noise enabled with the reference standard deviations
    degraded:      Noise enabled with 5x the reference standard deviations

Example:
    >>> cfg = QuadSensorConfig.from_preset('nominal')
    >>> cfg.noise_enabled
    True
    >>> cfg2 = QuadSensorConfig.from_dict(cfg.to_dict())
    >>> cfg2 == cfg
    True
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict
import warnings

# Reference home location (PX4 SITL default)
HOME_LAT = 47.397742  # degrees
HOME_LON = 8.545594  # degrees
HOME_ALT = 488.0  # meters
HOME_YAW = 0.0  # radians

GRAVITY = 9.81  # m/s²


@dataclass(frozen=True)
class HomeLocation:
    """
    Simulation origin: the NED frame is centred here.

    Attributes:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        alt: Altitude above mean sea level in meters.
        yaw: Initial heading in radians (0 = North).
    """

    lat: float = HOME_LAT
    lon: float = HOME_LON
    alt: float = HOME_ALT
    yaw: float = HOME_YAW

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"lat must be in [-90, 90], got {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"lon must be in [-180, 180], got {self.lon}")


@dataclass(frozen=True)
class SensorNoiseParams:
    """
    One-sigma noise levels of each sensor.

    Attributes:
        gps_lat_lon: GPS latitude/longitude noise [degrees].
        gps_alt: GPS altitude noise [m].
        gps_speed: GPS velocity noise per NED axis [m/s].
        imu_acc: Accelerometer noise per axis [m/s²].
        imu_gyro: Gyroscope noise per axis [rad/s].
        mag: Magnetometer noise per axis [Gauss].
        baro: Barometer pressure noise [Pa].
    """

    gps_lat_lon: float = 1e-6
    gps_alt: float = 0.01
    gps_speed: float = 0.01
    imu_acc: float = 0.05
    imu_gyro: float = 0.01
    mag: float = 0.005
    baro: float = 0.01

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if value < 0:
                raise ValueError(f"{name} noise std dev must be >= 0, got {value}")

    def scaled(self, factor: float) -> "SensorNoiseParams":
        """Return a copy with every standard deviation multiplied by factor."""
        return SensorNoiseParams(**{k: v * factor for k, v in asdict(self).items()})

    def all_zero(self) -> bool:
        return all(v == 0 for v in asdict(self).values())


@dataclass(frozen=True)
class GpsReceiverParams:
    """
    Static GPS receiver status fields reported with every fix.

    Attributes:
        eph: Horizontal position accuracy [m].
        epv: Vertical position accuracy [m].
        fix: Fix type (3 = 3D fix).
        visible_sats: Number of satellites in view.
    """

    eph: float = 1.0
    epv: float = 1.0
    fix: int = 3
    visible_sats: int = 10


@dataclass(frozen=True)
class QuadSensorConfig:
    """
    Complete configuration of the quadrotor sensor suite.

    Attributes:
        home: Simulation origin.
        noise: Per-sensor noise standard deviations.
        gps_receiver: GPS status fields.
        noise_enabled: Runtime noise switch. Default False (deterministic).
        gravity: Gravitational acceleration magnitude [m/s²].
    """

    home: HomeLocation = field(default_factory=HomeLocation)
    noise: SensorNoiseParams = field(default_factory=SensorNoiseParams)
    gps_receiver: GpsReceiverParams = field(default_factory=GpsReceiverParams)
    noise_enabled: bool = False
    gravity: float = GRAVITY

    def __post_init__(self) -> None:
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.noise_enabled and self.noise.all_zero():
            warnings.warn(
                "noise_enabled is True but every noise std dev is zero; "
                "readings will be noise-free",
                UserWarning,
            )

    @classmethod
    def from_preset(cls, name: str) -> "QuadSensorConfig":
        """Build a configuration from one of the PRESETS entries."""
        if name not in PRESETS:
            raise ValueError(
                f"Unknown preset '{name}', expected one of {sorted(PRESETS)}"
            )
        preset = PRESETS[name]
        return cls(
            noise=SensorNoiseParams().scaled(preset['noise_scale']),
            noise_enabled=preset['noise_enabled'],
        )

    def with_noise(self, enabled: bool) -> "QuadSensorConfig":
        return replace(self, noise_enabled=enabled)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain dict (JSON-compatible)."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "QuadSensorConfig":
        """Inverse of to_dict(); missing keys fall back to defaults."""
        return cls(
            home=HomeLocation(**d.get('home', {})),
            noise=SensorNoiseParams(**d.get('noise', {})),
            gps_receiver=GpsReceiverParams(**d.get('gps_receiver', {})),
            noise_enabled=d.get('noise_enabled', False),
            gravity=d.get('gravity', GRAVITY),
        )


PRESETS = {
    'deterministic': {
        'description': 'Noise disabled, reference parameters (bit-identical runs)',
        'noise_enabled': False,
        'noise_scale': 1.0,
    },
    'nominal': {
        'description': 'Noise enabled with reference sensor standard deviations',
        'noise_enabled': True,
        'noise_scale': 1.0,
    },
    'degraded': {
        'description': 'Noise enabled with 5x reference standard deviations',
        'noise_enabled': True,
        'noise_scale': 5.0,
    },
}
