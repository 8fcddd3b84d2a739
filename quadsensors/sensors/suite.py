"""
Quadrotor sensor suite: the simulator-facing entry point.

Bundles the GPS, IMU, magnetometer and barometer of one vehicle, built from a
QuadSensorConfig with a single NoiseSource, and updates all four from the
true VehicleState once per simulation tick.

Per-tick data flow:
    pos_ned, vel_ned       -> GPS
    acc_b, omega_b, dcm_be -> IMU
    true lat/lon, dcm_be   -> magnetometer (Earth field model)
    home_alt - down, u     -> barometer (ISA), u = body-x velocity

Example:
    >>> from quadsensors.config import QuadSensorConfig
    >>> suite = QuadSensorSuite.from_config(QuadSensorConfig())
    >>> suite.update(VehicleState())
    >>> readings = suite.readings()
"""

from typing import Dict, Optional
import numpy as np

from quadsensors.config import QuadSensorConfig
from quadsensors.coords.transforms import ned_to_llh
from quadsensors.sensors.barometer import init_baro, update_baro
from quadsensors.sensors.gps import init_gps, update_gps
from quadsensors.sensors.imu import init_imu, update_imu
from quadsensors.sensors.magnetometer import init_mag, update_mag
from quadsensors.sensors.types import (
    BaroSensor,
    GpsSensor,
    ImuSensor,
    MagSensorState,
    VehicleState,
)
from quadsensors.sim.noise import NoiseSource


class QuadSensorSuite:
    """
    All onboard sensors of one simulated quadrotor.

    Attributes:
        config: Configuration the suite was built from.
        noise: Noise source shared by the four sensors.
        gps, imu, mag, baro: Sensor states (read after each update).
    """

    def __init__(
        self,
        config: QuadSensorConfig,
        gps: GpsSensor,
        imu: ImuSensor,
        mag: MagSensorState,
        baro: BaroSensor,
        noise: NoiseSource,
    ) -> None:
        self.config = config
        self.gps = gps
        self.imu = imu
        self.mag = mag
        self.baro = baro
        self.noise = noise

    @classmethod
    def from_config(
        cls,
        config: QuadSensorConfig,
        rng: Optional[np.random.Generator] = None,
    ) -> "QuadSensorSuite":
        """
        Initialize every sensor from a configuration.

        Args:
            config: Suite configuration.
            rng: Generator for the shared noise source (seed it for
                 reproducible noisy runs). Default: np.random.default_rng().

        Returns:
            QuadSensorSuite with all sensors Initialized at home.
        """
        noise = NoiseSource(enabled=config.noise_enabled, rng=rng)
        home = config.home
        params = config.noise
        receiver = config.gps_receiver

        gps = init_gps(
            receiver.eph,
            receiver.epv,
            receiver.fix,
            receiver.visible_sats,
            params.gps_lat_lon,
            params.gps_alt,
            params.gps_speed,
            noise=noise,
            home=home,
        )
        imu = init_imu(params.imu_acc, params.imu_gyro, noise=noise, gravity=config.gravity)
        mag = init_mag(params.mag, noise=noise, home=home)
        baro = init_baro(params.baro, noise=noise, home_alt=home.alt, gravity=config.gravity)

        return cls(config, gps, imu, mag, baro, noise)

    def update(self, state: VehicleState) -> None:
        """
        Update all sensors from the true vehicle state of one tick.

        Args:
            state: True vehicle state.
        """
        home = self.config.home

        update_gps(self.gps, state.pos_ned, state.vel_ned)
        update_imu(self.imu, state.acc_b, state.omega_b, state.dcm_be)

        # Magnetometer uses the true position, not the noisy GPS fix
        lat, lon, _ = ned_to_llh(state.pos_ned, home.lat, home.lon, home.alt)
        update_mag(self.mag, lat, lon, state.dcm_be)

        vel_b = state.dcm_be @ state.vel_ned
        update_baro(self.baro, home.alt - state.pos_ned[2], vel_b[0])

    def readings(self) -> Dict[str, float]:
        """
        Flat snapshot of the latest readings.

        Returns:
            Dict with keys gps_lat, gps_lon, gps_alt, gps_vn, gps_ve, gps_vd,
            gps_ground_speed, gps_cog, acc_x/y/z, gyro_x/y/z, mag_x/y/z,
            baro_pressure, baro_pressure_alt, baro_diff_pressure,
            baro_temperature.
        """
        out = {
            'gps_lat': self.gps.lat_lon_alt[0],
            'gps_lon': self.gps.lat_lon_alt[1],
            'gps_alt': self.gps.lat_lon_alt[2],
            'gps_vn': self.gps.gps_speed[0],
            'gps_ve': self.gps.gps_speed[1],
            'gps_vd': self.gps.gps_speed[2],
            'gps_ground_speed': self.gps.ground_speed,
            'gps_cog': self.gps.cog,
        }
        for i, axis in enumerate('xyz'):
            out[f'acc_{axis}'] = self.imu.acc[i]
            out[f'gyro_{axis}'] = self.imu.gyro[i]
            out[f'mag_{axis}'] = self.mag.mag_field[i]
        out['baro_pressure'] = self.baro.pressure
        out['baro_pressure_alt'] = self.baro.pressure_alt
        out['baro_diff_pressure'] = self.baro.diff_pressure
        out['baro_temperature'] = self.baro.temperature

        return {k: float(v) for k, v in out.items()}
