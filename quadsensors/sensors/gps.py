"""
GPS receiver model.

init_gps stores the receiver parameters and reports the home position.
update_gps converts the true NED position to latitude/longitude/altitude,
adds Gaussian noise (lat/lon, altitude and each velocity axis with their own
standard deviations) and derives ground speed and course over ground from
the noisy velocity.
"""

from typing import Optional
import numpy as np

from quadsensors.config import HomeLocation
from quadsensors.coords.transforms import ned_to_llh
from quadsensors.sensors.types import GpsSensor
from quadsensors.sim.noise import NoiseSource
from quadsensors.utils.angles import wrap_angle_2pi


def init_gps(
    eph: float,
    epv: float,
    fix: int,
    visible_sats: int,
    lat_lon_noise_std_dev: float,
    alt_noise_std_dev: float,
    speed_noise_std_dev: float,
    noise: Optional[NoiseSource] = None,
    home: Optional[HomeLocation] = None,
) -> GpsSensor:
    """
    Create an initialized GPS receiver positioned at home.

    Args:
        eph: Horizontal accuracy [m].
        epv: Vertical accuracy [m].
        fix: Fix type.
        visible_sats: Satellites in view.
        lat_lon_noise_std_dev: Latitude/longitude noise [degrees].
        alt_noise_std_dev: Altitude noise [m].
        speed_noise_std_dev: Velocity noise per axis [m/s].
        noise: Noise source for later updates. Default: disabled.
        home: Simulation origin. Default: HomeLocation().

    Returns:
        GpsSensor with lat_lon_alt = [home.lat, home.lon, home.alt].

    Raises:
        ValueError: If any noise standard deviation is negative.
    """
    for name, value in (
        ("lat_lon_noise_std_dev", lat_lon_noise_std_dev),
        ("alt_noise_std_dev", alt_noise_std_dev),
        ("speed_noise_std_dev", speed_noise_std_dev),
    ):
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")

    if home is None:
        home = HomeLocation()
    if noise is None:
        noise = NoiseSource(enabled=False)

    return GpsSensor(
        eph=eph,
        epv=epv,
        fix=fix,
        visible_sats=visible_sats,
        lat_lon_noise_std_dev=lat_lon_noise_std_dev,
        alt_noise_std_dev=alt_noise_std_dev,
        speed_noise_std_dev=speed_noise_std_dev,
        lat_lon_alt=np.array([home.lat, home.lon, home.alt], dtype=np.float64),
        home=home,
        noise=noise,
    )


def update_gps(
    gps: GpsSensor,
    pos_ned: np.ndarray,
    vel_ned: np.ndarray,
) -> None:
    """
    Update the GPS fix for one simulation tick.

    Args:
        gps: State returned by init_gps. Modified in place.
        pos_ned: True position relative to home [m], shape (3,).
        vel_ned: True NED velocity [m/s], shape (3,).

    Notes:
        - ground_speed = hypot(v_n, v_e) of the noisy velocity
        - cog = atan2(v_e, v_n) wrapped to [0, 360) degrees
    """
    home = gps.home
    lla = ned_to_llh(pos_ned, home.lat, home.lon, home.alt)

    lla[0] += gps.noise.sample(gps.lat_lon_noise_std_dev)
    lla[1] += gps.noise.sample(gps.lat_lon_noise_std_dev)
    lla[2] += gps.noise.sample(gps.alt_noise_std_dev)
    gps.lat_lon_alt = lla

    vel_ned = np.asarray(vel_ned, dtype=np.float64)
    gps.gps_speed = vel_ned + gps.noise.sample_vector(gps.speed_noise_std_dev)

    gps.ground_speed = float(np.hypot(gps.gps_speed[0], gps.gps_speed[1]))
    gps.cog = float(np.rad2deg(wrap_angle_2pi(np.arctan2(gps.gps_speed[1], gps.gps_speed[0]))))
