"""
Magnetometer sensor model.

Two-phase lifecycle:
    init_mag:   evaluates the Earth field model at home with the home yaw
                (roll = pitch = 0) and stores the noise level
    update_mag: recomputes the body-frame field at the current position and
                attitude and adds independent per-axis Gaussian noise when the
                sensor's NoiseSource is enabled

Positions outside the valid geodetic range never raise; the field model
returns zero components there (see quadsensors.sensors.geomag).
"""

from typing import Optional
import numpy as np

from quadsensors.config import HomeLocation
from quadsensors.coords.rotations import euler_to_dcm_be
from quadsensors.sensors.geomag import compute_body_field
from quadsensors.sensors.types import MagSensorState
from quadsensors.sim.noise import NoiseSource


def init_mag(
    mag_noise_std_dev: float,
    noise: Optional[NoiseSource] = None,
    home: Optional[HomeLocation] = None,
) -> MagSensorState:
    """
    Create an initialized magnetometer.

    Args:
        mag_noise_std_dev: Per-axis noise standard deviation [Gauss].
        noise: Noise source for later updates. Default: disabled.
        home: Simulation origin. Default: HomeLocation().

    Returns:
        MagSensorState whose mag_field is the noise-free body field at home.

    Raises:
        ValueError: If mag_noise_std_dev < 0.

    Example:
        >>> mag = init_mag(0.005)
        >>> mag.mag_field.shape
        (3,)
    """
    if home is None:
        home = HomeLocation()
    if noise is None:
        noise = NoiseSource(enabled=False)

    # Level attitude with the initial heading
    dcm_be = euler_to_dcm_be(0.0, 0.0, home.yaw)

    return MagSensorState(
        mag_noise_std_dev=mag_noise_std_dev,
        mag_field=compute_body_field(home.lat, home.lon, dcm_be),
        noise=noise,
    )


def update_mag(
    mag: MagSensorState,
    lat: float,
    lon: float,
    dcm_be: np.ndarray,
) -> None:
    """
    Update the magnetometer reading for one simulation tick.

    Overwrites mag.mag_field with
        compute_body_field(lat, lon, dcm_be) + [n_x, n_y, n_z]
    where n_i ~ N(0, mag_noise_std_dev²) when noise is enabled, 0 otherwise.

    Args:
        mag: State returned by init_mag. Modified in place.
        lat: Vehicle latitude [degrees].
        lon: Vehicle longitude [degrees].
        dcm_be: Earth-to-body DCM, shape (3, 3).
    """
    field_b = compute_body_field(lat, lon, dcm_be)
    mag.mag_field = field_b + mag.noise.sample_vector(mag.mag_noise_std_dev)
