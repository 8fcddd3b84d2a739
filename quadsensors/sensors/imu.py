"""
IMU sensor model (accelerometer + gyroscope).

Forward model per body axis i:
    acc[i]  = a_b[i] + dcm_be[i, 2] * (-g) + n_a
    gyro[i] = ω_b[i] + n_g

The gravity term projects the NED gravity reaction [0, 0, -g] into the body
frame through the third column of the Earth-to-body DCM, so a level vehicle
at rest reads acc = [0, 0, -g] (body z points down).
"""

from typing import Optional
import numpy as np

from quadsensors.config import GRAVITY
from quadsensors.sensors.types import ImuSensor
from quadsensors.sim.noise import NoiseSource


def init_imu(
    acc_noise_std_dev: float,
    gyro_noise_std_dev: float,
    noise: Optional[NoiseSource] = None,
    gravity: float = GRAVITY,
) -> ImuSensor:
    """
    Create an initialized IMU reading a level vehicle at rest.

    Args:
        acc_noise_std_dev: Accelerometer noise per axis [m/s²].
        gyro_noise_std_dev: Gyroscope noise per axis [rad/s].
        noise: Noise source for later updates. Default: disabled.
        gravity: Gravity magnitude [m/s²]. Default: 9.81.

    Returns:
        ImuSensor with acc = [0, 0, -gravity] and gyro = [0, 0, 0].

    Raises:
        ValueError: If a noise standard deviation is negative.
    """
    if acc_noise_std_dev < 0:
        raise ValueError(f"acc_noise_std_dev must be >= 0, got {acc_noise_std_dev}")
    if gyro_noise_std_dev < 0:
        raise ValueError(f"gyro_noise_std_dev must be >= 0, got {gyro_noise_std_dev}")

    if noise is None:
        noise = NoiseSource(enabled=False)

    return ImuSensor(
        acc_noise_std_dev=acc_noise_std_dev,
        gyro_noise_std_dev=gyro_noise_std_dev,
        acc=np.array([0.0, 0.0, -gravity]),
        gyro=np.zeros(3),
        gravity=gravity,
        noise=noise,
    )


def update_imu(
    imu: ImuSensor,
    acc_b: np.ndarray,
    omega_b: np.ndarray,
    dcm_be: np.ndarray,
) -> None:
    """
    Update the IMU reading for one simulation tick.

    Args:
        imu: State returned by init_imu. Modified in place.
        acc_b: Kinematic acceleration in body frame [m/s²], shape (3,).
        omega_b: Angular rate in body frame [rad/s], shape (3,).
        dcm_be: Earth-to-body DCM, shape (3, 3).

    Raises:
        ValueError: If dcm_be is not 3x3.

    Example:
        >>> imu = init_imu(0.05, 0.01)
        >>> update_imu(imu, np.zeros(3), np.zeros(3), np.eye(3))
        >>> print(imu.acc)  # [0, 0, -9.81]
    """
    dcm_be = np.asarray(dcm_be, dtype=np.float64)
    if dcm_be.shape != (3, 3):
        raise ValueError(f"dcm_be must have shape (3, 3), got {dcm_be.shape}")

    acc_b = np.asarray(acc_b, dtype=np.float64)
    omega_b = np.asarray(omega_b, dtype=np.float64)

    # Gravity reaction rotated into body frame: dcm_be @ [0, 0, -g]
    gravity_b = dcm_be[:, 2] * (-imu.gravity)

    acc = np.zeros(3)
    gyro = np.zeros(3)
    for i in range(3):
        acc[i] = acc_b[i] + gravity_b[i] + imu.noise.sample(imu.acc_noise_std_dev)
        gyro[i] = omega_b[i] + imu.noise.sample(imu.gyro_noise_std_dev)

    imu.acc = acc
    imu.gyro = gyro
