"""Attitude representations used by the sensor models.

This module provides the direction cosine matrix (DCM) helpers needed to
express Earth-frame (NED) quantities in the vehicle body frame:
- Euler angles to body-to-NED rotation matrix
- Euler angles to Earth-to-body DCM
- Earth-to-body vector rotation

Conventions:
- Euler angles: [roll, pitch, yaw] in radians (ZYX/3-2-1 convention)
  - Roll: rotation about x-axis (φ)
  - Pitch: rotation about y-axis (θ)
  - Yaw: rotation about z-axis (ψ), 0 = North, positive towards East
- Earth frame: NED (x=North, y=East, z=Down)
- Body frame: x=forward, y=right, z=down
- dcm_be: 3x3 matrix such that v_body = dcm_be @ v_earth
"""

import numpy as np
from numpy.typing import NDArray


def euler_to_rotation_matrix(
    roll: float,
    pitch: float,
    yaw: float,
) -> NDArray[np.float64]:
    """Convert Euler angles to body-to-NED rotation matrix.

    Args:
        roll: Roll angle φ in radians (rotation about x-axis).
        pitch: Pitch angle θ in radians (rotation about y-axis).
        yaw: Yaw angle ψ in radians (rotation about z-axis).

    Returns:
        3x3 rotation matrix R such that v_ned = R @ v_body.

    Example:
        >>> R = euler_to_rotation_matrix(0.1, 0.2, 0.3)
        >>> print(f"Determinant (should be 1.0): {np.linalg.det(R):.6f}")
    """
    cr = np.cos(roll)
    sr = np.sin(roll)
    cp = np.cos(pitch)
    sp = np.sin(pitch)
    cy = np.cos(yaw)
    sy = np.sin(yaw)

    # ZYX (3-2-1) Euler angle rotation matrix
    R = np.array(
        [
            [cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr],
            [sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr],
            [-sp, cp * sr, cp * cr],
        ],
        dtype=np.float64,
    )

    return R


def euler_to_dcm_be(
    roll: float,
    pitch: float,
    yaw: float,
) -> NDArray[np.float64]:
    """Build the Earth-to-body direction cosine matrix from Euler angles.

    The DCM is the transpose of the body-to-NED rotation matrix. With
    roll = pitch = 0 it reduces to a pure yaw rotation:

        [[ cos ψ, sin ψ, 0],
         [-sin ψ, cos ψ, 0],
         [     0,     0, 1]]

    Args:
        roll: Roll angle in radians.
        pitch: Pitch angle in radians.
        yaw: Yaw angle in radians.

    Returns:
        3x3 DCM such that v_body = dcm_be @ v_earth.

    Example:
        >>> dcm = euler_to_dcm_be(0.0, 0.0, np.pi / 2)  # facing East
        >>> v_body = dcm @ np.array([0.0, 1.0, 0.0])
        >>> print(np.round(v_body, 6))  # East is body-forward: [1, 0, 0]
    """
    return euler_to_rotation_matrix(roll, pitch, yaw).T


def earth_to_body_rotation(
    dcm_be: NDArray[np.float64],
    vec_earth: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Rotate an Earth-frame (NED) vector into the body frame.

    Computes v_body = dcm_be @ v_earth.

    Args:
        dcm_be: Earth-to-body DCM, shape (3, 3).
        vec_earth: Vector in the NED frame, shape (3,).

    Returns:
        Vector in the body frame, shape (3,). A new array; neither input is
        modified.

    Raises:
        ValueError: If dcm_be is not 3x3 or vec_earth is not a 3-vector.
    """
    dcm_be = np.asarray(dcm_be, dtype=np.float64)
    vec_earth = np.asarray(vec_earth, dtype=np.float64)

    if dcm_be.shape != (3, 3):
        raise ValueError(f"dcm_be must have shape (3, 3), got {dcm_be.shape}")
    if vec_earth.shape != (3,):
        raise ValueError(f"vec_earth must have shape (3,), got {vec_earth.shape}")

    return dcm_be @ vec_earth
