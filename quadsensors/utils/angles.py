"""
Angle wrapping and scalar clamping utilities.

Provides the small numeric helpers shared by the sensor models:
- Angle wrapping to [0, 2π)
- Inclusive clamping of a scalar into a range

Critical for:
- GPS course-over-ground (reported in [0, 360) degrees)
- Geomagnetic table index clamping
- Interpolation weight clamping
"""

import numpy as np


def wrap_angle_2pi(angle: float) -> float:
    """
    Wrap angle to [0, 2π) range.

    Used for compass-style quantities where negative angles are not
    reported, e.g. GPS course over ground (0 = North, π/2 = East).

    Args:
        angle: Angle in radians (can be any value)

    Returns:
        Wrapped angle in range [0, 2π)

    Example:
        >>> wrap_angle_2pi(-np.pi / 2)  # -90° -> 270°
        4.71238898038469
    """
    wrapped = np.mod(angle, 2.0 * np.pi)
    # np.mod can return exactly 2π for tiny negative inputs
    if wrapped >= 2.0 * np.pi:
        wrapped = 0.0
    return float(wrapped)


def constrain(value: float, min_value: float, max_value: float) -> float:
    """
    Clamp a scalar into the inclusive range [min_value, max_value].

    Args:
        value: Value to clamp.
        min_value: Lower bound (inclusive).
        max_value: Upper bound (inclusive).

    Returns:
        min_value if value < min_value, max_value if value > max_value,
        otherwise value unchanged.

    Example:
        >>> constrain(75.0, -60.0, 50.0)
        50.0
        >>> constrain(1.5, 0.0, 1.0)
        1.0
    """
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value
