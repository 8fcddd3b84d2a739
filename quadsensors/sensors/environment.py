"""
International Standard Atmosphere (ISA) model for the troposphere.

This module implements the air-data relations used by the barometer model:
    - Temperature, pressure and density at a geometric altitude
    - Inverse barometric formula (pressure to altitude)

Valid up to the tropopause (11 km above MSL). Above that the linear
temperature profile is no longer physical; callers stay within the
quadrotor flight envelope.

Standard atmosphere parameters:
    Tb   = 288.15 K      sea-level temperature
    Pb   = 101325.0 Pa   sea-level pressure
    Lb   = -0.0065 K/m   temperature lapse rate
    R    = 8.31432       universal gas constant [J/(mol·K)]
    M    = 0.0289644     molar mass of dry air [kg/mol]
    RHO  = 1.225         sea-level density [kg/m³]
"""

from typing import NamedTuple
import numpy as np

from quadsensors.config import GRAVITY

TB = 288.15  # K
PB = 101325.0  # Pa
LB = -0.0065  # K/m
R_GAS = 8.31432  # J/(mol·K)
M_AIR = 0.0289644  # kg/mol
RHO_MSL = 1.225  # kg/m³

# Density exponent g*M/(R*L) - 1 for the standard lapse rate
DENSITY_EXPONENT = 4.256


class AtmosphereState(NamedTuple):
    """Air state at one altitude (SI units)."""

    temperature: float  # K
    pressure: float  # Pa
    density: float  # kg/m³


def isa_troposphere(alt: float, g: float = GRAVITY) -> AtmosphereState:
    """
    Evaluate the ISA troposphere at a geometric altitude.

        T   = Tb + Lb * h
        P   = Pb / (Tb / T)^(-(g*M)/(R*Lb))
        rho = RHO / (Tb / T)^4.256

    Args:
        alt: Altitude above mean sea level [m].
        g: Gravitational acceleration [m/s²]. Default: 9.81.

    Returns:
        AtmosphereState(temperature [K], pressure [Pa], density [kg/m³]).

    Example:
        >>> atm = isa_troposphere(0.0)
        >>> atm.pressure
        101325.0
        >>> atm = isa_troposphere(488.0)  # Zurich home altitude
        >>> # T ≈ 284.98 K, P ≈ 95.5 kPa
    """
    temperature_local = TB + LB * alt

    pressure_ratio = (TB / temperature_local) ** (-(g * M_AIR) / (R_GAS * LB))
    density_ratio = (TB / temperature_local) ** DENSITY_EXPONENT

    return AtmosphereState(
        temperature=temperature_local,
        pressure=PB / pressure_ratio,
        density=RHO_MSL / density_ratio,
    )


def pressure_to_altitude(
    p: float,
    p0: float = PB,
    T: float = TB,
    g: float = GRAVITY,
) -> float:
    """
    Convert static pressure to altitude (inverse of isa_troposphere).

        h = (T / -Lb) * (1 - (p / p0)^(-R*Lb / (g*M)))

    Args:
        p: Measured static pressure [Pa].
        p0: Reference pressure at h = 0 [Pa]. Default: 101325.
        T: Reference temperature at h = 0 [K]. Default: 288.15.
        g: Gravitational acceleration [m/s²]. Default: 9.81.

    Returns:
        Altitude above the reference level [m].

    Raises:
        ValueError: If p, p0 or T is not positive.

    Example:
        >>> h = pressure_to_altitude(isa_troposphere(500.0).pressure)
        >>> # h ≈ 500.0
    """
    if p <= 0:
        raise ValueError(f"p (pressure) must be positive, got {p}")
    if p0 <= 0:
        raise ValueError(f"p0 (reference pressure) must be positive, got {p0}")
    if T <= 0:
        raise ValueError(f"T (temperature) must be positive, got {T}")

    alpha = -(R_GAS * LB) / (g * M_AIR)

    return (T / -LB) * (1.0 - np.power(p / p0, alpha))
