"""
Barometer / air-data sensor model.

Readings are derived from the ISA troposphere at the vehicle altitude. A
single pressure noise sample n [Pa] per tick perturbs both outputs that
depend on static pressure:
    pressure      = 0.01 * (P(h) + n)           [hPa]
    pressure_alt  = h - n / (g * rho(h))        [m]
    diff_pressure = 0.005 * rho(h) * u²         [hPa]  (0.5 rho u², Pa -> hPa)
    temperature   = T(h) - 273.0                [°C]
where u is the body-x airspeed (no wind).
"""

from typing import Optional

from quadsensors.config import GRAVITY, HOME_ALT
from quadsensors.sensors.environment import isa_troposphere
from quadsensors.sensors.types import BaroSensor
from quadsensors.sim.noise import NoiseSource


def calc_baro(baro: BaroSensor, alt: float, vel_b_x: float, noise: float) -> None:
    """
    Fill the barometer outputs for one altitude, airspeed and noise sample.

    Args:
        baro: Barometer state. Modified in place.
        alt: Altitude above mean sea level [m].
        vel_b_x: Forward (body-x) velocity [m/s].
        noise: Static pressure noise sample [Pa].
    """
    atm = isa_troposphere(alt, g=baro.gravity)

    baro.pressure = 0.01 * (atm.pressure + noise)
    baro.pressure_alt = alt - noise / (baro.gravity * atm.density)
    baro.diff_pressure = 0.005 * atm.density * vel_b_x**2
    baro.temperature = atm.temperature - 273.0


def init_baro(
    baro_noise_std_dev: float,
    noise: Optional[NoiseSource] = None,
    home_alt: float = HOME_ALT,
    gravity: float = GRAVITY,
) -> BaroSensor:
    """
    Create an initialized barometer reading the home altitude at rest.

    Args:
        baro_noise_std_dev: Static pressure noise [Pa].
        noise: Noise source for later updates. Default: disabled.
        home_alt: Altitude of the simulation origin [m].
        gravity: Gravity magnitude [m/s²].

    Returns:
        BaroSensor evaluated at home_alt with zero airspeed and zero noise.

    Raises:
        ValueError: If baro_noise_std_dev < 0.
    """
    if baro_noise_std_dev < 0:
        raise ValueError(f"baro_noise_std_dev must be >= 0, got {baro_noise_std_dev}")

    if noise is None:
        noise = NoiseSource(enabled=False)

    baro = BaroSensor(baro_noise_std_dev=baro_noise_std_dev, gravity=gravity, noise=noise)
    calc_baro(baro, home_alt, 0.0, 0.0)
    return baro


def update_baro(baro: BaroSensor, alt: float, vel_b_x: float) -> None:
    """
    Update the barometer reading for one simulation tick.

    Args:
        baro: State returned by init_baro. Modified in place.
        alt: Altitude above mean sea level [m].
        vel_b_x: Forward (body-x) velocity [m/s].
    """
    noise = baro.noise.sample(baro.baro_noise_std_dev)
    calc_baro(baro, alt, vel_b_x, noise)
