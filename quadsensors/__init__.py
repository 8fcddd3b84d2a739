"""Onboard sensor simulation for a quadrotor flight-dynamics simulator.

This package contains the components that turn true vehicle state into
synthetic sensor readings:
- config: Home location, noise levels and presets
- coords: NED/geodetic transforms and attitude DCMs
- sensors: GPS, IMU, magnetometer (Earth field model) and barometer (ISA)
- sim: Runtime-switchable Gaussian noise
"""

__version__ = "0.1.0"
