"""
Simulation utilities for generating synthetic sensor data.

Modules:
    noise: Zero-mean Gaussian noise with a runtime enable switch
"""

from quadsensors.sim.noise import NoiseSource, zero_mean_noise

__all__ = [
    "NoiseSource",
    "zero_mean_noise",
]
