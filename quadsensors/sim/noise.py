"""
Zero-mean Gaussian noise for synthetic sensor readings.

This module provides the noise generator shared by all sensor models.
Noise injection is a runtime switch: a disabled NoiseSource returns exactly
zero for every sample, so a simulation run with noise disabled is
bit-for-bit deterministic, while an enabled source draws independent
N(0, σ²) samples from its own numpy Generator.

Key concepts:
    - Each sensor axis receives an independent sample per tick
    - Each NoiseSource owns its Generator, so vehicles can be seeded separately
    - std_dev = 0 yields exactly zero even when noise is enabled
"""

from typing import Optional
import numpy as np


def zero_mean_noise(
    std_dev: float,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Draw one zero-mean Gaussian sample with the given standard deviation.

    Args:
        std_dev: Standard deviation σ of the distribution. Must be >= 0.
        rng: Random number generator for reproducibility.
             If None, uses np.random.default_rng().

    Returns:
        A single float sample from N(0, σ²).

    Raises:
        ValueError: If std_dev < 0.

    Example:
        >>> rng = np.random.default_rng(42)
        >>> n = zero_mean_noise(0.005, rng=rng)
    """
    if std_dev < 0:
        raise ValueError(f"std_dev must be >= 0, got {std_dev}")

    if rng is None:
        rng = np.random.default_rng()

    if std_dev == 0:
        return 0.0

    return float(rng.normal(0.0, std_dev))


class NoiseSource:
    """
    Runtime-switchable Gaussian noise generator.

    Attributes:
        enabled: When False, every call returns zeros and the generator is
                 never consumed.
        rng: numpy Generator used for all samples of this source.

    Example:
        >>> noise = NoiseSource(enabled=True, rng=np.random.default_rng(7))
        >>> n_xyz = noise.sample_vector(0.005)  # shape (3,)
        >>> NoiseSource(enabled=False).sample(1.0)
        0.0
    """

    def __init__(
        self,
        enabled: bool = False,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.enabled = enabled
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed: int, enabled: bool = True) -> "NoiseSource":
        """Create a source backed by np.random.default_rng(seed)."""
        return cls(enabled=enabled, rng=np.random.default_rng(seed))

    def sample(self, std_dev: float) -> float:
        """Return one noise sample, or 0.0 when noise is disabled."""
        if not self.enabled:
            return 0.0
        return zero_mean_noise(std_dev, rng=self.rng)

    def sample_vector(self, std_dev: float, size: int = 3) -> np.ndarray:
        """Return `size` independent samples (one per sensor axis)."""
        return np.array([self.sample(std_dev) for _ in range(size)], dtype=np.float64)

    def __repr__(self) -> str:
        return f"NoiseSource(enabled={self.enabled})"
