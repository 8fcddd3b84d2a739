"""
Unit tests for quadsensors/sensors/magnetometer.py.

Run with: pytest tests/sensors/test_magnetometer.py -v
"""

import unittest
import numpy as np
import pytest

from quadsensors.config import HOME_LAT, HOME_LON, HOME_YAW, HomeLocation
from quadsensors.coords.rotations import euler_to_dcm_be
from quadsensors.sensors.geomag import compute_body_field, compute_earth_field
from quadsensors.sensors.magnetometer import init_mag, update_mag
from quadsensors.sim.noise import NoiseSource


class TestInitMag(unittest.TestCase):
    """Test suite for init_mag."""

    def test_home_field(self) -> None:
        """Initial reading is the noise-free body field at home."""
        mag = init_mag(0.005)
        expected = compute_body_field(HOME_LAT, HOME_LON, euler_to_dcm_be(0.0, 0.0, HOME_YAW))

        np.testing.assert_array_equal(mag.mag_field, expected)
        self.assertEqual(mag.mag_noise_std_dev, 0.005)

    def test_home_yaw_zero_is_earth_field(self) -> None:
        mag = init_mag(0.005)
        np.testing.assert_allclose(
            mag.mag_field, compute_earth_field(HOME_LAT, HOME_LON), atol=1e-15
        )

    def test_custom_home_heading(self) -> None:
        home = HomeLocation(yaw=np.pi / 2)
        mag = init_mag(0.005, home=home)
        earth = compute_earth_field(home.lat, home.lon)

        np.testing.assert_allclose(mag.mag_field, [earth[1], -earth[0], earth[2]], atol=1e-12)

    def test_init_ignores_enabled_noise(self) -> None:
        """Initialization never adds noise."""
        mag = init_mag(0.005, noise=NoiseSource.seeded(1))
        np.testing.assert_array_equal(mag.mag_field, init_mag(0.005).mag_field)

    def test_negative_std_dev(self) -> None:
        with pytest.raises(ValueError, match="mag_noise_std_dev"):
            init_mag(-0.001)


class TestUpdateMag(unittest.TestCase):
    """Test suite for update_mag."""

    def test_noise_disabled_is_bit_identical(self) -> None:
        mag = init_mag(0.005)
        dcm = euler_to_dcm_be(0.05, -0.02, 1.3)

        update_mag(mag, 47.5, 8.6, dcm)
        first = mag.mag_field.copy()
        update_mag(mag, 47.5, 8.6, dcm)

        np.testing.assert_array_equal(mag.mag_field, first)
        np.testing.assert_array_equal(first, compute_body_field(47.5, 8.6, dcm))

    def test_noise_statistics(self) -> None:
        """Per-axis noise is zero-mean with the configured sigma."""
        sigma = 0.005
        mag = init_mag(sigma, noise=NoiseSource.seeded(42))
        dcm = np.eye(3)
        truth = compute_body_field(HOME_LAT, HOME_LON, dcm)

        n_samples = 5000
        errors = np.zeros((n_samples, 3))
        for k in range(n_samples):
            update_mag(mag, HOME_LAT, HOME_LON, dcm)
            errors[k] = mag.mag_field - truth

        np.testing.assert_allclose(errors.mean(axis=0), 0.0, atol=4 * sigma / np.sqrt(n_samples))
        np.testing.assert_allclose(errors.std(axis=0), sigma, rtol=0.05)

    def test_axes_are_independent(self) -> None:
        mag = init_mag(0.005, noise=NoiseSource.seeded(3))
        update_mag(mag, HOME_LAT, HOME_LON, np.eye(3))
        n = mag.mag_field - compute_earth_field(HOME_LAT, HOME_LON)

        assert len(set(n.tolist())) == 3

    def test_seeded_noise_is_reproducible(self) -> None:
        a = init_mag(0.005, noise=NoiseSource.seeded(11))
        b = init_mag(0.005, noise=NoiseSource.seeded(11))
        for _ in range(5):
            update_mag(a, 10.0, 20.0, np.eye(3))
            update_mag(b, 10.0, 20.0, np.eye(3))

        np.testing.assert_array_equal(a.mag_field, b.mag_field)

    def test_zero_sigma_with_noise_enabled(self) -> None:
        mag = init_mag(0.0, noise=NoiseSource.seeded(5))
        update_mag(mag, 10.0, 20.0, np.eye(3))
        np.testing.assert_array_equal(mag.mag_field, compute_earth_field(10.0, 20.0))

    def test_out_of_range_position_gives_zero_field(self) -> None:
        """Invalid latitude degrades to zero field without raising."""
        mag = init_mag(0.005)
        update_mag(mag, 120.0, 0.0, np.eye(3))
        np.testing.assert_array_equal(mag.mag_field, np.zeros(3))

    def test_non_finite_position_gives_zero_field(self) -> None:
        """A diverged position (NaN/inf) degrades to zero field without raising."""
        mag = init_mag(0.005)
        for lat, lon in [(float('nan'), 8.5), (10.0, float('nan')), (float('inf'), 0.0)]:
            update_mag(mag, lat, lon, np.eye(3))
            np.testing.assert_array_equal(mag.mag_field, np.zeros(3))

    def test_heading_change_rotates_field(self) -> None:
        mag = init_mag(0.005)
        update_mag(mag, HOME_LAT, HOME_LON, euler_to_dcm_be(0.0, 0.0, np.pi))
        earth = compute_earth_field(HOME_LAT, HOME_LON)

        np.testing.assert_allclose(mag.mag_field, [-earth[0], -earth[1], earth[2]], atol=1e-12)
