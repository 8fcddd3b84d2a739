"""
Unit tests for quadsensors/sensors/imu.py.

Run with: pytest tests/sensors/test_imu.py -v
"""

import unittest
import numpy as np
import pytest

from quadsensors.coords.rotations import euler_to_dcm_be
from quadsensors.sensors.imu import init_imu, update_imu
from quadsensors.sim.noise import NoiseSource


class TestInitImu(unittest.TestCase):
    """Test suite for init_imu."""

    def test_level_at_rest(self) -> None:
        imu = init_imu(0.05, 0.01)
        np.testing.assert_array_equal(imu.acc, [0.0, 0.0, -9.81])
        np.testing.assert_array_equal(imu.gyro, np.zeros(3))

    def test_custom_gravity(self) -> None:
        imu = init_imu(0.05, 0.01, gravity=9.80665)
        self.assertEqual(imu.acc[2], -9.80665)

    def test_negative_std_dev(self) -> None:
        with pytest.raises(ValueError, match="gyro_noise_std_dev"):
            init_imu(0.05, -0.01)


class TestUpdateImu(unittest.TestCase):
    """Test suite for update_imu."""

    def test_level_hover(self) -> None:
        imu = init_imu(0.05, 0.01)
        update_imu(imu, np.zeros(3), np.zeros(3), np.eye(3))
        np.testing.assert_array_equal(imu.acc, [0.0, 0.0, -9.81])

    def test_heading_does_not_change_gravity(self) -> None:
        imu = init_imu(0.05, 0.01)
        update_imu(imu, np.zeros(3), np.zeros(3), euler_to_dcm_be(0.0, 0.0, 2.0))
        np.testing.assert_allclose(imu.acc, [0.0, 0.0, -9.81], atol=1e-12)

    def test_roll_90_deg(self) -> None:
        """Right wing down: body y points down, gravity reaction along -y."""
        imu = init_imu(0.05, 0.01)
        update_imu(imu, np.zeros(3), np.zeros(3), euler_to_dcm_be(np.pi / 2, 0.0, 0.0))
        np.testing.assert_allclose(imu.acc, [0.0, -9.81, 0.0], atol=1e-12)

    def test_pitch_up(self) -> None:
        pitch = 0.2
        imu = init_imu(0.05, 0.01)
        update_imu(imu, np.zeros(3), np.zeros(3), euler_to_dcm_be(0.0, pitch, 0.0))
        np.testing.assert_allclose(
            imu.acc, [9.81 * np.sin(pitch), 0.0, -9.81 * np.cos(pitch)], atol=1e-12
        )

    def test_specific_force_magnitude_at_rest(self) -> None:
        imu = init_imu(0.05, 0.01)
        update_imu(imu, np.zeros(3), np.zeros(3), euler_to_dcm_be(0.4, -0.3, 1.0))
        self.assertAlmostEqual(np.linalg.norm(imu.acc), 9.81, places=12)

    def test_kinematic_acceleration_and_rates(self) -> None:
        imu = init_imu(0.05, 0.01)
        acc_b = np.array([1.0, -2.0, 0.5])
        omega_b = np.array([0.1, 0.2, -0.3])
        update_imu(imu, acc_b, omega_b, np.eye(3))

        np.testing.assert_allclose(imu.acc, [1.0, -2.0, 0.5 - 9.81])
        np.testing.assert_array_equal(imu.gyro, omega_b)

    def test_noise_statistics(self) -> None:
        imu = init_imu(0.05, 0.01, noise=NoiseSource.seeded(42))
        n_samples = 4000
        acc = np.zeros((n_samples, 3))
        gyro = np.zeros((n_samples, 3))
        for k in range(n_samples):
            update_imu(imu, np.zeros(3), np.zeros(3), np.eye(3))
            acc[k] = imu.acc
            gyro[k] = imu.gyro

        np.testing.assert_allclose(acc.std(axis=0), 0.05, rtol=0.06)
        np.testing.assert_allclose(gyro.std(axis=0), 0.01, rtol=0.06)
        np.testing.assert_allclose(acc.mean(axis=0), [0.0, 0.0, -9.81], atol=0.01)

    def test_invalid_dcm_shape(self) -> None:
        imu = init_imu(0.05, 0.01)
        with pytest.raises(ValueError, match="dcm_be"):
            update_imu(imu, np.zeros(3), np.zeros(3), np.eye(4))
