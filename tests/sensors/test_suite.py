"""
Unit tests for quadsensors/sensors/suite.py (QuadSensorSuite).

Run with: pytest tests/sensors/test_suite.py -v
"""

import unittest
import numpy as np

from quadsensors.config import HOME_ALT, HOME_LAT, HOME_LON, QuadSensorConfig
from quadsensors.coords.rotations import euler_to_dcm_be
from quadsensors.sensors import QuadSensorSuite, VehicleState, init_mag
from quadsensors.sensors.environment import isa_troposphere
from quadsensors.sensors.geomag import compute_body_field


class TestQuadSensorSuite(unittest.TestCase):
    """Test suite for the bundled sensor suite."""

    def test_from_config_defaults(self) -> None:
        suite = QuadSensorSuite.from_config(QuadSensorConfig())

        assert not suite.noise.enabled
        self.assertEqual(suite.mag.mag_noise_std_dev, 0.005)
        self.assertEqual(suite.gps.visible_sats, 10)
        self.assertEqual(suite.imu.acc_noise_std_dev, 0.05)
        self.assertEqual(suite.baro.baro_noise_std_dev, 0.01)

    def test_rest_at_home(self) -> None:
        suite = QuadSensorSuite.from_config(QuadSensorConfig())
        suite.update(VehicleState())

        np.testing.assert_allclose(suite.mag.mag_field, init_mag(0.005).mag_field, atol=1e-12)
        np.testing.assert_allclose(suite.gps.lat_lon_alt[:2], [HOME_LAT, HOME_LON], atol=1e-9)
        np.testing.assert_array_equal(suite.imu.acc, [0.0, 0.0, -9.81])
        self.assertAlmostEqual(suite.baro.pressure_alt, HOME_ALT)

    def test_climb(self) -> None:
        suite = QuadSensorSuite.from_config(QuadSensorConfig())
        suite.update(VehicleState(pos_ned=np.array([0.0, 0.0, -10.0])))

        self.assertAlmostEqual(suite.baro.pressure_alt, HOME_ALT + 10.0)
        self.assertAlmostEqual(suite.gps.lat_lon_alt[2], HOME_ALT + 10.0, places=4)

    def test_magnetometer_follows_attitude(self) -> None:
        suite = QuadSensorSuite.from_config(QuadSensorConfig())
        dcm = euler_to_dcm_be(0.1, -0.05, 1.2)
        suite.update(VehicleState(dcm_be=dcm))

        np.testing.assert_allclose(
            suite.mag.mag_field, compute_body_field(HOME_LAT, HOME_LON, dcm), atol=1e-12
        )

    def test_airspeed_uses_body_x_velocity(self) -> None:
        """Flying East while facing East gives full forward airspeed."""
        suite = QuadSensorSuite.from_config(QuadSensorConfig())
        state = VehicleState(
            vel_ned=np.array([0.0, 10.0, 0.0]),
            dcm_be=euler_to_dcm_be(0.0, 0.0, np.pi / 2),
        )
        suite.update(state)
        rho = isa_troposphere(HOME_ALT).density

        self.assertAlmostEqual(suite.baro.diff_pressure, 0.005 * rho * 100.0)
        self.assertAlmostEqual(suite.gps.cog, 90.0, places=9)

    def test_noise_disabled_is_reproducible(self) -> None:
        state = VehicleState(
            pos_ned=np.array([5.0, 3.0, -2.0]),
            vel_ned=np.array([1.0, 1.0, 0.0]),
            dcm_be=euler_to_dcm_be(0.0, 0.0, 0.7),
        )
        a = QuadSensorSuite.from_config(QuadSensorConfig())
        b = QuadSensorSuite.from_config(QuadSensorConfig())
        a.update(state)
        b.update(state)

        self.assertEqual(a.readings(), b.readings())

    def test_seeded_noise_is_reproducible(self) -> None:
        config = QuadSensorConfig.from_preset('nominal')
        a = QuadSensorSuite.from_config(config, rng=np.random.default_rng(7))
        b = QuadSensorSuite.from_config(config, rng=np.random.default_rng(7))
        c = QuadSensorSuite.from_config(config, rng=np.random.default_rng(8))
        for suite in (a, b, c):
            suite.update(VehicleState())

        self.assertEqual(a.readings(), b.readings())
        self.assertNotEqual(a.readings(), c.readings())

    def test_readings_keys(self) -> None:
        suite = QuadSensorSuite.from_config(QuadSensorConfig())
        readings = suite.readings()

        self.assertEqual(len(readings), 21)
        for key in ('gps_lat', 'gps_cog', 'acc_z', 'gyro_x', 'mag_y', 'baro_temperature'):
            assert key in readings
        assert all(isinstance(v, float) for v in readings.values())
