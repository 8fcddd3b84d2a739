"""
Unit tests for quadsensors/sensors/gps.py.

Run with: pytest tests/sensors/test_gps.py -v
"""

import unittest
import numpy as np
import pytest

from quadsensors.config import HOME_ALT, HOME_LAT, HOME_LON, HomeLocation
from quadsensors.sensors.gps import init_gps, update_gps
from quadsensors.sim.noise import NoiseSource


def make_gps(noise=None, home=None):
    return init_gps(1.0, 1.0, 3, 10, 1e-6, 0.01, 0.01, noise=noise, home=home)


class TestInitGps(unittest.TestCase):
    """Test suite for init_gps."""

    def test_starts_at_home(self) -> None:
        gps = make_gps()
        np.testing.assert_array_equal(gps.lat_lon_alt, [HOME_LAT, HOME_LON, HOME_ALT])
        np.testing.assert_array_equal(gps.gps_speed, np.zeros(3))
        self.assertEqual(gps.ground_speed, 0.0)
        self.assertEqual(gps.cog, 0.0)

    def test_receiver_fields(self) -> None:
        gps = init_gps(2.5, 3.5, 2, 7, 1e-6, 0.01, 0.01)
        self.assertEqual((gps.eph, gps.epv, gps.fix, gps.visible_sats), (2.5, 3.5, 2, 7))

    def test_custom_home(self) -> None:
        home = HomeLocation(lat=-33.86, lon=151.21, alt=20.0)
        gps = make_gps(home=home)
        np.testing.assert_array_equal(gps.lat_lon_alt, [-33.86, 151.21, 20.0])

    def test_negative_std_dev(self) -> None:
        with pytest.raises(ValueError, match="alt_noise_std_dev"):
            init_gps(1.0, 1.0, 3, 10, 1e-6, -0.01, 0.01)


class TestUpdateGps(unittest.TestCase):
    """Test suite for update_gps."""

    def test_at_home(self) -> None:
        gps = make_gps()
        update_gps(gps, np.zeros(3), np.zeros(3))

        np.testing.assert_allclose(gps.lat_lon_alt[:2], [HOME_LAT, HOME_LON], atol=1e-9)
        self.assertAlmostEqual(gps.lat_lon_alt[2], HOME_ALT, places=6)

    def test_north_displacement(self) -> None:
        """100 m North is roughly 0.0009 degrees of latitude at 47°N."""
        gps = make_gps()
        update_gps(gps, np.array([100.0, 0.0, -10.0]), np.zeros(3))
        lat, lon, alt = gps.lat_lon_alt

        assert 0.00085 < lat - HOME_LAT < 0.00095
        self.assertAlmostEqual(lon, HOME_LON, places=9)
        self.assertAlmostEqual(alt, HOME_ALT + 10.0, places=2)

    def test_east_displacement(self) -> None:
        gps = make_gps()
        update_gps(gps, np.array([0.0, 100.0, 0.0]), np.zeros(3))
        lat, lon, _ = gps.lat_lon_alt

        assert lon > HOME_LON
        self.assertAlmostEqual(lat, HOME_LAT, places=6)

    def test_velocity_and_ground_speed(self) -> None:
        gps = make_gps()
        update_gps(gps, np.zeros(3), np.array([3.0, 4.0, -1.0]))

        np.testing.assert_array_equal(gps.gps_speed, [3.0, 4.0, -1.0])
        self.assertAlmostEqual(gps.ground_speed, 5.0)

    def test_course_over_ground(self) -> None:
        """cog is a compass bearing in [0, 360)."""
        gps = make_gps()
        cases = [
            ([5.0, 0.0, 0.0], 0.0),
            ([0.0, 5.0, 0.0], 90.0),
            ([-5.0, 0.0, 0.0], 180.0),
            ([0.0, -5.0, 0.0], 270.0),
            ([1.0, -1.0, 0.0], 315.0),
        ]
        for vel, expected in cases:
            update_gps(gps, np.zeros(3), np.array(vel))
            self.assertAlmostEqual(gps.cog, expected, places=9)
            assert 0.0 <= gps.cog < 360.0

    def test_noise_disabled_is_deterministic(self) -> None:
        a = make_gps()
        b = make_gps()
        pos = np.array([12.0, -7.0, -3.0])
        vel = np.array([1.0, 2.0, 0.0])
        update_gps(a, pos, vel)
        update_gps(b, pos, vel)

        np.testing.assert_array_equal(a.lat_lon_alt, b.lat_lon_alt)
        np.testing.assert_array_equal(a.gps_speed, b.gps_speed)

    def test_noise_enabled_perturbs_fix(self) -> None:
        clean = make_gps()
        noisy = make_gps(noise=NoiseSource.seeded(42))
        pos = np.array([12.0, -7.0, -3.0])
        vel = np.array([1.0, 2.0, 0.0])
        update_gps(clean, pos, vel)
        update_gps(noisy, pos, vel)

        diff = noisy.lat_lon_alt - clean.lat_lon_alt
        assert np.all(diff != 0.0)
        assert np.all(np.abs(diff[:2]) < 1e-5)
        assert abs(diff[2]) < 0.1
        assert np.all(np.abs(noisy.gps_speed - vel) < 0.1)
        self.assertAlmostEqual(
            noisy.ground_speed, np.hypot(noisy.gps_speed[0], noisy.gps_speed[1])
        )

    def test_invalid_position_shape(self) -> None:
        gps = make_gps()
        with pytest.raises(ValueError, match="pos_ned"):
            update_gps(gps, np.zeros(2), np.zeros(3))
