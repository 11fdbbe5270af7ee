"""Tests unitarios de los cálculos de la búsqueda por radio."""
import math

import pytest

from eventfence import geo


class TestAngularRadius:

    def test_distance_equal_to_earth_radius_is_one_radian(self):
        assert geo.angular_radius(6378) == 1.0

    def test_zero_distance(self):
        assert geo.angular_radius(0) == 0

    def test_negative_distance_rejected(self):
        with pytest.raises(ValueError):
            geo.angular_radius(-1)

    def test_custom_earth_radius_in_miles(self):
        assert geo.angular_radius(3963, earth_radius=3963) == 1.0


class TestWithinDistance:

    def test_same_point(self):
        assert geo.within_distance(40.0, -75.0, 40.0, -75.0, 1)

    def test_point_inside_one_radian(self):
        # 28 grados de latitud, unos 0.49 rad
        assert geo.within_distance(68.0, -75.0, 40.0, -75.0, 6378)

    def test_point_outside_one_radian(self):
        # 80 grados de latitud, unos 1.40 rad
        assert not geo.within_distance(-40.0, -75.0, 40.0, -75.0, 6378)

    def test_quarter_turn_on_earth_sphere(self):
        quarter = math.pi / 2 * 6378
        assert geo.within_distance(90.0, 0.0, 0.0, 0.0, quarter + 0.001)
        assert not geo.within_distance(90.0, 0.0, 0.0, 0.0, quarter - 0.001)

    def test_custom_earth_radius(self):
        assert geo.within_distance(90.0, 0.0, 0.0, 0.0, 1.6, earth_radius=1)
        assert not geo.within_distance(90.0, 0.0, 0.0, 0.0, 1.5, earth_radius=1)

    def test_zero_distance_requires_identical_coordinates(self):
        assert geo.within_distance(40.0, -75.0, 40.0, -75.0, 0)
        assert not geo.within_distance(40.000001, -75.0, 40.0, -75.0, 0)


class TestLatitudeBand:

    def test_band_around_center(self):
        low, high = geo.latitude_band(0.0, math.radians(10))
        assert low == pytest.approx(-10.0)
        assert high == pytest.approx(10.0)

    def test_band_clamped_at_poles(self):
        assert geo.latitude_band(80.0, 1.0) == (80.0 - math.degrees(1.0), 90.0)
