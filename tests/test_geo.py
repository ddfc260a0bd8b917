import math

import pytest

from gpxkit.geo import EARTH_RADIUS_KM, haversine_km, to_radians


def test_to_radians():
    assert to_radians(180) == math.pi
    assert to_radians(0) == 0.0
    assert to_radians(-90) == pytest.approx(-math.pi / 2)


def test_haversine_quarter_meridian():
    assert haversine_km(0, 0, 90, 0) == pytest.approx(EARTH_RADIUS_KM * math.pi / 2)


def test_haversine_is_symmetric():
    london = (51.5074, -0.1278)
    paris = (48.8566, 2.3522)
    there = haversine_km(*london, *paris)

    assert there == pytest.approx(haversine_km(*paris, *london))
    assert 340 < there < 345
