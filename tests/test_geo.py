import math

import pytest

from foodswipe.services.geo_service import distance_km


def test_distance_identity():
    assert distance_km(35.6, 139.7, 35.6, 139.7) == 0


def test_distance_one_degree_diagonal_at_equator():
    assert distance_km(0, 0, 1, 1) == pytest.approx(157.25, abs=0.05)


def test_distance_is_symmetric():
    a = (37.5665, 126.9780)
    b = (35.1796, 129.0756)
    assert distance_km(*a, *b) == pytest.approx(distance_km(*b, *a))


@pytest.mark.parametrize(
    "lat1,lng1,lat2,lng2",
    [
        (0, 0, 0, 180),
        (90, 0, -90, 0),
        (-33.87, 151.21, 51.51, -0.13),
        (10, -170, -10, 170),
    ],
)
def test_distance_is_never_negative(lat1, lng1, lat2, lng2):
    assert distance_km(lat1, lng1, lat2, lng2) >= 0


def test_antipodal_points_are_half_the_circumference():
    assert distance_km(0, 0, 0, 180) == pytest.approx(math.pi * 6371, rel=1e-9)


def test_nan_propagates():
    assert math.isnan(distance_km(float("nan"), 0, 0, 0))
