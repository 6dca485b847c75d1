import math
import pytest

from geocoord.distance import (
    DistanceEngine,
    DistanceFormula,
    EARTH_RADIUS,
    distance,
    ellipsoidal_distance,
    haversine_distance,
    is_nearby,
)
from geocoord.geometry import Coordinate, ORIGIN


def test_known_distance():
    assert distance(Coordinate(45, 45), Coordinate(25, 25)) == pytest.approx(
        2856265.0616, rel=1e-9
    )


def test_distance_to_self_is_zero():
    point = Coordinate(-15.77972, -47.92972)
    assert distance(point, point) == 0.0


def test_one_degree_on_the_equator():
    expected = EARTH_RADIUS * math.pi / 180
    assert haversine_distance(ORIGIN, Coordinate(0, 1)) == pytest.approx(expected)


def test_antipodal_points_are_half_circumference():
    half = EARTH_RADIUS * math.pi
    assert distance(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(half)
    assert distance(Coordinate(90, 0), Coordinate(-90, 0)) == pytest.approx(half)


def test_is_nearby_threshold():
    assert is_nearby(Coordinate(10, 10), Coordinate(10.0009, 9.9991))
    assert not is_nearby(Coordinate(10, 10), Coordinate(10.002, 10))
    assert not is_nearby(Coordinate(10, 10), Coordinate(10, 10.002))


def test_formula_selection():
    engine = DistanceEngine()
    near = (Coordinate(10, 10), Coordinate(10.0001, 10.0001))
    far = (Coordinate(10, 10), Coordinate(20, 20))
    assert engine.select_formula(*near) is DistanceFormula.HAVERSINE
    assert engine.select_formula(*far) is DistanceFormula.PRECISE


def test_precise_formula_matches_haversine():
    a, b = Coordinate(48.85341, 2.3488), Coordinate(45.41117, -75.69812)
    assert DistanceEngine().distance(a, b) == haversine_distance(a, b)


def test_short_distance_under_threshold():
    a = Coordinate(47.12322, -122.85051)
    b = Coordinate(47.12308, -122.85048)
    # About 16 meters
    assert 10 < distance(a, b) < 20


def test_ellipsoidal_engine():
    engine = DistanceEngine(long_range=DistanceFormula.ELLIPSOIDAL)
    # One degree of longitude on the WGS84 equator
    assert engine.distance(ORIGIN, Coordinate(0, 1)) == pytest.approx(
        111319.49, abs=0.01
    )
    # Nearby points still use haversine
    a, b = Coordinate(10, 10), Coordinate(10.0001, 10)
    assert engine.distance(a, b) == haversine_distance(a, b)


def test_ellipsoidal_distance_to_self_is_zero():
    point = Coordinate(39.9075, 116.39723)
    assert ellipsoidal_distance(point, point) == 0.0


def test_engine_accepts_formula_names():
    engine = DistanceEngine(long_range="ellipsoidal")
    assert engine.long_range is DistanceFormula.ELLIPSOIDAL


def test_unknown_formula_name_is_rejected():
    with pytest.raises(ValueError):
        DistanceEngine(long_range="vincenty")
