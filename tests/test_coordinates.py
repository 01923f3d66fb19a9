import copy
import math
import pickle
from datetime import timedelta

import pytest

from flatgeo import GeoPoint, LON180, METERS_PER_DEGREE_LAT, SpeedProfile
from tests.functions import assert_geopoints_equal


def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    # Latitudes are clamped
    assert GeoPoint(91., 10.) == GeoPoint(90., 10.)
    assert GeoPoint(-100., 10.) == GeoPoint(-90., 10.)

    # Longitudes are wrapped
    assert GeoPoint(0, 181.) == GeoPoint(0, -179.)
    assert GeoPoint(0, 361.) == GeoPoint(0, 1.)
    assert GeoPoint(0, -181) == GeoPoint(0, 179)
    assert GeoPoint(0, 180).longitude == -180
    assert GeoPoint(0, LON180).longitude == LON180

    # Non-finite values are not sanitized
    assert math.isnan(GeoPoint(float('nan'), 0.).latitude)
    assert math.isnan(GeoPoint(0., float('nan')).longitude)


def test_geopoint_immutable():
    p = GeoPoint(1., 2.)
    with pytest.raises(AttributeError):
        p.latitude = 5.

    with pytest.raises(AttributeError):
        p.altitude = 5.

    assert p == GeoPoint(1., 2.)


def test_geopoint_copy():
    p = GeoPoint(1., 2.)
    assert pickle.loads(pickle.dumps(p)) == p
    assert copy.deepcopy(p) == p


def test_geopoint_hash():
    points = [
        GeoPoint(0., 0.),
        GeoPoint(0., 0.),
        GeoPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeoPoint(0., 0.) in set(points)
    assert GeoPoint(1., 1.) in set(points)


def test_geopoint_eq():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) != GeoPoint(1., 0.)
    assert GeoPoint(0., 0.) != (0., 0.)


def test_geopoint_repr():
    assert repr(GeoPoint(1., 0.)) == '<GeoPoint(1.0, 0.0)>'


def test_geopoint_to_float():
    assert GeoPoint(1., 0.).to_float() == (1.0, 0.0)
    assert GeoPoint(1., 0.).to_float(reverse=True) == (0.0, 1.0)


def test_geopoint_from_float():
    assert GeoPoint.from_float((1., 0.)) == GeoPoint(1., 0.)
    assert GeoPoint.from_float((0., 1.), reverse=True) == GeoPoint(1., 0.)

    p = GeoPoint(51.509865, -0.118092)
    assert GeoPoint.from_float(p.to_float()) == p


def test_geopoint_to_dms():
    assert GeoPoint(51.509865, -0.118092).to_dms() == ((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'))


def test_geopoint_from_dms():
    assert GeoPoint.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == GeoPoint(0., 0.)
    assert_geopoints_equal(
        GeoPoint.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        GeoPoint(51.509865, -0.118092)
    )


def test_geopoint_translate():
    origin = GeoPoint(0., 0.)
    assert_geopoints_equal(origin.translate(METERS_PER_DEGREE_LAT, 0), GeoPoint(1., 0.))
    assert_geopoints_equal(origin.translate(0, -METERS_PER_DEGREE_LAT), GeoPoint(0., -1.))
    assert origin.translate(0, 0) == origin

    # Longitude offsets are measured at the starting latitude
    assert_geopoints_equal(
        GeoPoint(60., 10.).translate(0, METERS_PER_DEGREE_LAT),
        GeoPoint(60., 12.)
    )

    # Crossing the antimeridian wraps
    assert_geopoints_equal(
        GeoPoint(0., 179.5).translate(0, METERS_PER_DEGREE_LAT),
        GeoPoint(0., -179.5)
    )

    # Crossing a pole clamps
    assert GeoPoint(89.5, 0.).translate(METERS_PER_DEGREE_LAT, 0).latitude == 90.

    # The original is unchanged
    assert origin == GeoPoint(0., 0.)


def test_geopoint_translate_distance():
    origin = GeoPoint(0., 0.)
    for meters in (1., 500., 12_345.):
        assert origin.distance_to(origin.translate(meters, 0)) == pytest.approx(meters)
        assert origin.distance_to(origin.translate(0, meters)) == pytest.approx(meters)


def test_geopoint_distance_to():
    p1, p2 = GeoPoint(-0.5, 0.), GeoPoint(0.5, 0.)
    assert p1.distance_to(p2) == pytest.approx(METERS_PER_DEGREE_LAT, abs=1e-6)
    assert p1.distance_to(p1) == 0


def test_geopoint_min_travel_time_to():
    profile = SpeedProfile([(0, 15), (1, 20)])
    start = GeoPoint(0., 0.)
    end = start.translate(1500, 0)
    assert round(start.min_travel_time_to(end, profile=profile).total_seconds()) == 330
    assert round(start.min_travel_time_to(end, 2, profile).total_seconds()) == 165
    assert start.min_travel_time_to(start) == timedelta(0)
