"""
Planar (flat-earth) geodesic calculations.

All distances are computed on a local plane: degree deltas are converted to meters using
a fixed length per degree of latitude, and a length per degree of longitude scaled by the
cosine of the latitude. This is accurate for short to medium distances and degrades at
high latitudes and beyond a few hundred kilometers.
"""

__all__ = [
    'clamp_latitude', 'degrees_lat_to_meters', 'degrees_lon_to_meters_at_lat',
    'distance_in_meters', 'estimated_min_travel_time', 'meters_to_degrees_lat',
    'meters_to_degrees_lon_at_lat', 'wrap_longitude',
]

from datetime import timedelta
import math
from typing import TYPE_CHECKING

from flatgeo._const import (
    MAX_PLANAR_DISTANCE_METERS, METERS_PER_DEGREE_LAT, METERS_PER_DEGREE_LON_EQUATOR
)
from flatgeo.speed import DEFAULT_SPEED_PROFILE, SpeedProfile
from flatgeo.utils.logging import warn_once

if TYPE_CHECKING:
    from flatgeo.coordinates import GeoPoint


def degrees_lat_to_meters(delta_lat: float) -> float:
    """Converts a latitude delta in degrees to meters"""
    return delta_lat * METERS_PER_DEGREE_LAT


def degrees_lon_to_meters_at_lat(delta_lon: float, at_latitude: float) -> float:
    """
    Converts a longitude delta in degrees to meters. Meridians converge towards the poles,
    so the length of a degree of longitude shrinks with the cosine of the latitude.

    Args:
        delta_lon:
            The longitude delta, in degrees

        at_latitude:
            The latitude at which the delta is measured, in degrees

    Returns:
        (float) the delta in meters
    """
    return delta_lon * METERS_PER_DEGREE_LON_EQUATOR * math.cos(math.radians(at_latitude))


def meters_to_degrees_lat(meters: float) -> float:
    """Converts a north/south distance in meters to degrees of latitude"""
    return meters / METERS_PER_DEGREE_LAT


def meters_to_degrees_lon_at_lat(meters: float, at_latitude: float) -> float:
    """
    Converts an east/west distance in meters to degrees of longitude, measured at a
    given latitude. At the poles the result is unbounded.

    Args:
        meters:
            The distance, in meters

        at_latitude:
            The latitude at which the distance is measured, in degrees

    Returns:
        (float) the distance in degrees of longitude
    """
    return meters / (METERS_PER_DEGREE_LON_EQUATOR * math.cos(math.radians(at_latitude)))


def clamp_latitude(latitude: float) -> float:
    """Saturates a latitude to [-90, 90]. NaN is returned unchanged."""
    return min(max(latitude, -90.), 90.)


def wrap_longitude(longitude: float) -> float:
    """
    Wraps a longitude into [-180, 180). 180 itself wraps to -180 so that the antimeridian
    has a single representation.

    Args:
        longitude:
            The longitude, in degrees

    Returns:
        (float) the equivalent longitude in [-180, 180)
    """
    if -180 <= longitude < 180:
        return longitude

    wrapped = (longitude + 180) % 360 - 180

    # The modulo can round up to 360 for values just below -180
    return -180. if wrapped >= 180 else wrapped


def distance_in_meters(point1: 'GeoPoint', point2: 'GeoPoint') -> float:
    """
    Calculates the straight-line distance between two points on the local plane.

    The longitude delta takes the shorter way around the antimeridian and is scaled at
    the mean latitude of both points, which keeps the result independent of argument
    order.

    Args:
        point1:
            A GeoPoint

        point2:
            A second GeoPoint

    Returns:
        (float) the distance in meters
    """
    d_lat = point2.latitude - point1.latitude
    d_lon = abs(wrap_longitude(point2.longitude - point1.longitude))
    mean_lat = (point1.latitude + point2.latitude) / 2

    distance = math.hypot(
        degrees_lat_to_meters(d_lat),
        degrees_lon_to_meters_at_lat(d_lon, mean_lat)
    )
    if distance > MAX_PLANAR_DISTANCE_METERS:
        warn_once(
            f'Distances over {MAX_PLANAR_DISTANCE_METERS / 1000:g} km are poorly approximated '
            'by a planar calculation. (this warning will not repeat)'
        )

    return distance


def estimated_min_travel_time(
    start: 'GeoPoint',
    end: 'GeoPoint',
    speed_factor: float = 1.,
    profile: SpeedProfile = DEFAULT_SPEED_PROFILE,
) -> timedelta:
    """
    Estimates the best-case travel time between two points, ignoring the road network.
    The straight-line distance is integrated across the speed profile, with every
    profile speed multiplied by the speed factor.

    Args:
        start:
            The departure GeoPoint

        end:
            The destination GeoPoint

        speed_factor:
            (Default 1.0) Multiplier applied to every profile speed

        profile:
            (Default DEFAULT_SPEED_PROFILE) The distance-dependent speed profile

    Returns:
        timedelta
    """
    if not (math.isfinite(speed_factor) and speed_factor > 0):
        raise ValueError(f'Speed factor must be a positive number, got {speed_factor}')

    hours = profile.travel_time_hours(distance_in_meters(start, end) / 1000.)
    if math.isnan(hours):
        raise ValueError(
            f'Cannot estimate a travel time between {start!r} and {end!r}: '
            'the distance is not a number'
        )

    return timedelta(hours=hours / speed_factor)
