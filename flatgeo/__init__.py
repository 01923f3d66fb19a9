
from flatgeo._version import __version__  # noqa: F401
from flatgeo.utils.logging import LOGGER
from flatgeo._const import LON180, METERS_PER_DEGREE_LAT, METERS_PER_DEGREE_LON_EQUATOR
from flatgeo.coordinates import GeoPoint
from flatgeo.speed import DEFAULT_SPEED_PROFILE, SpeedProfile
from flatgeo.geomath import (
    clamp_latitude, degrees_lat_to_meters, degrees_lon_to_meters_at_lat,
    distance_in_meters, estimated_min_travel_time, meters_to_degrees_lat,
    meters_to_degrees_lon_at_lat, wrap_longitude
)

__all__ = [
    'DEFAULT_SPEED_PROFILE',
    'GeoPoint',
    'LON180',
    'METERS_PER_DEGREE_LAT',
    'METERS_PER_DEGREE_LON_EQUATOR',
    'SpeedProfile',
    'clamp_latitude',
    'degrees_lat_to_meters',
    'degrees_lon_to_meters_at_lat',
    'distance_in_meters',
    'estimated_min_travel_time',
    'meters_to_degrees_lat',
    'meters_to_degrees_lon_at_lat',
    'wrap_longitude',
    'LOGGER',
]
