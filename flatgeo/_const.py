"""
Constants declarations for flatgeo
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)

# Length of one degree along the equator, used for both axes of the local plane
METERS_PER_DEGREE_LAT = 2 * math.pi * WGS84_A / 360
METERS_PER_DEGREE_LON_EQUATOR = METERS_PER_DEGREE_LAT

# Largest longitude below the antimeridian; 180 itself wraps to -180
LON180 = math.nextafter(180.0, 0.0)

# Planar distances beyond this are no longer a useful approximation
MAX_PLANAR_DISTANCE_METERS = 1_000_000.0
