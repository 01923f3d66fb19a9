"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from datetime import timedelta
from typing import Optional, Tuple, Union

from flatgeo.geomath import (
    clamp_latitude, distance_in_meters, estimated_min_travel_time,
    meters_to_degrees_lat, meters_to_degrees_lon_at_lat, wrap_longitude
)
from flatgeo.speed import DEFAULT_SPEED_PROFILE, SpeedProfile


class GeoPoint:
    """
    Immutable representation of a point on the globe (i.e., a lat/lon pair). Latitudes
    are clamped to [-90, 90] and longitudes are wrapped to [-180, 180).
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, '_latitude', clamp_latitude(float(latitude)))
        object.__setattr__(self, '_longitude', wrap_longitude(float(longitude)))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return GeoPoint, (self.latitude, self.longitude)

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str))

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return GeoPoint(convert(lat), convert(lon))

    @classmethod
    def from_float(cls, pair: Tuple[float, float], reverse: bool = False):
        """
        Creates a GeoPoint from a (latitude, longitude) tuple, as produced by .to_float()

        Args:
            pair:
                The coordinate values

            reverse: (bool)
                (Default False) If True, the pair is read as (longitude, latitude)

        Returns:
            GeoPoint
        """
        lat, lon = pair[::-1] if reverse else pair
        return GeoPoint(lat, lon)

    def distance_to(self, other: 'GeoPoint') -> float:
        """The planar distance to another GeoPoint, in meters"""
        return distance_in_meters(self, other)

    def min_travel_time_to(
        self,
        other: 'GeoPoint',
        speed_factor: float = 1.,
        profile: Optional[SpeedProfile] = None,
    ) -> timedelta:
        """The best-case travel time to another GeoPoint; see estimated_min_travel_time"""
        return estimated_min_travel_time(
            self, other, speed_factor,
            DEFAULT_SPEED_PROFILE if profile is None else profile
        )

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude in decimal degrees to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), ...) in
            (latitude, longitude) order
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        out = (self.latitude, self.longitude)
        if reverse:
            return out[::-1]

        return out

    def translate(self, north_meters: float, east_meters: float) -> 'GeoPoint':
        """
        Offsets this point by a metric displacement. The longitude offset is measured at
        this point's latitude.

        Args:
            north_meters:
                The distance to move north (negative for south), in meters

            east_meters:
                The distance to move east (negative for west), in meters

        Returns:
            GeoPoint
        """
        return GeoPoint(
            self.latitude + meters_to_degrees_lat(north_meters),
            self.longitude + meters_to_degrees_lon_at_lat(east_meters, self.latitude),
        )
