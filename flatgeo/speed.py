"""
Distance-dependent speed profiles used to estimate best-case travel times
"""

from __future__ import annotations

__all__ = ['DEFAULT_SPEED_PROFILE', 'SpeedProfile']

import json
import math
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

import numpy as np
from pydantic import validate_call

from flatgeo.conversion import convert_to_kph, convert_to_meters
from flatgeo.utils.logging import LOGGER


class SpeedProfile:
    """
    An ordered table of (threshold, speed) entries. Each speed applies from its own
    threshold up to (but excluding) the next one; the final speed applies to every
    distance beyond the final threshold.

    Thresholds are stored in kilometers and speeds in kilometers per hour.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        entries: List[Tuple[float, float]],
        distance_unit: str = 'km',
        speed_unit: str = 'kph',
    ):
        if not entries:
            raise ValueError('A speed profile requires at least one entry')

        thresholds = np.array(
            [convert_to_meters(x[0], distance_unit) / 1000. for x in entries],
            dtype=float
        )
        speeds = np.array([convert_to_kph(x[1], speed_unit) for x in entries], dtype=float)

        if not (np.all(np.isfinite(thresholds)) and np.all(np.isfinite(speeds))):
            raise ValueError('Speed profile entries must be finite numbers')

        if thresholds[0] != 0:
            raise ValueError(
                f'The first speed profile threshold must be 0, not {thresholds[0]}'
            )

        if np.any(np.diff(thresholds) <= 0):
            raise ValueError('Speed profile thresholds must be strictly increasing')

        if np.any(speeds <= 0):
            raise ValueError('Speed profile speeds must be greater than 0')

        self._thresholds = thresholds
        self._speeds = speeds

        # Hours spent crossing every bucket prior to bucket i
        self._elapsed = np.concatenate(
            ([0.], np.cumsum(np.diff(thresholds) / speeds[:-1]))
        )
        LOGGER.debug('Created speed profile with %d buckets', len(thresholds))

    def __eq__(self, other) -> bool:
        if not isinstance(other, SpeedProfile):
            return False

        return self.thresholds_km == other.thresholds_km and self.speeds_kmh == other.speeds_kmh

    def __hash__(self):
        return hash((self.thresholds_km, self.speeds_kmh))

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self.thresholds_km, self.speeds_kmh)

    def __len__(self) -> int:
        return len(self._thresholds)

    def __repr__(self):
        buckets = ', '.join(f'{t:g}km: {s:g}kph' for t, s in self)
        return f'<SpeedProfile({buckets})>'

    @property
    def speeds_kmh(self) -> Tuple[float, ...]:
        """The bucket speeds, in kilometers per hour"""
        return tuple(float(x) for x in self._speeds)

    @property
    def thresholds_km(self) -> Tuple[float, ...]:
        """The bucket lower bounds, in kilometers"""
        return tuple(float(x) for x in self._thresholds)

    @classmethod
    def from_dict(cls, profile: Dict[Union[str, float], float], **kwargs) -> SpeedProfile:
        """
        Creates a SpeedProfile from a {threshold: speed} mapping. Keys may be strings,
        as produced by a JSON object.

        Args:
            profile:
                The mapping of bucket thresholds to bucket speeds

        Keyword Args:
            distance_unit: (str) (Default 'km')
                The unit of the thresholds

            speed_unit: (str) (Default 'kph')
                The unit of the speeds

        Returns:
            SpeedProfile
        """
        entries = sorted((float(k), float(v)) for k, v in profile.items())
        return cls(entries, **kwargs)

    @classmethod
    def from_json(cls, path: Union[str, Path], **kwargs) -> SpeedProfile:
        """
        Loads a SpeedProfile from a JSON file containing either a {threshold: speed}
        object or a list of [threshold, speed] pairs.

        Args:
            path:
                The path to the JSON file

        Keyword Args:
            Passed through to the SpeedProfile constructor

        Returns:
            SpeedProfile
        """
        content = json.loads(Path(path).read_text(encoding='utf-8'))
        if isinstance(content, dict):
            return cls.from_dict(content, **kwargs)

        return cls([tuple(x) for x in content], **kwargs)

    def travel_time_hours(self, distance_km: float) -> float:
        """
        Integrates travel time across the profile buckets up to a distance. Every bucket
        crossed entirely contributes its width over its speed; the bucket containing the
        endpoint contributes the remaining distance over its speed.

        Args:
            distance_km:
                The distance travelled, in kilometers

        Returns:
            (float) the travel time in hours
        """
        if distance_km < 0:
            raise ValueError(f'Travel distance must not be negative, got {distance_km}')

        if math.isnan(distance_km):
            return distance_km

        idx = int(np.searchsorted(self._thresholds, distance_km, side='right')) - 1
        return float(
            self._elapsed[idx] + (distance_km - self._thresholds[idx]) / self._speeds[idx]
        )


# Placeholder calibration for mixed urban and interurban road travel. Deployments with
# a measured table should load it via SpeedProfile.from_json and pass it explicitly.
DEFAULT_SPEED_PROFILE = SpeedProfile([
    (0., 12.),
    (1., 18.),
    (2., 25.),
    (5., 35.),
    (10., 45.),
    (20., 60.),
    (40., 75.),
    (80., 90.),
    (150., 100.),
])
