"""
Module for unit conversions
"""
__all__ = ['convert_to_kph', 'convert_to_meters']

_DISTANCE_FACTORS = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.344,
    'ft': 0.3048,
    'nmi': 1852.,
    'yd': 0.9144,
}

_SPEED_FACTORS = {
    'kph': 1.,
    'mps': 3.6,
    'mph': 1.609344,
    'kn': 1.852,
}


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    unit = unit.lower()
    if unit not in _DISTANCE_FACTORS:
        raise ValueError(
            f"Unknown distance unit '{unit}'. Options: {list(_DISTANCE_FACTORS.keys())}"
        )

    return distance * _DISTANCE_FACTORS[unit]


def convert_to_kph(speed: float, unit: str) -> float:
    """
    Converts speed from different units to kilometers per hour.

    Args:
        speed (float): Speed value.
        unit (str): Speed unit (kilometer per hour = 'kph', meter per second = 'mps',
        mile per hour = 'mph', knot = 'kn').

    Returns:
        float: Speed in kilometers per hour.
    """
    unit = unit.lower()
    if unit not in _SPEED_FACTORS:
        raise ValueError(
            f"Unknown speed unit '{unit}'. Options: {list(_SPEED_FACTORS.keys())}"
        )

    return speed * _SPEED_FACTORS[unit]
