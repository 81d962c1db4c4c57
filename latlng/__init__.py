from .precision import float_kind, pi
from .angles import (
    to_radian,
    from_radian,
    normalize_relative,
    normalize_absolute,
)
from .point import (
    EARTH_RADIUS_M,
    BasicLatLng,
    LatLng,
    LatLngF,
)

__all__ = [
    "float_kind",
    "pi",
    "to_radian",
    "from_radian",
    "normalize_relative",
    "normalize_absolute",
    "EARTH_RADIUS_M",
    "BasicLatLng",
    "LatLng",
    "LatLngF",
]
