"""Latitude/longitude value type with great-circle distance and azimuth.

Distances use a spherical Earth whose radius is the WGS-84 equatorial radius.
That is accurate to a few tenths of a percent, which is fine for ranking and
rough range checks but not for survey work.

Example (the documented Tokyo/Osaka sample, coordinates passed positionally):

    >>> tokyo = LatLng(139.539242, 35.686991)
    >>> osaka = LatLng(135.545261, 34.598366)
    >>> round(float(tokyo.distance_from(osaka)))
    453496

Positional order is ``(lat, lng)``. The sample above therefore stores the
longitude-looking value as latitude; prefer ``LatLng(lat=..., lng=...)``.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Type, TypeVar

import numpy as np

from .angles import from_radian, normalize_absolute, to_radian
from .precision import common_kind

logger = logging.getLogger(__name__)

T = TypeVar("T")

# WGS-84 semi-major axis, used here as the radius of a sphere.
EARTH_RADIUS_M = 6378137.0


def _work_kind(kind: Type) -> Type:
    # Python floats are evaluated through NumPy's double and converted back.
    return np.float64 if kind is float else kind


@dataclass(frozen=True)
class BasicLatLng(Generic[T]):
    """Immutable latitude/longitude pair in degrees.

    No range checking is done: values outside [-90, 90] / [-180, 180), NaN and
    inf are kept and flow through the calculations as they are. Subclasses pin
    the floating-point kind through ``kind``; the base class keeps whatever kind
    the coordinates arrive in, promoting ``lat`` and ``lng`` to a common one.
    """

    lat: T
    lng: T

    kind = None

    def __post_init__(self):
        kind = self.kind or common_kind(self.lat, self.lng)
        object.__setattr__(self, "lat", kind(self.lat))
        object.__setattr__(self, "lng", kind(self.lng))

    def _radians(self, other: "BasicLatLng"):
        kind = common_kind(self.lat, other.lat)
        work = _work_kind(kind)
        coords = (self.lat, self.lng, other.lat, other.lng)
        return kind, [to_radian(work(c)) for c in coords]

    def distance_from(self, other: "BasicLatLng", clamp: bool = False) -> T:
        """Great-circle distance to ``other`` in meters (spherical law of cosines).

        Rounding can push the cosine just outside [-1, 1] for identical or
        antipodal points, which makes the result NaN. Pass ``clamp=True`` to clip
        the cosine first; identical points then give exactly 0.
        """
        kind, (lat, lng, other_lat, other_lng) = self._radians(other)
        work = _work_kind(kind)

        # non-finite coordinates propagate as NaN without floating-point warnings
        with np.errstate(invalid="ignore"):
            cos_c = np.sin(lat) * np.sin(other_lat) + np.cos(lat) * np.cos(other_lat) * np.cos(other_lng - lng)
            if clamp:
                cos_c = np.clip(cos_c, work(-1.0), work(1.0))
            central = np.arccos(cos_c)
        if np.isnan(central) and not np.isnan(cos_c):
            logger.debug("acos argument %r outside [-1, 1] for %s -> %s", cos_c, self, other)

        return kind(work(EARTH_RADIUS_M) * central)

    def azimuth_from(self, other: "BasicLatLng") -> T:
        """Initial bearing in degrees [0, 360) of the arrow drawn from ``other`` to ``self``."""
        kind, (lat, lng, other_lat, other_lng) = self._radians(other)
        work = _work_kind(kind)

        with np.errstate(invalid="ignore"):
            dlng = other_lng - lng
            y = np.sin(dlng)
            x = np.cos(lat) * np.tan(other_lat) - np.sin(lat) * np.cos(dlng)
            # atan2 gives self -> other; the half turn flips it to other -> self
            bearing = from_radian(work(np.arctan2(y, x))) + work(180.0)
        return kind(normalize_absolute(bearing))


@dataclass(frozen=True)
class LatLng(BasicLatLng[np.float64]):
    """Double-precision point."""

    kind = np.float64


@dataclass(frozen=True)
class LatLngF(BasicLatLng[np.float32]):
    """Single-precision point."""

    kind = np.float32
