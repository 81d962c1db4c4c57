"""Angle conversion and normalization.

Degree/radian conversion plus folding of arbitrary degree values into the two
canonical ranges used for geographic angles:

- relative: [-180, 180), e.g. longitudes and signed heading differences
- absolute: [0, 360), e.g. compass bearings

All functions are generic over the floating-point kind of their argument
(see :mod:`latlng.precision`) and return a value of that same kind.
"""

import logging
import math

from .precision import Float, float_kind, pi

logger = logging.getLogger(__name__)

# Beyond this magnitude a ±360 step no longer changes a double reliably.
NORMALIZE_LIMIT_DEG = 1e9


def to_radian(deg: Float) -> Float:
    """Degrees to radians: deg · π / 180."""
    kind = float_kind(deg)
    return deg * pi(kind) / kind(180.0)


def from_radian(rad: Float) -> Float:
    """Radians to degrees: rad · 180 / π."""
    kind = float_kind(rad)
    return rad * kind(180.0) / pi(kind)


def _beyond_limit(deg: Float) -> bool:
    if deg > NORMALIZE_LIMIT_DEG or deg < -NORMALIZE_LIMIT_DEG:
        logger.debug("angle %s beyond ±%g deg, normalizing to 0", deg, NORMALIZE_LIMIT_DEG)
        return True
    return False


def normalize_relative(deg: Float) -> Float:
    """Fold ``deg`` into [-180, 180) by whole turns.

    NaN is returned unchanged; magnitudes above 1e9 return 0.
    """
    kind = float_kind(deg)
    # NaN compares false against any bound and would never leave the loops.
    if math.isnan(deg):
        return deg
    if _beyond_limit(deg):
        return kind(0.0)

    deg = kind(deg)
    turn = kind(360.0)
    while deg >= 180.0:
        deg -= turn
    while deg < -180.0:
        deg += turn
    return deg


def normalize_absolute(deg: Float) -> Float:
    """Fold ``deg`` into [0, 360) by whole turns.

    NaN is returned unchanged; magnitudes above 1e9 return 0.
    """
    kind = float_kind(deg)
    if math.isnan(deg):
        return deg
    if _beyond_limit(deg):
        return kind(0.0)

    deg = kind(deg)
    turn = kind(360.0)
    while deg >= 360.0:
        deg -= turn
    while deg < 0.0:
        deg += turn
    # tiny negatives round up to a full turn when 360 is added
    if deg >= turn:
        deg = kind(0.0)
    return deg
