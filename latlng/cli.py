"""CLI to print the distance and azimuth between two points.

Usage:
    python -m latlng.cli --to 35.686991 139.539242 --from 34.598366 135.545261
"""

import argparse
import logging

from . import LatLng, LatLngF


def main(argv=None):
    parser = argparse.ArgumentParser(description="Great-circle distance and azimuth between two points")
    parser.add_argument("--to", type=float, nargs=2, required=True, metavar=("LAT", "LNG"), help="arrow head (self)")
    parser.add_argument("--from", dest="origin", type=float, nargs=2, required=True, metavar=("LAT", "LNG"), help="arrow tail (other)")
    parser.add_argument("--single", action="store_true", help="compute in single precision")
    parser.add_argument("--clamp", action="store_true", help="clip the acos argument to [-1, 1]")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    point_cls = LatLngF if args.single else LatLng
    to = point_cls(lat=args.to[0], lng=args.to[1])
    origin = point_cls(lat=args.origin[0], lng=args.origin[1])

    distance_m = to.distance_from(origin, clamp=args.clamp)
    azimuth_deg = to.azimuth_from(origin)
    print(f"distance_m={float(distance_m):.3f}")
    print(f"azimuth_deg={float(azimuth_deg):.4f}")
    return 0


if __name__ == "__main__":
    main()
