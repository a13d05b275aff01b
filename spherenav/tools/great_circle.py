"""
Great-circle formulas on a sphere.

Every function is a pure computation on immutable points:
  1. Distances use the haversine formula (Sinnott, "Virtues of the
     Haversine", Sky and Telescope, 1984)
  2. Bearings are returned in degrees from true north, in [0, 360)
  3. Computed points take the radius of the first point
  4. Longitudes of computed points are normalized to (-180, 180]

Usage:
    from spherenav.point import LatLon
    from spherenav.tools.great_circle import haversine_distance

    haversine_distance(LatLon(52.205, 0.119), LatLon(48.857, 2.351))  # 404.3
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from spherenav.config import config
from spherenav.utils.geo import (
    normalize_bearing,
    require_finite,
    round_significant,
    to_degrees,
    to_radians,
    wrap_longitude,
)
from spherenav.utils.logging_config import logger

if TYPE_CHECKING:
    from spherenav.point import LatLon


def angular_distance(start: LatLon, end: LatLon) -> float:
    """Central angle between two points, in radians (haversine formula)."""

    phi1 = to_radians(start.latitude)
    phi2 = to_radians(end.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = to_radians(end.longitude - start.longitude)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(
        delta_lambda / 2
    ) ** 2
    # rounding can push a just outside [0, 1]
    a = min(1.0, max(0.0, a))
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distance(
    start: LatLon, end: LatLon, precision: Optional[int] = None
) -> float:
    """Distance between two points along the great circle.

    Args:
        start: Origin; its radius sets the sphere and the distance unit.
        end: Destination point.
        precision: Significant digits (not decimal places) of the result.
            Defaults to DISTANCE_PRECISION.

    Returns:
        Distance in the unit of ``start.radius`` (km by default).
    """

    if precision is None:
        precision = config.DISTANCE_PRECISION
    return round_significant(start.radius * angular_distance(start, end), precision)


def initial_bearing(start: LatLon, end: LatLon) -> float:
    """Initial bearing from ``start`` towards ``end``, in degrees [0, 360)."""

    phi1 = to_radians(start.latitude)
    phi2 = to_radians(end.latitude)
    delta_lambda = to_radians(end.longitude - start.longitude)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        delta_lambda
    )
    return normalize_bearing(to_degrees(math.atan2(y, x)))


def final_bearing(start: LatLon, end: LatLon) -> float:
    """Bearing on arrival at ``end``: the reverse initial bearing, turned 180°."""

    return normalize_bearing(initial_bearing(end, start) + 180)


def midpoint(start: LatLon, end: LatLon) -> LatLon:
    """Halfway point along the great circle.

    Both points are turned into unit vectors, summed, and the sum converted
    back to latitude/longitude, which stays well-behaved at the poles and
    across the antimeridian. Antipodal points have no unique midpoint; the
    near-zero vector sum then gives an arbitrary point equidistant from
    both.
    """

    phi1, lambda1 = to_radians(start.latitude), to_radians(start.longitude)
    phi2, lambda2 = to_radians(end.latitude), to_radians(end.longitude)

    x = math.cos(phi1) * math.cos(lambda1) + math.cos(phi2) * math.cos(lambda2)
    y = math.cos(phi1) * math.sin(lambda1) + math.cos(phi2) * math.sin(lambda2)
    z = math.sin(phi1) + math.sin(phi2)

    if math.hypot(x, y, z) < config.INTERSECTION_EPSILON:
        logger.debug("Midpoint of antipodal points %s and %s is undefined", start, end)

    phi_m = math.atan2(z, math.hypot(x, y))
    lambda_m = math.atan2(y, x)
    return replace(
        start,
        latitude=to_degrees(phi_m),
        longitude=wrap_longitude(to_degrees(lambda_m)),
    )


def destination_point(start: LatLon, bearing: float, distance: float) -> LatLon:
    """Point reached after travelling ``distance`` on initial ``bearing``.

    Args:
        start: Origin point.
        bearing: Initial bearing in degrees from north.
        distance: Distance in the unit of ``start.radius``.

    Returns:
        Destination point on the same sphere.

    Raises:
        InvalidInputError: If bearing or distance is not finite.
    """

    theta = to_radians(require_finite(bearing, "bearing"))
    delta = require_finite(distance, "distance") / start.radius

    phi1 = to_radians(start.latitude)
    lambda1 = to_radians(start.longitude)

    sin_phi2 = math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(
        delta
    ) * math.cos(theta)
    phi2 = math.asin(min(1.0, max(-1.0, sin_phi2)))
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return replace(
        start,
        latitude=to_degrees(phi2),
        longitude=wrap_longitude(to_degrees(lambda2)),
    )


def intersection(
    first: LatLon, first_bearing: float, second: LatLon, second_bearing: float
) -> Optional[LatLon]:
    """Point where two great-circle paths cross.

    Each path is given by a start point and an initial bearing. The
    spherical triangle formed by the two start points and the crossing is
    solved for the crossing's angular distance from ``first``.

    Returns:
        The crossing point, or None when no unique crossing exists: the
        start points coincide, both paths run along the same great circle
        (parallel or anti-parallel), or the paths diverge from each other.
    """

    theta13 = to_radians(require_finite(first_bearing, "first_bearing"))
    theta23 = to_radians(require_finite(second_bearing, "second_bearing"))
    eps = config.INTERSECTION_EPSILON

    phi1, lambda1 = to_radians(first.latitude), to_radians(first.longitude)

    delta12 = angular_distance(first, second)
    if delta12 < eps:
        logger.debug("No intersection: start points %s and %s coincide", first, second)
        return None

    # bearings between the two start points
    theta12 = to_radians(initial_bearing(first, second))
    theta21 = to_radians(initial_bearing(second, first))

    alpha1 = (theta13 - theta12 + math.pi) % (2 * math.pi) - math.pi  # angle 2-1-3
    alpha2 = (theta21 - theta23 + math.pi) % (2 * math.pi) - math.pi  # angle 1-2-3
    sin_alpha1, sin_alpha2 = math.sin(alpha1), math.sin(alpha2)

    if abs(sin_alpha1) < eps and abs(sin_alpha2) < eps:
        logger.debug("No intersection: paths share a great circle")
        return None
    if sin_alpha1 * sin_alpha2 < 0:
        logger.debug("No intersection: paths diverge")
        return None

    cos_alpha3 = -math.cos(alpha1) * math.cos(alpha2) + sin_alpha1 * sin_alpha2 * math.cos(
        delta12
    )
    alpha3 = math.acos(min(1.0, max(-1.0, cos_alpha3)))
    delta13 = math.atan2(
        math.sin(delta12) * sin_alpha1 * sin_alpha2,
        math.cos(alpha2) + math.cos(alpha1) * math.cos(alpha3),
    )

    sin_phi3 = math.sin(phi1) * math.cos(delta13) + math.cos(phi1) * math.sin(
        delta13
    ) * math.cos(theta13)
    phi3 = math.asin(min(1.0, max(-1.0, sin_phi3)))
    delta_lambda13 = math.atan2(
        math.sin(theta13) * math.sin(delta13) * math.cos(phi1),
        math.cos(delta13) - math.sin(phi1) * math.sin(phi3),
    )
    return replace(
        first,
        latitude=to_degrees(phi3),
        longitude=wrap_longitude(to_degrees(lambda1 + delta_lambda13)),
    )
