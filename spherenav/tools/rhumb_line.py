"""
Rhumb-line (loxodrome) formulas on a sphere.

A rhumb line crosses every meridian at the same angle, so it can be sailed
on a constant compass bearing. It is generally longer than the great-circle
path. The formulas work on Mercator latitudes, where a rhumb line becomes a
straight line.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING

from spherenav.config import config
from spherenav.utils.geo import (
    normalize_bearing,
    require_finite,
    to_degrees,
    to_radians,
    wrap_longitude,
)
from spherenav.utils.logging_config import logger

if TYPE_CHECKING:
    from spherenav.point import LatLon


def mercator_latitude(phi: float) -> float:
    """Mercator (isometric) latitude ψ = ln(tan(π/4 + φ/2)) of ``phi`` radians."""

    t = math.tan(math.pi / 4 + phi / 2)
    # south pole projects to -infinity
    return math.log(t) if t > 0 else -math.inf


def _shorter_way(delta_lambda: float) -> float:
    """Longitude difference (radians) taking the shorter way round the globe."""

    if abs(delta_lambda) > math.pi:
        return delta_lambda - 2 * math.pi if delta_lambda > 0 else delta_lambda + 2 * math.pi
    return delta_lambda


def _stretch_factor(phi1: float, delta_phi: float, delta_psi: float) -> float:
    """Ratio Δφ/Δψ, or cos φ1 on an east-west line where Δψ vanishes."""

    if abs(delta_psi) > config.RHUMB_EPSILON:
        return delta_phi / delta_psi
    logger.debug("East-west rhumb line: using cos(lat) instead of dphi/dpsi")
    return math.cos(phi1)


def rhumb_distance(start: LatLon, end: LatLon) -> float:
    """Distance along the rhumb line, in the unit of ``start.radius``."""

    phi1 = to_radians(start.latitude)
    phi2 = to_radians(end.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = _shorter_way(to_radians(end.longitude - start.longitude))
    delta_psi = mercator_latitude(phi2) - mercator_latitude(phi1)

    q = _stretch_factor(phi1, delta_phi, delta_psi)
    return math.sqrt(delta_phi ** 2 + q ** 2 * delta_lambda ** 2) * start.radius


def rhumb_bearing(start: LatLon, end: LatLon) -> float:
    """Constant bearing from ``start`` to ``end``, in degrees [0, 360)."""

    phi1 = to_radians(start.latitude)
    phi2 = to_radians(end.latitude)
    delta_lambda = _shorter_way(to_radians(end.longitude - start.longitude))
    delta_psi = mercator_latitude(phi2) - mercator_latitude(phi1)
    # both ends on the south pole: -inf - -inf
    if math.isnan(delta_psi):
        delta_psi = 0.0

    return normalize_bearing(to_degrees(math.atan2(delta_lambda, delta_psi)))


def rhumb_destination_point(start: LatLon, bearing: float, distance: float) -> LatLon:
    """Point reached after travelling ``distance`` on constant ``bearing``.

    Raises:
        InvalidInputError: If bearing or distance is not finite.
    """

    theta = to_radians(require_finite(bearing, "bearing"))
    delta = require_finite(distance, "distance") / start.radius

    phi1 = to_radians(start.latitude)
    lambda1 = to_radians(start.longitude)

    delta_phi = delta * math.cos(theta)
    # ill-conditioned near a parallel; under 1e-10 rad is under a millimetre
    if abs(delta_phi) < 1e-10:
        delta_phi = 0.0
    phi2 = phi1 + delta_phi

    # travelled past a pole: reflect back onto the sphere
    if abs(phi2) > math.pi / 2:
        phi2 = math.pi - phi2 if phi2 > 0 else -math.pi - phi2

    delta_psi = mercator_latitude(phi2) - mercator_latitude(phi1)
    q = _stretch_factor(phi1, delta_phi, delta_psi)
    if abs(q) < config.RHUMB_EPSILON:
        # departing from a pole, longitude is arbitrary
        delta_lambda = 0.0
    else:
        delta_lambda = delta * math.sin(theta) / q

    return replace(
        start,
        latitude=to_degrees(phi2),
        longitude=wrap_longitude(to_degrees(lambda1 + delta_lambda)),
    )


def rhumb_midpoint(start: LatLon, end: LatLon) -> LatLon:
    """Halfway point along the rhumb line.

    Distance along a rhumb line is proportional to the change in latitude,
    so the midpoint sits at the mean latitude. Its longitude is interpolated
    on Mercator latitudes; on a parallel it is the plain mean.
    """

    phi1, lambda1 = to_radians(start.latitude), to_radians(start.longitude)
    phi2, lambda2 = to_radians(end.latitude), to_radians(end.longitude)

    # crossing the antimeridian: lift the western end by a full turn
    if lambda2 - lambda1 > math.pi:
        lambda1 += 2 * math.pi
    elif lambda1 - lambda2 > math.pi:
        lambda2 += 2 * math.pi

    phi3 = (phi1 + phi2) / 2
    psi1 = mercator_latitude(phi1)
    psi2 = mercator_latitude(phi2)
    psi3 = mercator_latitude(phi3)

    delta_psi = psi2 - psi1
    lambda3 = math.nan
    if abs(delta_psi) > config.RHUMB_EPSILON and math.isfinite(delta_psi):
        lambda3 = ((lambda2 - lambda1) * psi3 + lambda1 * psi2 - lambda2 * psi1) / delta_psi
    if not math.isfinite(lambda3):
        lambda3 = (lambda1 + lambda2) / 2

    return replace(
        start,
        latitude=to_degrees(phi3),
        longitude=wrap_longitude(to_degrees(lambda3)),
    )
