"""
Chord distance and spherical interpolation.

Assumption
----------
The earth is treated as a sphere of radius 6371 km.  Both points are
projected to 3D Cartesian coordinates and the straight-line (chord)
distance between them is returned.  This is *not* a geodesic: it
undercounts the surface distance, and the error grows with the angular
separation.  For pins a few hundred metres apart the difference is far
below one metre.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6_371.0

LatLng = tuple[float, float]


def to_cartesian(
    lat: float, lng: float, radius: float = EARTH_RADIUS_KM
) -> tuple[float, float, float]:
    """Project a geo-point onto a sphere of *radius*."""
    phi = lat * math.pi / 180
    lam = lng * math.pi / 180
    return (
        radius * math.cos(phi) * math.cos(lam),
        radius * math.cos(phi) * math.sin(lam),
        radius * math.sin(phi),
    )


def chord_km(
    lat1: float, lng1: float, lat2: float, lng2: float,
    radius: float = EARTH_RADIUS_KM,
) -> float:
    """Return the straight-line distance in **km** between two points."""
    x1, y1, z1 = to_cartesian(lat1, lng1, radius)
    x2, y2, z2 = to_cartesian(lat2, lng2, radius)
    return math.sqrt(
        (x1 - x2) * (x1 - x2) + (y1 - y2) * (y1 - y2) + (z1 - z2) * (z1 - z2)
    )


def estimate(
    lat1: float, lng1: float, lat2: float, lng2: float,
    radius: float = EARTH_RADIUS_KM,
) -> int:
    """Chord distance in whole **metres**, halves rounded up."""
    return math.floor(chord_km(lat1, lng1, lat2, lng2, radius) * 1000 + 0.5)


def _angle_between(a: LatLng, b: LatLng) -> float:
    """Central angle in radians (haversine form)."""
    lat1, lat2 = math.radians(a[0]), math.radians(b[0])
    dlat = lat2 - lat1
    dlng = math.radians(b[1] - a[1])
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    )
    return 2 * math.asin(math.sqrt(min(1.0, h)))


def interpolate(start: LatLng, end: LatLng, fraction: float) -> LatLng:
    """
    Return the point *fraction* of the way along the great circle from
    *start* to *end*.

    Nearly coincident points fall back to linear interpolation of the
    raw coordinates, since the slerp weights are ill-conditioned there.
    """
    angle = _angle_between(start, end)
    sin_angle = math.sin(angle)
    if sin_angle < 1e-6:
        return (
            start[0] + fraction * (end[0] - start[0]),
            start[1] + fraction * (end[1] - start[1]),
        )

    a = math.sin((1 - fraction) * angle) / sin_angle
    b = math.sin(fraction * angle) / sin_angle

    lat1, lng1 = math.radians(start[0]), math.radians(start[1])
    lat2, lng2 = math.radians(end[0]), math.radians(end[1])

    x = a * math.cos(lat1) * math.cos(lng1) + b * math.cos(lat2) * math.cos(lng2)
    y = a * math.cos(lat1) * math.sin(lng1) + b * math.cos(lat2) * math.sin(lng2)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lng = math.atan2(y, x)
    return math.degrees(lat), math.degrees(lng)
