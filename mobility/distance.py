#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Inter-satellite distance.

Great-circle (haversine) distance between two points on a sphere of radius
``EARTH_RADIUS_KM + altitude``, ignoring Earth's oblateness. Both satellites
are assumed to fly at the same altitude; the altitude of the first position
is used for both.
"""

import math
from typing import Sequence

import numpy as np

from .errors import DomainError
from .orbit import EARTH_RADIUS_KM
from .position import GeoPosition


def _check_finite(position: GeoPosition) -> None:
    values = (position.latitude, position.longitude, position.altitude)
    if not all(math.isfinite(v) for v in values):
        raise DomainError(f"Position has non-finite coordinates: {position!r}")


def calculate_distance(
    a: GeoPosition,
    b: GeoPosition,
    earth_radius: float = EARTH_RADIUS_KM
) -> float:
    """
    Great-circle distance between two satellites.

    Parameters
    ----------
    a : GeoPosition
        First position; its altitude sets the sphere radius
    b : GeoPosition
        Second position
    earth_radius : float
        Radius of Earth (km)

    Returns
    -------
    float
        Distance in kilometers

    Raises
    ------
    DomainError
        If either position holds NaN or infinite coordinates.
    """
    _check_finite(a)
    _check_finite(b)

    radius = earth_radius + a.altitude

    latitude1 = math.radians(a.latitude)
    latitude2 = math.radians(b.latitude)
    delta_latitude = math.radians(b.latitude - a.latitude)
    delta_longitude = math.radians(b.longitude - a.longitude)

    h = (math.sin(delta_latitude / 2) ** 2
         + math.cos(latitude1) * math.cos(latitude2) * math.sin(delta_longitude / 2) ** 2)
    # Rounding can push h just outside [0, 1]
    h = min(1.0, max(0.0, h))

    central_angle = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return radius * central_angle


def distance_matrix(
    positions: Sequence[GeoPosition],
    earth_radius: float = EARTH_RADIUS_KM
) -> np.ndarray:
    """
    Pairwise great-circle distances.

    Parameters
    ----------
    positions : sequence of GeoPosition
        Satellite positions; the first one's altitude sets the sphere radius
    earth_radius : float
        Radius of Earth (km)

    Returns
    -------
    np.ndarray
        Symmetric (N, N) matrix of distances in km with a zero diagonal
    """
    if len(positions) == 0:
        return np.zeros((0, 0))

    coords = np.array([[p.latitude, p.longitude, p.altitude] for p in positions], dtype=float)
    if not np.all(np.isfinite(coords)):
        raise DomainError("Positions contain non-finite coordinates")

    radius = earth_radius + coords[0, 2]
    lat = np.radians(coords[:, 0])
    lon = np.radians(coords[:, 1])

    delta_lat = lat[None, :] - lat[:, None]
    delta_lon = lon[None, :] - lon[:, None]

    h = (np.sin(delta_lat / 2) ** 2
         + np.cos(lat)[:, None] * np.cos(lat)[None, :] * np.sin(delta_lon / 2) ** 2)
    h = np.clip(h, 0.0, 1.0)

    distances = radius * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    np.fill_diagonal(distances, 0.0)
    return distances
