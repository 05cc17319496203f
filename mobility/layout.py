#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constellation Layout

Maps a satellite's 1-based index onto its starting latitude, longitude and
travel direction:

- Satellite 1 is the closest to latitude 90, longitude -180
- Satellites in the same plane step latitude downward, longitude fixed
- The first satellite of the next plane restarts near latitude 90 with
  longitude incremented
- Satellite N is the closest to latitude -90 in the last plane
"""

import math
import numbers
from typing import NamedTuple

from .errors import ConfigurationError


class InitialPosition(NamedTuple):
    """Starting state of a satellite (degrees, True = northbound)."""
    latitude: float
    longitude: float
    direction: bool


def validate_shape(num_planes: int, sats_per_plane: int) -> None:
    """
    Check that a constellation shape is usable.

    Raises
    ------
    ConfigurationError
        If either count is not a positive integer.
    """
    for name, value in (("num_planes", num_planes), ("sats_per_plane", sats_per_plane)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ConfigurationError(f"{name} must be at least 1, got {value}")


def validate_index(index: int, num_planes: int, sats_per_plane: int) -> None:
    """
    Check that ``index`` names a satellite of the constellation.

    Raises
    ------
    ConfigurationError
        If the shape is invalid or ``index`` is outside [1, P*K].
    """
    validate_shape(num_planes, sats_per_plane)
    total = num_planes * sats_per_plane
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ConfigurationError(f"Satellite index must be an integer, got {index!r}")
    if not 1 <= index <= total:
        raise ConfigurationError(
            f"Satellite index {index} is outside 1..{total} "
            f"for {num_planes} planes x {sats_per_plane} satellites"
        )


def initial_position(index: int, num_planes: int, sats_per_plane: int) -> InitialPosition:
    """
    Starting position of satellite ``index``.

    Parameters
    ----------
    index : int
        1-based satellite index
    num_planes : int
        Number of orbital planes (P)
    sats_per_plane : int
        Satellites per orbital plane (K)

    Returns
    -------
    InitialPosition
        Latitude, longitude and direction (True = northbound)

    Raises
    ------
    ConfigurationError
        If the shape or index is invalid.
    """
    validate_index(index, num_planes, sats_per_plane)

    latitude_step = 180.0 / (sats_per_plane + 1)
    longitude_step = 360.0 / (2 * num_planes + 1)

    latitude = 90 - latitude_step - latitude_step * ((index - 1) % sats_per_plane)
    longitude = -180 + longitude_step + longitude_step * ((index - 1) // sats_per_plane)

    plane = math.ceil(index / (2 * num_planes))
    direction = plane % 2 == 1

    return InitialPosition(latitude, longitude, direction)
