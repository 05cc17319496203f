#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constellation Builder

Creates one LeoSatellite per index of a polar constellation and derives the
inter-satellite links from the current positions:

- Intra-plane links join consecutive satellites of a plane, closing the ring
  when the plane has three or more members
- Inter-plane links join each satellite to the nearest satellite of the
  next plane
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .distance import calculate_distance, distance_matrix
from .errors import ConfigurationError
from .layout import validate_shape
from .position import GeoPosition
from .satellite import LeoSatellite, SatelliteConfig


logger = logging.getLogger(__name__)

# Speed of light in vacuum [km/s]
SPEED_OF_LIGHT_KM_S = 299792.458


class LinkType(Enum):
    """Kinds of inter-satellite links."""
    INTRA_PLANE = "intra_plane"
    INTER_PLANE = "inter_plane"


@dataclass
class ConstellationConfig:
    """
    Shape of a polar constellation.

    Attributes
    ----------
    num_planes : int
        Number of orbital planes.
    sats_per_plane : int
        Satellites per plane.
    altitude : float
        Orbital altitude (km), shared by all satellites.
    start_time : float
        Simulation time (seconds) of the initial positions.
    max_link_range : float, optional
        Links longer than this (km) are not established. None = unlimited.
    """

    num_planes: int = 10
    sats_per_plane: int = 12
    altitude: float = 2000.0
    start_time: float = 0.0
    max_link_range: Optional[float] = None

    def __post_init__(self):
        validate_shape(self.num_planes, self.sats_per_plane)
        if not math.isfinite(self.altitude) or self.altitude < 0:
            raise ConfigurationError(f"Altitude must be finite and non-negative, got {self.altitude}")
        if not math.isfinite(self.start_time):
            raise ConfigurationError(f"Start time must be finite, got {self.start_time}")
        if self.max_link_range is not None and not self.max_link_range > 0:
            raise ConfigurationError(
                f"Maximum link range must be positive, got {self.max_link_range}"
            )

    @property
    def num_satellites(self) -> int:
        return self.num_planes * self.sats_per_plane


@dataclass
class InterSatelliteLink:
    """
    A link between two satellites.

    Attributes
    ----------
    source : int
        Index of the first satellite
    target : int
        Index of the second satellite
    distance_km : float
        Great-circle link length
    delay_ms : float
        One-way propagation delay at the speed of light
    link_type : LinkType
        Intra-plane or inter-plane
    """
    source: int
    target: int
    distance_km: float
    delay_ms: float
    link_type: LinkType

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "target": self.target,
            "distance_km": self.distance_km,
            "delay_ms": self.delay_ms,
            "type": self.link_type.value,
        }


class LeoConstellation:
    """
    A polar LEO constellation and its link topology.

    Parameters
    ----------
    config : ConstellationConfig, optional
        Constellation shape

    Attributes
    ----------
    satellites : list
        Satellites ordered by index (``satellites[0]`` is index 1)
    links : list
        Links computed by the last ``update_links`` call
    """

    def __init__(self, config: Optional[ConstellationConfig] = None):
        self.config = config or ConstellationConfig()
        self.satellites: List[LeoSatellite] = []
        self.links: List[InterSatelliteLink] = []
        self._create_satellites()

    def _create_satellites(self) -> None:
        config = self.config
        satellite_config = SatelliteConfig(
            sats_per_plane=config.sats_per_plane,
            num_planes=config.num_planes,
            time=config.start_time,
            altitude=config.altitude,
        )

        self.satellites = []
        for index in range(1, config.num_satellites + 1):
            satellite = LeoSatellite(index, satellite_config)
            satellite.set_initial_position()
            self.satellites.append(satellite)

        logger.info(
            f"Created constellation of {config.num_planes} planes x "
            f"{config.sats_per_plane} satellites at {config.altitude} km"
        )

    @property
    def num_satellites(self) -> int:
        return len(self.satellites)

    def get_satellite(self, index: int) -> LeoSatellite:
        """Satellite with 1-based ``index``."""
        if not 1 <= index <= len(self.satellites):
            raise KeyError(f"No satellite with index {index}")
        return self.satellites[index - 1]

    def plane_of(self, index: int) -> int:
        """0-based orbital plane of satellite ``index``."""
        return (self.get_satellite(index).index - 1) // self.config.sats_per_plane

    def satellites_in_plane(self, plane: int) -> List[LeoSatellite]:
        """Members of 0-based ``plane``, from northernmost start to southernmost."""
        if not 0 <= plane < self.config.num_planes:
            raise KeyError(f"No orbital plane {plane}")
        k = self.config.sats_per_plane
        return self.satellites[plane * k:(plane + 1) * k]

    def get_positions(self, now: float) -> Dict[int, GeoPosition]:
        """
        Advance every satellite to ``now``.

        Returns
        -------
        dict
            Satellite index -> GeoPosition
        """
        return {
            satellite.index: satellite.advance_and_get_position(now)
            for satellite in self.satellites
        }

    def current_positions(self) -> Dict[int, GeoPosition]:
        """Last computed positions, without advancing."""
        return {satellite.index: satellite.position for satellite in self.satellites}

    def distance_between(self, index_a: int, index_b: int) -> float:
        """Great-circle distance (km) between two satellites at their current positions."""
        return calculate_distance(
            self.get_satellite(index_a).position,
            self.get_satellite(index_b).position,
        )

    def _make_link(
        self, source: int, target: int, distance_km: float, link_type: LinkType
    ) -> InterSatelliteLink:
        return InterSatelliteLink(
            source=source,
            target=target,
            distance_km=distance_km,
            delay_ms=distance_km / SPEED_OF_LIGHT_KM_S * 1000.0,
            link_type=link_type,
        )

    def update_links(self, now: float) -> List[InterSatelliteLink]:
        """
        Move every satellite to ``now`` and rebuild the link topology.

        Parameters
        ----------
        now : float
            Current simulation time (seconds)

        Returns
        -------
        list
            The new links
        """
        self.get_positions(now)
        distances = distance_matrix([satellite.position for satellite in self.satellites])

        k = self.config.sats_per_plane
        links: List[InterSatelliteLink] = []

        for plane in range(self.config.num_planes):
            first = plane * k
            for offset in range(k - 1):
                i, j = first + offset, first + offset + 1
                links.append(
                    self._make_link(i + 1, j + 1, float(distances[i, j]), LinkType.INTRA_PLANE)
                )
            if k >= 3:
                i, j = first + k - 1, first
                links.append(
                    self._make_link(i + 1, j + 1, float(distances[i, j]), LinkType.INTRA_PLANE)
                )

        for plane in range(self.config.num_planes - 1):
            first = plane * k
            next_first = first + k
            for i in range(first, first + k):
                j = next_first + int(distances[i, next_first:next_first + k].argmin())
                links.append(
                    self._make_link(i + 1, j + 1, float(distances[i, j]), LinkType.INTER_PLANE)
                )

        max_range = self.config.max_link_range
        if max_range is not None:
            links = [link for link in links if link.distance_km <= max_range]

        self.links = links
        logger.debug(f"t={now:.1f}s: {len(links)} inter-satellite links")
        return links

    def __repr__(self) -> str:
        return (
            f"LeoConstellation(planes={self.config.num_planes}, "
            f"sats_per_plane={self.config.sats_per_plane}, "
            f"altitude={self.config.altitude:.0f} km, "
            f"links={len(self.links)})"
        )


def create_polar_constellation(
    num_planes: int,
    sats_per_plane: int,
    altitude: float,
    start_time: float = 0.0,
    max_link_range: Optional[float] = None
) -> LeoConstellation:
    """
    Create a polar constellation with every satellite at its starting position.

    Parameters
    ----------
    num_planes : int
        Number of orbital planes
    sats_per_plane : int
        Satellites per plane
    altitude : float
        Orbital altitude in km
    start_time : float
        Simulation time (seconds) of the initial positions
    max_link_range : float, optional
        Maximum link length in km

    Returns
    -------
    LeoConstellation
        The constellation
    """
    return LeoConstellation(
        ConstellationConfig(
            num_planes=num_planes,
            sats_per_plane=sats_per_plane,
            altitude=altitude,
            start_time=start_time,
            max_link_range=max_link_range,
        )
    )
