#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LEO Satellite Mobility Model

Keeps track of the current position and velocity of one LEO satellite and
calculates its distance to other satellites.

Each satellite is numbered explicitly by the constellation builder. Its
starting position comes from the constellation layout; afterwards every
call to ``advance_and_get_position`` moves it along its polar orbit.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .distance import calculate_distance
from .errors import ConfigurationError
from .layout import initial_position, validate_index, validate_shape
from .orbit import CircularPolarOrbit, EARTH_RADIUS_KM, EARTH_MASS_KG
from .position import GeoPosition
from .propagator import OrbitPropagator, OrbitState


class MobilityModel(ABC):
    """
    Calling contract between a mobility model and the scheduler driving it.
    """

    @abstractmethod
    def advance_and_get_position(self, now: float) -> GeoPosition:
        """Advance the model to time ``now`` and return the new position."""
        pass

    @abstractmethod
    def get_velocity(self) -> np.ndarray:
        """Current velocity vector."""
        pass


@dataclass
class SatelliteConfig:
    """
    Construction-time parameters of a satellite.

    Attributes
    ----------
    sats_per_plane : int
        Number of satellites per orbital plane.
    num_planes : int
        Total number of orbital planes.
    latitude : float
        Initial latitude (degrees). Replaced by ``set_initial_position``.
    longitude : float
        Initial longitude (degrees). Replaced by ``set_initial_position``.
    time : float
        Simulation time (seconds) at which the initial position is valid.
    altitude : float
        Altitude of the satellite (km). Determines its speed.
    direction : bool
        Initial direction, True = northbound.

    Raises
    ------
    ConfigurationError
        If any value is out of range.
    """

    sats_per_plane: int = 1
    num_planes: int = 1
    latitude: float = 1.0
    longitude: float = 1.0
    time: float = 1.0
    altitude: float = 1.0
    direction: bool = True

    def __post_init__(self):
        validate_shape(self.num_planes, self.sats_per_plane)

        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise ConfigurationError(f"Latitude must be within [-90, 90], got {self.latitude}")
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise ConfigurationError(f"Longitude must be within [-180, 180], got {self.longitude}")
        if not math.isfinite(self.time):
            raise ConfigurationError(f"Time must be finite, got {self.time}")
        if not math.isfinite(self.altitude) or self.altitude < 0:
            raise ConfigurationError(f"Altitude must be finite and non-negative, got {self.altitude}")

    @property
    def num_satellites(self) -> int:
        return self.num_planes * self.sats_per_plane


class LeoSatellite(MobilityModel):
    """
    A satellite on a circular polar orbit.

    Parameters
    ----------
    index : int
        1-based position of this satellite in the constellation
    config : SatelliteConfig, optional
        Shape, altitude and initial state
    earth_radius : float
        Radius of Earth (km)
    earth_mass : float
        Mass of Earth (kg)

    Attributes
    ----------
    index : int
        Satellite number, 1..N
    orbit : CircularPolarOrbit
        Fixed orbit, holding speed and period
    satellite_id : str
        Printable identifier
    """

    def __init__(
        self,
        index: int,
        config: Optional[SatelliteConfig] = None,
        earth_radius: float = EARTH_RADIUS_KM,
        earth_mass: float = EARTH_MASS_KG
    ):
        self.config = config or SatelliteConfig()
        validate_index(index, self.config.num_planes, self.config.sats_per_plane)

        self.index = index
        self.satellite_id = f"LEO-{index:04d}"
        self.orbit = CircularPolarOrbit(
            altitude=self.config.altitude,
            earth_radius=earth_radius,
            earth_mass=earth_mass,
        )
        self._propagator = OrbitPropagator(
            self.orbit,
            OrbitState(
                latitude=float(self.config.latitude),
                longitude=float(self.config.longitude),
                direction=bool(self.config.direction),
                time=float(self.config.time),
            ),
        )

    @property
    def num_planes(self) -> int:
        return self.config.num_planes

    @property
    def sats_per_plane(self) -> int:
        return self.config.sats_per_plane

    @property
    def altitude(self) -> float:
        return self.orbit.altitude

    @property
    def speed(self) -> float:
        """Orbital speed (km/s)."""
        return self.orbit.speed

    @property
    def state(self) -> OrbitState:
        return self._propagator.state

    @property
    def latitude(self) -> float:
        return self.state.latitude

    @property
    def longitude(self) -> float:
        return self.state.longitude

    @property
    def direction(self) -> bool:
        """True when northbound."""
        return self.state.direction

    @property
    def last_update_time(self) -> float:
        return self.state.time

    @property
    def position(self) -> GeoPosition:
        """Last computed position. Does not advance the orbit."""
        state = self.state
        return GeoPosition(state.latitude, state.longitude, self.altitude)

    def set_initial_position(self) -> GeoPosition:
        """
        Place the satellite at its canonical starting position.

        Latitude, longitude and direction are derived from the satellite's
        index and the constellation shape. The start time from the
        configuration is kept.

        Returns
        -------
        GeoPosition
            The starting position
        """
        start = initial_position(self.index, self.num_planes, self.sats_per_plane)
        self._propagator.reset(
            OrbitState(
                latitude=start.latitude,
                longitude=start.longitude,
                direction=start.direction,
                time=float(self.config.time),
            )
        )
        return self.position

    def advance_and_get_position(self, now: float) -> GeoPosition:
        """
        Move the satellite to simulated time ``now``.

        Parameters
        ----------
        now : float
            Current simulation time (seconds)

        Returns
        -------
        GeoPosition
            Latitude, longitude and altitude at ``now``
        """
        self._propagator.advance(now)
        return self.position

    def get_velocity(self) -> np.ndarray:
        """
        Velocity of the satellite.

        The model does not expose speed and heading as a vector, so this is
        always the zero vector.
        """
        return np.zeros(3)

    def distance_to(self, other: 'LeoSatellite') -> float:
        """
        Great-circle distance to another satellite at the current positions.

        Parameters
        ----------
        other : LeoSatellite
            Another satellite

        Returns
        -------
        float
            Distance in kilometers
        """
        return calculate_distance(
            self.position, other.position, earth_radius=self.orbit.earth_radius
        )

    def __repr__(self) -> str:
        heading = "N" if self.direction else "S"
        return (
            f"LeoSatellite({self.satellite_id}, "
            f"lat={self.latitude:.1f}°, "
            f"lon={self.longitude:.1f}°, "
            f"alt={self.altitude:.0f} km, "
            f"heading={heading})"
        )
