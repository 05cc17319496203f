#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Circular Polar Orbit for the LEO Mobility Model

Every satellite flies a circular pole-to-pole orbit at a fixed altitude.
Distances in kilometers, angles in degrees, time in seconds.
"""

import math

from .errors import ConfigurationError

# Gravitational constant [N m^2 / kg^2]
G = 6.673e-11

# Earth parameters
EARTH_RADIUS_KM = 6378.1  # Equatorial radius in km
EARTH_MASS_KG = 5.972e24  # Mass in kg


class CircularPolarOrbit:
    """
    A circular orbit passing over both poles.

    Parameters
    ----------
    altitude : float
        Altitude above Earth's surface (km)
    earth_radius : float
        Radius of Earth (km)
    earth_mass : float
        Mass of Earth (kg)

    Attributes
    ----------
    radius : float
        Distance from Earth's center (km)
    speed : float
        Orbital speed, ``sqrt(G * M / radius)`` (km/s)
    period : float
        Time for one full pole-to-pole-to-pole circuit (seconds)
    """

    def __init__(
        self,
        altitude: float,
        earth_radius: float = EARTH_RADIUS_KM,
        earth_mass: float = EARTH_MASS_KG
    ):
        if not math.isfinite(altitude) or altitude < 0:
            raise ConfigurationError(
                f"Altitude must be a finite, non-negative number of km, got {altitude}"
            )
        if earth_radius <= 0:
            raise ConfigurationError("Earth radius must be positive")
        if earth_mass <= 0:
            raise ConfigurationError("Earth mass must be positive")

        self.altitude = altitude
        self.earth_radius = earth_radius
        self.earth_mass = earth_mass

        self.radius = earth_radius + altitude
        self.speed = math.sqrt(G * earth_mass / self.radius)
        self.period = 2 * math.pi * self.radius / self.speed

    @property
    def degrees_per_second(self) -> float:
        """Latitude swept per second of simulated time."""
        return 360.0 / self.period

    def degree_displacement(self, elapsed: float) -> float:
        """
        Degrees travelled along the orbit in ``elapsed`` seconds.

        Whole circuits are dropped, so the result lies in [0, 360).

        Parameters
        ----------
        elapsed : float
            Elapsed simulated time (seconds), non-negative

        Returns
        -------
        float
            Displacement in degrees
        """
        orbits_travelled = elapsed / self.period
        return math.fmod(orbits_travelled * 360.0, 360.0)

    def __repr__(self) -> str:
        return (
            f"CircularPolarOrbit(altitude={self.altitude:.1f} km, "
            f"speed={self.speed:.3f} km/s, period={self.period:.2f} s)"
        )
