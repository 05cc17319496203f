#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Orbit Propagator

Advances a satellite along its pole-to-pole track. Motion is uniform, so the
latitude travelled since the last update is a fixed fraction of 360 degrees
per orbital period. When the track passes over a pole the satellite turns
around in latitude and continues down the antipodal meridian, which flips
the sign of its longitude.
"""

import logging
import math
from dataclasses import dataclass

from .errors import DomainError
from .orbit import CircularPolarOrbit


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrbitState:
    """
    Position state of one satellite at a point in simulated time.

    Attributes
    ----------
    latitude : float
        Latitude in degrees (-90 to 90)
    longitude : float
        Longitude in degrees (-180 to 180)
    direction : bool
        True when moving toward increasing latitude (northbound)
    time : float
        Simulated time (seconds) at which this state is valid
    """
    latitude: float
    longitude: float
    direction: bool
    time: float


def propagate_state(state: OrbitState, orbit: CircularPolarOrbit, now: float) -> OrbitState:
    """
    Compute the state reached at time ``now``.

    The displacement is wrapped to one circuit before it is applied, so at
    most two pole crossings happen in a single update.

    Parameters
    ----------
    state : OrbitState
        Last known state
    orbit : CircularPolarOrbit
        The satellite's orbit
    now : float
        Current simulated time (seconds), not earlier than ``state.time``

    Returns
    -------
    OrbitState
        New state valid at ``now``

    Raises
    ------
    DomainError
        If ``now`` is not finite or lies before ``state.time``.
    """
    if not math.isfinite(now):
        raise DomainError(f"Simulation time must be finite, got {now}")
    elapsed = now - state.time
    if elapsed < 0:
        raise DomainError(
            f"Position queried at t={now} s, before the last update at t={state.time} s"
        )

    displacement = orbit.degree_displacement(elapsed)
    latitude = state.latitude
    longitude = state.longitude
    direction = state.direction

    if direction:
        if latitude + displacement > 90:
            # Reach the north pole, then head south on the other meridian
            displacement -= 90 - latitude
            latitude = 90.0
            longitude = -longitude
            direction = False
            logger.debug("North pole crossing at t=%.3f s", now)

            if latitude - displacement < -90:
                displacement -= 180
                latitude = -90.0
                longitude = -longitude
                direction = True
                logger.debug("South pole crossing at t=%.3f s", now)
    else:
        if latitude - displacement < -90:
            displacement -= latitude + 90
            latitude = -90.0
            longitude = -longitude
            direction = True
            logger.debug("South pole crossing at t=%.3f s", now)

            if latitude + displacement > 90:
                displacement -= 180
                latitude = 90.0
                longitude = -longitude
                direction = False
                logger.debug("North pole crossing at t=%.3f s", now)

    new_latitude = latitude + displacement if direction else latitude - displacement

    return OrbitState(
        latitude=new_latitude,
        longitude=longitude,
        direction=direction,
        time=now,
    )


class OrbitPropagator:
    """
    Mutable orbit state of a single satellite.

    Parameters
    ----------
    orbit : CircularPolarOrbit
        The satellite's orbit
    state : OrbitState
        State to start from

    Notes
    -----
    Queries must arrive with non-decreasing times. Callers sharing a
    propagator must serialize their calls.
    """

    def __init__(self, orbit: CircularPolarOrbit, state: OrbitState):
        self.orbit = orbit
        self._state = state

    @property
    def state(self) -> OrbitState:
        """Last computed state. Reading it never advances the orbit."""
        return self._state

    def reset(self, state: OrbitState) -> None:
        """Replace the current state, e.g. with a canonical starting position."""
        self._state = state

    def advance(self, now: float) -> OrbitState:
        """
        Advance to ``now`` and commit the new state.

        Parameters
        ----------
        now : float
            Current simulated time (seconds)

        Returns
        -------
        OrbitState
            The committed state
        """
        self._state = propagate_state(self._state, self.orbit, now)
        return self._state

    def __repr__(self) -> str:
        s = self._state
        heading = "N" if s.direction else "S"
        return (
            f"OrbitPropagator(lat={s.latitude:.2f}°, lon={s.longitude:.2f}°, "
            f"heading={heading}, t={s.time:.1f}s)"
        )
