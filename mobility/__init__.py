#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LEO Satellite Mobility Package

Positions of satellites in a polar LEO constellation as a function of
simulated time, and great-circle distances between them:

- layout: starting latitude, longitude and direction from a satellite's index
- propagator: uniform motion along a pole-to-pole track with pole hand-off
- distance: haversine distance at orbital altitude
- constellation / simulation: thin builder and clock driving the model

Example usage:

    from mobility import Simulation, SimulationConfig

    sim = Simulation(SimulationConfig(num_planes=10, sats_per_plane=12, altitude=2000))
    sim.initialize()
    sim.step(60)  # Step 60 seconds
"""

from .errors import (
    ConfigurationError,
    DomainError,
)

from .orbit import (
    CircularPolarOrbit,
    EARTH_RADIUS_KM,
    EARTH_MASS_KG,
    G,
)

from .position import GeoPosition

from .layout import (
    InitialPosition,
    initial_position,
)

from .propagator import (
    OrbitState,
    OrbitPropagator,
    propagate_state,
)

from .distance import (
    calculate_distance,
    distance_matrix,
)

from .satellite import (
    MobilityModel,
    SatelliteConfig,
    LeoSatellite,
)

from .constellation import (
    ConstellationConfig,
    InterSatelliteLink,
    LeoConstellation,
    LinkType,
    SPEED_OF_LIGHT_KM_S,
    create_polar_constellation,
)

from .simulation import (
    Simulation,
    SimulationConfig,
    SimulationState,
    create_simulation,
)


__all__ = [
    # Errors
    "ConfigurationError",
    "DomainError",

    # Orbit
    "CircularPolarOrbit",
    "EARTH_RADIUS_KM",
    "EARTH_MASS_KG",
    "G",

    # Position and layout
    "GeoPosition",
    "InitialPosition",
    "initial_position",

    # Propagation
    "OrbitState",
    "OrbitPropagator",
    "propagate_state",

    # Distance
    "calculate_distance",
    "distance_matrix",

    # Satellite
    "MobilityModel",
    "SatelliteConfig",
    "LeoSatellite",

    # Constellation
    "ConstellationConfig",
    "InterSatelliteLink",
    "LeoConstellation",
    "LinkType",
    "SPEED_OF_LIGHT_KM_S",
    "create_polar_constellation",

    # Simulation
    "Simulation",
    "SimulationConfig",
    "SimulationState",
    "create_simulation",
]

__version__ = "1.0.0"
