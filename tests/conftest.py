#!/usr/bin/env python3
"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and markers for testing the mobility model,
the constellation builder and the simulation clock.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
    config.addinivalue_line(
        "markers", "integration: mark as integration test"
    )


# =============================================================================
# ORBIT FIXTURES
# =============================================================================

@pytest.fixture
def orbit_2000():
    """Circular polar orbit at 2000 km."""
    from mobility import CircularPolarOrbit

    return CircularPolarOrbit(altitude=2000.0)


@pytest.fixture
def after_degrees(orbit_2000):
    """Elapsed time (s) needed to travel a given number of degrees."""
    def _after(degrees: float) -> float:
        return degrees / 360.0 * orbit_2000.period

    return _after


# =============================================================================
# CONSTELLATION FIXTURES
# =============================================================================

@pytest.fixture
def small_constellation():
    """3 planes x 4 satellites at 2000 km, starting at t=0."""
    from mobility import ConstellationConfig, LeoConstellation

    return LeoConstellation(
        ConstellationConfig(num_planes=3, sats_per_plane=4, altitude=2000.0)
    )


# =============================================================================
# SIMULATION FIXTURES
# =============================================================================

@pytest.fixture
def simulation_config():
    """Small simulation configuration for testing."""
    from mobility import SimulationConfig

    return SimulationConfig(
        num_planes=2,
        sats_per_plane=3,
        altitude=550.0,
    )


@pytest.fixture
def small_simulation(simulation_config):
    """Initialized small simulation with per-step logging."""
    from mobility import Simulation

    sim = Simulation(simulation_config, enable_logging=True)
    sim.initialize()
    return sim
