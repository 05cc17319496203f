#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LEO Mobility Visualization Package

Pygame-based ground-track view of a constellation simulation.

The visualization package depends on the mobility package but can be
omitted when only running headless simulations.

Usage:
    from mobility import Simulation, SimulationConfig
    from visualization import Visualizer

    sim = Simulation(SimulationConfig(num_planes=10, sats_per_plane=12, altitude=2000))
    sim.initialize()

    visualizer = Visualizer()
    visualizer.set_simulation(sim)
    visualizer.run()
"""

from .renderer import Renderer, Colors, geo_to_screen
from .visualizer import Visualizer


__all__ = [
    "Renderer",
    "Colors",
    "geo_to_screen",
    "Visualizer",
]

__version__ = "1.0.0"
