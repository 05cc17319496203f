#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Visualizer Module for the LEO Mobility Simulator

Provides a Pygame-based interactive ground-track view of a constellation.
The visualizer steps a simulation and redraws satellites and links in
real time.
"""

import logging
from typing import Optional

import pygame

from mobility import Simulation
from .renderer import Renderer


logger = logging.getLogger(__name__)


class Visualizer:
    """
    Interactive ground-track visualization of a constellation simulation.

    Parameters
    ----------
    width : int
        Window width in pixels (default 1000)
    height : int
        Window height in pixels (default 560)
    title : str
        Window title
    time_scale : float
        Initial simulation time scale (simulation seconds per real second)
    paused : bool
        Start paused (default False)

    Attributes
    ----------
    screen : pygame.Surface
        The Pygame display surface
    renderer : Renderer
        The rendering engine
    simulation : Simulation
        The constellation simulation
    time_scale : float
        Current time scale
    paused : bool
        Whether simulation is paused
    running : bool
        Whether the visualizer is running
    """

    DEFAULT_TIME_SCALE = 10.0
    MIN_TIME_SCALE = 1.0
    MAX_TIME_SCALE = 3600.0

    def __init__(
        self,
        width: int = 1000,
        height: int = 560,
        title: str = "LEO Constellation Ground Track",
        time_scale: float = DEFAULT_TIME_SCALE,
        paused: bool = False
    ):
        pygame.init()

        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        self.renderer = Renderer(self.screen)

        self.simulation: Optional[Simulation] = None
        self.time_scale = time_scale
        self.paused = paused
        self.running = False

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('Arial', 16)

    def set_simulation(self, simulation: Simulation) -> None:
        """
        Set the simulation to visualize.

        Parameters
        ----------
        simulation : Simulation
            An initialized simulation
        """
        self.simulation = simulation

    def _handle_events(self) -> None:
        """Handle Pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        """Handle key press events."""
        if key == pygame.K_ESCAPE:
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_r:
            if self.simulation is not None:
                self.simulation.reset()
                logger.info("Simulation reset")

        elif key == pygame.K_LEFTBRACKET:
            self.time_scale = max(self.MIN_TIME_SCALE, self.time_scale / 2)
            logger.info(f"Time scale: {self.time_scale}x")

        elif key == pygame.K_RIGHTBRACKET:
            self.time_scale = min(self.MAX_TIME_SCALE, self.time_scale * 2)
            logger.info(f"Time scale: {self.time_scale}x")

    def _update(self, dt: float) -> None:
        """
        Update simulation state.

        Parameters
        ----------
        dt : float
            Real time delta in seconds
        """
        if self.simulation is None:
            return

        if not self.paused:
            self.simulation.step(dt * self.time_scale)

    def _render(self) -> None:
        """Render the current frame."""
        self.renderer.clear()

        if self.simulation is None:
            self.renderer.draw_text(
                "No simulation loaded. Call set_simulation() first.",
                (self.width // 2 - 200, self.height // 2),
                self.font
            )
            pygame.display.flip()
            return

        self.renderer.draw_map()
        self.renderer.draw_links(
            self.simulation.state.links,
            self.simulation.state.satellite_positions,
        )
        self.renderer.draw_satellites(self.simulation.satellites)
        self.renderer.draw_info_panel(
            self.simulation,
            self.font,
            self.time_scale,
            self.paused
        )

        pygame.display.flip()

    def run(self) -> None:
        """
        Run the visualization main loop.

        This blocks until the user closes the window or presses ESC.
        """
        self.running = True

        while self.running:
            dt = self.clock.tick(60) / 1000.0

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
