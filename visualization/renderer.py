#!/usr/bin/env python3
"""
Renderer Module

Pygame-based rendering of a LEO constellation on an equirectangular
ground-track map. Draws the latitude/longitude grid, satellites, their
inter-satellite links and an info panel.
"""

from typing import Dict, Iterable, List, Tuple

import pygame

from mobility import GeoPosition, InterSatelliteLink, LinkType


class Colors:
    """Default color palette."""

    BACKGROUND = (10, 10, 25)
    MAP = (20, 45, 80)
    GRID_LINE = (60, 120, 180)
    EQUATOR = (90, 160, 220)
    TEXT = (220, 220, 220)
    TEXT_DIM = (200, 200, 200)

    # Communication links
    INTRA_PLANE_LINK = (50, 255, 100)
    INTER_PLANE_LINK = (255, 170, 50)

    # Satellite heading
    NORTHBOUND = (255, 255, 50)
    SOUTHBOUND = (255, 80, 80)


def geo_to_screen(
    latitude: float, longitude: float, width: int, height: int, margin: int = 0
) -> Tuple[int, int]:
    """
    Project latitude/longitude (degrees) onto an equirectangular map.

    Longitude -180 maps to the left edge, latitude 90 to the top edge.
    """
    usable_w = width - 2 * margin
    usable_h = height - 2 * margin
    x = margin + (longitude + 180.0) / 360.0 * usable_w
    y = margin + (90.0 - latitude) / 180.0 * usable_h
    return int(round(x)), int(round(y))


class Renderer:
    """
    Handles all rendering operations.

    Parameters
    ----------
    screen : pygame.Surface
        Target surface.
    margin : int
        Border around the map (pixels).
    grid_spacing : int
        Spacing of latitude/longitude grid lines (degrees).
    satellite_size : int
        Satellite marker radius (pixels).
    """

    def __init__(
        self,
        screen: pygame.Surface,
        margin: int = 20,
        grid_spacing: int = 30,
        satellite_size: int = 4,
    ):
        self.screen = screen
        self.screen_width = screen.get_width()
        self.screen_height = screen.get_height()
        self.margin = margin
        self.grid_spacing = grid_spacing
        self.satellite_size = satellite_size

    def project(self, latitude: float, longitude: float) -> Tuple[int, int]:
        """Screen coordinates of a geographic point."""
        return geo_to_screen(
            latitude, longitude, self.screen_width, self.screen_height, self.margin
        )

    def clear(self, color: Tuple[int, int, int] = Colors.BACKGROUND) -> None:
        """Clear screen with background color."""
        self.screen.fill(color)

    def draw_map(self) -> None:
        """Draw the map background and grid."""
        top_left = self.project(90, -180)
        bottom_right = self.project(-90, 180)
        rect = pygame.Rect(
            top_left, (bottom_right[0] - top_left[0], bottom_right[1] - top_left[1])
        )
        pygame.draw.rect(self.screen, Colors.MAP, rect)

        for lat in range(-90, 91, self.grid_spacing):
            color = Colors.EQUATOR if lat == 0 else Colors.GRID_LINE
            pygame.draw.line(self.screen, color, self.project(lat, -180), self.project(lat, 180), 1)

        for lon in range(-180, 181, self.grid_spacing):
            pygame.draw.line(self.screen, Colors.GRID_LINE, self.project(90, lon), self.project(-90, lon), 1)

    def draw_links(
        self,
        links: Iterable[InterSatelliteLink],
        positions: Dict[int, GeoPosition],
    ) -> None:
        """
        Draw inter-satellite links.

        Links whose endpoints are more than half a map apart in longitude
        wrap around the date line and are skipped.
        """
        for link in links:
            a = positions.get(link.source)
            b = positions.get(link.target)
            if a is None or b is None:
                continue
            if abs(a.longitude - b.longitude) > 180:
                continue

            color = (
                Colors.INTRA_PLANE_LINK
                if link.link_type == LinkType.INTRA_PLANE
                else Colors.INTER_PLANE_LINK
            )
            pygame.draw.line(
                self.screen,
                color,
                self.project(a.latitude, a.longitude),
                self.project(b.latitude, b.longitude),
                1,
            )

    def draw_satellites(self, satellites: List) -> None:
        """Draw one marker per satellite, colored by heading."""
        for satellite in satellites:
            color = Colors.NORTHBOUND if satellite.direction else Colors.SOUTHBOUND
            center = self.project(satellite.latitude, satellite.longitude)
            pygame.draw.circle(self.screen, color, center, self.satellite_size)

    def draw_text(
        self,
        text: str,
        position: Tuple[int, int],
        font: pygame.font.Font,
        color: Tuple[int, int, int] = Colors.TEXT,
    ) -> None:
        """Draw text on screen."""
        surface = font.render(text, True, color)
        self.screen.blit(surface, position)

    def draw_info_panel(
        self,
        simulation,
        font: pygame.font.Font,
        time_scale: float,
        paused: bool,
    ) -> None:
        """Draw simulation information panel."""
        stats = simulation.get_link_statistics()
        lines = [
            f"Time: {simulation.simulation_time:.0f} s",
            f"Satellites: {simulation.num_satellites}",
            f"Links: {stats['count']}",
            f"Avg link: {stats['avg_km']:.0f} km",
            f"Time scale: {time_scale:.0f}x" + ("  [PAUSED]" if paused else ""),
        ]

        y = self.margin + 5
        for line in lines:
            self.draw_text(line, (self.margin + 5, y), font, Colors.TEXT_DIM)
            y += font.get_linesize()
