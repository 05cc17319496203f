#!/usr/bin/env python3
"""
Tests for the ground-track projection and drawing primitives.

Drawing goes to an off-screen surface, so no display is needed.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

pygame = pytest.importorskip("pygame")

sys.path.insert(0, str(Path(__file__).parent.parent))

from mobility import GeoPosition, InterSatelliteLink, LinkType
from visualization import Colors, Renderer, geo_to_screen


def color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((400, 220)), margin=20)


class TestProjection:

    def test_corners(self):
        assert geo_to_screen(90, -180, 360, 180) == (0, 0)
        assert geo_to_screen(-90, 180, 360, 180) == (360, 180)

    def test_center(self):
        assert geo_to_screen(0, 0, 360, 180) == (180, 90)

    def test_margin(self):
        assert geo_to_screen(90, -180, 400, 220, margin=20) == (20, 20)
        assert geo_to_screen(-90, 180, 400, 220, margin=20) == (380, 200)

    def test_renderer_uses_surface_size(self, renderer):
        assert renderer.project(0, 0) == (200, 110)


class TestDrawing:

    def test_satellite_color_by_heading(self, renderer):
        renderer.clear()
        north = SimpleNamespace(latitude=45.0, longitude=-90.0, direction=True)
        south = SimpleNamespace(latitude=-45.0, longitude=90.0, direction=False)
        renderer.draw_satellites([north, south])

        assert color_at(renderer.screen, renderer.project(45.0, -90.0)) == Colors.NORTHBOUND
        assert color_at(renderer.screen, renderer.project(-45.0, 90.0)) == Colors.SOUTHBOUND

    def test_link_color_by_type(self, renderer):
        renderer.clear()
        positions = {
            1: GeoPosition(0.0, -20.0, 2000.0),
            2: GeoPosition(0.0, 20.0, 2000.0),
        }
        link = InterSatelliteLink(1, 2, 4000.0, 13.3, LinkType.INTER_PLANE)
        renderer.draw_links([link], positions)

        assert color_at(renderer.screen, renderer.project(0.0, 0.0)) == Colors.INTER_PLANE_LINK

    def test_date_line_links_are_skipped(self, renderer):
        renderer.clear()
        positions = {
            1: GeoPosition(0.0, 170.0, 2000.0),
            2: GeoPosition(0.0, -170.0, 2000.0),
        }
        link = InterSatelliteLink(1, 2, 2900.0, 9.7, LinkType.INTRA_PLANE)
        renderer.draw_links([link], positions)

        assert color_at(renderer.screen, renderer.project(0.0, 0.0)) == Colors.BACKGROUND

    def test_unknown_endpoints_are_skipped(self, renderer):
        renderer.clear()
        link = InterSatelliteLink(1, 99, 1000.0, 3.3, LinkType.INTRA_PLANE)
        renderer.draw_links([link], {1: GeoPosition(0.0, 0.0, 2000.0)})

        assert color_at(renderer.screen, renderer.project(0.0, 0.0)) == Colors.BACKGROUND
