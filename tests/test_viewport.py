"""Tests for the camera transform."""

import pytest

from starlanes.ui.viewport import Viewport, clamp_zoom

SCREEN = (1000, 800)


@pytest.mark.parametrize("zoom", [0.3, 0.75, 1.0, 1.6, 2.0])
@pytest.mark.parametrize("point", [(0.0, 0.0), (123.4, -56.7), (1999.0, 1999.0)])
def test_screen_world_round_trip(zoom, point):
    vp = Viewport(500.0, -250.0, zoom)
    sx, sy = vp.world_to_screen(*point, SCREEN)
    wx, wy = vp.screen_to_world(sx, sy, SCREEN)
    assert wx == pytest.approx(point[0])
    assert wy == pytest.approx(point[1])


def test_camera_centre_maps_to_screen_centre():
    vp = Viewport(300.0, 400.0, 1.7)
    assert vp.world_to_screen(300.0, 400.0, SCREEN) == (500.0, 400.0)
    assert vp.screen_to_world(500.0, 400.0, SCREEN) == (300.0, 400.0)


def test_zoom_scales_offsets():
    vp = Viewport(0.0, 0.0, 2.0)
    assert vp.world_to_screen(10.0, -10.0, SCREEN) == (520.0, 380.0)


def test_clamp_zoom():
    assert clamp_zoom(0.01) == 0.3
    assert clamp_zoom(5.0) == 2.0
    assert clamp_zoom(1.2) == 1.2


def test_constructor_clamps_zoom():
    assert Viewport(zoom=10.0).zoom == 2.0
    assert Viewport(zoom=0.0).zoom == 0.3

