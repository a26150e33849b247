"""Camera state and the world <-> screen transform."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import MAX_ZOOM, MIN_ZOOM


def clamp_zoom(zoom: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


@dataclass
class Viewport:
    """World-space point at the centre of the screen, plus zoom factor.

    The render transform is: translate to the screen centre, scale by zoom,
    translate by ``-(x, y)``. ``screen_to_world`` is its exact inverse, and
    hit-testing must go through it so clicks match what is drawn.
    """

    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0

    def __post_init__(self) -> None:
        self.zoom = clamp_zoom(self.zoom)

    def world_to_screen(
        self, wx: float, wy: float, screen_size: tuple[int, int]
    ) -> tuple[float, float]:
        width, height = screen_size
        return (
            (wx - self.x) * self.zoom + width / 2,
            (wy - self.y) * self.zoom + height / 2,
        )

    def screen_to_world(
        self, sx: float, sy: float, screen_size: tuple[int, int]
    ) -> tuple[float, float]:
        width, height = screen_size
        return (
            (sx - width / 2) / self.zoom + self.x,
            (sy - height / 2) / self.zoom + self.y,
        )
