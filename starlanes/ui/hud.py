"""HUD overlay: galaxy name, tick, status and territory counts."""

from __future__ import annotations

import pygame

from ..constants import AMBER, HUD_HEIGHT, LIGHT_GREY, PANEL_BG, PANEL_BORDER, WHITE
from ..models.session import GalaxySession


class HUD:
    """Top bar drawn over the galaxy map."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)
        self.panel_height = HUD_HEIGHT

    def draw(self, surface: pygame.Surface, session: GalaxySession) -> None:
        width = surface.get_width()
        bar = pygame.Surface((width, self.panel_height), pygame.SRCALPHA)
        bar.fill(PANEL_BG)
        surface.blit(bar, (0, 0))
        pygame.draw.line(surface, PANEL_BORDER, (0, self.panel_height), (width, self.panel_height))

        galaxy = session.galaxy
        x = 15
        y = 11
        if galaxy is not None:
            name = self.font.render(galaxy.name, True, AMBER)
            surface.blit(name, (x, y))
            x += name.get_width() + 24
            x = self._draw_stat(surface, "Tick", str(galaxy.tick), x, y)
            x = self._draw_stat(surface, "Status", galaxy.status.value, x, y)

        x = self._draw_stat(surface, "Planets", str(len(session.graph)), x, y)
        self._draw_stat(surface, "Owned", str(session.owned_count()), x, y)

        hint = self.font_small.render("T: mock tick   F5: save   ESC: menu", True, LIGHT_GREY)
        surface.blit(hint, (width - hint.get_width() - 15, y + 2))

    def _draw_stat(self, surface: pygame.Surface, label: str, value: str, x: int, y: int) -> int:
        label_surf = self.font_small.render(f"{label}:", True, LIGHT_GREY)
        surface.blit(label_surf, (x, y + 2))
        value_surf = self.font.render(value, True, WHITE)
        surface.blit(value_surf, (x + label_surf.get_width() + 6, y))
        return x + label_surf.get_width() + value_surf.get_width() + 30
