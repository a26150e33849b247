"""Side panel describing the selected system."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from ..constants import AMBER, CYAN, LIGHT_GREY, PANEL_BG, PANEL_BORDER, WHITE
from ..models.galaxy import System, Yields


@dataclass
class SystemInfo:
    """What the panel shows; assembled by the star map screen."""

    name: str
    x: float
    y: float
    owner_status: str  # "Owned" or "Neutral"
    planet_count: int
    yields: Yields
    fleet_strength: int | None = None
    fleet_status: str | None = None
    fleet_prompt: bool = False

    @classmethod
    def for_system(cls, system: System, owned: bool, **fleet) -> SystemInfo:
        return cls(
            name=system.name,
            x=system.x,
            y=system.y,
            owner_status="Owned" if owned else "Neutral",
            planet_count=system.planet_count,
            yields=system.yields,
            **fleet,
        )


class SystemPanel:
    def __init__(self) -> None:
        self.font_title = pygame.font.Font(None, 32)
        self.font = pygame.font.Font(None, 24)

    def draw(self, surface: pygame.Surface, rect: pygame.Rect, info: SystemInfo | None) -> None:
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(PANEL_BG)
        surface.blit(panel, rect.topleft)
        pygame.draw.line(surface, PANEL_BORDER, rect.topleft, rect.bottomleft)

        x = rect.x + 20
        y = rect.y + 20
        if info is None:
            surf = self.font.render("Click a system", True, LIGHT_GREY)
            surface.blit(surf, (x, y))
            return

        title = self.font_title.render(info.name, True, AMBER)
        surface.blit(title, (x, y))
        y += 40

        lines = [f"Coordinates: ({round(info.x)}, {round(info.y)})", f"Owner: {info.owner_status}"]
        if info.fleet_strength is not None:
            lines.append(f"Fleet present (Strength: {info.fleet_strength})")
        if info.fleet_status:
            lines.append(info.fleet_status)
        lines.append(f"Planets in system: {info.planet_count}")
        for line in lines:
            surface.blit(self.font.render(line, True, LIGHT_GREY), (x, y))
            y += 28

        if info.fleet_prompt:
            surface.blit(self.font.render("Select an adjacent system to move", True, CYAN), (x, y))
            y += 28

        y += 8
        surface.blit(self.font.render("Base Yields", True, WHITE), (x, y))
        y += 28
        for label, value in (
            ("Energy", info.yields.energy),
            ("Minerals", info.yields.minerals),
            ("Science", info.yields.science),
        ):
            surface.blit(self.font.render(f"{label}: {value}", True, LIGHT_GREY), (x + 10, y))
            y += 24
