"""Title screen: a dim galaxy backdrop, the game name and the start menu."""

from __future__ import annotations

import pygame

from ..constants import (
    AMBER,
    CYAN,
    DARK_GREY,
    GAME_SUBTITLE,
    GAME_TITLE,
    GAME_VERSION,
    LIGHT_GREY,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_COLORS,
)
from ..models.galaxy import GalaxyConfig, GalaxyGraph, generate_galaxy
from ..models.save import has_save
from ..states import GameState

BACKDROP_SEED = 7
MENU_SPACING = 45


class TitleAction:
    CONTINUE = "continue"
    NEW_GALAXY = "new_galaxy"
    DEV_GALAXY = "dev_galaxy"
    QUIT = "quit"


class TitleScreen:
    """Start menu. Input is ignored until the fade-in finishes."""

    def __init__(self) -> None:
        self.font_large = pygame.font.Font(None, 96)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_menu = pygame.font.Font(None, 36)
        self.font_version = pygame.font.Font(None, 22)
        self.fade = 0.0  # 0..510: title fades in first, then the subtitle and menu
        self.next_state: GameState | None = None
        self.action: str | None = None

        self._menu_items = self._build_menu()
        self.selected = 0
        self._backdrop = generate_galaxy(
            "title",
            GalaxyConfig(system_count=60, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, neighbor_count=2),
            seed=BACKDROP_SEED,
        )

    @property
    def title_alpha(self) -> int:
        return int(min(255.0, self.fade))

    @property
    def subtitle_alpha(self) -> int:
        return int(max(0.0, min(255.0, self.fade - 255)))

    def _build_menu(self) -> list[tuple[str, str]]:
        items = [("New Galaxy", TitleAction.NEW_GALAXY), ("Dev Galaxy", TitleAction.DEV_GALAXY), ("Quit", TitleAction.QUIT)]
        if has_save():
            items.insert(0, ("Continue", TitleAction.CONTINUE))
        return items

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN or self.subtitle_alpha < 255:
            return
        if event.key in (pygame.K_UP, pygame.K_w):
            self.selected = (self.selected - 1) % len(self._menu_items)
        elif event.key in (pygame.K_DOWN, pygame.K_s):
            self.selected = (self.selected + 1) % len(self._menu_items)
        elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
            self.choose(self._menu_items[self.selected][1])

    def choose(self, action: str) -> None:
        self.action = action
        self.next_state = GameState.QUIT if action == TitleAction.QUIT else GameState.GALAXY_MAP

    def update(self, dt: float) -> None:
        self.fade = min(510.0, self.fade + 300 * dt)

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_backdrop(surface)

        cx = SCREEN_WIDTH // 2
        top = SCREEN_HEIGHT // 3
        for text, font, color, alpha, y in (
            (GAME_TITLE, self.font_large, AMBER, self.title_alpha, top),
            (GAME_SUBTITLE, self.font_medium, CYAN, self.subtitle_alpha, top + 70),
        ):
            surf = font.render(text, True, color)
            surf.set_alpha(alpha)
            surface.blit(surf, surf.get_rect(center=(cx, y)))

        if self.subtitle_alpha >= 255:
            for i, (label, _) in enumerate(self._menu_items):
                chosen = i == self.selected
                line = self.font_menu.render(f"> {label}" if chosen else label, True, AMBER if chosen else LIGHT_GREY)
                surface.blit(line, line.get_rect(center=(cx, SCREEN_HEIGHT // 2 + 40 + i * MENU_SPACING)))

        version = self.font_version.render(f"v{GAME_VERSION}", True, LIGHT_GREY)
        version.set_alpha(120)
        surface.blit(version, version.get_rect(bottomright=(SCREEN_WIDTH - 10, SCREEN_HEIGHT - 8)))

    def _draw_backdrop(self, surface: pygame.Surface) -> None:
        graph: GalaxyGraph = self._backdrop
        for lane in graph.lanes:
            a = graph.get_system(lane.from_system_id)
            b = graph.get_system(lane.to_system_id)
            pygame.draw.line(surface, DARK_GREY, (a.x, a.y), (b.x, b.y))
        for system in graph.systems:
            pygame.draw.circle(surface, STAR_COLORS[system.star_type.value], (int(system.x), int(system.y)), 2)
