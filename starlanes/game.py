"""Starlanes main game module: the state router and main loop."""

from __future__ import annotations

import logging

import pygame

from .constants import BACKGROUND, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from .models.dev_galaxy import build_dev_session
from .models.galaxy import GalaxyConfig
from .models.save import load_game
from .models.session import start_session
from .screens.star_map import StarMapScreen
from .screens.title import TitleAction, TitleScreen
from .states import GameState
from .ui.frames import FrameScheduler

logger = logging.getLogger(__name__)


class Game:
    """Core game class. Routes the current state to its screen object."""

    def __init__(
        self,
        config: GalaxyConfig | None = None,
        seed: int | None = None,
        start_action: str | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        self.state = GameState.TITLE

        self.config = config or GalaxyConfig()
        self.seed = seed
        self.scheduler = FrameScheduler()

        # Screens
        self.title_screen = TitleScreen()
        self.star_map_screen: StarMapScreen | None = None

        if start_action:
            self._open_galaxy(start_action)

    @staticmethod
    def now() -> float:
        return float(pygame.time.get_ticks())

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.scheduler.run_frame(self.now())
            self._update(dt)
            self._draw()

        if self.star_map_screen:
            self.star_map_screen.close()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._handle_escape()
                continue

            if self.state == GameState.TITLE:
                self.title_screen.handle_events(event)
            elif self.state == GameState.GALAXY_MAP and self.star_map_screen:
                self.star_map_screen.handle_events(event)

    def _handle_escape(self) -> None:
        """Back to the title from the map, or quit from the title."""
        if self.state == GameState.TITLE:
            self.running = False
        elif self.state == GameState.GALAXY_MAP:
            if self.star_map_screen:
                self.star_map_screen.close()
                self.star_map_screen = None
            self.state = GameState.TITLE
            self.title_screen = TitleScreen()

    def _update(self, dt: float) -> None:
        if self.state == GameState.TITLE:
            self.title_screen.update(dt)
            if self.title_screen.next_state == GameState.QUIT:
                self.running = False
            elif self.title_screen.next_state:
                self._open_galaxy(self.title_screen.action)
                self.title_screen.next_state = None

        elif self.state == GameState.GALAXY_MAP and self.star_map_screen:
            self.star_map_screen.update(dt)

    def _open_galaxy(self, action: str) -> None:
        viewport = None
        if action == TitleAction.CONTINUE:
            loaded = load_game(self.now())
            if loaded is None:
                logger.warning("no usable save; starting a new galaxy")
                session = start_session("galaxy", "New Galaxy", self.config, seed=self.seed)
            else:
                session, self.config, viewport = loaded
        elif action == TitleAction.DEV_GALAXY:
            session = build_dev_session()
            self.config = GalaxyConfig()
        else:
            session = start_session("galaxy", "New Galaxy", self.config, seed=self.seed)

        logger.info("opening galaxy %s (seed=%s)", session.galaxy.id, session.galaxy.seed)
        self.star_map_screen = StarMapScreen(session, self.config, self.scheduler, self.now, viewport)
        self.state = GameState.GALAXY_MAP

    def _draw(self) -> None:
        self.screen.fill(BACKGROUND)
        if self.state == GameState.TITLE:
            self.title_screen.draw(self.screen)
        elif self.state == GameState.GALAXY_MAP and self.star_map_screen:
            self.star_map_screen.draw(self.screen)
        pygame.display.flip()
