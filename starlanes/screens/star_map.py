"""Galaxy map screen: pan, zoom, select systems and move fleets."""

from __future__ import annotations

from typing import Callable

import pygame

from ..constants import (
    BACKGROUND,
    CYAN,
    FLEET_MARKER_COLOR,
    HIGHLIGHT_YELLOW,
    HUD_HEIGHT,
    LANE_COLOR,
    LIGHT_GREY,
    PANEL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_COLORS,
    SYSTEM_NEUTRAL_FILL,
    SYSTEM_PLAYER_FILL,
    SYSTEM_RADIUS,
    WHITE,
)
from ..models.galaxy import GalaxyConfig
from ..models.orders import MoveIssued, create_move_order, simulate_tick
from ..models.save import save_game
from ..models.session import GalaxySession
from ..states import GameState
from ..ui.frames import FrameScheduler
from ..ui.hud import HUD
from ..ui.map_controller import MapController
from ..ui.system_panel import SystemInfo, SystemPanel
from ..ui.viewport import Viewport


class StarMapScreen:
    """Galactic map with drag-to-pan, wheel zoom and clickable systems."""

    def __init__(
        self,
        session: GalaxySession,
        config: GalaxyConfig,
        scheduler: FrameScheduler,
        clock: Callable[[], float],
        viewport: Viewport | None = None,
    ) -> None:
        self.session = session
        self.config = config
        self.clock = clock
        self.font_name = pygame.font.Font(None, 20)

        self.map_rect = pygame.Rect(0, HUD_HEIGHT, SCREEN_WIDTH - PANEL_WIDTH, SCREEN_HEIGHT - HUD_HEIGHT)
        self.panel_rect = pygame.Rect(self.map_rect.right, HUD_HEIGHT, PANEL_WIDTH, self.map_rect.height)

        if viewport is None and session.graph.systems:
            # Center camera on the starting system
            home = session.graph.systems[0]
            viewport = Viewport(home.x, home.y, 1.0)

        self.controller = MapController(session, scheduler, clock, self.map_rect.size, viewport)
        self.controller.on_move = self._on_move
        self.controller.start()

        self.hud = HUD()
        self.panel = SystemPanel()
        self.next_state: GameState | None = None
        self.status_message = ""

    @property
    def viewport(self) -> Viewport:
        return self.controller.viewport

    def close(self) -> None:
        self.controller.stop()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.map_rect.collidepoint(event.pos):
                self.controller.pointer_down(*self._map_pos(event.pos), event.button)
        elif event.type == pygame.MOUSEMOTION:
            self.controller.pointer_move(*self._map_pos(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP:
            self.controller.pointer_up(*self._map_pos(event.pos), event.button)
        elif event.type == pygame.MOUSEWHEEL:
            # Wheel up (positive y) zooms in
            self.controller.wheel(-event.y)
        elif event.type == pygame.WINDOWLEAVE:
            self.controller.pointer_leave()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_t:
                simulate_tick(self.session)
                self.status_message = "Mock tick: nothing resolved"
            elif event.key == pygame.K_F5:
                path = save_game(self.session, self.config, self.viewport, self.clock())
                self.status_message = f"Saved to {path}"

    def _map_pos(self, pos: tuple[int, int]) -> tuple[int, int]:
        return pos[0] - self.map_rect.x, pos[1] - self.map_rect.y

    def _on_move(self, event: MoveIssued) -> None:
        galaxy = self.session.galaxy
        order = create_move_order(
            self.session.current_player_id or "",
            galaxy.id if galaxy else self.session.graph.galaxy_id,
            galaxy.tick if galaxy else 0,
            event.fleet_id,
            event.to_system_id,
        )
        self.session.orders.append(order)

    def update(self, dt: float) -> None:
        pass

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        map_surface = surface.subsurface(self.map_rect)
        map_surface.fill(BACKGROUND)
        self._draw_map(map_surface)

        self.panel.draw(surface, self.panel_rect, self._selected_info())
        self.hud.draw(surface, self.session)

        if self.status_message:
            msg = self.font_name.render(self.status_message, True, LIGHT_GREY)
            surface.blit(msg, (self.map_rect.x + 10, self.map_rect.bottom - msg.get_height() - 10))

    def _draw_map(self, surface: pygame.Surface) -> None:
        graph = self.session.graph
        ctrl = self.controller
        zoom = self.viewport.zoom
        radius = max(2, int(SYSTEM_RADIUS * zoom))

        # Lanes first (behind nodes)
        for lane in graph.lanes:
            a = graph.get_system(lane.from_system_id)
            b = graph.get_system(lane.to_system_id)
            pygame.draw.line(surface, LANE_COLOR, ctrl.world_to_screen(a.x, a.y), ctrl.world_to_screen(b.x, b.y), 2)

        player = self.session.current_player
        player_fill = player.rgb if player else SYSTEM_PLAYER_FILL
        targets = ctrl.move_targets

        for system in graph.systems:
            sx, sy = ctrl.world_to_screen(system.x, system.y)
            if sx < -50 or sx > surface.get_width() + 50 or sy < -50 or sy > surface.get_height() + 50:
                continue
            center = (int(sx), int(sy))

            if system.id in targets:
                pygame.draw.circle(surface, HIGHLIGHT_YELLOW, center, radius + int(5 * zoom))

            owner = self.session.owner_of(system.id)
            fill = player_fill if owner is not None and owner == self.session.current_player_id else SYSTEM_NEUTRAL_FILL
            pygame.draw.circle(surface, fill, center, radius)
            # Star core tinted by type
            pygame.draw.circle(surface, STAR_COLORS.get(system.star_type.value, WHITE), center, max(1, radius // 3))

            if system.id == ctrl.selected_system_id:
                pygame.draw.circle(surface, CYAN, center, radius + int(4 * zoom), 2)

            label = self.font_name.render(system.name, True, WHITE)
            surface.blit(label, (center[0] - label.get_width() // 2, center[1] + radius + 5))

        now = self.clock()
        for fleet in self.session.fleets:
            pos = fleet.position(graph, now)
            if pos is None:
                continue
            fx, fy = ctrl.world_to_screen(*pos)
            pygame.draw.circle(surface, FLEET_MARKER_COLOR, (int(fx), int(fy)), 5)

    def _selected_info(self) -> SystemInfo | None:
        system_id = self.controller.selected_system_id
        if system_id is None:
            return None
        system = self.session.graph.get_system(system_id)
        if system is None:
            return None

        player_id = self.session.current_player_id
        owned = player_id is not None and self.session.owner_of(system.id) == player_id
        # The player's own idle fleet takes precedence over passing or foreign ones
        fleet = self.session.idle_fleet_at(system.id, player_id) or self.session.fleet_at(system.id)
        fleet_status = None
        if fleet is not None and fleet.in_transit:
            dest = self.session.graph.get_system(fleet.state.to_id)
            remaining = max(0.0, fleet.state.arrive_at - self.clock()) / 1000
            fleet_status = f"Fleet en route to {dest.name} ({remaining:.1f}s)"
        return SystemInfo.for_system(
            system,
            owned,
            fleet_strength=fleet.strength if fleet else None,
            fleet_status=fleet_status,
            fleet_prompt=self.controller.selected_fleet_id is not None,
        )
