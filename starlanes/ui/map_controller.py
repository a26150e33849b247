"""Galaxy map interaction: pan, zoom, inertia, selection and fleet transit.

The controller owns the camera and drives fleet transit. It knows nothing
about pygame: the star map screen feeds it pointer and wheel input in screen
pixels, and it reports back through the ``on_*`` callbacks. All waiting
(inertia decay, transit countdown) is done by re-scheduling frame callbacks
on a ``FrameScheduler``.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable

from ..constants import (
    DRAG_THRESHOLD_PX,
    INERTIA_DECAY,
    INERTIA_MIN_SPEED,
    SELECTION_RADIUS,
    ZOOM_STEP,
)
from ..models.fleet import Fleet, arrive_if_due, depart
from ..models.galaxy import GalaxyGraph, System
from ..models.orders import MoveIssued
from ..models.session import GalaxySession
from .frames import FrameScheduler
from .viewport import Viewport, clamp_zoom

logger = logging.getLogger(__name__)

PRIMARY_BUTTON = 1


class DragState(enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class MapController:
    """Camera and selection state machine for the galaxy map."""

    def __init__(
        self,
        session: GalaxySession,
        scheduler: FrameScheduler,
        clock: Callable[[], float],
        screen_size: tuple[int, int],
        viewport: Viewport | None = None,
    ) -> None:
        self.session = session
        self.scheduler = scheduler
        self.clock = clock
        self.screen_size = screen_size
        self.viewport = viewport or Viewport()

        self.drag_state = DragState.IDLE
        self.selected_system_id: str | None = None
        self.selected_fleet_id: str | None = None

        # World units per ms, already negated (the camera moves against the drag)
        self.velocity: tuple[float, float] = (0.0, 0.0)
        self.drag_distance = 0.0
        self._drag_start: tuple[float, float] = (0.0, 0.0)
        self._last_pointer: tuple[float, float] = (0.0, 0.0)
        self._last_move_time = 0.0

        self._inertia_handle: int | None = None
        self._inertia_last_time = 0.0
        self._transit_handle: int | None = None

        # Listeners
        self.on_viewport_change: Callable[[Viewport], None] | None = None
        self.on_select: Callable[[System | None], None] | None = None
        self.on_move: Callable[[MoveIssued], None] | None = None
        self.on_arrival: Callable[[Fleet], None] | None = None

    @property
    def graph(self) -> GalaxyGraph:
        return self.session.graph

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin watching fleets in transit."""
        self._ensure_transit_timer()

    def stop(self) -> None:
        self.stop_inertia()
        self.scheduler.cancel_frame(self._transit_handle)
        self._transit_handle = None

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def pointer_down(self, x: float, y: float, button: int = PRIMARY_BUTTON) -> None:
        if button != PRIMARY_BUTTON:
            return
        self.stop_inertia()
        self.drag_state = DragState.DRAGGING
        self._drag_start = (x, y)
        self._last_pointer = (x, y)
        self._last_move_time = self.clock()
        self.velocity = (0.0, 0.0)
        self.drag_distance = 0.0

    def pointer_move(self, x: float, y: float) -> None:
        if self.drag_state is not DragState.DRAGGING:
            return

        now = self.clock()
        dx = x - self._last_pointer[0]
        dy = y - self._last_pointer[1]
        elapsed = max(1.0, now - self._last_move_time)

        self.drag_distance += math.hypot(dx, dy)

        world_dx = dx / self.viewport.zoom
        world_dy = dy / self.viewport.zoom
        self.velocity = (-world_dx / elapsed, -world_dy / elapsed)

        self.viewport.x -= world_dx
        self.viewport.y -= world_dy
        self._notify_viewport()

        self._last_pointer = (x, y)
        self._last_move_time = now

    def pointer_up(self, x: float, y: float, button: int = PRIMARY_BUTTON) -> None:
        if button != PRIMARY_BUTTON or self.drag_state is not DragState.DRAGGING:
            return
        self.drag_state = DragState.IDLE

        if self.drag_distance <= DRAG_THRESHOLD_PX:
            self.select(self.system_at_screen(x, y))
            return

        self.start_inertia()

    def pointer_leave(self) -> None:
        """Pointer left the map: abandon the gesture without click or inertia."""
        self.drag_state = DragState.IDLE

    def wheel(self, delta: float) -> None:
        """Zoom out on positive delta, in on negative."""
        self.stop_inertia()
        if delta == 0:
            return
        factor = 1 / ZOOM_STEP if delta > 0 else ZOOM_STEP
        self.viewport.zoom = clamp_zoom(self.viewport.zoom * factor)
        self._notify_viewport()

    # ------------------------------------------------------------------
    # Inertia
    # ------------------------------------------------------------------

    @property
    def inertia_active(self) -> bool:
        return self.scheduler.is_scheduled(self._inertia_handle)

    @property
    def speed(self) -> float:
        return math.hypot(*self.velocity)

    def start_inertia(self) -> None:
        self.stop_inertia()
        self._inertia_last_time = self.clock()
        self._inertia_handle = self.scheduler.schedule_frame(self._inertia_step)

    def stop_inertia(self) -> None:
        self.scheduler.cancel_frame(self._inertia_handle)
        self._inertia_handle = None

    def _inertia_step(self, now: float) -> None:
        self._inertia_handle = None
        dt = now - self._inertia_last_time
        self._inertia_last_time = now

        if self.speed < INERTIA_MIN_SPEED or self.drag_state is DragState.DRAGGING:
            return

        vx, vy = self.velocity
        self.viewport.x += vx * dt
        self.viewport.y += vy * dt
        self._notify_viewport()

        self.velocity = (vx * INERTIA_DECAY, vy * INERTIA_DECAY)
        self._inertia_handle = self.scheduler.schedule_frame(self._inertia_step)

    # ------------------------------------------------------------------
    # Coordinate conversion and hit-testing
    # ------------------------------------------------------------------

    def world_to_screen(self, wx: float, wy: float) -> tuple[float, float]:
        return self.viewport.world_to_screen(wx, wy, self.screen_size)

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        return self.viewport.screen_to_world(sx, sy, self.screen_size)

    def system_at_screen(self, sx: float, sy: float) -> System | None:
        """Nearest system within the selection radius of a screen point."""
        wx, wy = self.screen_to_world(sx, sy)
        best: System | None = None
        best_dist = math.inf
        for system in self.graph.systems:
            dist = math.hypot(wx - system.x, wy - system.y)
            if dist <= SELECTION_RADIUS and dist < best_dist:
                best = system
                best_dist = dist
        return best

    # ------------------------------------------------------------------
    # Selection and fleet movement
    # ------------------------------------------------------------------

    @property
    def selected_fleet(self) -> Fleet | None:
        if self.selected_fleet_id is None:
            return None
        return self.session.get_fleet(self.selected_fleet_id)

    @property
    def move_targets(self) -> set[str]:
        """Systems the selected fleet could be sent to right now."""
        fleet = self.selected_fleet
        return fleet.valid_targets(self.graph) if fleet else set()

    def select(self, system: System | None) -> None:
        """Handle a click on ``system`` (or on empty space).

        With a fleet selected, clicking one of its move targets sends it
        there. Clicking a system holding an idle fleet of the current player
        selects that fleet. Anything else only changes the selected system.
        """
        self.selected_system_id = system.id if system else None
        if self.on_select:
            self.on_select(system)

        if system is None:
            self.selected_fleet_id = None
            return

        fleet = self.selected_fleet
        if fleet is not None and system.id in fleet.valid_targets(self.graph):
            self.issue_move(fleet.id, system.id)
            self.selected_fleet_id = None
            return

        here = self.session.idle_fleet_at(system.id, self.session.current_player_id)
        self.selected_fleet_id = here.id if here else None

    def issue_move(self, fleet_id: str, to_system_id: str) -> MoveIssued | None:
        """Send a fleet to a lane-adjacent system. Invalid moves are ignored."""
        fleet = self.session.get_fleet(fleet_id)
        if fleet is None:
            logger.debug("move ignored: unknown fleet %s", fleet_id)
            return None

        from_id = fleet.location_id
        trip = depart(fleet, self.graph, to_system_id, self.clock())
        if trip is None:
            logger.debug("move ignored: %s cannot go %s -> %s", fleet_id, from_id, to_system_id)
            return None

        event = MoveIssued(
            fleet_id=fleet.id,
            from_system_id=trip.from_id,
            to_system_id=trip.to_id,
            depart_at=trip.depart_at,
            arrive_at=trip.arrive_at,
        )
        logger.info(
            "fleet %s departing %s -> %s (%.0f ms)",
            fleet.id, trip.from_id, trip.to_id, trip.arrive_at - trip.depart_at,
        )
        if self.on_move:
            self.on_move(event)
        self._ensure_transit_timer()
        return event

    def update_transits(self, now: float) -> list[Fleet]:
        """Land every fleet whose arrival time has come. Returns those fleets."""
        arrived = [fleet for fleet in self.session.fleets if arrive_if_due(fleet, now)]
        for fleet in arrived:
            logger.info("fleet %s arrived at %s", fleet.id, fleet.location_id)
            if self.on_arrival:
                self.on_arrival(fleet)
        return arrived

    def _ensure_transit_timer(self) -> None:
        if not self.scheduler.is_scheduled(self._transit_handle):
            self._transit_handle = self.scheduler.schedule_frame(self._transit_frame)

    def _transit_frame(self, now: float) -> None:
        self.update_transits(now)
        self._transit_handle = self.scheduler.schedule_frame(self._transit_frame)

    def _notify_viewport(self) -> None:
        if self.on_viewport_change:
            self.on_viewport_change(self.viewport)
