"""Fleet move orders and the local turn ("tick") stub.

Orders are what the map hands to whatever eventually persists or resolves
moves. Resolution itself is not done here: ``simulate_tick`` only reports.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .fleet import Fleet
from .galaxy import GalaxyGraph, System
from .session import GalaxySession

logger = logging.getLogger(__name__)


class OrderType(enum.Enum):
    MOVE_FLEET = "MOVE_FLEET"


class OrderStatus(enum.Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveIssued:
    """Emitted by the map when a fleet leaves a system."""

    fleet_id: str
    from_system_id: str
    to_system_id: str
    depart_at: float
    arrive_at: float


@dataclass
class MoveFleetOrder:
    player_id: str
    galaxy_id: str
    tick: int
    fleet_id: str
    to_system_id: str
    order_type: OrderType = OrderType.MOVE_FLEET
    status: OrderStatus = OrderStatus.PENDING


def create_move_order(
    player_id: str,
    galaxy_id: str,
    current_tick: int,
    fleet_id: str,
    to_system_id: str,
) -> MoveFleetOrder:
    return MoveFleetOrder(
        player_id=player_id,
        galaxy_id=galaxy_id,
        tick=current_tick,
        fleet_id=fleet_id,
        to_system_id=to_system_id,
    )


def validate_move_order(
    order: MoveFleetOrder,
    fleet: Fleet | None,
    target: System | None,
    graph: GalaxyGraph,
) -> tuple[bool, str | None]:
    """Check an order against the fleet it names and the lane graph.

    Returns ``(valid, error)``; ``error`` is None when the order is valid.
    """
    if fleet is None:
        return False, "Fleet not found"
    if target is None:
        return False, "Target system not found"
    if order.fleet_id != fleet.id:
        return False, "Fleet ID mismatch"
    if order.to_system_id != target.id:
        return False, "Target system ID mismatch"
    if not graph.connected(fleet.location_id, target.id):
        return False, "Systems are not connected by a lane"
    return True, None


def can_fleet_move(fleet: Fleet, target: System, graph: GalaxyGraph) -> tuple[bool, str | None]:
    if not graph.connected(fleet.location_id, target.id):
        return False, "Systems are not connected by a lane"
    return True, None


def simulate_tick(session: GalaxySession) -> GalaxySession:
    """Local stand-in for server-side turn processing.

    Reports what a real tick would have to resolve and returns the session
    untouched: no order resolution, combat, ownership changes or tick
    advance happen here.
    """
    if session.galaxy is None:
        logger.warning("Cannot simulate tick: no galaxy loaded")
        return session

    pending = [o for o in session.orders if o.status is OrderStatus.PENDING]
    logger.info(
        "Simulated tick %d for galaxy %s: %d pending order(s) left unresolved",
        session.galaxy.tick, session.galaxy.id, len(pending),
    )
    return session
