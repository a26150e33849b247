"""Fleets and their hyperlane transit state.

A fleet is always in exactly one of two states: ``Idle`` at a system, or
``InTransit`` between two lane-connected systems. Times are milliseconds on
whatever clock the caller supplies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..constants import MAX_TRAVEL_MS, MIN_TRAVEL_MS, TRAVEL_MS_PER_UNIT
from .galaxy import GalaxyGraph, distance


@dataclass(frozen=True)
class Idle:
    location_id: str


@dataclass(frozen=True)
class InTransit:
    from_id: str
    to_id: str
    depart_at: float
    arrive_at: float

    def progress(self, now: float) -> float:
        """Fraction of the trip completed, clamped to ``[0, 1]``."""
        span = self.arrive_at - self.depart_at
        if span <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.depart_at) / span))


FleetState = Union[Idle, InTransit]


@dataclass
class Fleet:
    """A player fleet on the galaxy map."""

    id: str
    owner: str
    strength: int
    state: FleetState

    @classmethod
    def at(cls, fleet_id: str, owner: str, location_id: str, strength: int = 10) -> Fleet:
        return cls(id=fleet_id, owner=owner, strength=strength, state=Idle(location_id))

    @property
    def in_transit(self) -> bool:
        return isinstance(self.state, InTransit)

    @property
    def location_id(self) -> str:
        """Where the fleet counts as being: its origin until it arrives."""
        if isinstance(self.state, InTransit):
            return self.state.from_id
        return self.state.location_id

    def valid_targets(self, graph: GalaxyGraph) -> set[str]:
        """Systems this fleet may be ordered to. Empty while in transit."""
        if self.in_transit:
            return set()
        return graph.adjacent(self.location_id)

    def position(self, graph: GalaxyGraph, now: float) -> tuple[float, float] | None:
        """World position, interpolated along the lane while in transit."""
        if isinstance(self.state, Idle):
            system = graph.get_system(self.state.location_id)
            return (system.x, system.y) if system else None

        origin = graph.get_system(self.state.from_id)
        dest = graph.get_system(self.state.to_id)
        if origin is None or dest is None:
            return None
        t = self.state.progress(now)
        return (origin.x + (dest.x - origin.x) * t, origin.y + (dest.y - origin.y) * t)


def travel_ms(dist: float) -> float:
    """Travel time for a lane of length ``dist``."""
    return min(MAX_TRAVEL_MS, max(MIN_TRAVEL_MS, dist * TRAVEL_MS_PER_UNIT))


def depart(fleet: Fleet, graph: GalaxyGraph, to_id: str, now: float) -> InTransit | None:
    """Send an idle fleet down a lane. Returns the new state, or None if refused."""
    if fleet.in_transit:
        return None
    from_id = fleet.location_id
    if not graph.connected(from_id, to_id):
        return None

    trip = InTransit(
        from_id=from_id,
        to_id=to_id,
        depart_at=now,
        arrive_at=now + travel_ms(distance(graph.get_system(from_id), graph.get_system(to_id))),
    )
    fleet.state = trip
    return trip


def arrive_if_due(fleet: Fleet, now: float) -> bool:
    """Land the fleet if its arrival time has passed. Returns True on landing."""
    if isinstance(fleet.state, InTransit) and now >= fleet.state.arrive_at:
        fleet.state = Idle(fleet.state.to_id)
        return True
    return False
