"""Everything the map needs about one galaxy, held in one place."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import DEV_PLAYER_COLOR, DEV_PLAYER_ID
from .fleet import Fleet
from .galaxy import Galaxy, GalaxyConfig, GalaxyGraph, GalaxyStatus, generate_galaxy


@dataclass
class Player:
    """An empire taking part in a galaxy."""

    id: str
    empire_name: str
    color: str  # hex color, e.g. "#4a9eff"
    ready: bool = True

    @property
    def rgb(self) -> tuple[int, int, int]:
        value = self.color.lstrip("#")
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass
class GalaxySession:
    """Loaded galaxy state: metadata, static graph, and mutable game pieces."""

    galaxy: Galaxy | None
    graph: GalaxyGraph
    players: list[Player] = field(default_factory=list)
    current_player_id: str | None = None
    ownership: dict[str, str] = field(default_factory=dict)  # system id -> player id
    fleets: list[Fleet] = field(default_factory=list)
    orders: list = field(default_factory=list)  # MoveFleetOrder, see orders.py

    @property
    def current_player(self) -> Player | None:
        for player in self.players:
            if player.id == self.current_player_id:
                return player
        return None

    def owner_of(self, system_id: str) -> str | None:
        return self.ownership.get(system_id)

    def owned_count(self, player_id: str | None = None) -> int:
        player_id = player_id or self.current_player_id
        return sum(1 for owner in self.ownership.values() if owner == player_id)

    def get_fleet(self, fleet_id: str) -> Fleet | None:
        for fleet in self.fleets:
            if fleet.id == fleet_id:
                return fleet
        return None

    def fleet_at(self, system_id: str) -> Fleet | None:
        """First fleet located at ``system_id`` (in-transit fleets count at their origin)."""
        for fleet in self.fleets:
            if fleet.location_id == system_id:
                return fleet
        return None

    def idle_fleet_at(self, system_id: str, owner: str | None) -> Fleet | None:
        """First fleet of ``owner`` sitting idle at ``system_id``."""
        if owner is None:
            return None
        for fleet in self.fleets:
            if fleet.owner == owner and not fleet.in_transit and fleet.location_id == system_id:
                return fleet
        return None


def start_session(
    galaxy_id: str,
    name: str,
    config: GalaxyConfig | None = None,
    seed: int | None = None,
) -> GalaxySession:
    """Generate a fresh galaxy with one local player at the first system."""
    graph = generate_galaxy(galaxy_id, config, seed=seed)
    player = Player(id=DEV_PLAYER_ID, empire_name="Player", color=DEV_PLAYER_COLOR)
    session = GalaxySession(
        galaxy=Galaxy(id=galaxy_id, name=name, seed=graph.seed, status=GalaxyStatus.ACTIVE),
        graph=graph,
        players=[player],
        current_player_id=player.id,
    )
    if graph.systems:
        home = graph.systems[0]
        session.ownership[home.id] = player.id
        session.fleets.append(Fleet.at(f"{galaxy_id}-fleet-1", player.id, home.id))
    return session
