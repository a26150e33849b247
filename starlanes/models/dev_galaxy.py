"""Fixed development galaxy: same seed, same map, every run."""

from __future__ import annotations

import dataclasses

from ..constants import DEV_PLAYER_COLOR, DEV_PLAYER_ID
from .fleet import Fleet
from .galaxy import Galaxy, GalaxyConfig, GalaxyGraph, GalaxyStatus, distance, generate_galaxy
from .session import GalaxySession, Player

DEV_GALAXY_ID = "dev"
DEV_SEED = 1337
DEV_OWNED_SYSTEMS = 5
DEV_MIN_OWNED_PLANETS = 2


def build_dev_session(config: GalaxyConfig | None = None) -> GalaxySession:
    """Build the dev galaxy with its player, home territory and one fleet.

    The player owns the first generated system and its nearest neighbours by
    distance; owned systems always have at least two planets.
    """
    config = config or GalaxyConfig()
    generated = generate_galaxy(DEV_GALAXY_ID, config, seed=DEV_SEED)
    if not generated.systems:
        return GalaxySession(
            galaxy=Galaxy(id=DEV_GALAXY_ID, name="Dev Galaxy", seed=DEV_SEED, status=GalaxyStatus.ACTIVE),
            graph=generated,
        )

    home = generated.systems[0]
    nearest = sorted(generated.systems[1:], key=lambda s: distance(home, s))
    owned_ids = [home.id] + [s.id for s in nearest[:DEV_OWNED_SYSTEMS - 1]]

    systems = [
        dataclasses.replace(s, planet_count=DEV_MIN_OWNED_PLANETS)
        if s.id in owned_ids and s.planet_count < DEV_MIN_OWNED_PLANETS
        else s
        for s in generated.systems
    ]
    graph = GalaxyGraph(DEV_GALAXY_ID, systems, list(generated.lanes), seed=DEV_SEED)

    return GalaxySession(
        galaxy=Galaxy(id=DEV_GALAXY_ID, name="Dev Galaxy", seed=DEV_SEED, status=GalaxyStatus.ACTIVE),
        graph=graph,
        players=[Player(id=DEV_PLAYER_ID, empire_name="Player", color=DEV_PLAYER_COLOR)],
        current_player_id=DEV_PLAYER_ID,
        ownership={sid: DEV_PLAYER_ID for sid in owned_ids},
        fleets=[Fleet.at("dev-fleet-1", DEV_PLAYER_ID, home.id, strength=10)],
    )
