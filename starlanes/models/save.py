"""Save / load galaxy sessions to JSON.

Uses platformdirs for cross-platform save location:
  Linux:   ~/.local/share/starlanes/save.json
  macOS:   ~/Library/Application Support/starlanes/save.json
  Windows: C:/Users/.../AppData/Local/starlanes/save.json

The lane graph is regenerated from seed + config; only mutable state is
persisted. Transit timestamps are stored relative to the moment of saving
and rebased onto the loader's clock.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_data_dir

from ..ui.viewport import Viewport
from .dev_galaxy import DEV_GALAXY_ID, build_dev_session
from .fleet import Fleet, Idle, InTransit
from .galaxy import Galaxy, GalaxyConfig, GalaxyStatus, StarType, generate_galaxy
from .orders import MoveFleetOrder, OrderStatus, OrderType
from .session import GalaxySession, Player

logger = logging.getLogger(__name__)

SAVE_VERSION = 1
SAVE_DIR = Path(user_data_dir("starlanes"))
SAVE_FILE = SAVE_DIR / "save.json"


# ── Serialise helpers ─────────────────────────────────────────────────

def _config_to_dict(c: GalaxyConfig) -> dict:
    return {
        "system_count": c.system_count,
        "width": c.width,
        "height": c.height,
        "star_types": [t.value for t in c.star_types],
        "neighbor_count": c.neighbor_count,
        "planet_range": list(c.planet_range),
        "energy_range": list(c.energy_range),
        "minerals_range": list(c.minerals_range),
        "science_range": list(c.science_range),
        "repair_connectivity": c.repair_connectivity,
    }


def _config_from_dict(d: dict) -> GalaxyConfig:
    defaults = GalaxyConfig()
    return GalaxyConfig(
        system_count=d["system_count"],
        width=d["width"],
        height=d["height"],
        star_types=tuple(StarType(v) for v in d["star_types"]),
        neighbor_count=d["neighbor_count"],
        planet_range=tuple(d.get("planet_range", defaults.planet_range)),
        energy_range=tuple(d.get("energy_range", defaults.energy_range)),
        minerals_range=tuple(d.get("minerals_range", defaults.minerals_range)),
        science_range=tuple(d.get("science_range", defaults.science_range)),
        repair_connectivity=d.get("repair_connectivity", False),
    )


def _fleet_to_dict(f: Fleet, now: float) -> dict:
    d = {"id": f.id, "owner": f.owner, "strength": f.strength}
    if isinstance(f.state, InTransit):
        d["transit"] = {
            "from_id": f.state.from_id,
            "to_id": f.state.to_id,
            "elapsed_ms": now - f.state.depart_at,
            "remaining_ms": f.state.arrive_at - now,
        }
    else:
        d["location_id"] = f.state.location_id
    return d


def _fleet_from_dict(d: dict, now: float) -> Fleet:
    transit = d.get("transit")
    if transit:
        state = InTransit(
            from_id=transit["from_id"],
            to_id=transit["to_id"],
            depart_at=now - transit["elapsed_ms"],
            arrive_at=now + transit["remaining_ms"],
        )
    else:
        state = Idle(d["location_id"])
    return Fleet(id=d["id"], owner=d["owner"], strength=d.get("strength", 0), state=state)


def _order_to_dict(o: MoveFleetOrder) -> dict:
    return {
        "player_id": o.player_id,
        "galaxy_id": o.galaxy_id,
        "tick": o.tick,
        "fleet_id": o.fleet_id,
        "to_system_id": o.to_system_id,
        "order_type": o.order_type.value,
        "status": o.status.value,
    }


def _order_from_dict(d: dict) -> MoveFleetOrder:
    return MoveFleetOrder(
        player_id=d["player_id"],
        galaxy_id=d["galaxy_id"],
        tick=d["tick"],
        fleet_id=d["fleet_id"],
        to_system_id=d["to_system_id"],
        order_type=OrderType(d.get("order_type", OrderType.MOVE_FLEET.value)),
        status=OrderStatus(d.get("status", OrderStatus.PENDING.value)),
    )


# ── Top-level API ─────────────────────────────────────────────────────

def save_game(
    session: GalaxySession,
    config: GalaxyConfig,
    viewport: Viewport,
    now: float,
    path: Path | None = None,
) -> Path:
    """Serialize the session to JSON and return the save path."""
    path = path or SAVE_FILE
    galaxy = session.galaxy
    data = {
        "version": SAVE_VERSION,
        "galaxy": {
            "id": galaxy.id,
            "name": galaxy.name,
            "seed": galaxy.seed,
            "tick": galaxy.tick,
            "status": galaxy.status.value,
        },
        "config": _config_to_dict(config),
        "players": [
            {"id": p.id, "empire_name": p.empire_name, "color": p.color, "ready": p.ready}
            for p in session.players
        ],
        "current_player_id": session.current_player_id,
        "ownership": dict(session.ownership),
        "fleets": [_fleet_to_dict(f, now) for f in session.fleets],
        "orders": [_order_to_dict(o) for o in session.orders],
        "viewport": {"x": viewport.x, "y": viewport.y, "zoom": viewport.zoom},
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.info("saved galaxy %s to %s", galaxy.id, path)
    return path


def load_game(
    now: float,
    path: Path | None = None,
) -> tuple[GalaxySession, GalaxyConfig, Viewport] | None:
    """Deserialize a saved session. Returns None if no usable save exists."""
    path = path or SAVE_FILE
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError):
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        logger.warning("could not read save file %s", path)
        return None
    if not isinstance(data, dict):
        logger.warning("save file %s does not hold a JSON object", path)
        return None

    try:
        if data.get("version") != SAVE_VERSION:
            logger.warning("ignoring save with version %r", data.get("version"))
            return None

        g = data["galaxy"]
        config = _config_from_dict(data["config"])
        galaxy = Galaxy(
            id=g["id"],
            name=g["name"],
            seed=g["seed"],
            tick=g.get("tick", 0),
            status=GalaxyStatus(g.get("status", GalaxyStatus.ACTIVE.value)),
        )
        if galaxy.id == DEV_GALAXY_ID:
            graph = build_dev_session(config).graph
        else:
            graph = generate_galaxy(galaxy.id, config, seed=galaxy.seed)

        fleets = [_fleet_from_dict(f, now) for f in data.get("fleets", [])]
        for fleet in fleets:
            if fleet.location_id not in graph:
                raise ValueError(f"fleet {fleet.id} is at unknown system {fleet.location_id}")

        session = GalaxySession(
            galaxy=galaxy,
            graph=graph,
            players=[
                Player(id=p["id"], empire_name=p["empire_name"], color=p["color"], ready=p.get("ready", True))
                for p in data.get("players", [])
            ],
            current_player_id=data.get("current_player_id"),
            ownership={sid: pid for sid, pid in data.get("ownership", {}).items() if sid in graph},
            fleets=fleets,
            orders=[_order_from_dict(o) for o in data.get("orders", [])],
        )
        v = data.get("viewport", {})
        viewport = Viewport(x=v.get("x", 0.0), y=v.get("y", 0.0), zoom=v.get("zoom", 1.0))
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("save file %s is corrupt: %s", path, exc)
        return None

    return session, config, viewport


def has_save(path: Path | None = None) -> bool:
    """Check if a save file exists."""
    return (path or SAVE_FILE).exists()


def delete_save(path: Path | None = None) -> None:
    """Remove the save file if it exists."""
    path = path or SAVE_FILE
    if path.exists():
        path.unlink()
