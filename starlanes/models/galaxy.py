"""Procedural galaxy generation for Starlanes.

A galaxy is a static graph: star systems scattered over a rectangular field,
joined by hyperlanes to their nearest neighbours. The graph is generated once
per galaxy and never mutated afterwards; ownership and fleets live elsewhere.
"""

from __future__ import annotations

import enum
import logging
import math
import random
from dataclasses import dataclass, field

from .rng import SeededRNG

logger = logging.getLogger(__name__)


class StarType(enum.Enum):
    """Types of stars in the galaxy."""

    RED_DWARF = "red_dwarf"
    YELLOW = "yellow"
    BLUE_GIANT = "blue_giant"
    WHITE_DWARF = "white_dwarf"


class GalaxyStatus(enum.Enum):
    LOBBY = "lobby"
    ACTIVE = "active"
    PAUSED = "paused"
    FINISHED = "finished"


class GalaxyError(ValueError):
    """Raised when a galaxy graph or its configuration is malformed."""


@dataclass(frozen=True)
class Yields:
    """Per-turn resource output of a system."""

    energy: int = 0
    minerals: int = 0
    science: int = 0


@dataclass(frozen=True)
class System:
    """A single star system in the galaxy."""

    id: str
    galaxy_id: str
    name: str
    x: float  # Galaxy-space position
    y: float
    star_type: StarType
    planet_count: int = 0
    yields: Yields = field(default_factory=Yields)


@dataclass(frozen=True)
class Lane:
    """Undirected hyperlane between two systems."""

    id: str
    galaxy_id: str
    from_system_id: str
    to_system_id: str
    distance: float

    @property
    def key(self) -> tuple[str, str]:
        return lane_key(self.from_system_id, self.to_system_id)


@dataclass
class Galaxy:
    """Galaxy metadata: the graph itself is held by ``GalaxyGraph``."""

    id: str
    name: str
    seed: int
    tick: int = 0
    status: GalaxyStatus = GalaxyStatus.ACTIVE


DEFAULT_STAR_TYPES: tuple[StarType, ...] = (
    StarType.RED_DWARF,
    StarType.YELLOW,
    StarType.BLUE_GIANT,
    StarType.WHITE_DWARF,
)


@dataclass
class GalaxyConfig:
    """Tunable parameters for galaxy generation.

    Ranges are inclusive ``(min, max)`` pairs. The defaults reproduce the
    development galaxy used by the golden test fixtures.
    """

    system_count: int = 20
    width: float = 2000.0
    height: float = 2000.0
    star_types: tuple[StarType, ...] = DEFAULT_STAR_TYPES
    neighbor_count: int = 3

    planet_range: tuple[int, int] = (0, 6)
    energy_range: tuple[int, int] = (2, 8)
    minerals_range: tuple[int, int] = (1, 7)
    science_range: tuple[int, int] = (1, 6)

    # Join disconnected clusters with their shortest bridging lanes
    repair_connectivity: bool = False

    def validate(self) -> None:
        if self.system_count < 0:
            raise GalaxyError(f"system_count must be >= 0, got {self.system_count}")
        if self.neighbor_count < 0:
            raise GalaxyError(f"neighbor_count must be >= 0, got {self.neighbor_count}")
        if self.width <= 0 or self.height <= 0:
            raise GalaxyError(f"field must have positive size, got {self.width}x{self.height}")
        if not self.star_types:
            raise GalaxyError("star_types must not be empty")
        for name in ("planet_range", "energy_range", "minerals_range", "science_range"):
            lo, hi = getattr(self, name)
            if lo < 0 or hi < lo:
                raise GalaxyError(f"{name} must be a non-negative (min, max) pair, got {(lo, hi)}")


def distance(a: System, b: System) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def lane_key(a: str, b: str) -> tuple[str, str]:
    """Canonical, order-independent key for an unordered system pair."""
    return (a, b) if a <= b else (b, a)


def _lane_id(galaxy_id: str, a: str, b: str) -> str:
    first, second = lane_key(a, b)
    return f"{galaxy_id}-lane-{first}-{second}"


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------


class GalaxyGraph:
    """Immutable system/lane graph with precomputed lookups."""

    def __init__(
        self,
        galaxy_id: str,
        systems: list[System],
        lanes: list[Lane],
        seed: int | None = None,
    ) -> None:
        self.galaxy_id = galaxy_id
        self.seed = seed
        self.systems: tuple[System, ...] = tuple(systems)
        self.lanes: tuple[Lane, ...] = tuple(lanes)

        self._by_id: dict[str, System] = {}
        for system in self.systems:
            if system.id in self._by_id:
                raise GalaxyError(f"duplicate system id {system.id!r}")
            self._by_id[system.id] = system

        self._adjacency: dict[str, set[str]] = {sid: set() for sid in self._by_id}
        self._lane_keys: set[tuple[str, str]] = set()
        for lane in self.lanes:
            a, b = lane.from_system_id, lane.to_system_id
            if a not in self._by_id or b not in self._by_id:
                raise GalaxyError(f"lane {lane.id!r} references a system outside the galaxy")
            if a == b:
                raise GalaxyError(f"lane {lane.id!r} connects {a!r} to itself")
            if lane.key in self._lane_keys:
                raise GalaxyError(f"duplicate lane between {a!r} and {b!r}")
            self._lane_keys.add(lane.key)
            self._adjacency[a].add(b)
            self._adjacency[b].add(a)

    def __len__(self) -> int:
        return len(self.systems)

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._by_id

    def get_system(self, system_id: str) -> System | None:
        return self._by_id.get(system_id)

    def adjacent(self, system_id: str) -> set[str]:
        """Ids of systems one lane away. Unknown ids have no neighbours."""
        return set(self._adjacency.get(system_id, ()))

    def connected(self, a: str, b: str) -> bool:
        """True when a lane runs directly between ``a`` and ``b``."""
        return lane_key(a, b) in self._lane_keys

    def components(self) -> list[set[str]]:
        """Connected components, in order of first system generated."""
        parent = _union_find(self.systems, self.lanes)
        groups: dict[str, set[str]] = {}
        for system in self.systems:
            groups.setdefault(_find(parent, system.id), set()).add(system.id)
        return list(groups.values())

    def is_connected(self) -> bool:
        return len(self.components()) <= 1


def _union_find(systems, lanes) -> dict[str, str]:
    parent = {s.id: s.id for s in systems}
    for lane in lanes:
        ra, rb = _find(parent, lane.from_system_id), _find(parent, lane.to_system_id)
        if ra != rb:
            parent[ra] = rb
    return parent


def _find(parent: dict[str, str], x: str) -> str:
    while parent[x] != x:
        parent[x] = parent[parent[x]]  # path halving
        x = parent[x]
    return x


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def generate_systems(galaxy_id: str, config: GalaxyConfig, rng: SeededRNG) -> list[System]:
    """Scatter systems uniformly over the field.

    The draw order per system is fixed (x, y, star type, planets, energy,
    minerals, science); changing it changes every seeded galaxy.
    """
    systems: list[System] = []
    for i in range(config.system_count):
        x = rng.float(0, config.width)
        y = rng.float(0, config.height)
        star_type = rng.choice(config.star_types)
        planet_count = rng.range(*config.planet_range)
        yields = Yields(
            energy=rng.range(*config.energy_range),
            minerals=rng.range(*config.minerals_range),
            science=rng.range(*config.science_range),
        )
        systems.append(
            System(
                id=f"{galaxy_id}-system-{i + 1}",
                galaxy_id=galaxy_id,
                name=f"System {i + 1}",
                x=x,
                y=y,
                star_type=star_type,
                planet_count=planet_count,
                yields=yields,
            )
        )
    return systems


def generate_lanes(galaxy_id: str, systems: list[System], neighbor_count: int) -> list[Lane]:
    """Join every system to its ``neighbor_count`` nearest systems.

    A pair already joined from the other end is skipped, so a popular system
    can end up with more than ``neighbor_count`` lanes.
    """
    lanes: list[Lane] = []
    seen: set[tuple[str, str]] = set()

    for system in systems:
        # sorted() is stable: equidistant systems keep generation order
        nearest = sorted(
            ((other, distance(system, other)) for other in systems if other.id != system.id),
            key=lambda pair: pair[1],
        )[:neighbor_count]

        for neighbor, dist in nearest:
            key = lane_key(system.id, neighbor.id)
            if key in seen:
                continue
            seen.add(key)
            lanes.append(
                Lane(
                    id=_lane_id(galaxy_id, system.id, neighbor.id),
                    galaxy_id=galaxy_id,
                    from_system_id=system.id,
                    to_system_id=neighbor.id,
                    distance=dist,
                )
            )
    return lanes


def bridge_components(galaxy_id: str, systems: list[System], lanes: list[Lane]) -> list[Lane]:
    """Return extra lanes that merge all components into one.

    Repeatedly adds the shortest lane between two systems in different
    components until a single component remains.
    """
    parent = _union_find(systems, lanes)
    bridges: list[Lane] = []

    while len({_find(parent, s.id) for s in systems}) > 1:
        best: tuple[float, System, System] | None = None
        for i, a in enumerate(systems):
            root_a = _find(parent, a.id)
            for b in systems[i + 1:]:
                if _find(parent, b.id) == root_a:
                    continue
                dist = distance(a, b)
                if best is None or dist < best[0]:
                    best = (dist, a, b)

        dist, a, b = best
        parent[_find(parent, a.id)] = _find(parent, b.id)
        bridges.append(
            Lane(
                id=_lane_id(galaxy_id, a.id, b.id),
                galaxy_id=galaxy_id,
                from_system_id=a.id,
                to_system_id=b.id,
                distance=dist,
            )
        )
        logger.debug("bridged %s <-> %s (%.1f)", a.id, b.id, dist)

    return bridges


def generate_galaxy(
    galaxy_id: str,
    config: GalaxyConfig | None = None,
    seed: int | None = None,
) -> GalaxyGraph:
    """Generate a galaxy graph.

    Without a seed a random one is picked and recorded on the returned graph,
    so any galaxy can be regenerated later from ``graph.seed``.
    """
    config = config or GalaxyConfig()
    config.validate()
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    rng = SeededRNG(seed)
    systems = generate_systems(galaxy_id, config, rng)
    lanes = generate_lanes(galaxy_id, systems, config.neighbor_count)
    if config.repair_connectivity:
        lanes.extend(bridge_components(galaxy_id, systems, lanes))

    graph = GalaxyGraph(galaxy_id, systems, lanes, seed=seed)
    components = len(graph.components())
    logger.info(
        "generated galaxy %s: %d systems, %d lanes, %d component(s) (seed=%d)",
        galaxy_id, len(systems), len(lanes), components, seed,
    )
    if components > 1:
        logger.warning("galaxy %s is split into %d disconnected clusters", galaxy_id, components)
    return graph
