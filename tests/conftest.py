"""Shared fixtures: a tiny hand-built galaxy, a fake clock and a scheduler."""

from __future__ import annotations

import pytest

from starlanes.models.fleet import Fleet
from starlanes.models.galaxy import Galaxy, GalaxyGraph, Lane, StarType, System, distance
from starlanes.models.session import GalaxySession, Player
from starlanes.ui.frames import FrameScheduler
from starlanes.ui.map_controller import MapController
from starlanes.ui.viewport import Viewport

SCREEN = (1000, 800)


class FakeClock:
    """Millisecond clock the test moves by hand."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


def make_system(sid: str, x: float, y: float) -> System:
    return System(id=sid, galaxy_id="test", name=sid.upper(), x=x, y=y, star_type=StarType.YELLOW, planet_count=3)


def make_lane(a: System, b: System) -> Lane:
    return Lane(id=f"lane-{a.id}-{b.id}", galaxy_id="test", from_system_id=a.id, to_system_id=b.id, distance=distance(a, b))


@pytest.fixture
def line_graph() -> GalaxyGraph:
    """a -- b -- c in a row, plus d far away with no lanes."""
    a = make_system("a", 0, 0)
    b = make_system("b", 400, 0)
    c = make_system("c", 1400, 0)
    d = make_system("d", 5000, 5000)
    return GalaxyGraph("test", [a, b, c, d], [make_lane(a, b), make_lane(b, c)])


@pytest.fixture
def session(line_graph) -> GalaxySession:
    return GalaxySession(
        galaxy=Galaxy(id="test", name="Test Galaxy", seed=0),
        graph=line_graph,
        players=[Player(id="player", empire_name="Player", color="#4a9eff")],
        current_player_id="player",
        ownership={"a": "player"},
        fleets=[Fleet.at("fleet-1", "player", "a", strength=10)],
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture
def controller(session, scheduler, clock) -> MapController:
    return MapController(session, scheduler, clock, SCREEN, Viewport(0.0, 0.0, 1.0))
