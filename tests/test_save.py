"""Tests for JSON save / load."""

import json

import pytest

from starlanes.models.dev_galaxy import build_dev_session
from starlanes.models.fleet import Idle, InTransit, depart
from starlanes.models.galaxy import GalaxyConfig
from starlanes.models.orders import create_move_order
from starlanes.models.save import SAVE_VERSION, delete_save, has_save, load_game, save_game
from starlanes.models.session import start_session
from starlanes.ui.viewport import Viewport


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "saves" / "save.json"


def test_round_trip_generated_galaxy(save_path):
    config = GalaxyConfig(system_count=15, neighbor_count=2)
    session = start_session("g", "Round Trip", config, seed=2024)
    session.galaxy.tick = 3
    session.orders.append(create_move_order("player", "g", 3, "g-fleet-1", "g-system-2"))

    written = save_game(session, config, Viewport(10.0, 20.0, 1.5), now=0.0, path=save_path)
    assert written == save_path
    assert has_save(save_path)

    loaded, loaded_config, viewport = load_game(now=0.0, path=save_path)
    assert loaded_config == config
    assert loaded.galaxy == session.galaxy
    assert loaded.graph.systems == session.graph.systems
    assert loaded.graph.lanes == session.graph.lanes
    assert loaded.players == session.players
    assert loaded.current_player_id == "player"
    assert loaded.ownership == session.ownership
    assert loaded.orders == session.orders
    assert [f.state for f in loaded.fleets] == [f.state for f in session.fleets]
    assert (viewport.x, viewport.y, viewport.zoom) == (10.0, 20.0, 1.5)


def test_dev_galaxy_keeps_its_territory(save_path):
    session = build_dev_session()
    save_game(session, GalaxyConfig(), Viewport(), now=0.0, path=save_path)
    loaded, _, _ = load_game(now=0.0, path=save_path)
    assert loaded.graph.systems == session.graph.systems
    assert loaded.graph.get_system("dev-system-9").planet_count == 2


def test_transit_is_rebased_onto_new_clock(save_path):
    session = build_dev_session()
    fleet = session.get_fleet("dev-fleet-1")
    depart(fleet, session.graph, "dev-system-12", now=10_000.0)  # 1500 ms trip
    save_game(session, GalaxyConfig(), Viewport(), now=10_500.0, path=save_path)

    loaded, _, _ = load_game(now=200.0, path=save_path)
    state = loaded.get_fleet("dev-fleet-1").state
    assert state == InTransit("dev-system-1", "dev-system-12", -300.0, 1200.0)


def test_missing_file(save_path):
    assert not has_save(save_path)
    assert load_game(now=0.0, path=save_path) is None


def test_corrupt_json(save_path):
    save_path.parent.mkdir(parents=True)
    save_path.write_text("{not json")
    assert load_game(now=0.0, path=save_path) is None


def test_undecodable_bytes(save_path):
    save_path.parent.mkdir(parents=True)
    save_path.write_bytes(b"\xff\xfe\x00garbage")
    assert load_game(now=0.0, path=save_path) is None


@pytest.mark.parametrize("payload", ["[]", '"x"', "3", "null"])
def test_top_level_not_an_object(save_path, payload):
    save_path.parent.mkdir(parents=True)
    save_path.write_text(payload)
    assert load_game(now=0.0, path=save_path) is None


def test_malformed_fleet_entry(save_path):
    save_game(build_dev_session(), GalaxyConfig(), Viewport(), now=0.0, path=save_path)
    data = json.loads(save_path.read_text())
    data["fleets"] = [3]
    save_path.write_text(json.dumps(data))
    assert load_game(now=0.0, path=save_path) is None


def test_wrong_version(save_path):
    save_path.parent.mkdir(parents=True)
    save_path.write_text(json.dumps({"version": SAVE_VERSION + 1}))
    assert load_game(now=0.0, path=save_path) is None


def test_missing_fields(save_path):
    save_path.parent.mkdir(parents=True)
    save_path.write_text(json.dumps({"version": SAVE_VERSION, "galaxy": {"id": "g"}}))
    assert load_game(now=0.0, path=save_path) is None


def test_fleet_at_unknown_system(save_path):
    session = build_dev_session()
    session.get_fleet("dev-fleet-1").state = Idle("dev-system-99")
    save_game(session, GalaxyConfig(), Viewport(), now=0.0, path=save_path)
    assert load_game(now=0.0, path=save_path) is None


def test_delete_save(save_path):
    save_game(build_dev_session(), GalaxyConfig(), Viewport(), now=0.0, path=save_path)
    delete_save(save_path)
    assert not has_save(save_path)
    delete_save(save_path)
