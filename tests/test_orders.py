"""Tests for move orders and the mock tick."""

import logging

from starlanes.models.fleet import Fleet
from starlanes.models.orders import (
    MoveFleetOrder,
    OrderStatus,
    OrderType,
    can_fleet_move,
    create_move_order,
    simulate_tick,
    validate_move_order,
)


def test_create_move_order_defaults():
    order = create_move_order("player", "test", 4, "fleet-1", "b")
    assert order == MoveFleetOrder("player", "test", 4, "fleet-1", "b")
    assert order.order_type is OrderType.MOVE_FLEET
    assert order.status is OrderStatus.PENDING


class TestValidateMoveOrder:

    def test_valid(self, session):
        order = create_move_order("player", "test", 0, "fleet-1", "b")
        fleet = session.get_fleet("fleet-1")
        target = session.graph.get_system("b")
        assert validate_move_order(order, fleet, target, session.graph) == (True, None)

    def test_missing_fleet(self, session):
        order = create_move_order("player", "test", 0, "ghost", "b")
        target = session.graph.get_system("b")
        assert validate_move_order(order, None, target, session.graph) == (False, "Fleet not found")

    def test_missing_target(self, session):
        order = create_move_order("player", "test", 0, "fleet-1", "zz")
        fleet = session.get_fleet("fleet-1")
        assert validate_move_order(order, fleet, None, session.graph) == (False, "Target system not found")

    def test_fleet_mismatch(self, session):
        order = create_move_order("player", "test", 0, "fleet-9", "b")
        fleet = session.get_fleet("fleet-1")
        target = session.graph.get_system("b")
        assert validate_move_order(order, fleet, target, session.graph) == (False, "Fleet ID mismatch")

    def test_target_mismatch(self, session):
        order = create_move_order("player", "test", 0, "fleet-1", "c")
        fleet = session.get_fleet("fleet-1")
        target = session.graph.get_system("b")
        assert validate_move_order(order, fleet, target, session.graph) == (False, "Target system ID mismatch")

    def test_not_connected(self, session):
        order = create_move_order("player", "test", 0, "fleet-1", "c")
        fleet = session.get_fleet("fleet-1")
        target = session.graph.get_system("c")
        assert validate_move_order(order, fleet, target, session.graph) == (
            False,
            "Systems are not connected by a lane",
        )


def test_can_fleet_move(session):
    fleet = Fleet.at("x", "player", "b")
    assert can_fleet_move(fleet, session.graph.get_system("c"), session.graph) == (True, None)
    assert can_fleet_move(fleet, session.graph.get_system("d"), session.graph)[0] is False


def test_simulate_tick_reports_and_changes_nothing(session, caplog):
    session.orders.append(create_move_order("player", "test", 0, "fleet-1", "b"))
    with caplog.at_level(logging.INFO, logger="starlanes.models.orders"):
        result = simulate_tick(session)
    assert result is session
    assert session.galaxy.tick == 0
    assert session.orders[0].status is OrderStatus.PENDING
    assert session.get_fleet("fleet-1").location_id == "a"
    assert "1 pending order" in caplog.text


def test_simulate_tick_without_galaxy(session, caplog):
    session.galaxy = None
    with caplog.at_level(logging.WARNING, logger="starlanes.models.orders"):
        assert simulate_tick(session) is session
    assert "Cannot simulate tick: no galaxy loaded" in caplog.text
