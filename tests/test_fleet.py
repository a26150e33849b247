"""Tests for fleet transit."""

import pytest

from starlanes.models.fleet import Fleet, Idle, InTransit, arrive_if_due, depart, travel_ms


@pytest.mark.parametrize(
    "dist, expected",
    [
        (0.0, 1500),
        (100.0, 1500),
        (187.5, 1500),
        (400.0, 3200),
        (600.0, 4800),
        (750.0, 6000),
        (5000.0, 6000),
    ],
)
def test_travel_ms_is_clamped(dist, expected):
    assert travel_ms(dist) == expected


def test_depart_and_arrive(line_graph):
    fleet = Fleet.at("f", "p", "a")
    trip = depart(fleet, line_graph, "b", now=1000.0)

    assert trip == InTransit("a", "b", 1000.0, 4200.0)
    assert fleet.in_transit
    assert fleet.location_id == "a"

    assert not arrive_if_due(fleet, 4199.0)
    assert fleet.in_transit
    assert arrive_if_due(fleet, 4200.0)
    assert fleet.state == Idle("b")
    assert not arrive_if_due(fleet, 9999.0)


def test_arrival_never_later_than_max_travel(line_graph):
    fleet = Fleet.at("f", "p", "b")
    depart(fleet, line_graph, "c", now=0.0)
    assert fleet.state.arrive_at == 6000.0
    assert arrive_if_due(fleet, 6000.0)
    assert fleet.location_id == "c"


def test_depart_refuses_non_adjacent(line_graph):
    fleet = Fleet.at("f", "p", "a")
    assert depart(fleet, line_graph, "c", now=0.0) is None
    assert depart(fleet, line_graph, "d", now=0.0) is None
    assert depart(fleet, line_graph, "nowhere", now=0.0) is None
    assert fleet.state == Idle("a")


def test_depart_refuses_while_in_transit(line_graph):
    fleet = Fleet.at("f", "p", "a")
    first = depart(fleet, line_graph, "b", now=0.0)
    assert depart(fleet, line_graph, "b", now=10.0) is None
    assert fleet.state is first


def test_valid_targets(line_graph):
    fleet = Fleet.at("f", "p", "b")
    assert fleet.valid_targets(line_graph) == {"a", "c"}
    depart(fleet, line_graph, "a", now=0.0)
    assert fleet.valid_targets(line_graph) == set()


def test_position_interpolates_along_lane(line_graph):
    fleet = Fleet.at("f", "p", "a")
    assert fleet.position(line_graph, 0.0) == (0.0, 0.0)

    depart(fleet, line_graph, "b", now=0.0)  # 3200 ms
    assert fleet.position(line_graph, 0.0) == (0.0, 0.0)
    assert fleet.position(line_graph, 1600.0) == pytest.approx((200.0, 0.0))
    assert fleet.position(line_graph, 10_000.0) == pytest.approx((400.0, 0.0))


def test_progress_clamps():
    trip = InTransit("a", "b", 100.0, 200.0)
    assert trip.progress(0.0) == 0.0
    assert trip.progress(150.0) == 0.5
    assert trip.progress(500.0) == 1.0
    assert InTransit("a", "b", 5.0, 5.0).progress(0.0) == 1.0
