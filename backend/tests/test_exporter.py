from pathlib import Path

import pytest

from trip_planner.core.errors import WriteError
from trip_planner.models.domain import Destination
from trip_planner.planning.catalog import DestinationCatalog
from trip_planner.planning.exporter import java_double, parse_stops, render_plan, save_plan
from trip_planner.planning.itinerary import Itinerary


def _itinerary() -> Itinerary:
    catalog = DestinationCatalog()
    catalog.load_defaults()
    itinerary = Itinerary("Sam")
    itinerary.set_budget(1000.0)
    itinerary.add_destination(catalog.get(0))
    itinerary.add_destination(catalog.get(3))
    return itinerary


def test_render_plan_layout():
    text = render_plan(_itinerary().snapshot())
    assert text.splitlines() == [
        "TRAVEL PLAN FOR: Sam",
        "=" * 50,
        "",
        "Stop 1: Paris, France",
        "Cost: $500.0",
        "",
        "Stop 2: Bali, Indonesia",
        "Cost: $400.0",
        "",
        "Total Budget: $1000.0",
        "Total Cost: $1650.0",
        "Remaining: $-650.0",
    ]


def test_empty_plan_has_only_header_and_summary():
    itinerary = Itinerary("")
    itinerary.set_budget(250)
    lines = render_plan(itinerary.snapshot()).splitlines()
    assert lines[0] == "TRAVEL PLAN FOR: "
    assert lines[-3:] == ["Total Budget: $250.0", "Total Cost: $0.0", "Remaining: $250.0"]
    assert parse_stops("\n".join(lines)) == []


def test_export_then_parse_stops_returns_selection():
    itinerary = _itinerary()
    itinerary.add_destination(Destination("Rome", "Italy", 300.25, "Ancient capital"))
    itinerary.add_destination(Destination("Bath, Somerset", "UK", 120.0, "Spa town"))

    parsed = parse_stops(render_plan(itinerary.snapshot()))

    assert parsed == [(d.name, d.country, d.base_cost) for d in itinerary.selected()]


def test_save_plan_writes_utf8(tmp_path: Path):
    itinerary = Itinerary("Zoë")
    itinerary.set_budget(500.0)
    itinerary.add_destination(Destination("Zürich", "Switzerland", 200.0, "Lake city"))

    path = save_plan(itinerary.snapshot(), tmp_path / "plan.txt")

    text = path.read_text(encoding="utf-8")
    assert text.startswith("TRAVEL PLAN FOR: Zoë\n")
    assert "Stop 1: Zürich, Switzerland" in text


def test_save_plan_to_missing_dir_is_write_error(tmp_path: Path):
    itinerary = _itinerary()
    with pytest.raises(WriteError):
        save_plan(itinerary.snapshot(), tmp_path / "nope" / "plan.txt")
    assert itinerary.ledger.total_cost == 1650.0


@pytest.mark.parametrize(
    "value,text",
    [
        (500.0, "500.0"),
        (-650.0, "-650.0"),
        (0.0, "0.0"),
        (0.001, "0.001"),
        (9999999.0, "9999999.0"),
        (1e7, "1.0E7"),
        (12345678.9, "1.23456789E7"),
        (-2.5e10, "-2.5E10"),
        (0.0001, "1.0E-4"),
        (1.5e-5, "1.5E-5"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
    ],
)
def test_java_double(value, text):
    assert java_double(value) == text


def test_large_costs_use_exponent_and_parse_back():
    itinerary = Itinerary("Rich")
    itinerary.set_budget(5e7)
    itinerary.add_destination(Destination("Moon", "Space", 12345678.9, "Far"))

    text = render_plan(itinerary.snapshot())

    assert "Cost: $1.23456789E7" in text
    assert "Total Budget: $5.0E7" in text
    assert parse_stops(text) == [("Moon", "Space", 12345678.9)]
