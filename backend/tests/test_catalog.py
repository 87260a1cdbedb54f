from pathlib import Path

import pytest
import requests

from trip_planner.core.errors import OutOfRange, ParseError, ReadError
from trip_planner.models.domain import CityDetails, DestinationKind, TourDetails
from trip_planner.planning.catalog import DestinationCatalog


def _defaults() -> DestinationCatalog:
    catalog = DestinationCatalog()
    catalog.load_defaults()
    return catalog


def test_load_defaults_fixed_order():
    catalog = _defaults()
    assert [d.name for d in catalog.all()] == [
        "Paris",
        "Tokyo",
        "New York",
        "Bali",
        "Swiss Alps",
        "Dubai",
    ]
    assert catalog.get(0).name == "Paris"
    assert [d.kind for d in catalog] == [DestinationKind.city] * 3 + [DestinationKind.tour] * 3


def test_default_entries_carry_variant_details():
    catalog = _defaults()
    paris = catalog.get(0)
    assert isinstance(paris.details, CityDetails)
    assert paris.details.attractions == ("Eiffel Tower", "Louvre Museum", "Notre-Dame")
    assert paris.details.transport_cost == 50.0

    dubai = catalog.get(5)
    assert isinstance(dubai.details, TourDetails)
    assert (dubai.details.duration_days, dubai.details.tour_type) == (4, "Luxury")
    assert dubai.total_tour_cost == 900.0 + 4 * 100.0


def test_load_defaults_with_custom_costs():
    catalog = DestinationCatalog()
    catalog.load_defaults(transport_cost=75.0, daily_cost=120.0)
    assert catalog.get(1).details.transport_cost == 75.0
    assert catalog.get(3).details.daily_cost == 120.0


def test_get_bounds():
    catalog = _defaults()
    for index in range(len(catalog)):
        assert catalog.get(index) is catalog.all()[index]
    for index in (-1, -6, 6, 100):
        with pytest.raises(OutOfRange):
            catalog.get(index)


def test_import_lines_appends_plain_and_skips_short_lines():
    catalog = _defaults()
    imported = catalog.import_lines(
        ["Rome, Italy, 300.0, Ancient capital", "badline", "", "Oslo,Norway,450,Fjords,extra"]
    )

    assert len(catalog) == 8
    rome = catalog.get(6)
    assert (rome.name, rome.country, rome.base_cost, rome.description) == (
        "Rome",
        "Italy",
        300.0,
        "Ancient capital",
    )
    assert rome.kind == DestinationKind.plain
    assert catalog.get(7).description == "Fjords"
    assert imported == [rome, catalog.get(7)]


def test_import_only_bad_line_changes_nothing():
    catalog = _defaults()
    assert catalog.import_lines(["badline"]) == []
    assert len(catalog) == 6


def test_non_numeric_cost_fails_whole_import():
    catalog = _defaults()
    with pytest.raises(ParseError):
        catalog.import_lines(["Rome, Italy, 300.0, Ancient capital", "Oslo, Norway, cheap, Fjords"])
    assert len(catalog) == 6


def test_import_file(tmp_path: Path):
    source = tmp_path / "extra.txt"
    source.write_text("Rome, Italy, 300.0, Ancient capital\nbadline\n", encoding="utf-8")
    catalog = DestinationCatalog()
    assert len(catalog.import_file(source)) == 1
    assert catalog.get(0).name == "Rome"


def test_import_missing_file_is_read_error(tmp_path: Path):
    catalog = DestinationCatalog()
    with pytest.raises(ReadError):
        catalog.import_file(tmp_path / "missing.txt")
    assert len(catalog) == 0


class _FakeResponse:
    def __init__(self, text: str, status: int = 200):
        self.text = text
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


def test_import_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse("Rome, Italy, 300.0, Ancient capital\r\nbadline\r\n")

    monkeypatch.setattr(requests, "get", fake_get)
    catalog = DestinationCatalog()
    catalog.import_url("https://example.com/extra.txt", timeout=3)
    assert calls == [("https://example.com/extra.txt", 3)]
    assert [d.name for d in catalog] == ["Rome"]
    assert catalog.get(0).description == "Ancient capital"


def test_import_url_failure_is_read_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse("", status=404))
    catalog = DestinationCatalog()
    with pytest.raises(ReadError):
        catalog.import_url("https://example.com/missing.txt")
    assert len(catalog) == 0


def test_trailing_empty_fields_do_not_count():
    catalog = _defaults()
    assert catalog.import_lines(["Rome,Italy,300.0,", "Oslo,Norway,cheap,", "Nice,France,,,"]) == []
    assert len(catalog) == 6

    imported = catalog.import_lines(["Rome, Italy, 300.0, ,"])
    assert [(d.name, d.description) for d in imported] == [("Rome", "")]


def test_short_line_with_bad_cost_does_not_fail_import():
    catalog = _defaults()
    catalog.import_lines(["Rome, Italy, 300.0, Ancient capital", "Oslo,Norway,cheap,"])
    assert [d.name for d in catalog][-1] == "Rome"
    assert len(catalog) == 7
