from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

import requests

from trip_planner.core.errors import OutOfRange, ParseError, ReadError
from trip_planner.models.domain import (
    DEFAULT_DAILY_COST,
    DEFAULT_TRANSPORT_COST,
    Destination,
)

logger = logging.getLogger(__name__)

MIN_IMPORT_FIELDS = 4

DEFAULT_CITIES: List[dict] = [
    {
        "name": "Paris",
        "country": "France",
        "base_cost": 500.0,
        "description": "The City of Light with iconic landmarks",
        "attractions": ["Eiffel Tower", "Louvre Museum", "Notre-Dame"],
    },
    {
        "name": "Tokyo",
        "country": "Japan",
        "base_cost": 600.0,
        "description": "Modern metropolis with rich culture",
        "attractions": ["Senso-ji Temple", "Tokyo Tower", "Shibuya Crossing"],
    },
    {
        "name": "New York",
        "country": "USA",
        "base_cost": 700.0,
        "description": "The city that never sleeps",
        "attractions": ["Statue of Liberty", "Central Park", "Times Square"],
    },
]

DEFAULT_TOURS: List[dict] = [
    {
        "name": "Bali",
        "country": "Indonesia",
        "base_cost": 400.0,
        "description": "Tropical paradise with beaches and temples",
        "duration_days": 7,
        "tour_type": "Beach & Culture",
    },
    {
        "name": "Swiss Alps",
        "country": "Switzerland",
        "base_cost": 800.0,
        "description": "Mountain adventure with stunning views",
        "duration_days": 5,
        "tour_type": "Adventure",
    },
    {
        "name": "Dubai",
        "country": "UAE",
        "base_cost": 900.0,
        "description": "Luxury and modern architecture",
        "duration_days": 4,
        "tour_type": "Luxury",
    },
]


def parse_import_line(line: str) -> Destination | None:
    """
    Parse ``name,country,baseCost,description[,...]``. Lines with fewer than
    four fields yield ``None``; a cost that is not a number raises ParseError.
    """
    parts = line.split(",")
    # trailing empty fields do not count towards the four required ones
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) < MIN_IMPORT_FIELDS:
        return None
    name, country, raw_cost, description = (p.strip() for p in parts[:MIN_IMPORT_FIELDS])
    try:
        base_cost = float(raw_cost)
    except ValueError as exc:
        raise ParseError(f"Invalid cost {raw_cost!r} for destination {name!r}") from exc
    return Destination(
        name=name, country=country, base_cost=base_cost, description=description
    )


class DestinationCatalog:
    """Ordered, append-only list of destinations a traveler can pick from."""

    def __init__(self) -> None:
        self._destinations: List[Destination] = []

    def __len__(self) -> int:
        return len(self._destinations)

    def __iter__(self) -> Iterator[Destination]:
        return iter(self.all())

    def load_defaults(
        self,
        transport_cost: float = DEFAULT_TRANSPORT_COST,
        daily_cost: float = DEFAULT_DAILY_COST,
    ) -> None:
        for city in DEFAULT_CITIES:
            self._destinations.append(
                Destination.city(transport_cost=transport_cost, **city)
            )
        for tour in DEFAULT_TOURS:
            self._destinations.append(Destination.tour(daily_cost=daily_cost, **tour))

    def import_lines(self, lines: Iterable[str]) -> List[Destination]:
        parsed: List[Destination] = []
        skipped = 0
        for line in lines:
            dest = parse_import_line(line.rstrip("\r\n"))
            if dest is None:
                skipped += 1
                continue
            parsed.append(dest)
        self._destinations.extend(parsed)
        if skipped:
            logger.debug("Skipped %d short import lines", skipped)
        return parsed

    def import_file(self, path: str | Path) -> List[Destination]:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read {path}: {exc}") from exc
        imported = self.import_lines(text.splitlines())
        logger.info("Loaded %d destinations from %s", len(imported), path)
        return imported

    def import_url(self, url: str, timeout: int = 10) -> List[Destination]:
        try:
            resp = requests.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise ReadError(f"Cannot fetch {url}: {exc}") from exc
        imported = self.import_lines(resp.text.splitlines())
        logger.info("Loaded %d destinations from %s", len(imported), url)
        return imported

    def get(self, index: int) -> Destination:
        if index < 0 or index >= len(self._destinations):
            raise OutOfRange(index)
        return self._destinations[index]

    def all(self) -> Tuple[Destination, ...]:
        return tuple(self._destinations)
