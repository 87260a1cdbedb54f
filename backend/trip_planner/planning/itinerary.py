from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from trip_planner.core.errors import BudgetAlreadySet, NoBudgetSet
from trip_planner.models.domain import (
    CityDetails,
    Destination,
    ItinerarySnapshot,
    LineItem,
    TourDetails,
)
from trip_planner.planning.ledger import CostLedger

logger = logging.getLogger(__name__)


def derive_line_items(dest: Destination) -> List[LineItem]:
    """Cost lines a destination contributes to the ledger, in booking order."""
    items = [LineItem(label=f"{dest.name} (Base)", amount=dest.base_cost)]
    details = dest.details
    if isinstance(details, CityDetails):
        items.append(
            LineItem(label=f"{dest.name} (Transport)", amount=details.transport_cost)
        )
    elif isinstance(details, TourDetails):
        items.append(
            LineItem(
                label=f"{dest.name} (Daily x{details.duration_days})",
                amount=details.daily_cost * details.duration_days,
            )
        )
    return items


class Itinerary:
    def __init__(self, traveler_name: str = "") -> None:
        self.traveler_name = traveler_name
        self.ledger: Optional[CostLedger] = None
        self._selected: List[Destination] = []

    def set_budget(self, budget: float) -> CostLedger:
        if self.ledger is not None:
            raise BudgetAlreadySet()
        self.ledger = CostLedger(budget)
        return self.ledger

    def add_destination(self, dest: Destination) -> List[LineItem]:
        if self.ledger is None:
            raise NoBudgetSet()
        items = derive_line_items(dest)
        for item in items:
            self.ledger.add_cost(item.label, item.amount)
        self._selected.append(dest)
        logger.debug(
            "Added %s to itinerary of %r (total %.2f)",
            dest.name,
            self.traveler_name,
            self.ledger.total_cost,
        )
        return items

    def selected(self) -> Tuple[Destination, ...]:
        return tuple(self._selected)

    def snapshot(self) -> ItinerarySnapshot:
        if self.ledger is None:
            raise NoBudgetSet()
        return ItinerarySnapshot(
            traveler_name=self.traveler_name,
            stops=self.selected(),
            ledger=self.ledger.snapshot(),
        )
