from __future__ import annotations

from typing import Dict, Optional

from trip_planner.planning.catalog import DestinationCatalog
from trip_planner.planning.itinerary import Itinerary


class InMemoryRepository:
    def __init__(self, catalog: Optional[DestinationCatalog] = None) -> None:
        self.catalog = catalog if catalog is not None else DestinationCatalog()
        self.itineraries: Dict[str, Itinerary] = {}

    def save_itinerary(self, itinerary_id: str, itinerary: Itinerary) -> Itinerary:
        self.itineraries[itinerary_id] = itinerary
        return itinerary

    def get_itinerary(self, itinerary_id: str) -> Optional[Itinerary]:
        return self.itineraries.get(itinerary_id)
