import logging
from pathlib import Path
from typing import List, Tuple
from uuid import uuid4

from trip_planner.core.config import Settings, get_settings
from trip_planner.core.errors import ItineraryNotFound
from trip_planner.models.domain import Destination
from trip_planner.planning.exporter import render_plan, save_plan
from trip_planner.planning.itinerary import Itinerary
from trip_planner.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)


class PlanningService:
    """
    Session-level operations shared by the console menu and the HTTP API.
    Destination numbers are 1-based, as shown to the user.
    """

    def __init__(self, repository: InMemoryRepository, settings: Settings | None = None):
        self.repository = repository
        self.settings = settings or get_settings()

    @property
    def catalog(self):
        return self.repository.catalog

    def load_catalog(self) -> int:
        """Seed an empty catalog and apply the configured import file, if any."""
        if len(self.catalog) == 0:
            self.catalog.load_defaults(
                transport_cost=self.settings.city_transport_cost,
                daily_cost=self.settings.tour_daily_cost,
            )
        if self.settings.catalog_import_path:
            self.import_destinations(self.settings.catalog_import_path)
        return len(self.catalog)

    def list_destinations(self) -> Tuple[Destination, ...]:
        return self.catalog.all()

    def get_destination(self, number: int) -> Destination:
        return self.catalog.get(number - 1)

    def import_destinations(self, source: str | Path) -> int:
        source_str = str(source)
        if source_str.startswith(("http://", "https://")):
            imported = self.catalog.import_url(source_str, timeout=self.settings.http_timeout)
        else:
            imported = self.catalog.import_file(source)
        return len(imported)

    def import_lines(self, lines: List[str]) -> int:
        return len(self.catalog.import_lines(lines))

    def start_session(self, traveler_name: str, budget: float) -> str:
        itinerary = Itinerary(traveler_name=traveler_name)
        itinerary.set_budget(budget)
        itinerary_id = str(uuid4())
        self.repository.save_itinerary(itinerary_id, itinerary)
        logger.info("Started itinerary %s for %r with budget %.2f", itinerary_id, traveler_name, budget)
        return itinerary_id

    def get_itinerary(self, itinerary_id: str) -> Itinerary:
        itinerary = self.repository.get_itinerary(itinerary_id)
        if itinerary is None:
            raise ItineraryNotFound(itinerary_id)
        return itinerary

    def add_destination(self, itinerary_id: str, number: int) -> Destination:
        itinerary = self.get_itinerary(itinerary_id)
        dest = self.get_destination(number)
        itinerary.add_destination(dest)
        logger.info("Added %s to itinerary %s", dest.name, itinerary_id)
        return dest

    def render_itinerary(self, itinerary_id: str) -> str:
        return render_plan(self.get_itinerary(itinerary_id).snapshot())

    def export_itinerary(self, itinerary_id: str, path: str | Path) -> Path:
        itinerary = self.get_itinerary(itinerary_id)
        try:
            return save_plan(itinerary.snapshot(), path)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Export of itinerary %s failed: %s", itinerary_id, exc)
            raise
