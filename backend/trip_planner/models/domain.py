from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

DEFAULT_TRANSPORT_COST = 50.0
DEFAULT_DAILY_COST = 100.0


class DestinationKind(str, Enum):
    plain = "plain"
    city = "city"
    tour = "tour"


@dataclass(frozen=True)
class CityDetails:
    attractions: Tuple[str, ...] = ()
    transport_cost: float = DEFAULT_TRANSPORT_COST


@dataclass(frozen=True)
class TourDetails:
    duration_days: int
    tour_type: str
    daily_cost: float = DEFAULT_DAILY_COST


@dataclass(frozen=True)
class Destination:
    """
    A catalog entry. The variant is carried by ``details``: ``None`` for a
    plain destination, ``CityDetails`` or ``TourDetails`` otherwise.
    """

    name: str
    country: str
    base_cost: float
    description: str
    details: Union[None, CityDetails, TourDetails] = None

    @classmethod
    def city(
        cls,
        name: str,
        country: str,
        base_cost: float,
        description: str,
        attractions: Iterable[str] = (),
        transport_cost: float = DEFAULT_TRANSPORT_COST,
    ) -> "Destination":
        return cls(
            name=name,
            country=country,
            base_cost=base_cost,
            description=description,
            details=CityDetails(
                attractions=tuple(attractions), transport_cost=transport_cost
            ),
        )

    @classmethod
    def tour(
        cls,
        name: str,
        country: str,
        base_cost: float,
        description: str,
        duration_days: int,
        tour_type: str,
        daily_cost: float = DEFAULT_DAILY_COST,
    ) -> "Destination":
        return cls(
            name=name,
            country=country,
            base_cost=base_cost,
            description=description,
            details=TourDetails(
                duration_days=duration_days, tour_type=tour_type, daily_cost=daily_cost
            ),
        )

    @property
    def kind(self) -> DestinationKind:
        if isinstance(self.details, CityDetails):
            return DestinationKind.city
        if isinstance(self.details, TourDetails):
            return DestinationKind.tour
        return DestinationKind.plain

    @property
    def total_tour_cost(self) -> Optional[float]:
        """Base cost plus every tour day; ``None`` for anything but a tour."""
        if not isinstance(self.details, TourDetails):
            return None
        return self.base_cost + self.details.daily_cost * self.details.duration_days


@dataclass(frozen=True)
class LineItem:
    label: str
    amount: float


@dataclass(frozen=True)
class LedgerSnapshot:
    budget: float
    total_cost: float
    remaining: float
    within_budget: bool
    over_budget_by: float = 0.0
    line_items: Tuple[LineItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ItinerarySnapshot:
    traveler_name: str
    stops: Tuple[Destination, ...]
    ledger: LedgerSnapshot
