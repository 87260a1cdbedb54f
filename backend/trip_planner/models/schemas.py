from typing import List, Optional

from pydantic import BaseModel, Field

from trip_planner.models.domain import (
    CityDetails,
    Destination,
    DestinationKind,
    ItinerarySnapshot,
    LedgerSnapshot,
    LineItem,
    TourDetails,
)


class DestinationSchema(BaseModel):
    number: Optional[int] = None
    kind: DestinationKind
    name: str
    country: str
    base_cost: float
    description: str
    attractions: Optional[List[str]] = None
    transport_cost: Optional[float] = None
    duration_days: Optional[int] = None
    tour_type: Optional[str] = None
    daily_cost: Optional[float] = None
    total_tour_cost: Optional[float] = None

    @classmethod
    def from_domain(cls, obj: Destination, number: Optional[int] = None) -> "DestinationSchema":
        schema = cls(
            number=number,
            kind=obj.kind,
            name=obj.name,
            country=obj.country,
            base_cost=obj.base_cost,
            description=obj.description,
        )
        if isinstance(obj.details, CityDetails):
            schema.attractions = list(obj.details.attractions)
            schema.transport_cost = obj.details.transport_cost
        elif isinstance(obj.details, TourDetails):
            schema.duration_days = obj.details.duration_days
            schema.tour_type = obj.details.tour_type
            schema.daily_cost = obj.details.daily_cost
            schema.total_tour_cost = obj.total_tour_cost
        return schema


class LineItemSchema(BaseModel):
    label: str
    amount: float

    @classmethod
    def from_domain(cls, obj: LineItem) -> "LineItemSchema":
        return cls(label=obj.label, amount=obj.amount)


class LedgerSchema(BaseModel):
    budget: float
    total_cost: float
    remaining: float
    within_budget: bool
    over_budget_by: float
    line_items: List[LineItemSchema]

    @classmethod
    def from_domain(cls, obj: LedgerSnapshot) -> "LedgerSchema":
        return cls(
            budget=obj.budget,
            total_cost=obj.total_cost,
            remaining=obj.remaining,
            within_budget=obj.within_budget,
            over_budget_by=obj.over_budget_by,
            line_items=[LineItemSchema.from_domain(i) for i in obj.line_items],
        )


class ItinerarySchema(BaseModel):
    itinerary_id: str
    traveler_name: str
    stops: List[DestinationSchema]
    ledger: LedgerSchema

    @classmethod
    def from_domain(cls, itinerary_id: str, obj: ItinerarySnapshot) -> "ItinerarySchema":
        return cls(
            itinerary_id=itinerary_id,
            traveler_name=obj.traveler_name,
            stops=[DestinationSchema.from_domain(d) for d in obj.stops],
            ledger=LedgerSchema.from_domain(obj.ledger),
        )


class ItineraryCreate(BaseModel):
    traveler_name: str = ""
    budget: float = Field(..., examples=[1500.0])


class AddDestinationRequest(BaseModel):
    number: int = Field(..., description="1-based catalog number")


class ImportRequest(BaseModel):
    lines: List[str] = Field(default_factory=list)


class ImportResponse(BaseModel):
    imported: int
