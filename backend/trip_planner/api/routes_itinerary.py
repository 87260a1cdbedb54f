from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from trip_planner.api import get_planning_service
from trip_planner.core.errors import InvalidBudget, ItineraryNotFound, OutOfRange
from trip_planner.models.schemas import (
    AddDestinationRequest,
    ItineraryCreate,
    ItinerarySchema,
)
from trip_planner.services.planning_service import PlanningService

router = APIRouter()


def _load(service: PlanningService, itinerary_id: str):
    try:
        return service.get_itinerary(itinerary_id)
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("", response_model=ItinerarySchema, status_code=201)
def create_itinerary(
    payload: ItineraryCreate, service: PlanningService = Depends(get_planning_service)
) -> ItinerarySchema:
    try:
        itinerary_id = service.start_session(payload.traveler_name, payload.budget)
    except InvalidBudget as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    itinerary = service.get_itinerary(itinerary_id)
    return ItinerarySchema.from_domain(itinerary_id, itinerary.snapshot())


@router.get("/{itinerary_id}", response_model=ItinerarySchema)
def get_itinerary(
    itinerary_id: str, service: PlanningService = Depends(get_planning_service)
) -> ItinerarySchema:
    itinerary = _load(service, itinerary_id)
    return ItinerarySchema.from_domain(itinerary_id, itinerary.snapshot())


@router.post("/{itinerary_id}/destinations", response_model=ItinerarySchema)
def add_destination(
    itinerary_id: str,
    payload: AddDestinationRequest,
    service: PlanningService = Depends(get_planning_service),
) -> ItinerarySchema:
    itinerary = _load(service, itinerary_id)
    try:
        service.add_destination(itinerary_id, payload.number)
    except OutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ItinerarySchema.from_domain(itinerary_id, itinerary.snapshot())


@router.get("/{itinerary_id}/export", response_class=PlainTextResponse)
def export_itinerary(
    itinerary_id: str, service: PlanningService = Depends(get_planning_service)
) -> str:
    _load(service, itinerary_id)
    return service.render_itinerary(itinerary_id)
