from typing import List

from fastapi import APIRouter, Depends, HTTPException

from trip_planner.api import get_planning_service
from trip_planner.core.errors import OutOfRange, ParseError
from trip_planner.models.schemas import DestinationSchema, ImportRequest, ImportResponse
from trip_planner.services.planning_service import PlanningService

router = APIRouter()


@router.get("", response_model=List[DestinationSchema])
def list_destinations(
    service: PlanningService = Depends(get_planning_service),
) -> List[DestinationSchema]:
    return [
        DestinationSchema.from_domain(dest, number=i)
        for i, dest in enumerate(service.list_destinations(), start=1)
    ]


@router.get("/{number}", response_model=DestinationSchema)
def get_destination(
    number: int, service: PlanningService = Depends(get_planning_service)
) -> DestinationSchema:
    try:
        dest = service.get_destination(number)
    except OutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return DestinationSchema.from_domain(dest, number=number)


@router.post("/import", response_model=ImportResponse)
def import_destinations(
    request: ImportRequest, service: PlanningService = Depends(get_planning_service)
) -> ImportResponse:
    try:
        imported = service.import_lines(request.lines)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ImportResponse(imported=imported)
