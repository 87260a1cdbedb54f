from fastapi import Depends, HTTPException
from starlette.requests import Request

from trip_planner.core.config import Settings, get_settings
from trip_planner.services.planning_service import PlanningService
from trip_planner.storage.repository import InMemoryRepository


def get_repository(request: Request) -> InMemoryRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Catalog repository not initialized")
    return repository


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_planning_service(
    repository: InMemoryRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
) -> PlanningService:
    return PlanningService(repository=repository, settings=settings)
