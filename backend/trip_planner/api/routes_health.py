from fastapi import APIRouter, Depends

from trip_planner.api import get_app_settings, get_repository
from trip_planner.core.config import Settings
from trip_planner.storage.repository import InMemoryRepository

router = APIRouter()


@router.get("/health")
def healthcheck(
    repository: InMemoryRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    return {
        "status": "ok",
        "app": settings.app_name,
        "destinations": len(repository.catalog),
        "itineraries": len(repository.itineraries),
    }
