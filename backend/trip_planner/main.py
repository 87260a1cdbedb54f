from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trip_planner.api import routes_catalog, routes_health, routes_itinerary
from trip_planner.core.config import Settings, get_settings
from trip_planner.core.logging import configure_logging
from trip_planner.services.planning_service import PlanningService
from trip_planner.storage.repository import InMemoryRepository


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = InMemoryRepository()
    PlanningService(repository=repository, settings=settings).load_catalog()

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_catalog.router, prefix="/catalog", tags=["catalog"])
    app.include_router(
        routes_itinerary.router, prefix="/itineraries", tags=["itineraries"]
    )

    # Inject repository into state for dependencies
    app.state.repository = repository
    app.state.settings = settings
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("trip_planner.main:create_app", factory=True, host="0.0.0.0", port=8000)
