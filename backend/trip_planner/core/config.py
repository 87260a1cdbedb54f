from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    app_name: str = "Smart Trip Planner"
    log_level: str = Field("WARNING", validation_alias="LOG_LEVEL")
    default_traveler: str = Field("", validation_alias="DEFAULT_TRAVELER")
    city_transport_cost: float = Field(50.0, validation_alias="CITY_TRANSPORT_COST")
    tour_daily_cost: float = Field(100.0, validation_alias="TOUR_DAILY_COST")
    catalog_import_path: str | None = Field(None, validation_alias="CATALOG_IMPORT_PATH")
    http_timeout: int = Field(10, validation_alias="HTTP_TIMEOUT")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()

