from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    # App Settings
    app_name: str = "Flight Management"
    env: str = "development"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./flight_management.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Seeding
    seed_on_startup: bool = True
    airports_csv_path: Optional[str] = None  # Falls back to the bundled data/airports.csv

    # Defaults offered on the new-flight form
    default_fuel_consumption_per_km: float = 3.5
    default_takeoff_fuel: float = 500.0

    # CORS
    cors_origins: str = ""  # Comma-separated production origins

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
