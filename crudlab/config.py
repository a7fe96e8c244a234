"""All settings, loaded from the environment or the .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "1.0.0"

EXERCISES = ("musicos", "alumnos", "proyectos")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_json: bool = False
    testing: bool = False

    # One SQLite file per exercise
    musicos_database_url: str = "sqlite:///db_musicos.db"
    alumnos_database_url: str = "sqlite:///db_alumnos.db"
    proyectos_database_url: str = "sqlite:///parcial.db"

    # Drop and recreate the schema on every start (discards data)
    musicos_reset_on_start: bool = False
    alumnos_reset_on_start: bool = False
    proyectos_reset_on_start: bool = True

    def database_url(self, exercise: str) -> str:
        if exercise not in EXERCISES:
            raise ValueError(f"Unknown exercise: {exercise}")
        return getattr(self, f"{exercise}_database_url")

    def reset_on_start(self, exercise: str) -> bool:
        if exercise not in EXERCISES:
            raise ValueError(f"Unknown exercise: {exercise}")
        return getattr(self, f"{exercise}_reset_on_start")


@lru_cache
def get_settings() -> Settings:
    return Settings()

