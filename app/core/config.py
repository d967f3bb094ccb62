"""Configuración de la aplicación mediante variables de entorno."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración cargada desde .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "API Formulario Inscripción Exámenes"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Base de datos (SQLite local por defecto; PostgreSQL vía URL + token)
    database_url: str = "sqlite+aiosqlite:///./inscripciones.db"
    database_auth_token: str | None = None

    # Catálogo
    seed_on_startup: bool = True

    # Formulario
    max_materias_por_inscripcion: int = 3


settings = Settings()
