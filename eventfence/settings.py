# settings.py
"""
Configuración centralizada del servicio.

Usa pydantic-settings: los valores se leen de variables de entorno con
prefijo EVENTFENCE_ o de un archivo .env en el directorio de trabajo.

Uso:
    from eventfence.settings import settings

    url = settings.database_url
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración global de la API de eventos"""

    model_config = SettingsConfigDict(
        env_prefix="EVENTFENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ===== Base de datos =====
    database_url: str = "sqlite:///./eventfence.db"
    database_echo: bool = False

    # ===== Logging =====
    log_level: str = "INFO"

    # ===== CORS =====
    cors_origins: List[str] = ["*"]

    # ===== Geofences =====
    default_geofence_radius: float = 500
    default_traffic_impact: str = "low"

    # Radio de la Tierra en km (6378 km / 3963 millas)
    earth_radius_km: float = 6378

    # ===== Consultas =====
    upcoming_limit: int = 10
    default_page_size: int = 25
    max_page_size: int = 100


settings = Settings()
