# schemas/events.py
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from typing import Optional, Any, Dict
from datetime import datetime, timezone

from eventfence.models.events import EventStatus
from eventfence.models.geofences import TrafficImpactLevel

# Campos que el cliente no puede fijar como campos adicionales
RESERVED_FIELDS = frozenset({
    "id", "_id", "organizer", "organizer_id", "extra", "latitude",
    "longitude", "created_at", "createdAt",
})


def to_utc(value: datetime) -> datetime:
    """Fechas sin zona horaria se interpretan como UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LocationPoint(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, description="Latitud")
    longitude: float = Field(..., ge=-180, le=180, description="Longitud")


class EventPayload(BaseModel):
    """Cuerpo de creación/actualización: evento + opciones del geofence"""
    model_config = ConfigDict(extra="allow")

    geofence_radius: Optional[float] = Field(
        None,
        ge=0,
        validation_alias=AliasChoices("geofence_radius", "geofenceRadius"),
        description="Radio del geofence en metros (por defecto 500)",
    )
    traffic_impact: Optional[TrafficImpactLevel] = Field(
        None,
        validation_alias=AliasChoices("traffic_impact", "trafficImpact"),
        description="Nivel de impacto en el tráfico (por defecto low)",
    )

    def extra_fields(self) -> Dict[str, Any]:
        """Campos adicionales aceptados tal cual, salvo los reservados"""
        return {
            key: value for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_FIELDS
        }


class EventCreate(EventPayload):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)
    date: datetime = Field(..., description="Fecha del evento")
    status: EventStatus = EventStatus.UPCOMING
    coordinates: LocationPoint

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_utc(v)

    def event_fields(self) -> Dict[str, Any]:
        """Columnas del evento (sin opciones del geofence)"""
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "date": self.date,
            "status": self.status.value,
            "latitude": self.coordinates.latitude,
            "longitude": self.coordinates.longitude,
        }


class EventUpdate(EventPayload):
    """Actualización parcial: solo se aplican los campos enviados"""

    # Los campos obligatorios no aceptan null
    title: str = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    category: str = Field(None, min_length=1, max_length=100)
    date: datetime = None
    status: EventStatus = None
    coordinates: LocationPoint = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_utc(v)

    def event_fields(self) -> Dict[str, Any]:
        update_data = self.model_dump(
            exclude_unset=True,
            include={"title", "description", "category", "date", "status", "coordinates"},
        )

        if "coordinates" in update_data:
            coordinates = update_data.pop("coordinates")
            update_data["latitude"] = coordinates["latitude"]
            update_data["longitude"] = coordinates["longitude"]

        if "status" in update_data:
            update_data["status"] = update_data["status"].value

        return update_data
