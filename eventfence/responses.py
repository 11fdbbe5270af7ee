# responses.py
"""Sobre de respuesta {success, data, count?} y serialización de documentos."""
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from eventfence.models.events import Event
from eventfence.models.geofences import Geofence
from eventfence.schemas.events import to_utc


def _timestamp(value: Optional[datetime]) -> Optional[datetime]:
    return to_utc(value) if value is not None else None


def serialize_organizer(event: Event, select: Optional[Iterable[str]]):
    """
    Sin `select` el organizador es solo su ID; con `select` se proyectan
    esos campos del usuario (null si el usuario no existe).
    """
    if select is None:
        return event.organizer_id

    user = event.organizer
    if user is None:
        return None

    organizer = {"id": user.id}
    for field in select:
        organizer[field] = getattr(user, field)
    return organizer


def serialize_event(event: Event, organizer_fields: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    # Los campos adicionales nunca pisan los del documento
    document = dict(event.extra or {})
    document.update({
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "category": event.category,
        "date": _timestamp(event.date),
        "status": event.status,
        "coordinates": {
            "latitude": event.latitude,
            "longitude": event.longitude,
        },
        "organizer": serialize_organizer(event, organizer_fields),
        "created_at": _timestamp(event.created_at),
    })
    return document


def serialize_geofence(geofence: Geofence) -> Dict[str, Any]:
    return {
        "id": geofence.id,
        "event": geofence.event_id,
        "center": {
            "latitude": geofence.center_latitude,
            "longitude": geofence.center_longitude,
        },
        "radius": geofence.radius,
        "traffic_impact": {
            "level": geofence.traffic_impact_level,
            "description": geofence.traffic_impact_description,
        },
        "created_by": geofence.created_by,
        "created_at": _timestamp(geofence.created_at),
    }


def success(data: Any, count: Optional[int] = None, **extra) -> Dict[str, Any]:
    body = {"success": True}
    if count is not None:
        body["count"] = count
    body.update(extra)
    body["data"] = data
    return body


def failure(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}
