# crud/geofences_crud.py
from sqlalchemy.orm import Session
from typing import Optional

from eventfence.models.events import Event
from eventfence.models.geofences import Geofence


def create_geofence(
    db: Session,
    event: Event,
    radius: float,
    traffic_level: str,
    created_by: str,
) -> Geofence:
    """Crear el geofence de un evento, centrado en sus coordenadas"""
    db_geofence = Geofence(
        event_id=event.id,
        center_latitude=event.latitude,
        center_longitude=event.longitude,
        radius=radius,
        traffic_impact_level=traffic_level,
        traffic_impact_description=f"Traffic impact for {event.title}",
        created_by=created_by,
    )
    db.add(db_geofence)
    db.flush()
    return db_geofence


def get_geofence_by_event(db: Session, event_id: str) -> Optional[Geofence]:
    return db.query(Geofence).filter(Geofence.event_id == event_id).first()


def update_geofence_for_event(
    db: Session,
    event_id: str,
    latitude: float,
    longitude: float,
    radius: float,
    traffic_level: str,
) -> Optional[Geofence]:
    """Mover el geofence del evento; None si el evento no tiene geofence"""
    db_geofence = get_geofence_by_event(db, event_id)

    if not db_geofence:
        return None

    db_geofence.center_latitude = latitude
    db_geofence.center_longitude = longitude
    db_geofence.radius = radius
    db_geofence.traffic_impact_level = traffic_level

    db.flush()
    return db_geofence


def delete_geofence_for_event(db: Session, event_id: str) -> bool:
    """Eliminar el geofence del evento; False si no existía"""
    db_geofence = get_geofence_by_event(db, event_id)

    if not db_geofence:
        return False

    db.delete(db_geofence)
    db.flush()
    return True
