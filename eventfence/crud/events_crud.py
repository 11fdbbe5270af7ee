# crud/events_crud.py
"""
Adaptador de persistencia para eventos.

Las funciones no hacen commit: la capa de servicio agrupa el evento y su
geofence en una sola transacción.
"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import and_
from typing import Any, Dict, List, Optional, Sequence, Tuple
from datetime import datetime, timezone

from eventfence.models.events import Event, EventStatus
from eventfence import geo

SORTABLE_FIELDS = {
    "title": Event.title,
    "category": Event.category,
    "date": Event.date,
    "status": Event.status,
    "created_at": Event.created_at,
    "createdAt": Event.created_at,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_event(db: Session, fields: Dict[str, Any], extra: Dict[str, Any], organizer_id: str) -> Event:
    """Insertar un evento; el organizador siempre es el usuario autenticado"""
    db_event = Event(**fields, extra=dict(extra), organizer_id=organizer_id)
    db.add(db_event)
    db.flush()
    return db_event


def get_event(db: Session, event_id: str, with_organizer: bool = False) -> Optional[Event]:
    """Obtener un evento por ID"""
    query = db.query(Event)
    if with_organizer:
        query = query.options(selectinload(Event.organizer))
    return query.filter(Event.id == event_id).first()


def update_event(db: Session, db_event: Event, fields: Dict[str, Any], extra: Dict[str, Any]) -> Event:
    """Aplicar una actualización parcial"""
    for field, value in fields.items():
        setattr(db_event, field, value)

    if extra:
        # Reasignar para que SQLAlchemy detecte el cambio en la columna JSON
        db_event.extra = {**(db_event.extra or {}), **extra}

    db.flush()
    return db_event


def delete_event(db: Session, db_event: Event) -> None:
    db.delete(db_event)
    db.flush()


def get_events(
    db: Session,
    skip: int = 0,
    limit: int = 25,
    filters: Optional[Dict[str, Any]] = None,
    order_by: Sequence[Tuple[str, bool]] = (("date", True),),
) -> Tuple[List[Event], int]:
    """Listado general con filtros de igualdad, orden y paginación"""
    query = db.query(Event)

    filters = filters or {}
    if filters.get("category"):
        query = query.filter(Event.category == filters["category"])
    if filters.get("status"):
        query = query.filter(Event.status == filters["status"])
    if filters.get("organizer"):
        query = query.filter(Event.organizer_id == filters["organizer"])

    total = query.count()

    for field, descending in order_by:
        column = SORTABLE_FIELDS[field]
        query = query.order_by(column.desc() if descending else column.asc())

    events = query.order_by(Event.id).offset(skip).limit(limit).all()
    return events, total


def get_events_in_radius(
    db: Session,
    latitude: float,
    longitude: float,
    distance: float,
    batch_size: int = 500,
) -> List[Event]:
    """
    Eventos a no más de `distance` km del punto, es decir dentro del
    casquete esférico de radio angular distance / radio de la Tierra.

    Prefiltro en SQL por banda de latitud; la distancia de círculo máximo
    se comprueba con geopy leyendo las filas por lotes. Con distancia 0
    solo coinciden las coordenadas idénticas.
    """
    if distance == 0:
        return db.query(Event).filter(
            and_(Event.latitude == latitude, Event.longitude == longitude)
        ).all()

    min_lat, max_lat = geo.latitude_band(latitude, geo.angular_radius(distance))
    candidates = db.query(Event).filter(
        Event.latitude >= min_lat,
        Event.latitude <= max_lat,
    ).yield_per(batch_size)

    return [
        event for event in candidates
        if geo.within_distance(event.latitude, event.longitude, latitude, longitude, distance)
    ]


def get_upcoming_events(db: Session, limit: int = 10, now: Optional[datetime] = None) -> List[Event]:
    """Próximos eventos con estado upcoming, del más cercano al más lejano"""
    now = now or utcnow()

    return db.query(Event).options(selectinload(Event.organizer)).filter(
        Event.date >= now,
        Event.status == EventStatus.UPCOMING.value,
    ).order_by(Event.date.asc()).limit(limit).all()


def get_events_by_category(db: Session, category: str, now: Optional[datetime] = None) -> List[Event]:
    """Eventos futuros de una categoría"""
    now = now or utcnow()

    return db.query(Event).options(selectinload(Event.organizer)).filter(
        Event.category == category,
        Event.date >= now,
    ).order_by(Event.date.asc()).all()


def get_events_by_organizer(db: Session, organizer_id: str) -> List[Event]:
    """Eventos organizados por un usuario, los más recientes primero"""
    return db.query(Event).filter(
        Event.organizer_id == organizer_id
    ).order_by(Event.date.desc()).all()
