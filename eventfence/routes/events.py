# routes/events.py
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import Optional

import eventfence.schemas.events as schemas
from eventfence import query
from eventfence.crud.events_crud import SORTABLE_FIELDS
from eventfence.db import get_db
from eventfence.identity import CurrentUser, get_current_user
from eventfence.models.events import EventStatus
from eventfence.responses import serialize_event, serialize_geofence, success
from eventfence.services.event_service import EventService
from eventfence.settings import settings

router = APIRouter(
    prefix="/api/v1/events",
    tags=["Events"]
)


def get_service(db: Session = Depends(get_db)) -> EventService:
    return EventService(db)


@router.get(
    "/",
    summary="Listar todos los eventos"
)
def list_events(
    category: Optional[str] = Query(None, description="Filtrar por categoría"),
    event_status: Optional[EventStatus] = Query(None, alias="status", description="Filtrar por estado"),
    organizer: Optional[str] = Query(None, description="Filtrar por organizador"),
    sort: Optional[str] = Query(None, description="Campos de orden, p. ej. 'date' o '-date,title'"),
    page: int = Query(1, ge=1, description="Número de página"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Resultados por página"),
    service: EventService = Depends(get_service),
):
    """
    Obtener lista paginada de eventos con filtros opcionales.

    - **category**, **status**, **organizer**: filtros de igualdad
    - **sort**: campos separados por coma; prefijo "-" para orden descendente (por defecto -date)
    """
    order_by = query.parse_sort(sort, SORTABLE_FIELDS)
    filters = {
        "category": category,
        "status": event_status.value if event_status else None,
        "organizer": organizer,
    }

    events, total = service.list_events(filters, order_by, page=page, limit=limit)

    return success(
        [serialize_event(event) for event in events],
        count=len(events),
        total=total,
        pagination=query.pagination(page, limit, total),
    )


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    summary="Crear nuevo evento"
)
def create_event(
    event: schemas.EventCreate,
    user: CurrentUser = Depends(get_current_user),
    service: EventService = Depends(get_service),
):
    """
    Crear un nuevo evento junto con su geofence (solo roles ngo y admin).

    - **title**, **category**, **date**, **coordinates**: requeridos
    - **geofenceRadius**: radio del geofence en metros (por defecto 500)
    - **trafficImpact**: low, medium o high (por defecto low)
    - El organizador es siempre el usuario autenticado
    """
    db_event = service.create_event(user, event)
    return success(serialize_event(db_event))


@router.get(
    "/upcoming",
    summary="Eventos próximos"
)
def list_upcoming_events(service: EventService = Depends(get_service)):
    """
    Próximos eventos con estado "upcoming", ordenados por fecha
    (más próximo primero), con el nombre del organizador.
    """
    events = service.get_upcoming_events()
    data = [serialize_event(event, organizer_fields=("name",)) for event in events]
    return success(data, count=len(data))


@router.get(
    "/radius/{latitude}/{longitude}/{distance}",
    summary="Buscar eventos dentro de un radio"
)
def find_events_in_radius(
    latitude: float = Path(..., ge=-90, le=90, description="Latitud"),
    longitude: float = Path(..., ge=-180, le=180, description="Longitud"),
    distance: float = Path(..., ge=0, description="Distancia en km"),
    service: EventService = Depends(get_service),
):
    """
    Eventos cuyas coordenadas caen dentro del casquete esférico de radio
    angular distance / 6378 alrededor del punto.
    """
    events = service.get_events_in_radius(latitude, longitude, distance)
    data = [serialize_event(event) for event in events]
    return success(data, count=len(data))


@router.get(
    "/category/{category}",
    summary="Eventos por categoría"
)
def list_events_by_category(
    category: str,
    service: EventService = Depends(get_service),
):
    """Eventos futuros de la categoría, ordenados por fecha ascendente"""
    events = service.get_events_by_category(category)
    data = [serialize_event(event, organizer_fields=("name",)) for event in events]
    return success(data, count=len(data))


@router.get(
    "/user/{user_id}",
    summary="Eventos organizados por un usuario"
)
def list_user_events(
    user_id: str,
    service: EventService = Depends(get_service),
):
    events = service.get_user_events(user_id)
    data = [serialize_event(event) for event in events]
    return success(data, count=len(data))


@router.get(
    "/{event_id}",
    summary="Obtener evento por ID"
)
def get_event(
    event_id: str,
    service: EventService = Depends(get_service),
):
    """
    Obtener un evento con el nombre y email del organizador.
    """
    db_event = service.get_event(event_id, with_organizer=True)
    return success(serialize_event(db_event, organizer_fields=("name", "email")))


@router.get(
    "/{event_id}/geofence",
    summary="Obtener el geofence de un evento"
)
def get_event_geofence(
    event_id: str,
    service: EventService = Depends(get_service),
):
    db_geofence = service.get_geofence(event_id)
    return success(serialize_geofence(db_geofence))


@router.put(
    "/{event_id}",
    summary="Actualizar evento"
)
def update_event(
    event_id: str,
    event: schemas.EventUpdate,
    user: CurrentUser = Depends(get_current_user),
    service: EventService = Depends(get_service),
):
    """
    Actualizar un evento (solo el organizador o un admin).

    Solo se actualizan los campos proporcionados. Si se envían
    **coordinates**, el geofence se recentra y su radio e impacto se
    fijan a **geofenceRadius** / **trafficImpact** o a sus valores por defecto.
    """
    db_event = service.update_event(user, event_id, event)
    return success(serialize_event(db_event))


@router.delete(
    "/{event_id}",
    summary="Eliminar evento"
)
def delete_event(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: EventService = Depends(get_service),
):
    """
    Eliminar un evento y su geofence (solo el organizador o un admin).
    """
    service.delete_event(user, event_id)
    return success({})
