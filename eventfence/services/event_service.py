# services/event_service.py
"""
Servicio de eventos: toda la lógica de negocio vive aquí.

- Comprueba que el evento exista antes de autorizar
- Autoriza antes de cualquier escritura
- Mantiene el geofence de cada evento en la misma transacción
"""
from typing import List, Tuple

from loguru import logger
from sqlalchemy.orm import Session

import eventfence.crud.events_crud as events_crud
import eventfence.crud.geofences_crud as geofences_crud
from eventfence import query
from eventfence.errors import ForbiddenError, NotFoundError, ErrorCode, ValidationError, event_not_found
from eventfence.identity import CurrentUser
from eventfence.models.events import Event
from eventfence.models.geofences import Geofence
from eventfence.policy import Action, evaluate
from eventfence.schemas.events import EventCreate, EventUpdate
from eventfence.settings import settings


class EventService:
    """Operaciones sobre eventos y sus geofences"""

    def __init__(self, db: Session) -> None:
        self._db = db

    # ==================== Lectura ====================

    def list_events(
        self,
        filters: dict,
        order_by,
        page: int,
        limit: int,
    ) -> Tuple[List[Event], int]:
        skip = query.page_window(page, limit)
        return events_crud.get_events(self._db, skip=skip, limit=limit, filters=filters, order_by=order_by)

    def get_event(self, event_id: str, with_organizer: bool = False) -> Event:
        """
        Raises:
            NotFoundError: si el evento no existe.
        """
        db_event = events_crud.get_event(self._db, event_id, with_organizer=with_organizer)
        if not db_event:
            logger.warning(f"Event {event_id} not found")
            raise event_not_found(event_id)
        return db_event

    def get_geofence(self, event_id: str) -> Geofence:
        self.get_event(event_id)

        db_geofence = geofences_crud.get_geofence_by_event(self._db, event_id)
        if not db_geofence:
            raise NotFoundError(
                f"El evento {event_id} no tiene geofence",
                code=ErrorCode.GEOFENCE_NOT_FOUND,
            )
        return db_geofence

    def get_events_in_radius(self, latitude: float, longitude: float, distance: float) -> List[Event]:
        if distance < 0:
            raise ValidationError("distance no puede ser negativa")
        return events_crud.get_events_in_radius(self._db, latitude, longitude, distance)

    def get_upcoming_events(self) -> List[Event]:
        return events_crud.get_upcoming_events(self._db, limit=settings.upcoming_limit)

    def get_events_by_category(self, category: str) -> List[Event]:
        return events_crud.get_events_by_category(self._db, category)

    def get_user_events(self, user_id: str) -> List[Event]:
        return events_crud.get_events_by_organizer(self._db, user_id)

    # ==================== Escritura ====================

    def create_event(self, caller: CurrentUser, payload: EventCreate) -> Event:
        """
        Crear el evento y su geofence en una sola transacción.

        Raises:
            ForbiddenError: si el rol no es ngo ni admin.
        """
        if not evaluate(caller, Action.CREATE).allowed:
            logger.warning(f"User {caller.id} with role {caller.role} denied event creation")
            raise ForbiddenError(
                f"El usuario con rol {caller.role} no está autorizado para crear eventos"
            )

        try:
            db_event = events_crud.create_event(
                self._db,
                payload.event_fields(),
                payload.extra_fields(),
                organizer_id=caller.id,
            )
            geofences_crud.create_geofence(
                self._db,
                db_event,
                radius=payload.geofence_radius or settings.default_geofence_radius,
                traffic_level=self._traffic_level(payload),
                created_by=caller.id,
            )
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

        logger.info(f"Event {db_event.id} created by {caller.id}")
        return db_event

    def update_event(self, caller: CurrentUser, event_id: str, payload: EventUpdate) -> Event:
        """
        Actualización parcial. Si llegan coordenadas nuevas el geofence se
        recentra y su radio e impacto vuelven a los valores enviados o a
        los valores por defecto.

        Raises:
            NotFoundError: si el evento no existe.
            ForbiddenError: si el usuario no es el organizador ni admin.
        """
        db_event = self.get_event(event_id)
        self._authorize(caller, Action.UPDATE, db_event)

        try:
            events_crud.update_event(self._db, db_event, payload.event_fields(), payload.extra_fields())

            if payload.coordinates is not None:
                db_geofence = geofences_crud.update_geofence_for_event(
                    self._db,
                    db_event.id,
                    latitude=payload.coordinates.latitude,
                    longitude=payload.coordinates.longitude,
                    radius=payload.geofence_radius or settings.default_geofence_radius,
                    traffic_level=self._traffic_level(payload),
                )
                if db_geofence is None:
                    logger.debug(f"Event {db_event.id} has no geofence to move")

            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

        logger.info(f"Event {db_event.id} updated by {caller.id}")
        return db_event

    def delete_event(self, caller: CurrentUser, event_id: str) -> None:
        """
        Raises:
            NotFoundError: si el evento no existe.
            ForbiddenError: si el usuario no es el organizador ni admin.
        """
        db_event = self.get_event(event_id)
        self._authorize(caller, Action.DELETE, db_event)

        try:
            geofences_crud.delete_geofence_for_event(self._db, db_event.id)
            events_crud.delete_event(self._db, db_event)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

        logger.info(f"Event {event_id} deleted by {caller.id}")

    # ==================== Helpers ====================

    def _authorize(self, caller: CurrentUser, action: Action, db_event: Event) -> None:
        if not evaluate(caller, action, db_event).allowed:
            logger.warning(f"User {caller.id} denied {action.value} on event {db_event.id}")
            raise ForbiddenError(
                f"El usuario {caller.id} no está autorizado para modificar este evento"
                if action is Action.UPDATE
                else f"El usuario {caller.id} no está autorizado para eliminar este evento"
            )

    @staticmethod
    def _traffic_level(payload) -> str:
        if payload.traffic_impact is not None:
            return payload.traffic_impact.value
        return settings.default_traffic_impact
