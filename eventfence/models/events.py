# models/events.py
import uuid
from enum import Enum

from sqlalchemy import Column, String, Text, DateTime, Float, JSON, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from eventfence.db import Base


class EventStatus(str, Enum):
    """Estados del ciclo de vida; el servidor no los transiciona"""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def generate_id() -> str:
    return uuid.uuid4().hex


class Event(Base):
    __tablename__ = "events"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(Text, nullable=False)
    description = Column(Text)
    category = Column(String(100), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False, default=EventStatus.UPCOMING.value)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    organizer_id = Column(String(64), nullable=False)
    # Campos adicionales enviados por el cliente
    extra = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    organizer = relationship(
        "User",
        primaryjoin="foreign(Event.organizer_id) == User.id",
        viewonly=True,
        lazy="select",
    )

    __table_args__ = (
        Index("ix_events_date", "date"),
        Index("ix_events_category_date", "category", "date"),
        Index("ix_events_organizer_id", "organizer_id"),
        Index("ix_events_latitude", "latitude"),
    )
