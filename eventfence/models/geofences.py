# models/geofences.py
from enum import Enum

from sqlalchemy import Column, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.sql import func

from eventfence.db import Base
from eventfence.models.events import generate_id


class TrafficImpactLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Geofence(Base):
    __tablename__ = "geofences"

    id = Column(String(32), primary_key=True, default=generate_id)
    # Un geofence por evento
    event_id = Column(String(32), ForeignKey("events.id"), nullable=False, unique=True)
    center_latitude = Column(Float, nullable=False)
    center_longitude = Column(Float, nullable=False)
    radius = Column(Float, nullable=False, default=500)
    traffic_impact_level = Column(String(10), nullable=False, default=TrafficImpactLevel.LOW.value)
    traffic_impact_description = Column(Text)
    created_by = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
