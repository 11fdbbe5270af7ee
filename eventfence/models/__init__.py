from eventfence.models.users import User
from eventfence.models.events import Event, EventStatus
from eventfence.models.geofences import Geofence, TrafficImpactLevel

__all__ = ["User", "Event", "EventStatus", "Geofence", "TrafficImpactLevel"]
