"""Events API: eventos con geofences sobre FastAPI y SQLAlchemy."""

__version__ = "1.0.0"
