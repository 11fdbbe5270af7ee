"""Cabeceras de identidad y cuerpos de ejemplo para los tests."""
from datetime import datetime, timedelta, timezone


def auth(user_id: str, role: str) -> dict:
    return {"X-User-Id": user_id, "X-User-Role": role}


NGO = auth("ngo-1", "ngo")
OTHER_NGO = auth("ngo-2", "ngo")
ADMIN = auth("admin-1", "admin")
CITIZEN = auth("user-1", "user")


def future(days: float = 1) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def past(days: float = 1) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


def event_payload(**overrides) -> dict:
    payload = {
        "title": "Community Food Drive",
        "description": "Collecting canned goods",
        "category": "charity",
        "date": future(7),
        "coordinates": {"latitude": 40.7128, "longitude": -74.0060},
    }
    payload.update(overrides)
    return payload
