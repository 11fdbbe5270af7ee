# identity.py
"""
Contexto de identidad por request.

El middleware de autenticación (externo a este servicio) adjunta el
usuario en las cabeceras X-User-Id y X-User-Role.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from eventfence.errors import NotAuthenticatedError


@dataclass(frozen=True)
class CurrentUser:
    id: str
    role: str


def get_current_user(
    x_user_id: Optional[str] = Header(None, description="ID del usuario autenticado"),
    x_user_role: Optional[str] = Header(None, description="Rol del usuario autenticado"),
) -> CurrentUser:
    """Dependencia para rutas privadas"""
    if not x_user_id or not x_user_role:
        raise NotAuthenticatedError()
    return CurrentUser(id=x_user_id, role=x_user_role)
