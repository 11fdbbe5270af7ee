# policy.py
"""Reglas de autorización sobre eventos como decisiones enumeradas."""
from enum import Enum
from typing import Optional

from eventfence.identity import CurrentUser
from eventfence.models.events import Event


class Role(str, Enum):
    USER = "user"
    NGO = "ngo"
    ADMIN = "admin"


class Action(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Decision(Enum):
    ALLOW = "allow"
    DENY_ROLE = "deny_role"
    DENY_OWNERSHIP = "deny_ownership"

    @property
    def allowed(self) -> bool:
        return self is Decision.ALLOW


CREATOR_ROLES = frozenset({Role.NGO.value, Role.ADMIN.value})


def evaluate(caller: CurrentUser, action: Action, event: Optional[Event] = None) -> Decision:
    """
    Decidir si el usuario puede ejecutar la acción.

    - create: solo roles ngo o admin
    - update / delete: organizador del evento o admin
    """
    if action is Action.CREATE:
        return Decision.ALLOW if caller.role in CREATOR_ROLES else Decision.DENY_ROLE

    if event is None:
        raise ValueError(f"La acción {action.value} requiere un evento")

    if caller.role == Role.ADMIN.value or event.organizer_id == caller.id:
        return Decision.ALLOW
    return Decision.DENY_OWNERSHIP
