# errors.py
"""Errores del dominio con código, mensaje y status HTTP.

La capa de servicio los lanza; main.py los convierte en la respuesta
{success: false, message} en un único punto.
"""
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    GEOFENCE_NOT_FOUND = "GEOFENCE_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class ErrorResponse(Exception):
    """Error con mensaje seguro para el usuario y status HTTP"""

    status_code = 500

    def __init__(self, message: str, code: ErrorCode, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(ErrorResponse):
    status_code = 404

    def __init__(self, message: str, code: ErrorCode = ErrorCode.EVENT_NOT_FOUND):
        super().__init__(message, code)


class ForbiddenError(ErrorResponse):
    status_code = 403

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.FORBIDDEN)


class NotAuthenticatedError(ErrorResponse):
    status_code = 401

    def __init__(self, message: str = "No autorizado para acceder a esta ruta"):
        super().__init__(message, ErrorCode.NOT_AUTHENTICATED)


class ValidationError(ErrorResponse):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


def event_not_found(event_id: str) -> NotFoundError:
    return NotFoundError(f"Evento con ID {event_id} no encontrado")
