"""
Excepciones locales: configuracion, validacion de argumentos y ruteo.
"""
from lark_ats.shared.exceptions.base import AppException


class ConfigurationException(AppException):
    """Excepcion cuando falta configuracion obligatoria (variables de entorno)."""

    def __init__(self, variable: str, message: str | None = None):
        super().__init__(
            message=message or f"Falta variable de entorno obligatoria: {variable}",
            error_code="CONFIGURATION_ERROR",
            details={"variable": variable}
        )


class ValidationException(AppException):
    """Excepcion para errores de validacion de argumentos."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details
        )


class UnknownEventTypeException(AppException):
    """Excepcion cuando el router no tiene handler para el tipo de evento."""

    def __init__(self, event_type: str | None, known_types: list[str]):
        if event_type:
            message = f"Tipo de evento desconocido: {event_type}"
        else:
            message = "No se especifico tipo de evento"
        super().__init__(
            message=message,
            status_code=400,
            error_code="UNKNOWN_EVENT_TYPE",
            details={
                "event_type": event_type,
                "known_types": known_types
            }
        )
