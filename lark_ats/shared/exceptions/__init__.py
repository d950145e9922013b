"""
Excepciones de la integracion.
"""
from lark_ats.shared.exceptions.base import AppException
from lark_ats.shared.exceptions.domain import (
    ConfigurationException,
    UnknownEventTypeException,
    ValidationException,
)
from lark_ats.shared.exceptions.integration import LarkApiError

__all__ = [
    "AppException",
    "ConfigurationException",
    "LarkApiError",
    "UnknownEventTypeException",
    "ValidationException",
]
