"""
Excepciones de integracion con servicios externos.
"""
from typing import Optional

from lark_ats.shared.exceptions.base import AppException


class LarkApiError(AppException):
    """
    Error reportado por la Open API de Lark.

    Toda respuesta de Lark trae un sobre {code, msg, data}; code != 0 es fallo.
    El msg remoto se conserva sin modificar en `remote_message` y dentro del
    mensaje de la excepcion.
    """

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        remote_message: Optional[str] = None,
        http_status: Optional[int] = None,
    ):
        self.code = code
        self.remote_message = remote_message
        self.http_status = http_status
        super().__init__(
            message=message,
            status_code=502,
            error_code="LARK_API_ERROR",
            details={
                "code": code,
                "msg": remote_message,
                "http_status": http_status
            }
        )
