"""
Raiz de la jerarquia de errores de lark_ats.

Las CLIs capturan AppException en un solo punto, registran `message` con
loguru y terminan con codigo de salida 1. No hay servidor HTTP: `status_code`
solo documenta el equivalente HTTP del fallo y ningun codigo lo consulta.
"""
from typing import Any, Optional


class AppException(Exception):
    """
    Error esperado de la integracion con Lark Base.

    `error_code` es un identificador estable (CONFIGURATION_ERROR,
    LARK_API_ERROR, ...) y `details` guarda el contexto estructurado que
    acompana al log: la variable de entorno ausente, el code remoto de Lark
    o el campo invalido.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)
