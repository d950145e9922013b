"""
Configuracion de loguru para los entry points de linea de comandos.
"""
import sys

from loguru import logger

from lark_ats.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str | None = None) -> None:
    """
    Reemplaza el sink por defecto de loguru por uno en stderr con formato fijo.

    Solo deben llamarlo los scripts/CLIs; el codigo de libreria nunca toca sinks.

    Args:
        level: Nivel minimo; si es None se usa LOG_LEVEL de la configuracion
    """
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
