"""
Router de eventos tipo GitHub.

Tabla estatica tipo de evento -> handler asincrono. Los handlers solo
registran en el log lo que harian; no ejecutan ninguna accion externa.
"""
from typing import Awaitable, Callable, Dict, Optional

from loguru import logger

from lark_ats.shared.exceptions import UnknownEventTypeException

EventHandler = Callable[[str, str], Awaitable[None]]

SHORT_SHA_LENGTH = 7


async def handle_issue(action: str, issue_number: str) -> None:
    logger.info(f"Procesando evento issue: {action} para #{issue_number}")

    if action == "opened":
        logger.info(f"  -> Nuevo issue abierto: #{issue_number}")
        logger.info("  -> Disparando workflow de analisis...")
    elif action == "labeled":
        logger.info(f"  -> Issue etiquetado: #{issue_number}")
        logger.info("  -> Revisando transiciones de estado...")
    elif action == "closed":
        logger.info(f"  -> Issue cerrado: #{issue_number}")
    elif action == "reopened":
        logger.info(f"  -> Issue reabierto: #{issue_number}")
    elif action == "assigned":
        logger.info(f"  -> Issue asignado: #{issue_number}")
    else:
        logger.info(f"  -> Accion desconocida: {action}")


async def handle_pr(action: str, pr_number: str) -> None:
    logger.info(f"Procesando evento PR: {action} para #{pr_number}")

    if action == "opened":
        logger.info(f"  -> Nuevo PR abierto: #{pr_number}")
        logger.info("  -> Disparando workflow de review...")
    elif action == "closed":
        logger.info(f"  -> PR cerrado: #{pr_number}")
    elif action == "reopened":
        logger.info(f"  -> PR reabierto: #{pr_number}")
    elif action == "review_requested":
        logger.info(f"  -> Review solicitada para PR: #{pr_number}")
    elif action == "ready_for_review":
        logger.info(f"  -> PR listo para review: #{pr_number}")
    else:
        logger.info(f"  -> Accion desconocida: {action}")


async def handle_push(branch: str, commit_sha: str) -> None:
    """Para push, los argumentos son (rama, sha del commit)."""
    logger.info(f"Procesando evento push: {branch} @ {commit_sha}")
    logger.info(f"  -> Rama: {branch}")
    logger.info(f"  -> Commit: {commit_sha[:SHORT_SHA_LENGTH]}")

    if branch == "main":
        logger.info("  -> Rama main actualizada, revisando despliegues...")
    elif branch.startswith("feat/"):
        logger.info("  -> Rama de feature actualizada")
    elif branch.startswith("fix/"):
        logger.info("  -> Rama de fix actualizada")


async def handle_comment(issue_number: str, author: str) -> None:
    """Para comment, los argumentos son (numero de issue, autor)."""
    logger.info(f"Procesando evento comment: #{issue_number} por {author}")
    logger.info("  -> Buscando comandos...")


HANDLERS: Dict[str, EventHandler] = {
    "issue": handle_issue,
    "pr": handle_pr,
    "push": handle_push,
    "comment": handle_comment,
}


async def dispatch(event_type: Optional[str], action: str, identifier: str) -> None:
    """
    Ejecuta el handler asociado a `event_type`.

    Raises:
        UnknownEventTypeException: si no hay tipo o no existe handler para el
    """
    handler = HANDLERS.get(event_type) if event_type else None
    if handler is None:
        raise UnknownEventTypeException(event_type, sorted(HANDLERS))
    await handler(action, identifier)
