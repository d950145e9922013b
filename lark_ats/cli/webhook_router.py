"""
CLI: router de eventos webhook.

Ejecucion:
  lark-ats-webhook issue opened 42
  lark-ats-webhook push main 0a1b2c3d4e5f
  lark-ats-webhook comment 42 octocat

Sale con 1 si falta el tipo de evento, si es desconocido o si el handler falla.
"""
from __future__ import annotations

import argparse
import asyncio

from loguru import logger

from lark_ats.core.logging import setup_logging
from lark_ats.shared.exceptions import UnknownEventTypeException
from lark_ats.webhooks.router import dispatch


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Router de eventos webhook")
    parser.add_argument("event_type", nargs="?", default=None, help="issue | pr | push | comment")
    parser.add_argument("action", nargs="?", default="", help="Accion del evento (o rama para push)")
    parser.add_argument("identifier", nargs="?", default="", help="Numero de issue/PR, sha o autor")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    logger.info("=" * 50)
    logger.info("Webhook Event Router")
    logger.info("=" * 50)

    try:
        asyncio.run(dispatch(args.event_type, args.action, args.identifier))
    except UnknownEventTypeException as e:
        logger.error(f"Error: {e.message}")
        return 1
    except Exception as e:
        logger.exception(f"Error procesando el evento: {e}")
        return 1

    logger.success("Evento procesado correctamente")
    return 0


def run() -> None:
    """Entry point de consola: configura logging y termina con el exit code."""
    setup_logging()
    raise SystemExit(main())


if __name__ == "__main__":
    run()
