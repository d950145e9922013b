"""
CLI: crea la tabla ATS y sus campos en Lark Base.

Variables de entorno requeridas:
  - LARK_APP_ID
  - LARK_APP_SECRET
  - LARK_BASE_APP_TOKEN

Ejecucion:
  lark-ats-create-table
  lark-ats-create-table --table-name "採用管理（ATS）テスト"
  lark-ats-create-table --schema-only
"""

from __future__ import annotations

import argparse
import json

from loguru import logger

from lark_ats.core.logging import setup_logging
from lark_ats.infrastructure.external.lark_base.client import get_base_app_token, get_lark_client
from lark_ats.infrastructure.external.lark_base.provisioning import create_ats_table
from lark_ats.infrastructure.external.lark_base.schema import ATS_FIELDS, ATS_TABLE_NAME
from lark_ats.shared.exceptions import AppException


def _schema_json() -> str:
    payloads = [f.to_payload() for f in ATS_FIELDS]
    return json.dumps(payloads, ensure_ascii=False, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Crea la tabla ATS en Lark Base")
    parser.add_argument(
        "--table-name",
        default=ATS_TABLE_NAME,
        help=f"Nombre de la tabla a crear (default: {ATS_TABLE_NAME})",
    )
    parser.add_argument(
        "--schema-only",
        action="store_true",
        help="Solo imprime los campos a crear (no llama a Lark).",
    )
    args = parser.parse_args(argv)

    if args.schema_only:
        print(_schema_json())
        return 0

    try:
        client = get_lark_client()
        app_token = get_base_app_token()
        result = create_ats_table(client, app_token, table_name=args.table_name)
    except AppException as e:
        logger.error(f"Error creando la tabla ATS: {e.message}")
        return 1

    logger.info("Resumen:")
    logger.info(f"  - Table ID: {result.table_id}")
    logger.info(f"  - Nombre: {result.table_name}")
    logger.info(f"  - Campos creados: {len(result.created_fields)}/{len(ATS_FIELDS)}")
    if result.failed_fields:
        logger.warning(f"  - Campos con error: {', '.join(result.failed_fields)}")
    logger.info("Siguientes pasos: verificar la tabla en Lark y configurar vistas/automatizaciones.")
    return 0


def run() -> None:
    """Entry point de consola: configura logging y termina con el exit code."""
    setup_logging()
    raise SystemExit(main())


if __name__ == "__main__":
    run()
