"""
Provisioning de la tabla ATS en Lark Base.

Diseño (resumen):
- Crea la tabla en la Base destino (un fallo aqui aborta todo)
- Crea cada campo del esquema en orden
- Un campo que falla se registra como warning y se continua con el siguiente

No hay diffing ni migraciones: el script esta pensado para correr una vez
sobre una Base donde la tabla aun no existe.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from lark_ats.shared.exceptions import LarkApiError

from .client import LarkBaseClient
from .schema import ATS_FIELDS, ATS_TABLE_NAME, FieldDefinition


@dataclass
class ProvisioningResult:
    table_id: str
    table_name: str
    created_fields: dict[str, str] = field(default_factory=dict)
    failed_fields: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed_fields


def create_ats_table(
    client: LarkBaseClient,
    app_token: str,
    *,
    table_name: str = ATS_TABLE_NAME,
    fields: Sequence[FieldDefinition] = ATS_FIELDS,
) -> ProvisioningResult:
    """
    Crea la tabla y todos sus campos.

    Returns:
        ProvisioningResult con el table_id, campos creados (nombre -> field_id)
        y campos fallidos (nombre -> mensaje de error)

    Raises:
        LarkApiError: si la creacion de la tabla falla
    """
    logger.info(f"Creando tabla ATS '{table_name}' con {len(fields)} campos...")

    data = client.request(
        "POST",
        f"/open-apis/bitable/v1/apps/{app_token}/tables",
        action="crear la tabla",
        json={"table": {"name": table_name}},
    )
    table_id = data["table_id"]
    logger.success(f"Tabla creada. Table ID: {table_id}")

    result = ProvisioningResult(table_id=table_id, table_name=table_name)
    fields_path = f"/open-apis/bitable/v1/apps/{app_token}/tables/{table_id}/fields"

    for definition in fields:
        try:
            created = client.request(
                "POST",
                fields_path,
                action=f"crear el campo {definition.field_name}",
                json=definition.to_payload(),
            )
        except LarkApiError as e:
            logger.warning(f"  Campo {definition.field_name} no creado: {e.message}")
            result.failed_fields[definition.field_name] = e.message
            continue

        field_id = (created.get("field") or {}).get("field_id", "")
        result.created_fields[definition.field_name] = field_id
        logger.info(f"  Campo creado: {definition.field_name} (ID: {field_id})")

    logger.info(
        f"Provisioning completado: table_id={table_id}, "
        f"creados={len(result.created_fields)}, fallidos={len(result.failed_fields)}"
    )
    return result
