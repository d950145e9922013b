"""
Operaciones CRUD de registros ATS en Lark Base.

Cada operacion es un round trip independiente: no hay cache local, ni
reintentos, ni particion de lotes. Un code != 0 de Lark se propaga como
LarkApiError con el msg remoto intacto.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterator, Mapping, Optional, Sequence

from loguru import logger

from lark_ats.core.config import Settings, settings
from lark_ats.shared.exceptions import ConfigurationException, ValidationException

from .client import LarkBaseClient, build_client_from_settings, get_base_app_token, get_lark_client
from .schema import ATS_FIELD_TYPES, FieldType
from .types import ATSRecord, LarkFields, LarkRecordItem, datetime_to_lark_timestamp

DEFAULT_PAGE_SIZE = 100


def convert_to_lark_fields(
    fields: Mapping[str, Any],
    field_types: Mapping[str, FieldType] = ATS_FIELD_TYPES,
) -> LarkFields:
    """
    Convierte un ATSRecord (parcial) al formato de campos de Lark.

    Reglas:
    - Entradas None se descartan: un update nunca puede limpiar un campo
    - Fechas: int (ms) sin cambios; datetime/date se convierten a ms
    - Seleccion simple: el string se envia tal cual, Lark valida las opciones
    - Resto (texto, numero, claves fuera del esquema): sin cambios
    """
    lark_fields: LarkFields = {}

    for key, value in fields.items():
        if value is None:
            continue

        field_type = field_types.get(key)
        if field_type is FieldType.DATE_TIME and isinstance(value, date):
            lark_fields[key] = datetime_to_lark_timestamp(value)
        else:
            lark_fields[key] = value

    return lark_fields


def _require_id(record_id: str) -> str:
    if not record_id:
        raise ValidationException("record_id no puede estar vacio", field="record_id")
    return record_id


class ATSOperations:
    """
    Fachada CRUD sobre una tabla ATS.

    El cliente y el app token se pasan explicitamente; si se omiten se usan
    el cliente compartido del proceso y LARK_BASE_APP_TOKEN.
    """

    def __init__(
        self,
        table_id: str,
        *,
        client: Optional[LarkBaseClient] = None,
        app_token: Optional[str] = None,
    ) -> None:
        self._client = client or get_lark_client()
        self._app_token = app_token or get_base_app_token()
        self._table_id = table_id

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "ATSOperations":
        """
        Construye la fachada para LARK_ATS_TABLE_ID.

        Con la configuracion global se reutiliza el cliente compartido; con
        otra instancia de Settings se construye un cliente con sus credenciales.
        """
        if not config.LARK_ATS_TABLE_ID:
            raise ConfigurationException("LARK_ATS_TABLE_ID")
        client = get_lark_client() if config is settings else build_client_from_settings(config)
        return cls(config.LARK_ATS_TABLE_ID, client=client, app_token=get_base_app_token(config))

    @property
    def table_id(self) -> str:
        return self._table_id

    def _records_path(self, suffix: str = "") -> str:
        return f"/open-apis/bitable/v1/apps/{self._app_token}/tables/{self._table_id}/records{suffix}"

    def list_records(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
        filter: Optional[str] = None,
        sort: Optional[Sequence[str]] = None,
    ) -> dict[str, Any]:
        """
        Lista una pagina de registros.

        Retorna el payload de Lark sin tocar: items, page_token, total, has_more.
        """
        params = {
            "page_size": page_size,
            "page_token": page_token,
            "filter": filter,
            "sort": ",".join(sort) if sort else None,
        }
        return self._client.request("GET", self._records_path(), action="listar los registros", params=params)

    def iter_records(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        filter: Optional[str] = None,
        sort: Optional[Sequence[str]] = None,
    ) -> Iterator[LarkRecordItem]:
        """
        Itera todos los registros siguiendo page_token mientras has_more sea True.
        """
        page_token: Optional[str] = None
        while True:
            page = self.list_records(page_size=page_size, page_token=page_token, filter=filter, sort=sort)
            yield from page.get("items") or []

            page_token = page.get("page_token")
            if not page.get("has_more") or not page_token:
                break

    def get_record(self, record_id: str) -> dict[str, Any]:
        """Obtiene los campos crudos de un registro."""
        data = self._client.request(
            "GET",
            self._records_path(f"/{_require_id(record_id)}"),
            action="obtener el registro",
        )
        return data["record"]["fields"]

    def create_record(self, fields: ATSRecord) -> str:
        """Crea un registro y retorna el record_id asignado por Lark."""
        data = self._client.request(
            "POST",
            self._records_path(),
            action="crear el registro",
            json={"fields": convert_to_lark_fields(fields)},
        )
        record_id = data["record"]["record_id"]
        logger.info(f"Registro ATS creado: {record_id}")
        return record_id

    def batch_create_records(self, records: Sequence[ATSRecord]) -> list[str]:
        """
        Crea varios registros en una sola llamada.

        Los ids retornados respetan el orden de `records`. Si Lark rechaza el
        lote se levanta error y no se reporta resultado parcial.
        """
        data = self._client.request(
            "POST",
            self._records_path("/batch_create"),
            action="crear los registros en lote",
            json={"records": [{"fields": convert_to_lark_fields(r)} for r in records]},
        )
        record_ids = [r["record_id"] for r in data["records"]]
        logger.info(f"Registros ATS creados en lote: {len(record_ids)}")
        return record_ids

    def update_record(self, record_id: str, fields: ATSRecord) -> None:
        """Actualiza solo los campos presentes en `fields`; el resto queda intacto."""
        self._client.request(
            "PUT",
            self._records_path(f"/{_require_id(record_id)}"),
            action="actualizar el registro",
            json={"fields": convert_to_lark_fields(fields)},
        )
        logger.info(f"Registro ATS actualizado: {record_id}")

    def delete_record(self, record_id: str) -> None:
        """Elimina un registro."""
        self._client.request(
            "DELETE",
            self._records_path(f"/{_require_id(record_id)}"),
            action="eliminar el registro",
        )
        logger.info(f"Registro ATS eliminado: {record_id}")

    def batch_delete_records(self, record_ids: Sequence[str]) -> None:
        """Elimina varios registros en una sola llamada."""
        ids = list(record_ids)
        self._client.request(
            "POST",
            self._records_path("/batch_delete"),
            action="eliminar los registros en lote",
            json={"records": ids},
        )
        logger.info(f"Registros ATS eliminados en lote: {len(ids)}")
