"""
Integracion ATS sobre Lark Base.

Exporta el cliente, el esquema de la tabla ATS y las operaciones CRUD.
"""
from lark_ats.infrastructure.external.lark_base.ats_operations import (
    ATSOperations,
    convert_to_lark_fields,
)
from lark_ats.infrastructure.external.lark_base.client import (
    LarkBaseClient,
    LarkCredentials,
    get_base_app_token,
    get_lark_client,
)
from lark_ats.infrastructure.external.lark_base.schema import (
    ATS_FIELDS,
    ATS_TABLE_NAME,
    SELECTION_OPTIONS,
    FieldType,
)
from lark_ats.infrastructure.external.lark_base.types import (
    ATSRecord,
    datetime_to_lark_timestamp,
    lark_timestamp_to_datetime,
)

__all__ = [
    "ATSOperations",
    "ATSRecord",
    "ATS_FIELDS",
    "ATS_TABLE_NAME",
    "FieldType",
    "LarkBaseClient",
    "LarkCredentials",
    "SELECTION_OPTIONS",
    "convert_to_lark_fields",
    "datetime_to_lark_timestamp",
    "get_base_app_token",
    "get_lark_client",
    "lark_timestamp_to_datetime",
]
