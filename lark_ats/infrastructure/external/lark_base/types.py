"""
Tipos y utilidades puras para la tabla ATS en Lark Base.

Se mantienen libres de I/O para poder testearlos facilmente.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, TypedDict, Union


def ensure_utc(dt: datetime) -> datetime:
    """
    Normaliza datetime a UTC (aware).

    Un datetime naive se interpreta como UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def datetime_to_lark_timestamp(value: Union[datetime, date]) -> int:
    """
    Convierte un datetime (o date, a medianoche UTC) a timestamp Lark en milisegundos.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return (ensure_utc(value) - EPOCH) // timedelta(milliseconds=1)


def lark_timestamp_to_datetime(timestamp: int) -> datetime:
    """Convierte un timestamp Lark (ms desde epoch) a datetime aware en UTC."""
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)


# Registro ATS: todos los campos son opcionales. Ausente significa "sin valor",
# nunca string vacio. Las fechas van como int (ms desde epoch).
# Sintaxis funcional porque '現職（企業）' no es un identificador valido.
ATSRecord = TypedDict(
    "ATSRecord",
    {
        "担当CA名": str,
        "求職者氏名": str,
        "送客元": str,
        "紹介企業名": str,
        "選考ステップ": str,
        "ヨミ": str,
        "ネクストアクション": str,
        "初回面談日": int,
        "入社承諾日": int,
        "入社日": int,
        "決定年収": float,
        "現職（企業）": str,
        "現職種": str,
        "希望職種": str,
    },
    total=False,
)


# Valor de campo tal como lo acepta la API de Lark
LarkFieldValue = Union[str, int, float, bool, list[str]]
LarkFields = dict[str, LarkFieldValue]

# Item crudo devuelto por list: {"record_id": ..., "fields": {...}}
LarkRecordItem = dict[str, Any]
