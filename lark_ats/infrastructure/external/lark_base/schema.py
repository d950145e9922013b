"""
Definicion del esquema de la tabla ATS en Lark Base.

Este modulo no realiza I/O: solo declara tipos de campo, opciones de
seleccion y la lista de campos a crear. Es la unica fuente de verdad del
tipo de cada campo; la conversion de registros se apoya en ATS_FIELD_TYPES.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


class FieldType(IntEnum):
    """Codigos de tipo de campo de la API de Lark Base."""

    TEXT = 1
    NUMBER = 2
    SINGLE_SELECT = 3
    MULTI_SELECT = 4
    DATE_TIME = 5
    CHECKBOX = 7
    PERSON = 11
    PHONE = 13
    URL = 15
    ATTACHMENT = 17
    SINGLE_LINK = 18
    LOOKUP = 19
    FORMULA = 20
    DUPLEX_LINK = 21
    LOCATION = 22
    GROUP_CHAT = 23
    CREATED_TIME = 1001
    MODIFIED_TIME = 1002
    CREATED_USER = 1003
    MODIFIED_USER = 1004
    AUTO_NUMBER = 1005


def _options(*names: str) -> list[dict[str, Any]]:
    # El color es el indice de la paleta de Lark, en orden de declaracion.
    return [{"name": name, "color": color} for color, name in enumerate(names)]


SELECTION_OPTIONS: dict[str, list[dict[str, Any]]] = {
    "担当CA名": _options("道村", "紺屋"),
    "送客元": _options("RDS", "キミナラ", "自社", "紹介"),
    "選考ステップ": _options(
        "面談",
        "書類選考",
        "一次面接",
        "二次面接",
        "最終面接",
        "内定",
        "入社承諾",
        "入社",
        "お見送り",
        "辞退",
    ),
    "ヨミ": _options("A（80%）", "B（50%）", "C（20%）", "ネタ"),
}


@dataclass(frozen=True)
class FieldDefinition:
    """
    Define un campo a crear en la tabla.

    - field_name: nombre visible del campo (clave en los registros)
    - type: codigo FieldType
    - description: texto opcional mostrado en Lark
    - property: propiedades especificas del tipo (opciones, formato, etc.)
    """

    field_name: str
    type: FieldType
    description: Optional[str] = None
    property: Optional[dict[str, Any]] = None

    def to_payload(self) -> dict[str, Any]:
        """Body para POST .../fields, omitiendo miembros vacios."""
        payload: dict[str, Any] = {
            "field_name": self.field_name,
            "type": int(self.type),
        }
        if self.description:
            payload["description"] = {"text": self.description}
        if self.property is not None:
            payload["property"] = self.property
        return payload


_DATE_PROPERTY = {"date_formatter": "yyyy/MM/dd"}


def _single_select(field_name: str, description: str) -> FieldDefinition:
    return FieldDefinition(
        field_name=field_name,
        type=FieldType.SINGLE_SELECT,
        description=description,
        property={"options": SELECTION_OPTIONS[field_name]},
    )


ATS_FIELDS: list[FieldDefinition] = [
    _single_select("担当CA名", "キャリアアドバイザーの名前"),
    FieldDefinition("求職者氏名", FieldType.TEXT, "求職者の氏名"),
    _single_select("送客元", "紹介元チャネル"),
    FieldDefinition("紹介企業名", FieldType.TEXT, "応募先企業名"),
    _single_select("選考ステップ", "現在の選考進捗状況"),
    _single_select("ヨミ", "成約確度"),
    FieldDefinition("ネクストアクション", FieldType.TEXT, "次のアクション内容"),
    FieldDefinition("初回面談日", FieldType.DATE_TIME, "初回面談実施日", dict(_DATE_PROPERTY)),
    FieldDefinition("入社承諾日", FieldType.DATE_TIME, "内定承諾日", dict(_DATE_PROPERTY)),
    FieldDefinition("入社日", FieldType.DATE_TIME, "入社予定日", dict(_DATE_PROPERTY)),
    FieldDefinition("決定年収", FieldType.NUMBER, "決定年収（万円）", {"formatter": "0"}),
    FieldDefinition("現職（企業）", FieldType.TEXT, "現在の勤務先企業名"),
    FieldDefinition("現職種", FieldType.TEXT, "現在の職種"),
    FieldDefinition("希望職種", FieldType.TEXT, "希望する職種"),
]

ATS_FIELD_TYPES: dict[str, FieldType] = {f.field_name: f.type for f in ATS_FIELDS}

ATS_TABLE_NAME = "採用管理（ATS）"
