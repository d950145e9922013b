from __future__ import annotations

import json
import typing

import pytest

from lark_ats.cli import create_ats_table as create_ats_table_cli
from lark_ats.infrastructure.external.lark_base.provisioning import create_ats_table
from lark_ats.infrastructure.external.lark_base.schema import (
    ATS_FIELD_TYPES,
    ATS_FIELDS,
    ATS_TABLE_NAME,
    SELECTION_OPTIONS,
    FieldDefinition,
    FieldType,
)
from lark_ats.infrastructure.external.lark_base.types import ATSRecord
from lark_ats.shared.exceptions import LarkApiError

TABLES_URL = "https://open.larksuite.com/open-apis/bitable/v1/apps/bascnApp/tables"


def test_schema_matches_record_type() -> None:
    # Un campo nuevo debe agregarse en ambos lados
    assert [f.field_name for f in ATS_FIELDS] == list(typing.get_type_hints(ATSRecord))


def test_single_select_fields_declare_their_options() -> None:
    single_selects = {f.field_name for f in ATS_FIELDS if f.type is FieldType.SINGLE_SELECT}

    assert single_selects == set(SELECTION_OPTIONS)
    assert [o["name"] for o in SELECTION_OPTIONS["ヨミ"]] == ["A（80%）", "B（50%）", "C（20%）", "ネタ"]
    assert [o["color"] for o in SELECTION_OPTIONS["選考ステップ"]] == list(range(10))


def test_field_types_are_derived_from_schema() -> None:
    assert ATS_FIELD_TYPES["初回面談日"] is FieldType.DATE_TIME
    assert ATS_FIELD_TYPES["決定年収"] is FieldType.NUMBER
    assert ATS_FIELD_TYPES["担当CA名"] is FieldType.SINGLE_SELECT


def test_field_payload_wraps_description_and_omits_empty_members() -> None:
    assert FieldDefinition("現職種", FieldType.TEXT, "現在の職種").to_payload() == {
        "field_name": "現職種",
        "type": 1,
        "description": {"text": "現在の職種"},
    }
    assert FieldDefinition("メモ", FieldType.TEXT).to_payload() == {"field_name": "メモ", "type": 1}


def test_create_ats_table_creates_table_then_each_field(client, session, lark_ok) -> None:
    session.responses.append(lark_ok({"table_id": "tblNew", "default_view_id": "vew1", "field_id_list": []}))
    session.responses.extend(
        lark_ok({"field": {"field_id": f"fld{i}", "field_name": f.field_name, "type": int(f.type)}})
        for i, f in enumerate(ATS_FIELDS)
    )

    result = create_ats_table(client, "bascnApp")

    assert result.table_id == "tblNew"
    assert result.table_name == ATS_TABLE_NAME
    assert result.ok
    assert result.created_fields["担当CA名"] == "fld0"
    assert len(result.created_fields) == len(ATS_FIELDS)

    assert session.calls[0]["url"] == TABLES_URL
    assert session.calls[0]["json"] == {"table": {"name": ATS_TABLE_NAME}}
    assert all(c["url"] == f"{TABLES_URL}/tblNew/fields" for c in session.calls[1:])
    assert session.calls[8]["json"] == {
        "field_name": "初回面談日",
        "type": 5,
        "description": {"text": "初回面談実施日"},
        "property": {"date_formatter": "yyyy/MM/dd"},
    }


def test_field_failure_is_logged_and_provisioning_continues(client, session, lark_ok, lark_fail, log_messages) -> None:
    fields = ATS_FIELDS[:3]
    session.responses.extend(
        [
            lark_ok({"table_id": "tblNew"}),
            lark_ok({"field": {"field_id": "fld0"}}),
            lark_fail(1254014, "FieldNameDuplicated"),
            lark_ok({"field": {"field_id": "fld2"}}),
        ]
    )

    result = create_ats_table(client, "bascnApp", fields=fields)

    assert not result.ok
    assert list(result.created_fields) == ["担当CA名", "送客元"]
    assert "FieldNameDuplicated" in result.failed_fields["求職者氏名"]
    assert any("求職者氏名" in m and "FieldNameDuplicated" in m for m in log_messages)


def test_table_failure_aborts(client, session, lark_fail) -> None:
    session.responses.append(lark_fail(1254001, "WrongBaseToken"))

    with pytest.raises(LarkApiError, match="WrongBaseToken"):
        create_ats_table(client, "bascnApp")

    assert len(session.calls) == 1


def test_cli_schema_only_prints_payloads_without_network(capsys) -> None:
    assert create_ats_table_cli.main(["--schema-only"]) == 0

    payloads = json.loads(capsys.readouterr().out)
    assert [p["field_name"] for p in payloads] == [f.field_name for f in ATS_FIELDS]


def test_cli_returns_1_when_configuration_is_missing(monkeypatch, log_messages) -> None:
    from lark_ats.core.config import settings
    from lark_ats.infrastructure.external.lark_base.client import get_lark_client

    monkeypatch.setattr(settings, "LARK_APP_ID", "")
    get_lark_client.cache_clear()
    try:
        assert create_ats_table_cli.main([]) == 1
    finally:
        get_lark_client.cache_clear()

    assert any("LARK_APP_ID" in m for m in log_messages)
