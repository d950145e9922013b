from __future__ import annotations

from datetime import date, datetime, timezone

from lark_ats.infrastructure.external.lark_base.ats_operations import convert_to_lark_fields
from lark_ats.infrastructure.external.lark_base.types import (
    datetime_to_lark_timestamp,
    lark_timestamp_to_datetime,
)


def test_date_fields_keep_integer_timestamps() -> None:
    record = {"初回面談日": 1704067200000, "入社承諾日": 1706745600000, "入社日": 1709251200000}

    converted = convert_to_lark_fields(record)

    assert converted == record
    assert all(isinstance(v, int) for v in converted.values())


def test_mixed_record_keeps_each_present_field_once() -> None:
    record = {
        "担当CA名": "紺屋",
        "求職者氏名": "山田太郎",
        "選考ステップ": "一次面接",
        "初回面談日": 1704067200000,
        "決定年収": 650,
        "現職（企業）": "株式会社サンプル",
    }

    assert convert_to_lark_fields(record) == record


def test_none_entries_are_dropped() -> None:
    record = {"求職者氏名": "山田太郎", "ヨミ": None, "入社日": None}

    converted = convert_to_lark_fields(record)

    assert converted == {"求職者氏名": "山田太郎"}
    assert "ヨミ" not in converted
    assert "入社日" not in converted


def test_create_scenario_fields_pass_through_unchanged() -> None:
    assert convert_to_lark_fields({"担当CA名": "道村", "決定年収": 600}) == {"担当CA名": "道村", "決定年収": 600}


def test_unknown_keys_pass_through() -> None:
    assert convert_to_lark_fields({"メモ": "自由記述"}) == {"メモ": "自由記述"}


def test_datetime_values_for_date_fields_become_milliseconds() -> None:
    converted = convert_to_lark_fields(
        {
            "初回面談日": datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
            "入社日": date(2024, 4, 1),
        }
    )

    assert converted == {"初回面談日": 1704099600000, "入社日": 1711929600000}


def test_datetime_values_outside_date_fields_are_untouched() -> None:
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert convert_to_lark_fields({"ネクストアクション": moment}) == {"ネクストアクション": moment}


def test_timestamp_helpers() -> None:
    assert datetime_to_lark_timestamp(datetime(1970, 1, 1, 0, 0, 1)) == 1000
    assert lark_timestamp_to_datetime(1704067200000) == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_pre_epoch_sub_millisecond_datetime_floors() -> None:
    moment = datetime(1969, 12, 31, 23, 59, 59, 999500, tzinfo=timezone.utc)

    assert datetime_to_lark_timestamp(moment) == -1
    assert datetime_to_lark_timestamp(datetime(2024, 1, 1, 0, 0, 0, 999, tzinfo=timezone.utc)) == 1704067200000
