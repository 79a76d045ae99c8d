from datetime import datetime

from paynotify.parsers import ErrorCode, parse_timestamp, thai_month


def test_parse_timestamp_slash_layout():
    assert parse_timestamp("18/10/2026 14:30").value == datetime(2026, 10, 18, 14, 30)


def test_parse_timestamp_dash_layout_buddhist_era():
    assert parse_timestamp("18-10-2569 14:30").value == datetime(2026, 10, 18, 14, 30)


def test_parse_timestamp_thai_abbreviated_month():
    r = parse_timestamp("เวลา 18 ต.ค. 2569 14:30:05")
    assert r.ok
    assert r.value == datetime(2026, 10, 18, 14, 30, 5)


def test_parse_timestamp_thai_full_month_two_digit_year():
    assert parse_timestamp("5 มกราคม 69 09:15").value == datetime(2026, 1, 5, 9, 15)


def test_parse_timestamp_bad_month():
    r = parse_timestamp("18 ฟฟฟ 2569 14:30")
    assert not r.ok and r.error == ErrorCode.BAD_MONTH


def test_parse_timestamp_bad_date():
    r = parse_timestamp("31/02/2026 10:00")
    assert not r.ok and r.error == ErrorCode.BAD_DATE


def test_parse_timestamp_no_match():
    assert parse_timestamp("hello").error == ErrorCode.NO_MATCH
    assert parse_timestamp("").error == ErrorCode.EMPTY


def test_thai_month_with_and_without_dots():
    assert thai_month("ธ.ค.") == 12
    assert thai_month("ธค") == 12
    assert thai_month("เมษายน") == 4
    assert thai_month("xyz") is None
