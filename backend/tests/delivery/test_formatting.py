from paynotify.config import DisplaySettings
from paynotify.delivery import (
    display_fields,
    format_amount_display,
    format_timestamp,
    notification_body,
    notification_title,
)
from paynotify.engine import TransactionRecord

BKK = DisplaySettings(timezone="Asia/Bangkok", currency_glyph="฿", date_format="%d/%m/%Y %H:%M")


def test_epoch_rendered_in_display_timezone():
    assert format_timestamp(0, BKK) == "01/01/1970 07:00"
    utc = DisplaySettings(timezone="UTC", currency_glyph="฿", date_format="%d/%m/%Y %H:%M")
    assert format_timestamp(0.0, utc) == "01/01/1970 00:00"


def test_slip_timestamps_reformatted_or_kept():
    assert format_timestamp("18 ต.ค. 2569 14:30", BKK) == "18/10/2026 14:30"
    assert format_timestamp("18-10-2026 09:05", BKK) == "18/10/2026 09:05"
    assert format_timestamp("yesterday", BKK) == "yesterday"
    assert format_timestamp(None, BKK) == ""
    assert format_timestamp("", BKK) == ""


def test_amount_display():
    assert format_amount_display(1234.5, BKK) == "฿1,234.50"
    assert format_amount_display(None, BKK) == ""


def test_title_and_body():
    rec = TransactionRecord(bank="SCB", amount=1234.5, sender="สมชาย ใจดี")
    assert notification_title(rec) == "รับเงินเข้าบัญชี SCB"
    assert notification_body(rec) == "จำนวน 1,234.50 บาท จาก สมชาย ใจดี"
    assert notification_body(TransactionRecord(amount=10)) == "จำนวน 10.00 บาท"
    assert notification_body(TransactionRecord()) == ""


def test_display_fields():
    rec = TransactionRecord(bank="KBANK", amount=2000.0, sender="นาย ก", timestamp=0)
    d = display_fields(rec, BKK)
    assert d == {
        "bank": "KBANK",
        "amount": "฿2,000.00",
        "sender": "จาก: นาย ก",
        "account": "",
        "timestamp": "01/01/1970 07:00",
        "title": "รับเงินเข้าบัญชี KBANK",
        "body": "จำนวน 2,000.00 บาท จาก นาย ก",
    }
