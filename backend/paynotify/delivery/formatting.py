from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional, Union
from zoneinfo import ZoneInfo

from paynotify.config import DEFAULT_DISPLAY, DisplaySettings
from paynotify.engine.record import TransactionRecord
from paynotify.parsers.dates import parse_timestamp
from paynotify.parsers.numeric import format_amount


def format_amount_display(amount: Optional[float], settings: Optional[DisplaySettings] = None) -> str:
    if amount is None:
        return ""
    s = settings or DEFAULT_DISPLAY
    return format_amount(amount, glyph=s.currency_glyph)


def format_timestamp(value: Optional[Union[str, float, int]], settings: Optional[DisplaySettings] = None) -> str:
    """Render epoch seconds or a recognized slip timestamp as dd/mm/yyyy HH:MM.

    Epoch values are shown in the display timezone; parsed slip timestamps
    are already local. Unparseable strings are returned as they came.
    """
    if value is None or value == "":
        return ""
    s = settings or DEFAULT_DISPLAY
    if isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(float(value), tz=ZoneInfo(s.timezone))
        return dt.strftime(s.date_format)
    r = parse_timestamp(str(value))
    if r.ok:
        return r.value.strftime(s.date_format)
    return str(value)


def notification_title(record: TransactionRecord) -> str:
    return f"รับเงินเข้าบัญชี {record.bank}"


def notification_body(record: TransactionRecord) -> str:
    """Thai summary line; fields that were not recognized are left out."""
    parts = []
    if record.amount is not None:
        parts.append(f"จำนวน {format_amount(record.amount, glyph='')} บาท")
    if record.sender:
        parts.append(f"จาก {record.sender}")
    return " ".join(parts)


def display_fields(record: TransactionRecord, settings: Optional[DisplaySettings] = None) -> Dict[str, str]:
    return {
        "bank": record.bank,
        "amount": format_amount_display(record.amount, settings),
        "sender": f"จาก: {record.sender}" if record.sender else "",
        "account": record.account_number or "",
        "timestamp": format_timestamp(record.timestamp, settings),
        "title": notification_title(record),
        "body": notification_body(record),
    }
