from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from paynotify.parsers.error_codes import ErrorCode
from paynotify.parsers.result import ParseResult
from paynotify.parsers.text_utils import normalize_digits

_NUMERIC_RX = re.compile(r"\b(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})\s+(\d{1,2}):(\d{2})(?::(\d{2}))?")
_THAI_RX = re.compile(r"\b(\d{1,2})\s+([ก-๎][ก-๎.]*)\s+(\d{2,4})\s+(\d{1,2}):(\d{2})(?::(\d{2}))?")

# Keys have dots removed so "ต.ค." and "ตค" both resolve.
_THAI_MONTHS = {
    "มกราคม": 1, "มค": 1,
    "กุมภาพันธ์": 2, "กพ": 2,
    "มีนาคม": 3, "มีค": 3,
    "เมษายน": 4, "เมย": 4,
    "พฤษภาคม": 5, "พค": 5,
    "มิถุนายน": 6, "มิย": 6,
    "กรกฎาคม": 7, "กค": 7,
    "สิงหาคม": 8, "สค": 8,
    "กันยายน": 9, "กย": 9,
    "ตุลาคม": 10, "ตค": 10,
    "พฤศจิกายน": 11, "พย": 11,
    "ธันวาคม": 12, "ธค": 12,
}

_BUDDHIST_ERA_OFFSET = 543


def _to_gregorian(year: int) -> int:
    if year < 100:
        # Two-digit years on Thai slips are Buddhist era (69 -> 2569).
        year += 2500
    if year >= 2400:
        year -= _BUDDHIST_ERA_OFFSET
    return year


def thai_month(name: str) -> Optional[int]:
    return _THAI_MONTHS.get(name.replace(".", "").strip())


def parse_timestamp(text: Optional[str]) -> ParseResult:
    """Parse a slip/notification timestamp into a naive local datetime.

    Supports DD/MM/YYYY HH:MM, DD-MM-YYYY HH:MM and DD <Thai month> YYYY
    HH:MM[:SS]; Buddhist-era years are converted to Gregorian.
    """
    if not text:
        return ParseResult(value=None, ok=False, error=ErrorCode.EMPTY)
    s = normalize_digits(text)
    m = _NUMERIC_RX.search(s)
    if m:
        day, month = int(m.group(1)), int(m.group(2))
    else:
        m = _THAI_RX.search(s)
        if not m:
            return ParseResult(value=None, ok=False, error=ErrorCode.NO_MATCH, meta={"text": text})
        day = int(m.group(1))
        month = thai_month(m.group(2))
        if month is None:
            return ParseResult(value=None, ok=False, error=ErrorCode.BAD_MONTH, meta={"mon": m.group(2)})
    year = _to_gregorian(int(m.group(3)))
    hour, minute = int(m.group(4)), int(m.group(5))
    second = int(m.group(6)) if m.group(6) else 0
    try:
        value = datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        return ParseResult(value=None, ok=False, error=ErrorCode.BAD_DATE, meta={"text": text, "error": str(e)})
    return ParseResult(value=value, ok=True)


__all__ = ["parse_timestamp", "thai_month"]
