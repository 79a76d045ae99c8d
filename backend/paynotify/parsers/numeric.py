from __future__ import annotations

import re
from typing import Optional, Union

from paynotify.parsers.error_codes import ErrorCode
from paynotify.parsers.result import ParseResult
from paynotify.parsers.text_utils import normalize_digits, strip_invisible

_NUMBER_RX = re.compile(r"^(\d*)(?:\.(\d*))?$")


def parse_amount(text: Optional[str]) -> ParseResult:
    """Parse a grouped numeric string ("1,234.56") into a non-negative float.

    Currency symbols are not handled here; the extraction rule is expected to
    capture only the numeric payload. Failures are reported in the result,
    never raised.
    """
    if not text:
        return ParseResult(value=None, ok=False, error=ErrorCode.EMPTY)
    s = normalize_digits(strip_invisible(str(text)))
    s = re.sub(r"\s+", "", s).replace(",", "")
    if not s:
        return ParseResult(value=None, ok=False, error=ErrorCode.EMPTY, meta={"text": text})
    if s.count(".") > 1:
        return ParseResult(value=None, ok=False, error=ErrorCode.MULTIPLE_DECIMAL_POINTS, meta={"text": text})
    m = _NUMBER_RX.match(s)
    if not m or not (m.group(1) or m.group(2)):
        return ParseResult(value=None, ok=False, error=ErrorCode.BAD_NUMBER, meta={"text": text})
    try:
        return ParseResult(value=float(s), ok=True)
    except ValueError:
        return ParseResult(value=None, ok=False, error=ErrorCode.BAD_NUMBER, meta={"text": text, "val": s})


def normalize_amount(text: Optional[str]) -> Optional[float]:
    r = parse_amount(text)
    return r.value if r.ok else None


def format_amount(value: Union[float, int], glyph: str = "฿") -> str:
    """Grouped two-decimal display form, e.g. 1234.5 -> "฿1,234.50"."""
    return f"{glyph}{float(value):,.2f}"


__all__ = ["parse_amount", "normalize_amount", "format_amount"]
