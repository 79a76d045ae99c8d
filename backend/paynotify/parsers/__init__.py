from .error_codes import ErrorCode
from .result import ParseResult
from .numeric import parse_amount, normalize_amount, format_amount
from .dates import parse_timestamp, thai_month

__all__ = [
    "ErrorCode",
    "ParseResult",
    "parse_amount",
    "normalize_amount",
    "format_amount",
    "parse_timestamp",
    "thai_month",
]
