from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    EMPTY = "EMPTY"
    NO_MATCH = "NO_MATCH"

    # Amount
    BAD_NUMBER = "BAD_NUMBER"
    MULTIPLE_DECIMAL_POINTS = "MULTIPLE_DECIMAL_POINTS"

    # Timestamp
    BAD_MONTH = "BAD_MONTH"
    BAD_DATE = "BAD_DATE"
