from __future__ import annotations

from enum import Enum


class BankLabel(str, Enum):
    SCB = "SCB"
    KBANK = "KBANK"
    KTB = "KTB"
    BBL = "BBL"
    TTB = "TTB"
    BAY = "BAY"
    GSB = "GSB"
    UOB = "UOB"
    UNKNOWN = "Unknown"
