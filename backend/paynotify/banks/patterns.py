from __future__ import annotations

# Extraction rules, in evaluation order. Order matters: the extractor takes the
# first rule with any match in the text and never consults the rest.

from typing import Dict, Tuple

from paynotify.banks.rules import FieldKind, Rule, rule

# Numeric payload: starts with a digit, then digits, grouping commas and dots.
# Multiple dots are captured on purpose so the normalizer can reject them.
_NUM = r"(\d[\d,.]*)"
_CURRENCY = r"(?:THB|฿|บาท)"

GENERIC_AMOUNT: Tuple[Rule, ...] = (
    rule(rf"฿[ \t]*{_NUM}"),                 # ฿1,234.56
    rule(rf"{_NUM}[ \t]*บาท"),               # 1,234.56 บาท
    rule(rf"THB[ \t]*{_NUM}"),               # THB 1,234.56
    rule(rf"{_NUM}[ \t]*THB"),               # 1,234.56 THB
    rule(rf"จำนวนเงิน[ \t:]*{_NUM}"),         # จำนวนเงิน: 1,234.56
    rule(rf"เงิน[ \t:]*{_NUM}"),              # เงิน: 1,234.56
    rule(rf"โอนเงิน[ \t:]*{_NUM}"),           # โอนเงิน 1,234.56
    # Bare numeric fallback. Can pick up unrelated numbers (account digit
    # groups, dates) when no currency-marked amount exists.
    rule(_NUM),
)

GENERIC_ACCOUNT_NUMBER: Tuple[Rule, ...] = (
    rule(r"\d{3}-\d-\d{5}-\d", 0),           # XXX-X-XXXXX-X
    rule(r"\d{3}-\d{6}-\d", 0),              # XXX-XXXXXX-X
    rule(r"\d{10}", 0),                      # XXXXXXXXXX
    rule(r"\d{3}-\d{3}-\d{4}", 0),           # XXX-XXX-XXXX
    rule(r"[x*]{3}-[x*]-[x*\d]{5}-[x*\d]", 0),  # xxx-x-x1234-x
)

_SENDER_RX = r"(?:จาก|\bfrom\b|โดย|\bby\b)[ \t:]*([^\d\n]*[^\d\s])"

GENERIC_SENDER: Tuple[Rule, ...] = (
    rule(_SENDER_RX),
)

GENERIC_TIMESTAMP: Tuple[Rule, ...] = (
    rule(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}", 0),                  # DD/MM/YYYY HH:MM
    rule(r"\d{2}-\d{2}-\d{4} \d{2}:\d{2}", 0),                  # DD-MM-YYYY HH:MM
    rule(r"\d{1,2} [ก-๙.]+ \d{2,4} \d{2}:\d{2}(?::\d{2})?", 0),  # 18 ต.ค. 2569 14:30
)

GENERIC_RULES: Dict[FieldKind, Tuple[Rule, ...]] = {
    FieldKind.AMOUNT: GENERIC_AMOUNT,
    FieldKind.ACCOUNT_NUMBER: GENERIC_ACCOUNT_NUMBER,
    FieldKind.SENDER: GENERIC_SENDER,
    FieldKind.TIMESTAMP: GENERIC_TIMESTAMP,
}

# Shared by every bank app seen so far; banks differ only by name pattern.
_TRANSFER_RX = r"(?:transfer(?:red)?|โอนเงิน|รับเงิน|เงินเข้า|ได้รับเงิน|รายการโอน)"

BANK_AMOUNT: Tuple[Rule, ...] = (
    rule(rf"{_CURRENCY}[ \t]*{_NUM}|{_NUM}[ \t]*{_CURRENCY}", 1, 2),
    rule(rf"{_TRANSFER_RX}.*?{_NUM}"),
)

BANK_ACCOUNT_NUMBER: Tuple[Rule, ...] = (
    rule(r"(?:a/c|account|บัญชี)[^\dx*\n]*([x*\d]{3}(?:[- ]?[x*\d]+){1,3})"),
)

BANK_SENDER: Tuple[Rule, ...] = (
    rule(_SENDER_RX),
)

BANK_TRANSFER_KEYWORD: Tuple[Rule, ...] = (
    rule(_TRANSFER_RX, 0),
)


def bank_rules(name_pattern: str) -> Dict[FieldKind, Tuple[Rule, ...]]:
    return {
        FieldKind.BANK_NAME: (rule(name_pattern, 0),),
        FieldKind.TRANSFER_KEYWORD: BANK_TRANSFER_KEYWORD,
        FieldKind.AMOUNT: BANK_AMOUNT,
        FieldKind.ACCOUNT_NUMBER: BANK_ACCOUNT_NUMBER,
        FieldKind.SENDER: BANK_SENDER,
    }


BANK_NAME_PATTERNS: Dict[str, str] = {
    "SCB": r"(?:SCB|ไทยพาณิชย์|Siam Commercial Bank)",
    "KBANK": r"(?:KBANK|กสิกร|KASIKORN)",
    "KTB": r"(?:KTB|กรุงไทย|Krungthai)",
    "BBL": r"(?:BBL|กรุงเทพ|Bangkok Bank)",
    "TTB": r"(?:TTB|TMB|ทหารไทย|ธนชาต)",
    "BAY": r"(?:BAY|กรุงศรี|Krungsri)",
    "GSB": r"(?:GSB|ออมสิน)",
    "UOB": r"(?:UOB|ยูโอบี)",
}
