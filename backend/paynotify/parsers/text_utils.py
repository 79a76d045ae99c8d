from __future__ import annotations

import re
import unicodedata

# Thai OCR output and bank notifications mix Thai and Arabic digits, and
# copy-pasted text often carries invisible direction marks.

_THAI_DIGITS = {
    ord("๐"): "0",
    ord("๑"): "1",
    ord("๒"): "2",
    ord("๓"): "3",
    ord("๔"): "4",
    ord("๕"): "5",
    ord("๖"): "6",
    ord("๗"): "7",
    ord("๘"): "8",
    ord("๙"): "9",
}

_INVISIBLE_CHARS = (
    "\u200B",  # ZERO WIDTH SPACE
    "\u200C",  # ZERO WIDTH NON-JOINER
    "\u200D",  # ZERO WIDTH JOINER
    "\u200E",  # LEFT-TO-RIGHT MARK
    "\u200F",  # RIGHT-TO-LEFT MARK
    "\u2066",  # LRI
    "\u2067",  # RLI
    "\u2068",  # FSI
    "\u2069",  # PDI
    "\uFEFF",  # BOM
)


def normalize_digits(text: str) -> str:
    if not text:
        return text
    return text.translate(_THAI_DIGITS)


def strip_invisible(text: str) -> str:
    if not text:
        return text
    s = text
    for ch in _INVISIBLE_CHARS:
        s = s.replace(ch, "")
    return s


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def clean_line(text: str) -> str:
    """NFC-normalize one recognized line and drop invisible marks; keeps inner spacing."""
    if not text:
        return ""
    s = unicodedata.normalize("NFC", str(text))
    return strip_invisible(s).strip()
