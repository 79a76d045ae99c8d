from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from paynotify.banks.rules import FieldKind, Rule
from paynotify.engine.corpus import TextCorpus
from paynotify.parsers.error_codes import ErrorCode
from paynotify.parsers.numeric import parse_amount
from paynotify.parsers.text_utils import collapse_whitespace

Source = Union[TextCorpus, str]


@dataclass
class ExtractionResult:
    value: Any
    ok: bool
    rule_index: Optional[int] = None
    raw: Optional[str] = None
    error: Optional[str] = None


def _source_text(source: Source) -> str:
    if isinstance(source, TextCorpus):
        return source.search_text
    return str(source or "")


def _normalize(kind: FieldKind, raw: str) -> ExtractionResult:
    if kind == FieldKind.AMOUNT:
        r = parse_amount(raw)
        if r.ok:
            return ExtractionResult(value=r.value, ok=True, raw=raw)
        return ExtractionResult(value=None, ok=False, raw=raw, error=r.error)
    if kind == FieldKind.SENDER:
        value = collapse_whitespace(raw)
    else:
        value = raw.strip()
    if not value:
        return ExtractionResult(value=None, ok=False, raw=raw, error=ErrorCode.EMPTY)
    return ExtractionResult(value=value, ok=True, raw=raw)


def extract_field(source: Source, kind: FieldKind, rules: Sequence[Rule]) -> ExtractionResult:
    """Apply rules in order; the first rule matching anywhere decides the field.

    Later rules are not consulted even when the winning match fails to
    normalize (e.g. an amount with two decimal points).
    """
    text = _source_text(source)
    if not text:
        return ExtractionResult(value=None, ok=False, error=ErrorCode.EMPTY)
    for idx, rl in enumerate(rules):
        m = rl.pattern.search(text)
        if m is None:
            continue
        raw = rl.payload(m)
        if raw is None:
            return ExtractionResult(value=None, ok=False, rule_index=idx, error=ErrorCode.EMPTY)
        res = _normalize(kind, raw)
        res.rule_index = idx
        return res
    return ExtractionResult(value=None, ok=False, error=ErrorCode.NO_MATCH)


def extract_amount(source: Source, rules: Sequence[Rule]) -> Optional[float]:
    return extract_field(source, FieldKind.AMOUNT, rules).value


def extract_account_number(source: Source, rules: Sequence[Rule]) -> Optional[str]:
    return extract_field(source, FieldKind.ACCOUNT_NUMBER, rules).value


def extract_sender(source: Source, rules: Sequence[Rule]) -> Optional[str]:
    return extract_field(source, FieldKind.SENDER, rules).value


def extract_timestamp(source: Source, rules: Sequence[Rule]) -> Optional[str]:
    return extract_field(source, FieldKind.TIMESTAMP, rules).value


__all__ = [
    "ExtractionResult",
    "extract_field",
    "extract_amount",
    "extract_account_number",
    "extract_sender",
    "extract_timestamp",
]
