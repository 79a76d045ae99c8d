from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from paynotify.banks.profiles import DEFAULT_LIBRARY, PatternLibrary
from paynotify.banks.rules import FieldKind
from paynotify.engine.corpus import BoxLike, TextCorpus, TextLine
from paynotify.engine.errors import InvalidCorpusError
from paynotify.engine.extractor import extract_field
from paynotify.engine.identifier import Identification, Identified, identify_bank
from paynotify.engine.record import TransactionRecord

logger = logging.getLogger(__name__)


def _resolve_bank(corpus: TextCorpus, library: PatternLibrary, bank_hint: Optional[str]) -> Identification:
    if bank_hint and library.get(bank_hint) is not None:
        return Identified(bank_hint, "package")
    return identify_bank(corpus, library)


def assemble(
    corpus: TextCorpus,
    library: PatternLibrary = DEFAULT_LIBRARY,
    *,
    bank_hint: Optional[str] = None,
) -> TransactionRecord:
    """Build a TransactionRecord from one recognized corpus.

    Bank identification runs first; an identified bank's rules are tried
    before the generic ones for every field. Missing fields stay None and
    never raise; only a missing or malformed corpus does.

    bank_hint: profile code known from the originating app, skips identification.
    """
    if not isinstance(corpus, TextCorpus):
        raise InvalidCorpusError(f"Expected TextCorpus, got {type(corpus).__name__}")

    ident = _resolve_bank(corpus, library, bank_hint)
    bank = ident.code if ident.identified else None
    fields = {}
    for kind in (FieldKind.AMOUNT, FieldKind.ACCOUNT_NUMBER, FieldKind.SENDER, FieldKind.TIMESTAMP):
        res = extract_field(corpus, kind, library.rules_for(kind, bank))
        fields[kind] = res.value
        if not res.ok:
            logger.debug("field_missed", extra={"field": kind.value, "error": res.error, "rule": res.rule_index})

    record = TransactionRecord(
        bank=ident.code,
        amount=fields[FieldKind.AMOUNT],
        sender=fields[FieldKind.SENDER],
        account_number=fields[FieldKind.ACCOUNT_NUMBER],
        timestamp=fields[FieldKind.TIMESTAMP],
        raw_text=corpus.text,
        identified_by=ident.method,
    )
    logger.debug(
        "transaction_assembled",
        extra={
            "bank": record.bank,
            "method": record.identified_by,
            "has_amount": record.amount is not None,
            "has_sender": record.sender is not None,
        },
    )
    return record


def assemble_lines(
    lines: Iterable[Union[str, TextLine]],
    boxes: Optional[Sequence[BoxLike]] = None,
    library: PatternLibrary = DEFAULT_LIBRARY,
    *,
    bank_hint: Optional[str] = None,
) -> TransactionRecord:
    return assemble(TextCorpus.from_lines(lines, boxes), library, bank_hint=bank_hint)


__all__ = ["assemble", "assemble_lines"]
