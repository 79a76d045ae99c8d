from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from paynotify.banks.profiles import DEFAULT_LIBRARY, PatternLibrary
from paynotify.engine.assembler import assemble
from paynotify.engine.corpus import TextCorpus
from paynotify.engine.errors import InvalidPayloadError
from paynotify.engine.record import TransactionRecord
from paynotify.schemas.transactions import BankPayload

logger = logging.getLogger(__name__)


def record_from_payload(payload: Mapping[str, Any]) -> TransactionRecord:
    """Trusted path: the backend already parsed the transfer, no extraction runs."""
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(f"Expected a mapping, got {type(payload).__name__}")
    try:
        p = BankPayload(**payload)
    except ValidationError as e:
        raise InvalidPayloadError(str(e)) from e
    return TransactionRecord(
        bank=p.bankName,
        amount=p.amount,
        sender=p.senderInfo,
        account_number=p.accountNumber,
        timestamp=p.timestamp,
        raw_text=p.rawText or "",
        identified_by="payload",
    )


def process_notification(
    package_name: Optional[str],
    title: Optional[str],
    text: Optional[str],
    library: PatternLibrary = DEFAULT_LIBRARY,
) -> Optional[TransactionRecord]:
    """Run a posted bank-app notification through the extraction pipeline.

    Returns None when title or text is empty; such notifications are
    summaries or progress updates, not transfers. A package that belongs to
    a known bank app fixes the bank without looking at the text.
    """
    if not title or not text:
        logger.debug("notification_skipped", extra={"package": package_name})
        return None
    profile = library.by_package(package_name)
    corpus = TextCorpus.from_notification(title, text)
    record = assemble(corpus, library, bank_hint=profile.code if profile is not None else None)
    logger.info(
        "notification_processed",
        extra={"package": package_name, "bank": record.bank, "has_amount": record.amount is not None},
    )
    return record
