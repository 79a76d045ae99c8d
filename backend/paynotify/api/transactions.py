from __future__ import annotations

from typing import Any, Dict, Union

from fastapi import APIRouter, HTTPException

from paynotify.banks.profiles import DEFAULT_LIBRARY
from paynotify.delivery.formatting import display_fields
from paynotify.engine.assembler import assemble
from paynotify.engine.corpus import TextCorpus
from paynotify.engine.errors import InvalidCorpusError, InvalidPayloadError
from paynotify.engine.record import TransactionRecord
from paynotify.schemas.transactions import (
    BankPayload,
    ExtractRequest,
    NotificationRequest,
    TransactionOut,
)
from paynotify.services.notifications import process_notification, record_from_payload

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _out(record: TransactionRecord) -> TransactionOut:
    return TransactionOut(**record.to_dict(), display=display_fields(record))


@router.post("/extract", response_model=TransactionOut)
async def extract(req: ExtractRequest) -> TransactionOut:
    texts = [ln.text for ln in req.lines]
    boxes = [ln.box.model_dump() if ln.box is not None else None for ln in req.lines]
    try:
        corpus = TextCorpus.from_lines(texts, boxes)
    except InvalidCorpusError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if req.bankHint and DEFAULT_LIBRARY.get(req.bankHint) is None:
        raise HTTPException(status_code=400, detail="Unsupported bank")
    return _out(assemble(corpus, DEFAULT_LIBRARY, bank_hint=req.bankHint))


@router.post("/notification", response_model=None)
async def notification(req: NotificationRequest) -> Union[TransactionOut, Dict[str, Any]]:
    record = process_notification(req.packageName, req.title, req.text, DEFAULT_LIBRARY)
    if record is None:
        return {"skipped": True}
    return _out(record)


@router.post("/payload", response_model=TransactionOut)
async def payload(req: BankPayload) -> TransactionOut:
    try:
        record = record_from_payload(req.model_dump())
    except InvalidPayloadError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _out(record)
