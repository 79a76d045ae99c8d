from __future__ import annotations

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field


class BoxModel(BaseModel):
    x: float = Field(..., ge=0.0, le=1.0, description="Left edge, fraction of image width")
    y: float = Field(..., ge=0.0, le=1.0, description="Top edge, fraction of image height")
    width: float = Field(..., ge=0.0, le=1.0)
    height: float = Field(..., ge=0.0, le=1.0)


class LineModel(BaseModel):
    text: str
    box: Optional[BoxModel] = None


class ExtractRequest(BaseModel):
    lines: List[LineModel] = Field(..., description="Recognized text lines in reading order")
    bankHint: Optional[str] = Field(None, description="Bank code when the source app is already known")


class NotificationRequest(BaseModel):
    packageName: Optional[str] = Field(None, description="Originating app package, e.g. com.scb.phone")
    title: str = ""
    text: str = ""


class BankPayload(BaseModel):
    """Pre-structured transfer details pushed by the backend; trusted as-is."""

    bankName: str
    amount: float = Field(..., ge=0.0)
    senderInfo: str
    timestamp: float = Field(..., description="Epoch seconds")
    accountNumber: Optional[str] = None
    rawText: Optional[str] = None


class TransactionOut(BaseModel):
    bankName: str
    amount: Optional[float] = None
    senderInfo: Optional[str] = None
    accountNumber: Optional[str] = None
    timestamp: Optional[Union[float, str]] = None
    rawText: str
    identifiedBy: str
    display: Dict[str, str] = Field(default_factory=dict)
