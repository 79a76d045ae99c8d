from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from paynotify.banks.labels import BankLabel


@dataclass(frozen=True)
class TransactionRecord:
    """One recognized incoming transfer. Every field except bank and raw_text may be absent."""

    bank: str = BankLabel.UNKNOWN.value
    amount: Optional[float] = None
    sender: Optional[str] = None
    account_number: Optional[str] = None
    timestamp: Optional[Union[str, float]] = None
    raw_text: str = ""
    identified_by: str = "none"

    @property
    def bank_known(self) -> bool:
        return self.bank != BankLabel.UNKNOWN.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bankName": self.bank,
            "amount": self.amount,
            "senderInfo": self.sender,
            "accountNumber": self.account_number,
            "timestamp": self.timestamp,
            "rawText": self.raw_text,
            "identifiedBy": self.identified_by,
        }
