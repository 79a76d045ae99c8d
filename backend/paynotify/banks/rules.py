from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class FieldKind(str, Enum):
    AMOUNT = "amount"
    ACCOUNT_NUMBER = "account_number"
    SENDER = "sender"
    TIMESTAMP = "timestamp"
    BANK_NAME = "bank_name"
    TRANSFER_KEYWORD = "transfer_keyword"


@dataclass(frozen=True)
class Rule:
    """A compiled capture pattern plus the group indices holding the payload.

    Groups are tried in order and the first one that participated in the
    match wins; index 0 means the whole match.
    """

    pattern: re.Pattern
    groups: Tuple[int, ...] = (1,)

    def payload(self, match: re.Match) -> Optional[str]:
        for idx in self.groups:
            value = match.group(idx)
            if value is not None:
                return value
        return None


def rule(pattern: str, *groups: int, flags: int = re.IGNORECASE) -> Rule:
    return Rule(pattern=re.compile(pattern, flags), groups=tuple(groups) or (1,))


__all__ = ["FieldKind", "Rule", "rule"]
