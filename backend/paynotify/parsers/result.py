from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ParseResult:
    value: Any
    ok: bool
    error: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
