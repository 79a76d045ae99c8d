from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Tuple, Optional


def _split_env(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(p.strip() for p in raw.split(",") if p.strip())


@dataclass
class DisplaySettings:
    timezone: str = os.getenv("DISPLAY_TZ", "Asia/Bangkok")
    currency_glyph: str = os.getenv("DISPLAY_CURRENCY_GLYPH", "฿")
    date_format: str = os.getenv("DISPLAY_DATE_FORMAT", "%d/%m/%Y %H:%M")


DEFAULT_DISPLAY = DisplaySettings()


@dataclass
class OCRSettings:
    min_confidence: float = float(os.getenv("OCR_MIN_CONFIDENCE", 0.3))
    languages: Tuple[str, ...] = field(default_factory=lambda: _split_env("OCR_LANGS", "th"))
    threads: int = int(os.getenv("OCR_THREADS", 4))


DEFAULT_OCR = OCRSettings()


@dataclass
class ApiSettings:
    allowed_origins: Optional[str] = os.getenv("ALLOWED_ORIGINS") or None
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


DEFAULT_API = ApiSettings()
