from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from paynotify.banks.labels import BankLabel
from paynotify.banks.profiles import PatternLibrary
from paynotify.engine.corpus import TextCorpus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identified:
    code: str
    method: str  # "region" | "text" | "package"

    @property
    def identified(self) -> bool:
        return True


@dataclass(frozen=True)
class Unknown:
    code: str = BankLabel.UNKNOWN.value
    method: str = "none"

    @property
    def identified(self) -> bool:
        return False


Identification = Union[Identified, Unknown]


def identify_by_region(corpus: TextCorpus, library: PatternLibrary) -> Optional[Identified]:
    """First bank (in priority order) whose logo region intersects any line box."""
    boxes = corpus.boxes
    if not boxes:
        return None
    for profile in library.profiles:
        region = profile.logo_region
        if region is None:
            continue
        if any(region.intersects(b) for b in boxes):
            return Identified(profile.code, "region")
    return None


def identify_by_text(corpus: TextCorpus, library: PatternLibrary) -> Optional[Identified]:
    """First bank (in priority order) with a name keyword in the lower-cased text."""
    lowered = corpus.search_text.lower()
    for profile in library.profiles:
        if profile.matches_text(lowered):
            return Identified(profile.code, "text")
    return None


def identify_bank(corpus: TextCorpus, library: PatternLibrary) -> Identification:
    """Resolve which bank produced the corpus: logo region first, then keywords."""
    result = identify_by_region(corpus, library) or identify_by_text(corpus, library)
    if result is None:
        logger.debug("bank_unidentified", extra={"lines": len(corpus)})
        return Unknown()
    logger.debug("bank_identified", extra={"bank": result.code, "method": result.method})
    return result


__all__ = ["Identified", "Unknown", "Identification", "identify_bank", "identify_by_region", "identify_by_text"]
