"""Transaction extraction engine.

Pure, synchronous transform from recognized text to a TransactionRecord:
corpus -> bank identification -> per-field rule extraction -> record.
"""

from .errors import PayNotifyError, InvalidCorpusError, InvalidPayloadError, UnreadableImageError
from .corpus import TextLine, TextCorpus
from .record import TransactionRecord
from .identifier import Identified, Unknown, identify_bank
from .extractor import ExtractionResult, extract_field
from .assembler import assemble, assemble_lines

__all__ = [
    "PayNotifyError",
    "InvalidCorpusError",
    "InvalidPayloadError",
    "UnreadableImageError",
    "TextLine",
    "TextCorpus",
    "TransactionRecord",
    "Identified",
    "Unknown",
    "identify_bank",
    "ExtractionResult",
    "extract_field",
    "assemble",
    "assemble_lines",
]
