"""OCR boundary.

Adapts screen captures and OCR engine output into a TextCorpus.
"""

from .engine import PaddleTextRecognizer, read_image, lines_from_paddle, reading_order

__all__ = [
    "PaddleTextRecognizer",
    "read_image",
    "lines_from_paddle",
    "reading_order",
]
