from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

import cv2
import numpy as np

try:
    # PaddleOCR is an optional dependency; import lazily to avoid
    # import errors during testing when the library is not installed.
    from paddleocr import PaddleOCR  # type: ignore
except Exception:
    PaddleOCR = None  # type: ignore

from paynotify.config import DEFAULT_OCR, OCRSettings
from paynotify.engine.corpus import TextCorpus, TextLine
from paynotify.engine.errors import UnreadableImageError
from paynotify.geometry import BoundingBox, polygon_to_rect

logger = logging.getLogger(__name__)


def read_image(path: str) -> np.ndarray:
    """Load a screen capture from disk as a BGR array."""
    if not path or not os.path.isfile(path):
        raise UnreadableImageError(f"Image not found: {path}")
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise UnreadableImageError(f"Could not decode image: {path}")
    return img


def _line(text: Any, poly: Sequence[Sequence[float]], image_shape: Tuple[int, int]) -> TextLine:
    box = BoundingBox.from_pixels(polygon_to_rect(poly), image_shape)
    return TextLine(text=str(text), box=box)


def lines_from_paddle(
    results: Any,
    image_shape: Tuple[int, int],
    min_confidence: float = 0.3,
) -> List[TextLine]:
    """Convert raw PaddleOCR output to TextLines with normalized boxes.

    Handles both result layouts: the newer ``[{rec_texts, rec_scores,
    rec_polys}]`` dicts and the older ``[[(poly, (text, conf)), ...]]``
    nesting. Lines below ``min_confidence`` are dropped. image_shape is
    (height, width).
    """
    lines: List[TextLine] = []
    if not results:
        return lines
    first = results[0]
    if isinstance(first, dict):
        rec_texts = first.get("rec_texts")
        rec_scores = first.get("rec_scores")
        rec_polys = first.get("rec_polys")
        if rec_texts is None or rec_scores is None or rec_polys is None:
            return lines
        for text, score, poly in zip(rec_texts, rec_scores, rec_polys):
            if float(score) < min_confidence:
                continue
            lines.append(_line(text, poly, image_shape))
        return lines
    if isinstance(first, list):
        for poly, (text, conf) in first:
            if float(conf) < min_confidence:
                continue
            lines.append(_line(text, poly, image_shape))
    return lines


def reading_order(lines: List[TextLine]) -> List[TextLine]:
    """Top-to-bottom, then left-to-right; lines without boxes keep their place at the end."""
    boxed = [ln for ln in lines if ln.box is not None]
    rest = [ln for ln in lines if ln.box is None]
    boxed.sort(key=lambda ln: (round(ln.box.y, 2), ln.box.x))
    return boxed + rest


class PaddleTextRecognizer:
    """Wrapper around PaddleOCR producing a TextCorpus from a screen capture.

    Engines are created lazily per language and cached on the instance.
    """

    def __init__(self, settings: Optional[OCRSettings] = None) -> None:
        if PaddleOCR is None:
            raise ImportError(
                "PaddleOCR library is not installed. Please install paddleocr to use this engine."
            )
        self.settings = settings or DEFAULT_OCR
        self._engines: Dict[str, Any] = {}

    def _get_engine(self, lang: str) -> Any:
        if lang not in self._engines:
            try:
                self._engines[lang] = PaddleOCR(
                    lang=lang,
                    use_angle_cls=False,
                    cpu_threads=self.settings.threads,
                    show_log=False,
                )
            except (TypeError, ValueError):
                # Newer PaddleOCR releases dropped some of these kwargs
                self._engines[lang] = PaddleOCR(lang=lang)
        return self._engines[lang]

    def recognize(self, image: np.ndarray) -> TextCorpus:
        if image is None or not isinstance(image, np.ndarray) or image.size == 0:
            raise UnreadableImageError("Empty or invalid image array")
        image_shape = (int(image.shape[0]), int(image.shape[1]))
        all_lines: List[TextLine] = []
        for lang in self.settings.languages:
            engine = self._get_engine(lang)
            try:
                raw = engine.ocr(image)
            except AttributeError:
                raw = engine.predict(image)
            all_lines.extend(lines_from_paddle(raw, image_shape, self.settings.min_confidence))
        logger.debug("ocr_complete", extra={"lines": len(all_lines), "image_shape": image_shape})
        return TextCorpus.from_lines(reading_order(all_lines))

    def recognize_file(self, path: str) -> TextCorpus:
        return self.recognize(read_image(path))


__all__ = ["PaddleTextRecognizer", "read_image", "lines_from_paddle", "reading_order"]
