from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from paynotify.engine.errors import InvalidCorpusError
from paynotify.geometry import BoundingBox
from paynotify.parsers.text_utils import clean_line

BoxLike = Union[BoundingBox, Mapping[str, Any], Sequence[float], None]


def coerce_box(value: BoxLike) -> Optional[BoundingBox]:
    """Accept a BoundingBox, a {x, y, width, height} mapping or an [x, y, w, h] sequence."""
    if value is None:
        return None
    if isinstance(value, BoundingBox):
        return value
    try:
        if isinstance(value, Mapping):
            w = value.get("width", value.get("w"))
            h = value.get("height", value.get("h"))
            return BoundingBox(float(value["x"]), float(value["y"]), float(w), float(h))
        if len(value) == 4:
            x, y, w, h = value
            return BoundingBox(float(x), float(y), float(w), float(h))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidCorpusError(f"Invalid bounding box: {value!r}") from e
    raise InvalidCorpusError(f"Invalid bounding box: {value!r}")


@dataclass(frozen=True)
class TextLine:
    text: str
    box: Optional[BoundingBox] = None


@dataclass(frozen=True)
class TextCorpus:
    """Ordered recognized text lines, each optionally carrying a normalized box.

    ``text`` is the verbatim join used as the record's raw text;
    ``search_text`` is the cleaned join the extraction rules run against.
    """

    lines: Tuple[TextLine, ...]

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if not all(isinstance(ln, TextLine) for ln in lines):
            raise InvalidCorpusError("Corpus lines must be TextLine instances")
        if not any(ln.text.strip() for ln in lines):
            raise InvalidCorpusError("Corpus is empty")
        object.__setattr__(self, "lines", lines)

    @classmethod
    def from_lines(
        cls,
        lines: Optional[Iterable[Union[str, TextLine]]],
        boxes: Optional[Sequence[BoxLike]] = None,
    ) -> "TextCorpus":
        if lines is None:
            raise InvalidCorpusError("No corpus provided")
        if isinstance(lines, str):
            raise InvalidCorpusError("Expected a sequence of lines, got a single string")
        items = list(lines)
        if boxes is not None and len(boxes) != len(items):
            raise InvalidCorpusError(f"Got {len(boxes)} boxes for {len(items)} lines")
        out = []
        for i, item in enumerate(items):
            box = coerce_box(boxes[i]) if boxes is not None else None
            if isinstance(item, TextLine):
                out.append(TextLine(item.text, box if box is not None else item.box))
            elif isinstance(item, str):
                out.append(TextLine(item, box))
            else:
                raise InvalidCorpusError(f"Unsupported line type: {type(item).__name__}")
        return cls(tuple(out))

    @classmethod
    def from_text(cls, body: Optional[str]) -> "TextCorpus":
        if body is None:
            raise InvalidCorpusError("No corpus provided")
        return cls.from_lines(str(body).splitlines())

    @classmethod
    def from_notification(cls, title: Optional[str], text: Optional[str]) -> "TextCorpus":
        parts = [p for p in (title, text) if p]
        if not parts:
            raise InvalidCorpusError("Notification has neither title nor text")
        return cls.from_lines([ln for p in parts for ln in str(p).splitlines()])

    @property
    def text(self) -> str:
        return "\n".join(ln.text for ln in self.lines)

    @property
    def search_text(self) -> str:
        return "\n".join(clean_line(ln.text) for ln in self.lines)

    @property
    def boxes(self) -> Tuple[BoundingBox, ...]:
        return tuple(ln.box for ln in self.lines if ln.box is not None)

    @property
    def has_boxes(self) -> bool:
        return any(ln.box is not None for ln in self.lines)

    def __len__(self) -> int:
        return len(self.lines)


__all__ = ["TextLine", "TextCorpus", "coerce_box"]
