from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


def clip01(x: float) -> float:
    return max(0.0, min(1.0, x))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in fractional image coordinates.

    ``x``/``y`` is the top-left corner, ``width``/``height`` the extent; all
    four are clamped into [0, 1] on construction.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        x = clip01(float(self.x))
        y = clip01(float(self.y))
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "width", min(clip01(float(self.width)), 1.0 - x))
        object.__setattr__(self, "height", min(clip01(float(self.height)), 1.0 - y))

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def intersects(self, other: "BoundingBox") -> bool:
        # Rectangles sharing only an edge do not intersect.
        return self.x < other.x2 and other.x < self.x2 and self.y < other.y2 and other.y < self.y2

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> "BoundingBox":
        left, right = (x1, x2) if x1 <= x2 else (x2, x1)
        top, bottom = (y1, y2) if y1 <= y2 else (y2, y1)
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def from_pixels(cls, rect: Sequence[float], image_shape: Tuple[int, int]) -> "BoundingBox":
        """Build from pixel [x1, y1, x2, y2]; image_shape is (height, width)."""
        h, w = image_shape
        if h <= 0 or w <= 0:
            raise ValueError(f"Invalid image shape: {image_shape}")
        x1, y1, x2, y2 = (float(v) for v in rect[:4])
        return cls.from_corners(x1 / w, y1 / h, x2 / w, y2 / h)


def polygon_to_rect(poly: Sequence[Sequence[float]]) -> Tuple[float, float, float, float]:
    """Bounding pixel rect [x1, y1, x2, y2] of a quadrilateral as returned by OCR engines."""
    xs = [float(p[0]) for p in poly]
    ys = [float(p[1]) for p in poly]
    return min(xs), min(ys), max(xs), max(ys)


__all__ = ["BoundingBox", "clip01", "polygon_to_rect"]
