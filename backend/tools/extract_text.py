from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Tuple

from paynotify.banks.profiles import DEFAULT_LIBRARY
from paynotify.delivery.formatting import display_fields
from paynotify.engine.assembler import assemble
from paynotify.engine.corpus import TextCorpus
from paynotify.engine.errors import InvalidCorpusError
from paynotify.geometry import BoundingBox


def _coerce_lines(data: Dict[str, Any]) -> Tuple[List[str], List[Optional[BoundingBox]]]:
    """Accept lines as plain strings or dicts with:
    - box as {x, y, width, height} normalized
    - bbox as [x1, y1, x2, y2] pixels (needs image_height / image_width)
    """
    h = int(data.get("image_height") or 0)
    w = int(data.get("image_width") or 0)
    texts: List[str] = []
    boxes: List[Optional[BoundingBox]] = []
    for ln in data.get("lines") or []:
        if isinstance(ln, str):
            texts.append(ln)
            boxes.append(None)
            continue
        texts.append(str(ln.get("text", "")))
        box = ln.get("box")
        bbox = ln.get("bbox")
        if box:
            boxes.append(BoundingBox(box["x"], box["y"], box["width"], box["height"]))
        elif bbox and h and w:
            boxes.append(BoundingBox.from_pixels(bbox, (h, w)))
        else:
            boxes.append(None)
    return texts, boxes


def main() -> int:
    p = argparse.ArgumentParser(description="Extract a transfer record from OCR JSON or a plain text file")
    p.add_argument("path", help="OCR JSON ({lines: [...], image_height?, image_width?}) or .txt")
    p.add_argument("--bank", default=None, help="Bank code hint (e.g., SCB)")
    p.add_argument("--display", action="store_true", help="Include formatted display fields")

    args = p.parse_args()

    with open(args.path, "r", encoding="utf-8") as f:
        raw = f.read()

    try:
        if args.path.lower().endswith(".json"):
            texts, boxes = _coerce_lines(json.loads(raw))
            corpus = TextCorpus.from_lines(texts, boxes)
        else:
            corpus = TextCorpus.from_text(raw)
    except InvalidCorpusError as e:
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    record = assemble(corpus, DEFAULT_LIBRARY, bank_hint=args.bank)
    out: Dict[str, Any] = record.to_dict()
    if args.display:
        out["display"] = display_fields(record)
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
