from __future__ import annotations

from typing import List

ITEM_SEPARATORS = (",", " and ", ";", "+")


def split_order_items(text: str) -> List[str]:
    raw = (text or "").strip()
    if not raw:
        return []
    parts = [raw]
    for separator in ITEM_SEPARATORS:
        pieces: List[str] = []
        for part in parts:
            pieces.extend(part.split(separator))
        parts = [p.strip() for p in pieces if p.strip()]
    return parts
