"""Axis-aligned box helpers."""

from __future__ import annotations


def boxes_overlap(
    x1: float,
    y1: float,
    w1: float,
    h1: float,
    x2: float,
    y2: float,
    w2: float,
    h2: float,
) -> bool:
    """Return True unless one box lies entirely above, below, left or right of the other.

    Boxes whose edges merely touch are treated as overlapping.
    """
    return not (
        y1 + h1 < y2
        or y1 > y2 + h2
        or x1 + w1 < x2
        or x1 > x2 + w2
    )
