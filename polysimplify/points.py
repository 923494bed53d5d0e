from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Point:
    x: Any
    y: Any


def coords(p) -> Tuple[Any, Any]:
    """
    Return (x, y) of a point in any of the accepted forms:
      - mapping with "x" and "y" keys
      - object with .x and .y attributes (Point, namedtuples, ...)
      - indexable pair p[0], p[1] (tuple, list, numpy row)
    Coordinates are returned as-is so int/Fraction/Decimal callers keep their type.
    """
    if isinstance(p, Mapping):
        try:
            return p["x"], p["y"]
        except KeyError:
            raise TypeError(f"point mapping needs 'x' and 'y' keys, got {sorted(p)!r}") from None
    if hasattr(p, "x") and hasattr(p, "y"):
        return p.x, p.y
    try:
        return p[0], p[1]
    except (TypeError, IndexError):
        raise TypeError(f"not a 2D point: {p!r}") from None
