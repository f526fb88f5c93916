"""
Reporting utilities for presenting hangar occupancy.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .hangar import Hangar
from .layout import place_cell, place_position


OCCUPANCY_COLUMNS = [
    "index",
    "row",
    "column",
    "x",
    "y",
    "type",
    "max_speed",
    "weight",
    "main_color",
]


def build_occupancy_table(hangar: Hangar) -> pd.DataFrame:
    """
    One row per parked vehicle, in storage order.

    Positions are computed from the index, so the table does not depend on
    whether the hangar has been drawn yet.
    """
    rows: List[Dict[str, Any]] = []
    for index, vehicle in enumerate(hangar.places):
        row, column = place_cell(index)
        x, y = place_position(index)
        rows.append({
            "index": index,
            "row": row,
            "column": column,
            "x": x,
            "y": y,
            "type": type(vehicle).__name__,
            "max_speed": getattr(vehicle, "max_speed", None),
            "weight": getattr(vehicle, "weight", None),
            "main_color": getattr(vehicle, "main_color", None),
        })
    return pd.DataFrame(rows, columns=OCCUPANCY_COLUMNS)


def build_summary(hangar: Hangar) -> Dict[str, Any]:
    occupied = len(hangar)
    max_count = hangar.max_count
    return {
        "max_count": max_count,
        "occupied": occupied,
        "free": max_count - occupied,
        "occupancy_pct": round(100.0 * occupied / max_count, 1) if max_count else 0.0,
    }
