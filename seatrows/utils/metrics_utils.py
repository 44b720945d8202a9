"""
Spacing statistics for seat arrangements
"""

from typing import Dict, List

import numpy as np


def row_radii(inner_radius: float, outer_radius: float, row_count: int) -> np.ndarray:
    """
    Radii of ``row_count`` rows spaced evenly from the smaller radius, in the
    caller's inner-to-outer order.
    """
    low, high = min(inner_radius, outer_radius), max(inner_radius, outer_radius)
    if row_count == 0:
        return np.zeros(0)

    radii = low + np.arange(row_count) * ((high - low) / row_count)
    if inner_radius > outer_radius:
        radii = radii[::-1]
    return radii


def spacing_summary(
    inner_radius: float, outer_radius: float, seat_counts: List[int]
) -> Dict[str, float]:
    """
    Summarize the nominal arc length available to each seat, ``pi * radius / seats``,
    across the rows of an arrangement.

    Args:
        inner_radius: Radius the first row is measured from
        outer_radius: Radius the last row is measured towards
        seat_counts: Seats per row in inner-to-outer order

    Returns:
        min, max, mean and std of the per-seat arc length, and their spread
        (max / min, or 0.0 when undefined). All zeros for an empty arrangement.
    """
    summary = {"min": 0.0, "max": 0.0, "mean": 0.0, "std": 0.0, "spread": 0.0}

    seats = np.asarray(seat_counts, dtype=float)
    occupied = seats > 0
    if not occupied.any():
        return summary

    radii = row_radii(inner_radius, outer_radius, len(seats))
    arc_per_seat = np.pi * radii[occupied] / seats[occupied]

    summary["min"] = float(arc_per_seat.min())
    summary["max"] = float(arc_per_seat.max())
    summary["mean"] = float(arc_per_seat.mean())
    summary["std"] = float(arc_per_seat.std())
    if summary["min"] > 0:
        summary["spread"] = summary["max"] / summary["min"]

    return summary
