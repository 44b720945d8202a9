"""
Utility functions for formatting output
"""

from typing import Dict, List


def format_seat_counts(seat_counts: List[int]) -> str:
    """
    Format seats per row for logging, e.g. ``"3 + 6 = 9"``.

    Args:
        seat_counts: Seats per row

    Returns:
        The row counts joined with their total, or ``"no rows"``
    """
    if not seat_counts:
        return "no rows"

    return f"{' + '.join(str(count) for count in seat_counts)} = {sum(seat_counts)}"


def format_spacing_summary(summary: Dict[str, float]) -> str:
    """
    Format a spacing summary for text output.

    Args:
        summary: Statistics from ``spacing_summary``

    Returns:
        Formatted string representation of the statistics
    """
    if not summary:
        return ""

    return ", ".join(f"{name}={value:.4f}" for name, value in summary.items())
