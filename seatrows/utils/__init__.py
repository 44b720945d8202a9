"""
Utilities module initialization
"""

from seatrows.utils.format_utils import (
    format_seat_counts,
    format_spacing_summary,
)
from seatrows.utils.metrics_utils import (
    row_radii,
    spacing_summary,
)

__all__ = [
    "format_seat_counts",
    "format_spacing_summary",
    "row_radii",
    "spacing_summary",
]
