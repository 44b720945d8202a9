"""
Row capacity estimation for seatrows
"""

import math
from typing import Callable, Dict, List, NamedTuple, Optional

from seatrows.arrangement import Arrangement, Row
from seatrows.config import EstimatorConfig


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity"""
    return math.floor(value + 0.5)


ROUNDING_MODES: Dict[str, Callable[[float], int]] = {
    "half_up": round_half_up,
    "half_even": round,
}


class CapacityEstimate(NamedTuple):
    """Estimated seats for one candidate row count"""

    total_capacity: int
    rows: Arrangement


class RowCapacityEstimator:
    """
    Estimates how many seats fit in each of ``row_count`` evenly spaced rows.

    Row ``i`` sits at ``inner_radius + i * row_spacing`` and gets a capacity metric
    of ``pi * radius``. Its seat estimate is that metric divided by the row spacing,
    rounded, so seats in a row sit roughly one row spacing apart.
    """

    def __init__(self, config: Optional[EstimatorConfig] = None):
        self.config = config or EstimatorConfig()

        if self.config.rounding not in ROUNDING_MODES:
            raise ValueError(
                f"Unknown rounding mode '{self.config.rounding}', "
                f"expected one of {sorted(ROUNDING_MODES)}"
            )
        self._round = ROUNDING_MODES[self.config.rounding]

        if self.config.min_seats_per_row < 1:
            raise ValueError(
                f"min_seats_per_row must be at least 1, got {self.config.min_seats_per_row}"
            )

    def estimate(self, row_count: int, row_spacing: float, inner_radius: float) -> CapacityEstimate:
        """
        Estimate row capacities for a candidate row count

        Args:
            row_count: Number of rows to lay out
            row_spacing: Radial distance between consecutive rows
            inner_radius: Radius of the innermost row

        Returns:
            Total estimated capacity and the estimated rows, innermost first
        """
        if row_count < 0 or row_spacing < 0 or inner_radius < 0:
            raise ValueError("row_count, row_spacing and inner_radius must be non-negative")

        if row_count == 0:
            return CapacityEstimate(0, Arrangement())

        rows: List[Row] = []
        for i in range(row_count):
            radius = inner_radius + i * row_spacing
            metric = math.pi * radius

            if radius == 0 or metric == 0:
                seats = 1
            else:
                seats = max(self.config.min_seats_per_row, self._round(metric / row_spacing))

            rows.append(Row(seats=seats, capacity_metric=metric))

        arrangement = Arrangement.from_rows(rows)
        return CapacityEstimate(arrangement.total_seats(), arrangement)
