"""
Row count search for seatrows
"""

import logging
import math
from typing import List, Optional

from seatrows.balancer import Balancer
from seatrows.config import Config
from seatrows.errors import RowSearchExhaustedError
from seatrows.estimator import CapacityEstimate, RowCapacityEstimator

logger = logging.getLogger(__name__)


class RowCountSearch:
    """
    Finds the row count whose estimated capacity best matches the requested seats.

    Candidate row counts are tried from one upwards until the estimate reaches the
    requested total. The last undershoot and the first overshoot are then compared
    and the closer one is balanced to the exact total. Ties go to the undershoot.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        estimator: Optional[RowCapacityEstimator] = None,
        balancer: Optional[Balancer] = None,
    ):
        self.config = config or Config()

        if self.config.search.max_rows_factor < 1:
            raise ValueError(
                f"max_rows_factor must be at least 1, got {self.config.search.max_rows_factor}"
            )

        self.estimator = estimator or RowCapacityEstimator(self.config.estimator)
        self.balancer = balancer or Balancer(self.config.balancer)

    def max_rows(self, total_seats: int) -> int:
        """Upper bound on candidate row counts for ``total_seats`` seats"""
        return max(1, math.ceil(total_seats * self.config.search.max_rows_factor))

    def _estimate(self, row_count: int, radius_diff: float, inner_radius: float) -> CapacityEstimate:
        if row_count == 0:
            return self.estimator.estimate(0, 0.0, inner_radius)
        return self.estimator.estimate(row_count, radius_diff / row_count, inner_radius)

    def search(self, radius_diff: float, total_seats: int, inner_radius: float) -> List[int]:
        """
        Arrange ``total_seats`` seats over rows spanning ``radius_diff`` from ``inner_radius``

        Args:
            radius_diff: Outer radius minus inner radius, positive
            total_seats: Seats to place, positive
            inner_radius: Radius of the innermost row

        Returns:
            Seats per row, innermost first, summing to ``total_seats``
        """
        max_rows = self.max_rows(total_seats)

        for row_count in range(1, max_rows + 1):
            current = self._estimate(row_count, radius_diff, inner_radius)
            logger.debug(
                f"{row_count} rows estimate {current.total_capacity} seats "
                f"(target {total_seats})"
            )

            if current.total_capacity == total_seats:
                logger.debug(f"Exact match with {row_count} rows")
                return current.rows.seat_counts()

            if current.total_capacity < total_seats:
                continue

            previous = self._estimate(row_count - 1, radius_diff, inner_radius)
            previous_gap = total_seats - previous.total_capacity
            current_gap = current.total_capacity - total_seats

            if previous_gap <= current_gap and len(previous.rows) > 0:
                logger.debug(
                    f"Growing {row_count - 1} rows by {previous_gap} seats "
                    f"(overshoot by {row_count} rows would be {current_gap})"
                )
                return self.balancer.add_seats(previous.rows, previous_gap)

            logger.debug(
                f"Shrinking {row_count} rows by {current_gap} seats "
                f"(undershoot by {row_count - 1} rows would be {previous_gap})"
            )
            return self.balancer.remove_seats(current.rows, current_gap)

        raise RowSearchExhaustedError(
            f"No row count up to {max_rows} reaches {total_seats} seats"
        )
