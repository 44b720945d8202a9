"""
Seat distribution entry point for seatrows
"""

import logging
import numbers
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from seatrows.config import Config, load_config
from seatrows.errors import InvalidRadiusError
from seatrows.search import RowCountSearch
from seatrows.utils.format_utils import format_seat_counts

logger = logging.getLogger(__name__)


@dataclass
class SeatingResult:
    """Seats per row for one distribution request, with the inputs that produced it"""

    inner_radius: float
    outer_radius: float
    total_seats: int
    seat_counts: List[int] = field(default_factory=list)
    reversed: bool = False  # radii were swapped internally

    @property
    def row_count(self) -> int:
        return len(self.seat_counts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        data = asdict(self)
        data["row_count"] = self.row_count
        return data


def split_two_rows(total_seats: int) -> List[int]:
    """
    Split seats over two rows, the front row taking the smaller half.

    Used when both radii are equal and the layout degenerates into a rectangle.
    """
    front = total_seats // 2
    return [front, total_seats - front]


class Distributor:
    """
    Distributes a seat total over concentric rows between two radii
    """

    def __init__(self, config: Optional[Config] = None, config_path: Optional[str] = None):
        if config is not None:
            self.config = config
        else:
            self.config = load_config(config_path)

        self.search = RowCountSearch(self.config)

    def arrange(self, inner_radius: float, outer_radius: float, total_seats: int) -> SeatingResult:
        """
        Arrange ``total_seats`` seats between ``inner_radius`` and ``outer_radius``

        Returns:
            A SeatingResult whose seat counts run from ``inner_radius`` to ``outer_radius``

        Raises:
            InvalidRadiusError: if either radius is negative
            ValueError: if ``total_seats`` is not a non-negative integer
        """
        result = SeatingResult(inner_radius, outer_radius, total_seats)

        if total_seats == 0:
            return result
        if inner_radius < 0 or outer_radius < 0:
            raise InvalidRadiusError("Inner and outer radius cannot be negative")
        if isinstance(total_seats, bool) or not isinstance(total_seats, numbers.Integral) or total_seats < 0:
            raise ValueError(f"total_seats must be a non-negative integer, got {total_seats!r}")

        if inner_radius == outer_radius:
            result.seat_counts = split_two_rows(total_seats)
            logger.info(f"Equal radii, split into two rows: {format_seat_counts(result.seat_counts)}")
            return result

        if inner_radius > outer_radius:
            inner_radius, outer_radius = outer_radius, inner_radius
            result.reversed = True

        seat_counts = self.search.search(outer_radius - inner_radius, total_seats, inner_radius)
        if result.reversed:
            seat_counts.reverse()

        result.seat_counts = seat_counts
        logger.info(
            f"Placed {total_seats} seats in {result.row_count} rows: "
            f"{format_seat_counts(seat_counts)}"
        )
        return result

    def distribute(self, inner_radius: float, outer_radius: float, total_seats: int) -> List[int]:
        """Seats per row from ``inner_radius`` to ``outer_radius``; empty for zero seats"""
        return self.arrange(inner_radius, outer_radius, total_seats).seat_counts


def distribute(inner_radius: float, outer_radius: float, total_seats: int) -> List[int]:
    """
    Distribute ``total_seats`` seats between two radii with the default configuration

    Args:
        inner_radius: Radius of the first row, non-negative
        outer_radius: Radius of the last row, non-negative
        total_seats: Seats to place

    Returns:
        Seats per row ordered from ``inner_radius`` to ``outer_radius``
    """
    return Distributor(config=Config()).distribute(inner_radius, outer_radius, total_seats)
