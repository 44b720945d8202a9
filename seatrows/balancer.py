"""
Greedy seat balancing for seatrows
"""

import logging
from functools import reduce
from typing import List, Optional

from seatrows.arrangement import Arrangement
from seatrows.config import BalancerConfig
from seatrows.errors import SeatingInvariantError
from seatrows.spacing import space_per_seat

logger = logging.getLogger(__name__)

METRIC_UPDATE_MODES = ("carry", "scale")


def find_widest_row(rows: Arrangement) -> Optional[int]:
    """
    Index of the row with the most space per seat, or None for no rows.

    Only a strictly greater value replaces the current pick, so the first row wins ties.
    """
    best_index: Optional[int] = None
    best_space = 0.0
    for index, row in enumerate(rows):
        space = space_per_seat(row)
        if best_index is None or space > best_space:
            best_index, best_space = index, space
    return best_index


def find_tightest_row(rows: Arrangement) -> Optional[int]:
    """
    Index of the row with the least space per seat among rows holding more than one
    seat, or None when no row can give up a seat.
    """
    best_index: Optional[int] = None
    best_space = 0.0
    for index, row in enumerate(rows):
        space = space_per_seat(row)
        if row.seats > 1 and (best_index is None or space < best_space):
            best_index, best_space = index, space
    return best_index


class Balancer:
    """
    Closes the gap between an estimated arrangement and the requested seat total
    one seat at a time.
    """

    def __init__(self, config: Optional[BalancerConfig] = None):
        self.config = config or BalancerConfig()

        if self.config.metric_update not in METRIC_UPDATE_MODES:
            raise ValueError(
                f"Unknown metric update mode '{self.config.metric_update}', "
                f"expected one of {list(METRIC_UPDATE_MODES)}"
            )

    def _add_one(self, rows: Arrangement, _step: int) -> Arrangement:
        index = find_widest_row(rows)
        if index is None:
            raise SeatingInvariantError("Cannot add seats to an arrangement without rows")

        row = rows[index]
        return rows.replace(index, row.with_seats(row.seats + 1, self.config.metric_update))

    def _remove_one(self, rows: Arrangement, _step: int) -> Arrangement:
        index = find_tightest_row(rows)
        if index is None:
            logger.warning("No row holds more than one seat, skipping seat removal")
            return rows

        row = rows[index]
        return rows.replace(index, row.with_seats(row.seats - 1, self.config.metric_update))

    def add_seats(self, rows: Arrangement, count: int) -> List[int]:
        """
        Add ``count`` seats, each to the row currently offering the most space per seat

        Returns:
            Seats per row after balancing
        """
        balanced = reduce(self._add_one, range(count), rows)
        return balanced.seat_counts()

    def remove_seats(self, rows: Arrangement, count: int) -> List[int]:
        """
        Remove ``count`` seats, each from the row currently offering the least space
        per seat. Rows down to a single seat are left alone.

        Returns:
            Seats per row after balancing
        """
        balanced = reduce(self._remove_one, range(count), rows)
        return balanced.seat_counts()

    def balance(self, rows: Arrangement, delta: int) -> List[int]:
        """Add ``delta`` seats when positive, remove ``-delta`` seats when negative"""
        if delta >= 0:
            return self.add_seats(rows, delta)
        return self.remove_seats(rows, -delta)


def add_seats(rows: Arrangement, count: int) -> List[int]:
    """Add seats with the default balancer configuration"""
    return Balancer().add_seats(rows, count)


def remove_seats(rows: Arrangement, count: int) -> List[int]:
    """Remove seats with the default balancer configuration"""
    return Balancer().remove_seats(rows, count)
