"""
Per-seat spacing model
"""

from seatrows.arrangement import Row
from seatrows.errors import SeatingInvariantError


def space_per_seat(row: Row) -> float:
    """
    Share of a row's capacity metric taken by each of its seats.

    Args:
        row: Row to measure

    Returns:
        ``row.capacity_metric / row.seats``

    Raises:
        SeatingInvariantError: if the row holds no seats
    """
    if row.seats == 0:
        raise SeatingInvariantError("Number of seats in row cannot be zero")
    return row.capacity_metric / row.seats
