"""
Row and arrangement structures for seatrows
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class Row:
    """One concentric ring of seats"""

    seats: int
    capacity_metric: float  # proportional to pi * radius when first estimated

    def with_seats(self, seats: int, metric_update: str = "carry") -> "Row":
        """
        Return a copy holding ``seats`` seats with the capacity metric carried forward.

        The metric is never recomputed from the row's radius. In ``"carry"`` mode the
        per-seat share is taken at the new count, ``seats * (metric / seats)``. In
        ``"scale"`` mode the previous per-seat share is held fixed, ``seats * (metric /
        previous seats)``.
        """
        if metric_update == "carry":
            divisor = seats
        elif metric_update == "scale":
            divisor = self.seats
        else:
            raise ValueError(f"Unknown metric update mode '{metric_update}'")

        return Row(seats=seats, capacity_metric=seats * (self.capacity_metric / divisor))

    def to_dict(self) -> Dict[str, Any]:
        return {"seats": self.seats, "capacity_metric": self.capacity_metric}


@dataclass(frozen=True)
class Arrangement:
    """
    Ordered rows of an annular layout, innermost ring first.

    Arrangements are immutable: balancing produces a new arrangement per step.
    """

    rows: Tuple[Row, ...] = field(default_factory=tuple)

    @classmethod
    def from_rows(cls, rows: List[Row]) -> "Arrangement":
        return cls(rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def seat_counts(self) -> List[int]:
        """Seats per row, dropping capacity metrics"""
        return [row.seats for row in self.rows]

    def total_seats(self) -> int:
        return sum(row.seats for row in self.rows)

    def replace(self, index: int, row: Row) -> "Arrangement":
        """Return a new arrangement with the row at ``index`` swapped for ``row``"""
        rows = list(self.rows)
        rows[index] = row
        return Arrangement(rows=tuple(rows))

    def reversed(self) -> "Arrangement":
        return Arrangement(rows=tuple(reversed(self.rows)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {"rows": [row.to_dict() for row in self.rows]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Arrangement":
        """Create from dictionary representation"""
        return cls(rows=tuple(Row(**row) for row in data.get("rows", [])))
