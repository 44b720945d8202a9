"""
Sample layouts covering the degenerate and typical cases of seat distribution
"""

import logging
import os

from seatrows import Distributor, InvalidRadiusError
from seatrows.utils.format_utils import format_seat_counts

SAMPLES = [
    (1, 50, 0, "no seats to assign"),
    (0, 3, 50, "inner as zero"),
    (3, 1, 50, "inner is larger than outer"),
    (3, 3, 50, "radii are equal, seats even"),
    (3, 3, 21, "radii are equal, seats odd"),
    (1, 3, 50, ""),
    (1, 3, 100, ""),
    (1, 3, 500, ""),
    (3, 8, 500, ""),
    (2, 10, 300, ""),
    (1, 50, 5000, ""),
    (-1, 3, 50, "inner lower than zero"),
]


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    distributor = Distributor(
        config_path=os.path.join(os.path.dirname(__file__), "config.yaml")
    )

    for inner, outer, seats, note in SAMPLES:
        label = f"distribute({inner}, {outer}, {seats})"
        try:
            seat_counts = distributor.distribute(inner, outer, seats)
        except InvalidRadiusError as e:
            print(f"{label}: error: {e} {note}".rstrip())
            continue
        print(f"{label}: {seat_counts} [{format_seat_counts(seat_counts)}] {note}".rstrip())


if __name__ == "__main__":
    main()
