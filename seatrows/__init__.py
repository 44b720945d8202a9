"""
seatrows - seat distribution over concentric rows
"""

from seatrows.arrangement import Arrangement, Row
from seatrows.balancer import Balancer
from seatrows.config import Config, load_config
from seatrows.distributor import Distributor, SeatingResult, distribute, split_two_rows
from seatrows.errors import (
    InvalidRadiusError,
    RowSearchExhaustedError,
    SeatingError,
    SeatingInvariantError,
)
from seatrows.estimator import RowCapacityEstimator
from seatrows.search import RowCountSearch

__version__ = "0.1.0"

__all__ = [
    "Arrangement",
    "Balancer",
    "Config",
    "Distributor",
    "InvalidRadiusError",
    "Row",
    "RowCapacityEstimator",
    "RowCountSearch",
    "RowSearchExhaustedError",
    "SeatingError",
    "SeatingInvariantError",
    "SeatingResult",
    "distribute",
    "load_config",
    "split_two_rows",
]
