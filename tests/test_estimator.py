"""
Tests for row capacity estimation in seatrows.estimator
"""

import math
import unittest

from seatrows.config import Config, EstimatorConfig
from seatrows.distributor import Distributor
from seatrows.estimator import RowCapacityEstimator, round_half_up


class TestRoundHalfUp(unittest.TestCase):
    """Tests for the default rounding"""

    def test_ties_round_up(self):
        """Test that halves round towards positive infinity"""
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.4999), 2)
        self.assertEqual(round(2.5), 2)


class TestRowCapacityEstimator(unittest.TestCase):
    """Tests for RowCapacityEstimator"""

    def setUp(self):
        self.estimator = RowCapacityEstimator()

    def test_zero_rows(self):
        """Test that no rows estimate no capacity"""
        total, rows = self.estimator.estimate(0, 1.0, 1.0)
        self.assertEqual(total, 0)
        self.assertEqual(len(rows), 0)

    def test_two_rows(self):
        """Test capacities proportional to each row's radius"""
        total, rows = self.estimator.estimate(2, 1.0, 1.0)
        self.assertEqual(rows.seat_counts(), [3, 6])
        self.assertEqual(total, 9)
        self.assertAlmostEqual(rows[0].capacity_metric, math.pi)
        self.assertAlmostEqual(rows[1].capacity_metric, 2 * math.pi)

    def test_three_rows(self):
        """Test a spacing that does not divide the radii evenly"""
        total, rows = self.estimator.estimate(3, 2 / 3, 1.0)
        self.assertEqual(rows.seat_counts(), [5, 8, 11])
        self.assertEqual(total, 24)

    def test_zero_radius_row_holds_one_seat(self):
        """Test that a row at the centre holds a single seat"""
        total, rows = self.estimator.estimate(2, 1.5, 0.0)
        self.assertEqual(rows.seat_counts(), [1, 3])
        self.assertEqual(rows[0].capacity_metric, 0.0)
        self.assertEqual(total, 4)

    def test_tiny_row_is_raised_to_minimum(self):
        """Test that a row rounding to zero seats still holds one"""
        total, rows = self.estimator.estimate(1, 100.0, 0.01)
        self.assertEqual(rows.seat_counts(), [1])

    def test_minimum_below_one_rejected(self):
        """Test that a row minimum below one seat is rejected up front"""
        with self.assertRaises(ValueError):
            RowCapacityEstimator(EstimatorConfig(min_seats_per_row=0))
        with self.assertRaises(ValueError):
            RowCapacityEstimator(EstimatorConfig(min_seats_per_row=-2))

        config = Config()
        config.estimator.min_seats_per_row = 0
        with self.assertRaises(ValueError):
            Distributor(config=config)

    def test_negative_inputs(self):
        """Test that negative inputs are rejected"""
        with self.assertRaises(ValueError):
            self.estimator.estimate(-1, 1.0, 1.0)
        with self.assertRaises(ValueError):
            self.estimator.estimate(1, -1.0, 1.0)
        with self.assertRaises(ValueError):
            self.estimator.estimate(1, 1.0, -1.0)

    def test_unknown_rounding(self):
        """Test that an unknown rounding mode is rejected up front"""
        with self.assertRaises(ValueError):
            RowCapacityEstimator(EstimatorConfig(rounding="ceiling"))


if __name__ == "__main__":
    unittest.main()
