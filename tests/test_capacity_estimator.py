import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).parent.parent))

from CapacityEstimator import cell_size, estimate_capacity


class CapacityEstimatorTest(unittest.TestCase):
	def test_cell_size(self):
		self.assertAlmostEqual(cell_size(10), 10 / np.sqrt(2))
		self.assertEqual(cell_size(np.sqrt(2)), 1.0)

	def test_square_domain(self):
		# 100 / (10 / sqrt(2)) = 14.14..., rounded up
		self.assertEqual(estimate_capacity(100, 100, 10), (225, (15, 15)))

	def test_rectangular_domain(self):
		self.assertEqual(estimate_capacity(10, 5, np.sqrt(2)), (50, (10, 5)))

	def test_single_cell(self):
		self.assertEqual(estimate_capacity(1, 1, np.sqrt(2)), (1, (1, 1)))

	def test_float_dimensions(self):
		capacity, (gw, gh) = estimate_capacity(10.5, 3.2, 1)
		self.assertEqual((gw, gh), (15, 5))
		self.assertEqual(capacity, 75)

	def test_degenerate(self):
		self.assertEqual(estimate_capacity(0, 10, 1), (0, (0, 0)))
		self.assertEqual(estimate_capacity(10, 0, 1), (0, (0, 0)))
		self.assertEqual(estimate_capacity(-5, -5, 1), (0, (0, 0)))
		self.assertEqual(estimate_capacity(10, 10, 0), (0, (0, 0)))


if __name__ == '__main__':
	unittest.main()
