import sys
import unittest
from pathlib import Path

import numpy as np
from scipy.stats import kstest

sys.path.append(str(Path(__file__).parent.parent))

from AnnulusSampler import AnnulusSampler


class AnnulusSamplerTest(unittest.TestCase):
	N = 20000

	def setUp(self):
		self.sampler = AnnulusSampler(np.random.RandomState(seed=0))
		self.center = np.array([3.0, 4.0])

	def test_single_point(self):
		point = self.sampler.sample(self.center, 1, 2)
		self.assertEqual(point.shape, (2,))
		self.assertTrue(1 <= np.linalg.norm(point - self.center) <= 2)

	def test_radii_within_annulus(self):
		points = self.sampler.sample(self.center, 1, 2, size=self.N)
		self.assertEqual(points.shape, (self.N, 2))

		radii = np.linalg.norm(points - self.center, axis=1)
		self.assertGreaterEqual(radii.min(), 1 - 1e-9)
		self.assertLessEqual(radii.max(), 2 + 1e-9)

	def test_squared_radius_uniform(self):
		points = self.sampler.sample(self.center, 1, 2, size=self.N)
		radii_squared = np.sum((points - self.center) ** 2, axis=1)

		# Uniform over [1, 4]
		_, p = kstest(radii_squared, 'uniform', args=(1, 3))
		self.assertGreater(p, 0.001)

	def test_radius_not_linear(self):
		# With a linear radius the mean would be 1.5; uniform area gives 14/9
		points = self.sampler.sample(self.center, 1, 2, size=self.N)
		radii = np.linalg.norm(points - self.center, axis=1)
		self.assertAlmostEqual(radii.mean(), 14 / 9, delta=0.01)

	def test_angle_uniform(self):
		points = self.sampler.sample(self.center, 1, 2, size=self.N)
		d = points - self.center
		theta = np.mod(np.arctan2(d[:, 1], d[:, 0]), 2 * np.pi)

		_, p = kstest(theta, 'uniform', args=(0, 2 * np.pi))
		self.assertGreater(p, 0.001)

	def test_zero_inner_radius(self):
		points = self.sampler.sample((0, 0), 0, 1, size=100)
		self.assertLessEqual(np.linalg.norm(points, axis=1).max(), 1 + 1e-9)

	def test_deterministic(self):
		a = AnnulusSampler(np.random.RandomState(seed=5)).sample(self.center, 10, 20, size=50)
		b = AnnulusSampler(np.random.RandomState(seed=5)).sample(self.center, 10, 20, size=50)
		np.testing.assert_array_equal(a, b)

	def test_invalid_radii(self):
		with self.assertRaises(ValueError):
			self.sampler.sample(self.center, 2, 1)
		with self.assertRaises(ValueError):
			self.sampler.sample(self.center, 1, 1)
		with self.assertRaises(ValueError):
			self.sampler.sample(self.center, -1, 1)


if __name__ == '__main__':
	unittest.main()
