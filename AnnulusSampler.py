"""
Exports the AnnulusSampler class.
"""

from typing import Optional, Sequence

import numpy as np


class AnnulusSampler:
	"""
	Draw points uniformly distributed (by area) in the ring between two concentric circles.
	"""

	def __init__(self, rng: np.random.RandomState):
		"""
		:param np.random.RandomState rng: Random source. Only advanced by sample().
		"""
		self.rng = rng

	def sample(self, center: Sequence[float], r1: float, r2: float, size: Optional[int] = None) -> np.ndarray:
		"""
		:param Sequence center: 2-element xy coordinate of the annulus center.
		:param float    r1:     Inner radius.
		:param float    r2:     Outer radius. Must be larger than r1.
		:param int      size:   Number of points to draw. If None, a single point is drawn.
		:return: Ndarray of shape (2) if size is None, else of shape (size, 2).
		"""
		if not 0 <= r1 < r2:
			raise ValueError("radii must satisfy 0 <= r1 < r2")

		# Uniform in area: the squared radius is uniform over [r1^2, r2^2]
		u = self.rng.random_sample(size)
		radius = np.sqrt(u * (r2 ** 2 - r1 ** 2) + r1 ** 2)
		theta = self.rng.random_sample(size) * 2 * np.pi

		offset = np.stack([radius * np.cos(theta), radius * np.sin(theta)], axis=-1)
		return np.asarray(center, dtype=float) + offset
