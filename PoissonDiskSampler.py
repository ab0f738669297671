"""
Exports the PoissonDiskSampler class.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np
from scipy.spatial.distance import pdist

from AnnulusSampler import AnnulusSampler
from CapacityEstimator import estimate_capacity
from SpatialGrid import SpatialGrid

logger = logging.getLogger(__name__)

Termination = Enum('Termination', ['drained', 'full'])


class PoissonDiskSampler:
	"""
	Generate a Poisson-disk (blue noise) point set in a rectangular domain by dart throwing from an active frontier,
	accelerated by a background grid with cells of side r/sqrt(2).

	New candidates are drawn in the annulus [r, 2r] around a randomly picked frontier point. A frontier point that fails
	to produce an acceptable candidate in k attempts is retired. The run ends when the frontier is empty or when the
	number of points reaches the capacity of the grid.
	"""

	# Defaults:
	K = 30  # Candidate draws per frontier point before it is retired

	def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.RandomState] = None):
		"""
		:param int                   seed: Seed used to initialize the PRNG. May be None, in which case a random seed
		                                   will be used. Ignored if rng is given.
		:param np.random.RandomState rng:  Random source to use instead of a newly seeded one.
		"""
		self.rng = rng if rng is not None else np.random.RandomState(seed=seed)
		self.annulus = AnnulusSampler(self.rng)

		self.termination: Optional[Termination] = None

	def sample(self, width: float, height: float, r: float, k: int, seed_point: Sequence[float],
	           output_buffer: np.ndarray) -> int:
		"""
		Fill output_buffer with a Poisson-disk point set, starting from seed_point.
		:param float      width:         Domain width.
		:param float      height:        Domain height.
		:param float      r:             Minimum distance between points.
		:param int        k:             Candidate draws per frontier point before it is retired.
		:param Sequence   seed_point:    2-element xy coordinate of the first point. Must lie inside the domain.
		:param np.ndarray output_buffer: Ndarray of shape (n, 2) with n at least the capacity reported by
		                                 estimate_capacity(). Written in place; rows past the returned count are stale.
		:return: Number of valid points written to output_buffer.
		"""
		self.termination = None

		if r <= 0:
			raise ValueError("r must be positive")
		if k < 1:
			raise ValueError("k must be at least 1")
		if width <= 0 or height <= 0:
			raise ValueError("Domain dimensions must be positive")

		grid = SpatialGrid(width, height, r)

		if output_buffer.ndim != 2 or output_buffer.shape[1] != 2:
			raise ValueError("output_buffer must have shape (n, 2)")
		if not np.issubdtype(output_buffer.dtype, np.floating):
			raise ValueError("output_buffer must have a floating point dtype")
		if len(output_buffer) < grid.capacity:
			raise ValueError(f"output_buffer holds {len(output_buffer)} points, capacity is {grid.capacity}")
		if not grid.contains(seed_point):
			raise ValueError("seed_point must lie inside [0, width) x [0, height)")

		logger.debug(f"Sampling {width}x{height} domain with r={r}, k={k}, capacity {grid.capacity}")

		r_squared = r ** 2
		active: List[int] = []
		count = self._accept(seed_point, 0, output_buffer, grid, active)

		while active and count < grid.capacity:
			# Choose random frontier point
			active_id = self.rng.randint(len(active))
			center = output_buffer[active[active_id]]

			for _ in range(k):
				candidate = self.annulus.sample(center, r, 2 * r)

				if grid.contains(candidate) and not self._overlaps(candidate, output_buffer, grid, r_squared):
					count = self._accept(candidate, count, output_buffer, grid, active)
					break
			else:
				# Retire: swap with the last frontier entry and pop
				active[active_id] = active[-1]
				active.pop()

		self.termination = Termination.full if count >= grid.capacity else Termination.drained
		logger.debug(f"Sampling ended ({self.termination.name}) with {count} points")

		return count

	def generate(self, width: float, height: float, r: float, k: int = K,
	             seed_point: Optional[Sequence[float]] = None) -> np.ndarray:
		"""
		Allocate a buffer, sample into it and return the valid points.
		:param float    width:      Domain width.
		:param float    height:     Domain height.
		:param float    r:          Minimum distance between points.
		:param int      k:          Candidate draws per frontier point before it is retired.
		:param Sequence seed_point: 2-element xy coordinate of the first point. If None, the domain center is used.
		:return: Ndarray of shape (count, 2) with all point coordinates in acceptance order.
		"""
		if seed_point is None:
			seed_point = (width / 2, height / 2)

		capacity, _ = estimate_capacity(width, height, r)
		buffer = np.empty((max(capacity, 1), 2))
		count = self.sample(width, height, r, k, seed_point, buffer)

		return buffer[:count].copy()

	@staticmethod
	def min_distance(points: np.ndarray) -> float:
		"""
		:param np.ndarray points: Ndarray of shape (n, 2).
		:return: Smallest Euclidean distance between any two points, or inf for fewer than two points.
		"""
		if len(points) < 2:
			return np.inf
		return float(pdist(points).min())

	@staticmethod
	def _overlaps(candidate: np.ndarray, output_buffer: np.ndarray, grid: SpatialGrid, r_squared: float) -> bool:
		"""
		Check the candidate against the points in the neighbouring cells.
		:return bool: Return True if a point closer than r exists, False if not.
		"""
		for i in grid.neighbors_occupied(candidate):
			dist = (candidate - output_buffer[i]) ** 2
			if dist[0] + dist[1] < r_squared:
				return True

		return False

	@staticmethod
	def _accept(point: Sequence[float], count: int, output_buffer: np.ndarray, grid: SpatialGrid,
	            active: List[int]) -> int:
		"""
		Store an accepted point in the buffer, the grid and the frontier.
		:return: New number of points in the buffer.
		"""
		grid.mark(point, count)
		output_buffer[count] = point
		active.append(count)

		return count + 1
