"""
Exports the SpatialGrid class.
"""

from typing import Iterator, Sequence, Tuple

import numpy as np

from CapacityEstimator import cell_size, estimate_capacity


class SpatialGrid:
	"""
	Uniform background grid over a rectangular domain with square cells of side r/sqrt(2). Every cell is covered by the
	exclusion disk of a point inside it, so a cell references at most one accepted point. A point closer than r to a
	candidate can lie up to two cells away on one axis, so the 5x5 block of cells around the candidate is searched. Its
	corner cells are skipped: any point in them is at least r away.
	"""

	# Defaults:
	EMPTY = -1  # Sentinel for a cell without a point

	def __init__(self, width: float, height: float, r: float):
		"""
		:param float width:  Domain width.
		:param float height: Domain height.
		:param float r:      Minimum distance between points.
		"""
		self.width = width
		self.height = height
		self.cell_size = cell_size(r)

		self.capacity, (self.grid_width, self.grid_height) = estimate_capacity(width, height, r)

		# Row-major: cell (x, y) lives at y * grid_width + x
		self.cells = np.full(self.capacity, self.EMPTY, dtype=np.int64)

		# Offsets of the 21 cells to search (5x5 excluding corners)
		self.neighbor_offsets = []
		for i in [-2, -1, 0, 1, 2]:
			for j in [-2, -1, 0, 1, 2]:
				if not (abs(i) == 2 and abs(j) == 2):
					self.neighbor_offsets.append((i, j))

	def contains(self, point: Sequence[float]) -> bool:
		"""
		Check whether a point lies inside the half-open domain [0, width) x [0, height).
		"""
		return 0 <= point[0] < self.width and 0 <= point[1] < self.height

	def cell_coords(self, point: Sequence[float]) -> Tuple[int, int]:
		"""
		Get the cell coordinates of a point. Coordinates are clamped to the grid, which only matters for points on (or
		rounding onto) the far edges of the domain.
		:param Sequence point: 2-element xy coordinate.
		:return: Tuple of (x, y) cell coordinates.
		"""
		x = int(point[0] / self.cell_size)
		y = int(point[1] / self.cell_size)

		return min(max(x, 0), self.grid_width - 1), min(max(y, 0), self.grid_height - 1)

	def cell_index(self, point: Sequence[float]) -> int:
		"""
		:param Sequence point: 2-element xy coordinate.
		:return: Row-major index of the cell containing the point.
		"""
		x, y = self.cell_coords(point)
		return y * self.grid_width + x

	def mark(self, point: Sequence[float], buffer_index: int) -> None:
		"""
		Store a reference to an accepted point in its cell. An occupied cell means two points closer than r were
		accepted, which the neighbour search rules out; this raises instead of overwriting.
		:param Sequence point:        2-element xy coordinate.
		:param int      buffer_index: Index of the point in the output buffer.
		"""
		i = self.cell_index(point)
		if self.cells[i] != self.EMPTY:
			raise ValueError(f"Cell {i} already holds point {self.cells[i]}")

		self.cells[i] = buffer_index

	def neighbors_occupied(self, candidate: Sequence[float]) -> Iterator[int]:
		"""
		Yield the buffer indices of the points in the 5x5 block of cells (without its corners) around the candidate's
		cell. Cells outside the grid are skipped.
		:param Sequence candidate: 2-element xy coordinate.
		"""
		cx, cy = self.cell_coords(candidate)

		for i, j in self.neighbor_offsets:
			x = cx + i
			y = cy + j
			if 0 <= x < self.grid_width and 0 <= y < self.grid_height:
				occupant = self.cells[y * self.grid_width + x]
				if occupant != self.EMPTY:
					yield int(occupant)
