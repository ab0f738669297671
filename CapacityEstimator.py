"""
Exports the estimate_capacity and cell_size functions.
"""

import logging
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)


def cell_size(r: float) -> float:
	"""
	Side length of the square background cells. The cells should be as large as possible while their diagonal does not
	exceed the minimum distance, so that a cell can never hold two points.
	:param float r: Minimum distance between points.
	:return: Cell side length.
	"""
	return r / np.sqrt(2)


def estimate_capacity(width: float, height: float, r: float) -> Tuple[int, Tuple[int, int]]:
	"""
	Compute the number of grid cells covering the domain, which is an upper bound on the number of points that can be
	packed in it with minimum distance r.
	:param float width:  Domain width.
	:param float height: Domain height.
	:param float r:      Minimum distance between points.
	:return: Tuple of (capacity, (grid_width, grid_height)).
	"""
	if width <= 0 or height <= 0 or r <= 0:
		logger.debug(f"Degenerate domain {width}x{height} with r={r}: capacity is 0")
		return 0, (0, 0)

	s = cell_size(r)

	# Round domain size up to nearest multiple of cell size
	grid_width = int(np.ceil(width / s))
	grid_height = int(np.ceil(height / s))

	return grid_width * grid_height, (grid_width, grid_height)
