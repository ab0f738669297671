"""
Exports the PointSetPlotter class.
"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from CapacityEstimator import estimate_capacity
from PoissonDiskSampler import PoissonDiskSampler


class PointSetPlotter:
	"""
	Plot Poisson-disk point sets with Matplotlib. Clicking inside the domain resamples the point set with the clicked
	position as the seed point.
	"""

	# Defaults:
	MARKER_SIZE = 4
	DRAW_DISKS = True  # Draw a disk of radius r/2 around every point; these never overlap

	def __init__(self, width: float, height: float, r: float, k: int = PoissonDiskSampler.K, seed: Optional[int] = None,
	             ax: Optional[plt.Axes] = None, draw_disks: bool = DRAW_DISKS):
		"""
		:param float   width:      Domain width.
		:param float   height:     Domain height.
		:param float   r:          Minimum distance between points.
		:param int     k:          Candidate draws per frontier point before it is retired.
		:param int     seed:       Seed used to initialize the PRNG. May be None, in which case a random seed will be
		                           used.
		:param Axes    ax:         Axes to draw in. If None, a new figure is created.
		:param bool    draw_disks: Whether to draw the r/2 disks around the points.
		"""
		self.width = width
		self.height = height
		self.r = r
		self.k = k
		self.draw_disks = draw_disks

		self.capacity, _ = estimate_capacity(width, height, r)
		if self.capacity == 0:
			raise ValueError("Domain dimensions and r must be positive")

		# One buffer for all runs; only the first `count` rows are valid after a run
		self.buffer = np.zeros((self.capacity, 2))
		self.count = 0

		self.sampler = PoissonDiskSampler(seed)

		if ax is None:
			self.fig, self.ax = plt.subplots()
		else:
			self.fig, self.ax = ax.figure, ax

	def draw(self, seed_point: Sequence[float]) -> int:
		"""
		Sample a new point set from seed_point and redraw the axes.
		:param Sequence seed_point: 2-element xy coordinate inside the domain.
		:return: Number of points drawn.
		"""
		self.count = self.sampler.sample(self.width, self.height, self.r, self.k, seed_point, self.buffer)
		points = self.buffer[:self.count]

		ax = self.ax
		ax.clear()
		ax.plot(points[:, 0], points[:, 1], '.', color='tab:blue', markersize=self.MARKER_SIZE)

		if self.draw_disks:
			for p in points:
				ax.add_patch(plt.Circle(p, self.r / 2, color='tab:orange', fill=False))

		ax.set_xlim(0, self.width)
		ax.set_ylim(0, self.height)
		ax.set_aspect('equal')
		ax.set_title(f"{self.count} points (r = {self.r})")

		self.fig.canvas.draw_idle()

		return self.count

	def on_click(self, event) -> None:
		"""
		Matplotlib button_press_event handler.
		"""
		if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
			return
		if not (0 <= event.xdata < self.width and 0 <= event.ydata < self.height):
			return

		self.draw((event.xdata, event.ydata))

	def show(self) -> None:
		"""
		Draw a point set seeded at the domain center and show the interactive figure.
		"""
		self.draw((self.width / 2, self.height / 2))
		self.fig.canvas.mpl_connect('button_press_event', self.on_click)
		plt.show()
