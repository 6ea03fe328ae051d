"""Jittering ring of points used as a busy indicator."""

from __future__ import annotations

import math
import random

__all__ = ["BusyIndicatorModel"]


class BusyIndicatorModel:
    """Points on a circle whose radius and angle are disturbed by normal noise."""

    def __init__(
        self,
        center: tuple[float, float] = (60.0, 60.0),
        radius: float = 36.0,
        num_points: int = 7,
        seed: int | None = None,
    ) -> None:
        if num_points <= 0:
            raise ValueError("num_points must be positive")
        self.center = (float(center[0]), float(center[1]))
        self.radius = float(radius)
        self.num_points = num_points
        self._rng = random.Random(seed)
        self._rho_sigma = 0.25 * self.radius
        self._theta_sigma = 0.5 * math.pi / self.num_points
        self._x: list[float] = []
        self._y: list[float] = []
        self.randomize()

    def set_rho_deviation(self, deviation: float) -> None:
        """Set the radial deviation as a fraction of the radius."""
        if deviation < 0:
            raise ValueError("deviation must not be negative")
        self._rho_sigma = deviation * self.radius

    def set_theta_deviation(self, deviation: float) -> None:
        """Set the angular deviation as a fraction of the spacing between points."""
        if deviation < 0:
            raise ValueError("deviation must not be negative")
        self._theta_sigma = deviation * math.pi / self.num_points

    def randomize(self) -> None:
        """Draw new positions for all points, starting at 225 degrees."""
        cx, cy = self.center
        xs: list[float] = []
        ys: list[float] = []
        for i in range(self.num_points):
            rho = abs(self.radius + self._rand_rho())
            theta = (i / self.num_points + 0.625) * math.pi * 2.0 + self._rand_theta()
            xs.append(cx + rho * math.cos(theta))
            ys.append(cy + rho * math.sin(theta))
        self._x = xs
        self._y = ys

    def x_coords(self) -> list[float]:
        """X coordinates of the points."""
        return list(self._x)

    def y_coords(self) -> list[float]:
        """Y coordinates of the points."""
        return list(self._y)

    def _rand_rho(self) -> float:
        rho = self._rng.gauss(0.0, self._rho_sigma)
        if rho > 0.0:
            rho *= 0.5
        return rho

    def _rand_theta(self) -> float:
        return self._rng.gauss(0.0, self._theta_sigma)