"""
Piecewise linear curve through a set of (x, y) points.
Between points the curve is linearly interpolated, outside them it is linearly extrapolated
from the first or last segment.
"""

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

# Returned by get_y when the curve cannot be evaluated and by get_max_x when it is empty
CURVE_ERROR = -np.finfo(np.float64).max


class PointSetCurve:
    """
    Curve built once from calibration points. Points sharing an x value keep the last y given.
    """

    def __init__(self, points=()):
        data = {}
        for x, y in points:
            data[float(x)] = float(y)

        self.x = np.array(sorted(data), dtype=float)
        self.y = np.array([data[x] for x in self.x], dtype=float)

        self._interpolator = None
        if len(self.x) > 1:
            self._interpolator = interp1d(
                self.x,
                self.y,
                kind="linear",
                fill_value="extrapolate",
                assume_sorted=True,
            )

    def __len__(self):
        return len(self.x)

    def get_y(self, x):
        """
        Returns the curve value at x, or CURVE_ERROR if the curve is empty or x is not a number.
        """
        if len(self.x) == 0 or np.isnan(x):
            return CURVE_ERROR
        if self._interpolator is None:
            # A single point defines a flat curve
            return float(self.y[0])
        return float(self._interpolator(x))

    def get_min_x(self):
        if len(self.x) == 0:
            return -CURVE_ERROR
        return float(self.x[0])

    def get_max_x(self):
        if len(self.x) == 0:
            return CURVE_ERROR
        return float(self.x[-1])

    def get_sorted_pairs(self):
        """
        Returns the points as (x, y) tuples in ascending x.
        """
        return [(float(x), float(y)) for x, y in zip(self.x, self.y)]

    def to_frame(self, x_name="x", y_name="y"):
        return pd.DataFrame({x_name: self.x, y_name: self.y})

    def clone(self):
        return PointSetCurve(self.get_sorted_pairs())
