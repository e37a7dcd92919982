from typing import Literal

import numpy as np
import numpy.typing as npt

from myometab.utils.types import SCALAR_OR_ARRAY, beartowertype


@beartowertype
class PiecewiseLinearFunction:
    r"""
    Piecewise linear curve through an ordered set of breakpoints.

    Between two breakpoints the curve is the straight line joining them. Outside the
    breakpoint range the behaviour depends on ``extrapolation``:

        - ``'linear'``: continue the first (or last) segment with its slope
        - ``'constant'``: hold the first (or last) breakpoint value

    Parameters
    ----------
    x : list[float] | np.ndarray
        Breakpoint abscissae. Must be finite and strictly increasing.
    y : list[float] | np.ndarray
        Breakpoint ordinates. Must be finite and have the same length as ``x``.
    extrapolation : Literal["linear", "constant"], default="linear"
        Policy outside of ``[x[0], x[-1]]``.

    Raises
    ------
    ValueError
        If the breakpoints are empty, of different lengths, non-finite or if ``x``
        is not strictly increasing.

    Notes
    -----
    A single breakpoint describes a constant curve. The evaluation is a pure function
    of its argument, so one instance can be shared between concurrent evaluations.

    Examples
    --------
    >>> curve = PiecewiseLinearFunction([0.0, 1.0], [0.0, 2.0])
    >>> curve(0.25)
    0.5
    >>> curve(2.0)
    4.0
    """

    def __init__(
        self,
        x: list[float] | npt.NDArray[np.floating],
        y: list[float] | npt.NDArray[np.floating],
        extrapolation: Literal["linear", "constant"] = "linear",
    ):
        self.x = np.asarray(x, dtype=float)
        self.y = np.asarray(y, dtype=float)
        self.extrapolation = extrapolation

        if self.x.ndim != 1 or self.y.ndim != 1:
            raise ValueError("Breakpoints must be one-dimensional.")
        if self.x.size == 0:
            raise ValueError("At least one breakpoint is required.")
        if self.x.size != self.y.size:
            raise ValueError(
                f"Length of x ({self.x.size}) must match length of y ({self.y.size})"
            )
        if not (np.all(np.isfinite(self.x)) and np.all(np.isfinite(self.y))):
            raise ValueError("Breakpoints must be finite.")
        if np.any(np.diff(self.x) <= 0):
            raise ValueError("Breakpoint abscissae must be strictly increasing.")

        self.x.setflags(write=False)
        self.y.setflags(write=False)

        if self.x.size > 1:
            self._first_slope = (self.y[1] - self.y[0]) / (self.x[1] - self.x[0])
            self._last_slope = (self.y[-1] - self.y[-2]) / (self.x[-1] - self.x[-2])
        else:
            self._first_slope = 0.0
            self._last_slope = 0.0

    @property
    def number_of_points(self) -> int:
        return int(self.x.size)

    def evaluate(self, x: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
        """
        Evaluate the curve.

        Parameters
        ----------
        x : float | np.ndarray
            Point(s) at which to evaluate the curve.

        Returns
        -------
        float | np.ndarray
            Curve value(s), a float for a scalar input and an array of the same shape
            as ``x`` otherwise.
        """
        x_arr = np.asarray(x, dtype=float)

        # np.interp clamps to the boundary values outside the breakpoint range
        values = np.interp(x_arr, self.x, self.y)

        match self.extrapolation:
            case "linear":
                values = np.where(
                    x_arr < self.x[0],
                    self.y[0] + self._first_slope * (x_arr - self.x[0]),
                    values,
                )
                values = np.where(
                    x_arr > self.x[-1],
                    self.y[-1] + self._last_slope * (x_arr - self.x[-1]),
                    values,
                )
            case "constant":
                pass
            case _:
                raise ValueError(f"Unknown extrapolation: {self.extrapolation}")

        if np.ndim(x) == 0:
            return float(values)
        return values

    def __call__(self, x: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
        return self.evaluate(x)

    def __repr__(self) -> str:
        points = ", ".join(f"({xi:g}, {yi:g})" for xi, yi in zip(self.x, self.y))
        return f"PiecewiseLinearFunction([{points}], extrapolation={self.extrapolation!r})"


def default_maintenance_length_dependence() -> PiecewiseLinearFunction:
    """
    Normalized fiber length dependence of the maintenance heat rate.

    The curve is flat at 0.5 up to half the optimal fiber length, rises to 1.0 at the
    optimal fiber length and falls to 0 at 1.5 times the optimal fiber length.
    """
    return PiecewiseLinearFunction(
        x=[0.0, 0.5, 1.0, 1.5, 10.0],
        y=[0.5, 0.5, 1.0, 0.0, 0.0],
    )
