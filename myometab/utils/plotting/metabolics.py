from typing import Any

import numpy as np
import seaborn as sns
from beartype import beartype
from matplotlib.axes import Axes

from myometab.simulator.core.curves import PiecewiseLinearFunction
from myometab.utils.types import PROBE_OUTPUT__MATRIX


@beartype
def plot_maintenance_length_dependence(
    curve: PiecewiseLinearFunction,
    ax: Axes,
    normalized_fiber_length_range: tuple[float, float] = (0.0, 2.0),
    apply_default_formatting: bool = True,
    **kwargs: Any,
) -> Axes:
    """
    Plot the normalized fiber length dependence of the maintenance heat rate.

    Parameters
    ----------
    curve : PiecewiseLinearFunction
        The length dependence curve to plot.
    ax : Axes
        The axes to plot on.
    normalized_fiber_length_range : tuple[float, float], optional
        Range of normalized fiber lengths to plot, by default (0.0, 2.0)
    apply_default_formatting : bool, optional
        Whether to apply default formatting to the plot, by default True
    **kwargs : Any
        Additional keyword arguments to pass to the plot function. Only used if apply_default_formatting is False.

    Returns
    -------
    Axes
        The axes with the plot.
    """
    lengths = np.linspace(*normalized_fiber_length_range, 500)

    if apply_default_formatting:
        ax.plot(lengths, curve(lengths), "black")
        inside = (curve.x >= lengths[0]) & (curve.x <= lengths[-1])
        ax.plot(curve.x[inside], curve.y[inside], "o", color="red")
        ax.set_xlabel("Normalized Fiber Length")
        ax.set_ylabel("Maintenance Rate Multiplier")
        sns.despine(ax=ax, top=True, right=True, trim=True, offset=0)
    else:
        ax.plot(lengths, curve(lengths), **kwargs)

    return ax


@beartype
def plot_metabolic_power(
    metabolic_power__matrix: PROBE_OUTPUT__MATRIX,
    timestep__ms: float,
    labels: list[str],
    ax: Axes,
    apply_default_formatting: bool = True,
    **kwargs: Any,
) -> Axes:
    """
    Plot the probe outputs over time.

    Parameters
    ----------
    metabolic_power__matrix : PROBE_OUTPUT__MATRIX
        Matrix of shape (n_samples, n_outputs) as returned by ``evaluate_trajectory``.
    timestep__ms : float
        Time between samples in ms.
    labels : list[str]
        One label per output channel (see ``Bhargava2004MetabolicsProbe.output_labels``).
    ax : Axes
        The axes to plot on.
    apply_default_formatting : bool, optional
        Whether to apply default formatting to the plot, by default True
    **kwargs : Any
        Additional keyword arguments to pass to the plot function. Only used if apply_default_formatting is False.

    Returns
    -------
    Axes
        The axes with the plot.

    Raises
    ------
    ValueError
        If the number of labels does not match the number of output channels.
    """
    if len(labels) != metabolic_power__matrix.shape[1]:
        raise ValueError(
            f"Number of labels must match number of outputs. Got {len(labels)} labels, but {metabolic_power__matrix.shape[1]} outputs."
        )

    t = np.arange(metabolic_power__matrix.shape[0]) * timestep__ms

    for channel, label in zip(metabolic_power__matrix.T, labels):
        if apply_default_formatting:
            ax.plot(t, channel, label=label)
        else:
            ax.plot(t, channel, label=label, **kwargs)

    if apply_default_formatting:
        ax.set_xlabel("Time (ms)")
        ax.set_ylabel("Metabolic Power (W)")
        ax.legend(frameon=False)
        sns.despine(ax=ax, top=True, right=True, trim=True, offset=0)

    return ax
