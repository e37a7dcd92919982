"""Smoke tests for the plotting helpers."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from myometab.simulator import default_maintenance_length_dependence
from myometab.utils.plotting import plot_maintenance_length_dependence, plot_metabolic_power


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_plot_maintenance_length_dependence(ax):
    returned = plot_maintenance_length_dependence(default_maintenance_length_dependence(), ax)

    assert returned is ax
    assert len(ax.lines) == 2
    assert ax.get_xlabel() == "Normalized Fiber Length"


def test_plot_maintenance_length_dependence_without_formatting(ax):
    plot_maintenance_length_dependence(
        default_maintenance_length_dependence(), ax, apply_default_formatting=False, color="blue"
    )

    assert len(ax.lines) == 1


def test_plot_metabolic_power(ax):
    rates = np.column_stack([np.linspace(100, 200, 10), np.full(10, 105.7)])

    returned = plot_metabolic_power(rates, 10.0, ["metabolic_power", "metabolic_power_BASAL"], ax)

    assert returned is ax
    assert [line.get_label() for line in ax.lines] == ["metabolic_power", "metabolic_power_BASAL"]
    np.testing.assert_allclose(ax.lines[0].get_xdata(), np.arange(10) * 10.0)


def test_plot_metabolic_power_label_mismatch_raises(ax):
    rates = np.zeros((10, 3))

    with pytest.raises(ValueError):
        plot_metabolic_power(rates, 10.0, ["metabolic_power"], ax)
