"""Tests for evaluating the probe along a trajectory of states."""

import numpy as np
import pytest

from myometab.simulator import (
    Bhargava2004MetabolicsProbe,
    MetabolicsProbeConfiguration,
    MuscleMechanicalState,
    evaluate_trajectory,
)


@pytest.fixture
def states():
    t = np.linspace(0, 1, 25)
    return [
        {
            "soleus": MuscleMechanicalState(
                float(0.5 + 0.4 * np.sin(2 * np.pi * ti)),
                0.5,
                float(0.1 * np.cos(2 * np.pi * ti)),
                800.0,
                900.0,
                float(1.0 + 0.2 * np.sin(2 * np.pi * ti)),
            ),
            "tib_ant": MuscleMechanicalState(
                float(0.5 - 0.4 * np.sin(2 * np.pi * ti)),
                0.5,
                float(-0.1 * np.cos(2 * np.pi * ti)),
                300.0,
                250.0,
                1.0,
            ),
        }
        for ti in t
    ]


@pytest.fixture
def probe(model, parameters):
    p = Bhargava2004MetabolicsProbe(
        parameters, MetabolicsProbeConfiguration(report_individual_muscle_metabolics=True)
    )
    p.validate(model)
    return p


def test_rows_are_instantaneous_rates(model, probe, states):
    rates = evaluate_trajectory(probe, model, states)

    assert rates.shape == (len(states), probe.output_count())
    for row, state in zip(rates, states):
        np.testing.assert_array_equal(row, probe.compute(model, state))


def test_parallel_matches_serial(model, probe, states):
    serial = evaluate_trajectory(probe, model, states)
    parallel = evaluate_trajectory(probe, model, states, n_jobs=2)

    np.testing.assert_allclose(parallel, serial)


def test_empty_trajectory_raises(model, probe):
    with pytest.raises(ValueError):
        evaluate_trajectory(probe, model, [])


def test_unvalidated_probe_raises(model, parameters, states):
    with pytest.raises(ValueError):
        evaluate_trajectory(Bhargava2004MetabolicsProbe(parameters), model, states)
