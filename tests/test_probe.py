"""Tests for the metabolic power probe (aggregation, outputs and errors)."""

import numpy as np
import pytest

from myometab.simulator import (
    Bhargava2004MetabolicsProbe,
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    MetabolicsProbeConfiguration,
    MuscleMechanicalState,
    MusculoskeletalModel,
)
from myometab.simulator.core.metabolics import compute_muscle_heat_rates
from myometab.utils.errors import ConfigurationError, ConfigurationErrorReason, NumericalError


@pytest.fixture
def probe(model, parameters):
    p = Bhargava2004MetabolicsProbe(parameters)
    p.validate(model)
    return p


# ============================================================================
# Setup
# ============================================================================


def test_default_configuration():
    config = MetabolicsProbeConfiguration()

    assert config.activation_rate_on
    assert config.maintenance_rate_on
    assert config.shortening_rate_on
    assert config.basal_rate_on
    assert config.mechanical_work_rate_on
    assert not config.use_force_dependent_shortening_prop_constant
    assert not config.normalize_mechanical_work_rate_by_muscle_mass
    assert not config.report_individual_muscle_metabolics
    assert config.basal_coefficient == 1.51
    assert config.basal_exponent == 1.0


def test_configuration_is_immutable():
    config = MetabolicsProbeConfiguration()

    with pytest.raises(AttributeError):
        config.basal_rate_on = False


def test_compute_before_validate_raises(model, parameters, state):
    probe = Bhargava2004MetabolicsProbe(parameters)

    assert not probe.is_validated
    with pytest.raises(ValueError):
        probe.compute(model, state)


def test_validate_unknown_muscle(model):
    probe = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet([MetabolicMuscleParameter("gastroc")])
    )

    with pytest.raises(ConfigurationError) as excinfo:
        probe.validate(model)

    assert excinfo.value.reason is ConfigurationErrorReason.UNKNOWN_MUSCLE
    assert not probe.is_validated


def test_failed_revalidation_discards_previous_setup(model, parameters):
    probe = Bhargava2004MetabolicsProbe(parameters)
    probe.validate(model)
    parameters.add(MetabolicMuscleParameter("gastroc"))

    with pytest.raises(ConfigurationError):
        probe.validate(model)

    assert not probe.is_validated


# ============================================================================
# Outputs
# ============================================================================


def test_total_only_outputs(probe):
    assert probe.output_count() == 1
    assert probe.output_labels() == ["metabolic_power"]


def test_individual_muscle_outputs(model, parameters, state):
    probe = Bhargava2004MetabolicsProbe(
        parameters,
        MetabolicsProbeConfiguration(report_individual_muscle_metabolics=True),
        name="walking",
    )
    probe.validate(model)

    assert probe.output_count() == 4
    assert probe.output_labels() == ["walking", "walking_BASAL", "walking_soleus", "walking_tib_ant"]

    values = probe.compute(model, state)
    rates = probe.compute_muscle_heat_rates(model, state)

    assert values.shape == (4,)
    assert values[1] == pytest.approx(105.7)
    assert values[2] == pytest.approx(rates["soleus"].total)
    assert values[3] == pytest.approx(rates["tib_ant"].total)
    assert values[0] == pytest.approx(values[1:].sum())


def test_total_is_basal_plus_muscle_terms(model, probe, state):
    rates = probe.compute_muscle_heat_rates(model, state)
    values = probe.compute(model, state)

    expected = 1.51 * 70.0 + sum(r.total for r in rates.values())
    assert values.shape == (1,)
    assert values[0] == pytest.approx(expected)


def test_muscle_rates_use_resolved_parameters(model, probe, state):
    rates = probe.compute_muscle_heat_rates(model, state)

    for resolved in probe.resolved_muscles:
        assert rates[resolved.name] == compute_muscle_heat_rates(
            resolved, state[resolved.name], probe.configuration
        )


def test_basal_rate_is_added_once(model, parameters, state):
    with_basal = Bhargava2004MetabolicsProbe(parameters)
    without_basal = Bhargava2004MetabolicsProbe(
        parameters, MetabolicsProbeConfiguration(basal_rate_on=False)
    )
    with_basal.validate(model)
    without_basal.validate(model)

    difference = with_basal.compute(model, state)[0] - without_basal.compute(model, state)[0]
    assert difference == pytest.approx(105.7)


def test_basal_rate_is_independent_of_muscles(model, state):
    config = MetabolicsProbeConfiguration(
        activation_rate_on=False,
        maintenance_rate_on=False,
        shortening_rate_on=False,
        mechanical_work_rate_on=False,
    )
    one = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet([MetabolicMuscleParameter("soleus")]), config
    )
    two = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet(
            [MetabolicMuscleParameter("soleus"), MetabolicMuscleParameter("tib_ant")]
        ),
        config,
    )
    one.validate(model)
    two.validate(model)

    assert one.compute(model, state)[0] == 1.51 * 70.0**1.0
    assert two.compute(model, state)[0] == 1.51 * 70.0**1.0


def test_all_terms_disabled_gives_zero(model, parameters, state):
    config = MetabolicsProbeConfiguration(
        activation_rate_on=False,
        maintenance_rate_on=False,
        shortening_rate_on=False,
        basal_rate_on=False,
        mechanical_work_rate_on=False,
    )
    probe = Bhargava2004MetabolicsProbe(parameters, config)
    probe.validate(model)

    assert probe.compute(model, state)[0] == 0.0


def test_compute_is_repeatable(model, probe, state):
    first = probe.compute(model, state)
    second = probe.compute(model, state)

    assert np.array_equal(first, second)


def test_muscle_order_does_not_change_total(model, state):
    forward = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet(
            [MetabolicMuscleParameter("soleus"), MetabolicMuscleParameter("tib_ant")]
        )
    )
    backward = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet(
            [MetabolicMuscleParameter("tib_ant"), MetabolicMuscleParameter("soleus")]
        )
    )
    forward.validate(model)
    backward.validate(model)

    assert forward.compute(model, state)[0] == pytest.approx(backward.compute(model, state)[0])


def test_eccentric_state_without_force_dependence_has_no_shortening_heat(model):
    probe = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet([MetabolicMuscleParameter("soleus")])
    )
    probe.validate(model)
    state = {"soleus": MuscleMechanicalState(0.5, 0.5, -2.0, 100.0, 120.0, 1.0)}

    assert probe.compute_muscle_heat_rates(model, state)["soleus"].shortening == 0.0


# ============================================================================
# Numerical errors
# ============================================================================


def test_non_finite_state_raises(model, probe, state):
    state = dict(state)
    state["soleus"] = MuscleMechanicalState(float("nan"), 0.5, 0.0, 100.0, 100.0, 1.0)

    with pytest.raises(NumericalError):
        probe.compute(model, state)


def test_non_finite_state_in_disabled_term_is_ignored(model, state):
    config = MetabolicsProbeConfiguration(
        shortening_rate_on=False, mechanical_work_rate_on=False
    )
    probe = Bhargava2004MetabolicsProbe(
        MetabolicMuscleParameterSet([MetabolicMuscleParameter("soleus")]), config
    )
    probe.validate(model)
    state = {"soleus": MuscleMechanicalState(0.5, 0.5, float("inf"), 100.0, 100.0, 1.0)}

    assert np.isfinite(probe.compute(model, state)[0])


class _ShrinkingBodyModel(MusculoskeletalModel):
    def get_total_mass(self, state):
        return -70.0


@pytest.mark.parametrize("basal_exponent", [1.0, 0.75])
def test_non_positive_body_mass_raises(model, parameters, state, basal_exponent):
    host = _ShrinkingBodyModel(model.muscles, body_mass__kg=70.0)
    probe = Bhargava2004MetabolicsProbe(
        parameters, MetabolicsProbeConfiguration(basal_exponent=basal_exponent)
    )
    probe.validate(host)

    with pytest.raises(NumericalError):
        probe.compute(host, state)


# ============================================================================
# Setup is fixed by validate()
# ============================================================================


def test_outputs_are_fixed_after_validation(model, parameters, state):
    probe = Bhargava2004MetabolicsProbe(
        parameters, MetabolicsProbeConfiguration(report_individual_muscle_metabolics=True)
    )
    probe.validate(model)
    labels = probe.output_labels()

    parameters.add(MetabolicMuscleParameter("vasti"))

    assert probe.output_count() == 4
    assert probe.output_labels() == labels
    assert probe.compute(model, state).shape == (probe.output_count(),)


def test_parameter_changes_after_validation_are_not_used(model, parameters, state):
    probe = Bhargava2004MetabolicsProbe(parameters)
    probe.validate(model)
    before = probe.compute(model, state)

    parameters["soleus"].ratio_slow_twitch_fibers = 1.5
    parameters["soleus"].activation_constant_fast_twitch = 1000.0

    np.testing.assert_array_equal(probe.compute(model, state), before)
    with pytest.raises(ConfigurationError) as excinfo:
        probe.validate(model)
    assert excinfo.value.reason is ConfigurationErrorReason.INVALID_RATIO
