import pytest

from myometab.simulator import (
    MetabolicMuscleParameter,
    MetabolicMuscleParameterSet,
    Muscle,
    MuscleMechanicalState,
    MusculoskeletalModel,
)


@pytest.fixture
def model():
    return MusculoskeletalModel(
        muscles=[
            Muscle("soleus", max_isometric_force__N=3549.0, optimal_fiber_length__m=0.05),
            Muscle("tib_ant", max_isometric_force__N=905.0, optimal_fiber_length__m=0.098, mass__kg=0.3),
        ],
        body_mass__kg=70.0,
    )


@pytest.fixture
def parameters():
    return MetabolicMuscleParameterSet(
        [
            MetabolicMuscleParameter("soleus", ratio_slow_twitch_fibers=0.8, muscle_mass__kg=0.5),
            MetabolicMuscleParameter("tib_ant", ratio_slow_twitch_fibers=0.7),
        ]
    )


@pytest.fixture
def state():
    return {
        "soleus": MuscleMechanicalState(
            excitation=0.6,
            activation=0.5,
            fiber_velocity=0.05,
            active_fiber_force=1200.0,
            isometric_fiber_force=1500.0,
            normalized_fiber_length=1.05,
        ),
        "tib_ant": MuscleMechanicalState(
            excitation=0.3,
            activation=0.25,
            fiber_velocity=-0.02,
            active_fiber_force=300.0,
            isometric_fiber_force=250.0,
            normalized_fiber_length=0.9,
        ),
    }
