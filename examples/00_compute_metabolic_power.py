"""
Metabolic Power of a Gait Cycle
===============================

Given the **mechanical state** of a set of muscles, **MyoMetab** estimates the net metabolic
power they consume with the phenomenological model of Bhargava et al. (2004).

.. note::
    The **mechanical state** (excitation, activation, fiber velocity, fiber force and
    normalized fiber length) is supplied by a musculoskeletal simulation. Here we make up a
    simple periodic pattern to keep the example self-contained.

The total metabolic power is the sum of:

* **Basal heat rate**: resting expenditure of the whole body
* **Activation heat rate**: calcium handling, depends on excitation and fiber type
* **Maintenance heat rate**: cross-bridge cycling, depends on excitation and fiber length
* **Shortening heat rate**: depends on fiber velocity
* **Mechanical work rate**: power delivered by the contractile element

References
----------
.. [1] Bhargava, L.J., Pandy, M.G., Anderson, F.C., 2004.
       A phenomenological model for estimating metabolic energy consumption in muscle contraction.
       Journal of Biomechanics 37, 81–88. https://doi.org/10.1016/S0021-9290(03)00239-2
"""

##############################################################################
# Import Libraries
# ----------------

import numpy as np
import matplotlib.pyplot as plt

from myometab import simulator
from myometab.utils.plotting import (
    plot_maintenance_length_dependence,
    plot_metabolic_power,
)

##############################################################################
# Define the Model
# ----------------
#
# The host model provides the **muscle inventory** and the **whole-body mass**.
# Muscle masses are derived from the maximum isometric force and the optimal fiber length
# unless given explicitly.

model = simulator.MusculoskeletalModel(
    muscles=[
        simulator.Muscle("soleus", max_isometric_force__N=3549.0, optimal_fiber_length__m=0.05),
        simulator.Muscle("tib_ant", max_isometric_force__N=905.0, optimal_fiber_length__m=0.098),
        simulator.Muscle("vasti", max_isometric_force__N=5000.0, optimal_fiber_length__m=0.087),
    ],
    body_mass__kg=75.0,
)

for muscle in model.muscles:
    print(f"{muscle.name}: {muscle.mass__kg:.3f} kg")

##############################################################################
# Define the Metabolic Parameters
# -------------------------------
#
# Each muscle gets its **ratio of slow twitch fibers**. The activation and maintenance
# constants keep their published defaults.

parameters = simulator.MetabolicMuscleParameterSet(
    [
        simulator.MetabolicMuscleParameter("soleus", ratio_slow_twitch_fibers=0.8),
        simulator.MetabolicMuscleParameter("tib_ant", ratio_slow_twitch_fibers=0.7),
        simulator.MetabolicMuscleParameter("vasti", ratio_slow_twitch_fibers=0.5),
    ]
)

probe = simulator.Bhargava2004MetabolicsProbe(
    parameters,
    simulator.MetabolicsProbeConfiguration(report_individual_muscle_metabolics=True),
)
probe.validate(model)

print(probe.output_labels())

##############################################################################
# Create the Mechanical States
# ----------------------------

timestep__ms = 10.0
t = np.arange(0, 1000, timestep__ms) / 1000
phase_shifts = {"soleus": 0.0, "tib_ant": np.pi, "vasti": np.pi / 2}

states = [
    {
        name: simulator.MuscleMechanicalState(
            excitation=0.5 + 0.4 * np.sin(2 * np.pi * ti + shift),
            activation=0.5 + 0.4 * np.sin(2 * np.pi * ti + shift - 0.2),
            fiber_velocity=0.1 * np.cos(2 * np.pi * ti + shift),
            active_fiber_force=1000.0 * (0.5 + 0.4 * np.sin(2 * np.pi * ti + shift)),
            isometric_fiber_force=1100.0 * (0.5 + 0.4 * np.sin(2 * np.pi * ti + shift)),
            normalized_fiber_length=1.0 + 0.2 * np.sin(2 * np.pi * ti + shift),
        )
        for name, shift in phase_shifts.items()
    }
    for ti in t
]

##############################################################################
# Evaluate the Probe
# ------------------
#
# Each sample is an **instantaneous** rate; nothing is integrated over time.

metabolic_power = simulator.evaluate_trajectory(probe, model, states, verbose=True)

print(f"Mean metabolic power: {metabolic_power[:, 0].mean():.1f} W")

##############################################################################
# Plot the Results
# ----------------

_, axs = plt.subplots(1, 2, figsize=(12, 4))

plot_maintenance_length_dependence(
    probe.configuration.normalized_fiber_length_dependence_on_maintenance_rate, axs[0]
)
plot_metabolic_power(metabolic_power, timestep__ms, probe.output_labels(), axs[1])

plt.tight_layout()
plt.show()
