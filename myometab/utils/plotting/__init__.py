from myometab.utils.plotting.metabolics import (
    plot_maintenance_length_dependence,
    plot_metabolic_power,
)

__all__ = [
    "plot_maintenance_length_dependence",
    "plot_metabolic_power",
]
