# MIT License (see LICENSE)
"""
Core orbital dynamics components.

This subpackage provides:
    - Acceleration laws: Newtonian and Paczyński–Wiita, with matching
      circular-orbit speeds and the horizon absorption test.
    - Integrators: velocity Verlet.
    - Invariants: specific energy and angular momentum.

Typical usage:
    from grav_sim.core import newtonian_accel, verlet_step

    verlet_step(state, dt, body, newtonian_accel)
"""
from .accel import (
    AccelerationLaw,
    OrbitModel,
    NEWTONIAN,
    PACZYNSKI_WIITA,
    LAWS,
    get_law,
    newtonian_accel,
    newton_orbit_speed,
    pw_accel,
    pw_orbital_speed,
    absorbed,
)
from .integrators import verlet_step, verlet_propagate
from .invariants import (
    newtonian_potential,
    pw_potential,
    specific_energy,
    specific_angular_momentum,
)

__all__ = [
    # Acceleration laws
    "AccelerationLaw",
    "OrbitModel",
    "NEWTONIAN",
    "PACZYNSKI_WIITA",
    "LAWS",
    "get_law",
    "newtonian_accel",
    "newton_orbit_speed",
    "pw_accel",
    "pw_orbital_speed",
    "absorbed",
    # Integrators
    "verlet_step",
    "verlet_propagate",
    # Invariants
    "newtonian_potential",
    "pw_potential",
    "specific_energy",
    "specific_angular_momentum",
]
