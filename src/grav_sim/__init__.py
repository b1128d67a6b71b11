# MIT License (see LICENSE)
"""
grav_sim - Test-particle orbits around a compact gravitating body.

This package integrates a massless particle under a pluggable acceleration
law, to compare Newtonian gravity with the Paczyński–Wiita pseudo-Newtonian
potential near a Schwarzschild horizon.

Main entry points:
    - Vec3: Immutable 3D vector.
    - GravitatingBody: Central point mass with its Schwarzschild radius.
    - State: Position and velocity of the test particle.
    - verlet_step: One velocity-Verlet step under a chosen law.
    - Simulation: Runner with time bookkeeping and absorption tracking.

Submodules:
    - core: Acceleration laws, integrators, and conserved quantities.
    - io: JSON setup files.
    - reporting: Console and recording reporters.
    - cli: The grav-sim command.

Example:
    from grav_sim import GravitatingBody, Simulation

    bh = GravitatingBody.from_solar_mass(10.0)
    sim = Simulation.circular_orbit(bh, 20 * bh.r_s, law="paczynski_wiita")
    sim.run(100)
"""
from .constants import G, C, M_SUN, ABSORPTION_MARGIN, schwarzschild_radius
from .vector import Vec3
from .types import GravitatingBody, State
from .core import (
    newtonian_accel,
    newton_orbit_speed,
    pw_accel,
    pw_orbital_speed,
    absorbed,
    get_law,
    verlet_step,
)
from .simulation import Simulation

__all__ = [
    # Constants
    "G",
    "C",
    "M_SUN",
    "ABSORPTION_MARGIN",
    "schwarzschild_radius",
    # Types
    "Vec3",
    "GravitatingBody",
    "State",
    # Dynamics
    "newtonian_accel",
    "newton_orbit_speed",
    "pw_accel",
    "pw_orbital_speed",
    "absorbed",
    "get_law",
    "verlet_step",
    # Simulation
    "Simulation",
]
