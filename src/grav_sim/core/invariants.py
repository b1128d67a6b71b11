# MIT License (see LICENSE)
"""
Conserved quantities for checking integration quality.

For a test particle in a static central potential Φ(r), the specific
orbital energy E = v²/2 + Φ(r) and the specific angular momentum
h = r × v are both constant along an exact trajectory. A symplectic
integrator keeps the energy error bounded; a drifting E is a sign that
dt is too large or the particle is close to a singular point of the law.
"""
from __future__ import annotations
from typing import Callable

from ..constants import G
from ..types import GravitatingBody, State
from ..vector import Vec3


def newtonian_potential(r: float, body: GravitatingBody) -> float:
    """Φ = -GM/r. Returns -inf at r == 0."""
    if r == 0.0:
        return float("-inf")
    return -G * body.mass / r


def pw_potential(r: float, body: GravitatingBody) -> float:
    """Φ = -GM/(r - r_s). Returns -inf at or inside the horizon."""
    d = r - body.schwarzschild_radius()
    if d <= 0.0:
        return float("-inf")
    return -G * body.mass / d


def specific_energy(
    state: State,
    body: GravitatingBody,
    potential: Callable[[float, GravitatingBody], float] = newtonian_potential,
) -> float:
    """
    Specific orbital energy E = v²/2 + Φ(r) in J/kg.

    Args:
        state: Particle state.
        body: Central body.
        potential: Potential matching the acceleration law in use.
    """
    return 0.5 * state.velocity.norm2() + potential(state.radius, body)


def specific_angular_momentum(state: State) -> Vec3:
    """h = r × v in m²/s."""
    return state.position.cross(state.velocity)
