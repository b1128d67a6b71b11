import math

import pytest

from grav_sim.constants import G
from grav_sim.core.invariants import (
    newtonian_potential,
    pw_potential,
    specific_angular_momentum,
    specific_energy,
)
from grav_sim.types import GravitatingBody, State
from grav_sim.vector import Vec3


def test_potentials():
    bh = GravitatingBody.from_solar_mass(1.0)
    r = 10.0 * bh.r_s
    assert newtonian_potential(r, bh) == pytest.approx(-G * bh.mass / r)
    assert pw_potential(r, bh) == pytest.approx(-G * bh.mass / (9.0 * bh.r_s))
    assert newtonian_potential(0.0, bh) == -math.inf
    assert pw_potential(bh.r_s, bh) == -math.inf


def test_circular_orbit_energy_is_half_potential():
    """Virial theorem for a Newtonian circular orbit: E = Φ/2 = -GM/(2r)."""
    bh = GravitatingBody.from_solar_mass(10.0)
    r = 30.0 * bh.r_s
    v = math.sqrt(G * bh.mass / r)
    s = State(position=Vec3(r, 0.0, 0.0), velocity=Vec3(0.0, v, 0.0))
    assert specific_energy(s, bh) == pytest.approx(-G * bh.mass / (2.0 * r), rel=1e-12)


def test_angular_momentum():
    s = State(position=Vec3(2.0, 0.0, 0.0), velocity=Vec3(0.0, 3.0, 0.0))
    assert specific_angular_momentum(s) == Vec3(0.0, 0.0, 6.0)
