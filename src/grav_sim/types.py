# MIT License (see LICENSE)
"""
Core type definitions for the orbital simulation.

Defines the two data structures the integrator works on:
- GravitatingBody: the compact central mass (immutable).
- State: position and velocity of a massless test particle (mutable,
  owned by whoever drives the integration).

Both live in the same Cartesian frame, with the body fixed at the origin.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

from .constants import M_SUN, schwarzschild_radius
from .vector import Vec3


@dataclass(frozen=True)
class GravitatingBody:
    """
    Point mass fixed at the origin.

    Attributes:
        mass: Mass in kg. Must be finite and positive.

    Note:
        The Schwarzschild radius is derived on demand rather than cached;
        it is a single multiply-divide and mass never changes.
    """
    mass: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.mass) or self.mass <= 0.0:
            raise ValueError(f"Body mass must be finite and positive, got {self.mass}")

    @classmethod
    def from_solar_mass(cls, m: float) -> GravitatingBody:
        """Construct a body of m solar masses."""
        return cls(mass=m * M_SUN)

    @property
    def mass_solar(self) -> float:
        """Mass expressed in solar masses."""
        return self.mass / M_SUN

    def schwarzschild_radius(self) -> float:
        """Horizon radius r_s = 2GM/c² in meters."""
        return schwarzschild_radius(self.mass)

    @property
    def r_s(self) -> float:
        """Shorthand for schwarzschild_radius()."""
        return self.schwarzschild_radius()


@dataclass
class State:
    """
    Kinematic state of a test particle.

    Attributes:
        position: Position relative to the body in meters.
        velocity: Velocity in m/s.

    No finiteness check is performed; NaN or Inf components propagate
    through the integrator untouched.
    """
    position: Vec3 = field(default_factory=Vec3.zero)
    velocity: Vec3 = field(default_factory=Vec3.zero)

    @property
    def radius(self) -> float:
        """Distance from the body, |position|."""
        return self.position.norm()

    def copy(self) -> State:
        # Vec3 is immutable; components are shared.
        return State(position=self.position, velocity=self.velocity)
