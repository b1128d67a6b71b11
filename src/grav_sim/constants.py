# MIT License (see LICENSE)
"""
Physical constants used throughout the simulation.

All values are SI. The solar mass is the reference unit for constructing
gravitating bodies; the Schwarzschild radius is the length scale every
pseudo-relativistic quantity is measured against.
"""
from __future__ import annotations

# Newtonian gravitational constant, m³ kg⁻¹ s⁻²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: float = 6.67430e-11

# Speed of light in vacuum, m/s (exact)
C: float = 299_792_458.0

# One solar mass, kg
M_SUN: float = 1.98892e30

# A particle closer than ABSORPTION_MARGIN * r_s counts as swallowed
# by the horizon (1% safety margin).
ABSORPTION_MARGIN: float = 1.01


def schwarzschild_radius(mass_kg: float) -> float:
    """
    Schwarzschild radius r_s = 2GM/c² in meters.

    For one solar mass this is roughly 2953 m.
    """
    return 2.0 * G * mass_kg / (C * C)
