# MIT License (see LICENSE)
"""
Acceleration laws for a test particle around a point mass.

Every law follows the same contract, a = law(position, body): it maps a
position relative to the body to an acceleration (force per unit mass).
The integrator is handed one of these callables and never needs to know
which physics it encodes.

Available laws:
- newtonian_accel: inverse-square gravity, a = -GM/r² r̂
- pw_accel: Paczyński–Wiita pseudo-Newtonian gravity, a = -GM/(r - r_s)² r̂

Each law has a matching circular-orbit speed, used to construct initial
conditions that are consistent with the dynamics:
    Newtonian:        v = sqrt(GM / r)
    Paczyński–Wiita:  v = sqrt(GM r) / (r - r_s)

Reference:
    Paczyński & Wiita (1980), A&A 88, 23.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Protocol

import numpy as np

from ..constants import ABSORPTION_MARGIN, G
from ..types import GravitatingBody
from ..vector import Vec3


class AccelerationLaw(Protocol):
    """Callable mapping (position, body) to an acceleration vector."""

    def __call__(self, position: Vec3, body: GravitatingBody) -> Vec3:
        ...


def newtonian_accel(position: Vec3, body: GravitatingBody) -> Vec3:
    """
    Newtonian inverse-square acceleration toward the body.

    At r == 0 the direction is undefined; the zero vector is returned
    instead of a singular value.
    """
    r = position.norm()
    if r == 0.0:
        return Vec3.zero()
    a_mag = -G * body.mass / (r * r)
    return position.normalized() * a_mag


def newton_orbit_speed(body: GravitatingBody, radius: float) -> float:
    """
    Speed of a circular Newtonian orbit at the given radius.

    Raises:
        ValueError: If radius is not positive.
    """
    if radius <= 0.0:
        raise ValueError(f"Circular orbit radius must be positive, got {radius}")
    return float(np.sqrt(G * body.mass / radius))


def pw_accel(position: Vec3, body: GravitatingBody) -> Vec3:
    """
    Paczyński–Wiita acceleration toward the body.

    The potential -GM/(r - r_s) diverges at the horizon. At or inside
    r_s the law saturates to zero acceleration; whether the particle
    counts as captured is a separate question answered by absorbed().
    """
    r = position.norm()
    r_s = body.schwarzschild_radius()
    if r <= r_s:
        return Vec3.zero()
    d = r - r_s
    a_mag = -G * body.mass / (d * d)
    return position.normalized() * a_mag


def pw_orbital_speed(body: GravitatingBody, radius: float) -> float:
    """
    Speed of a circular Paczyński–Wiita orbit at the given radius.

    Grows without bound as radius approaches r_s from above.

    Raises:
        ValueError: If radius is at or inside the Schwarzschild radius,
                    where no circular orbit exists.
    """
    r_s = body.schwarzschild_radius()
    if radius <= r_s:
        raise ValueError(
            f"Circular orbit radius {radius} must exceed the Schwarzschild radius {r_s}"
        )
    return float(np.sqrt(G * body.mass * radius)) / (radius - r_s)


def absorbed(position: Vec3, body: GravitatingBody) -> bool:
    """
    True when the particle lies within ABSORPTION_MARGIN * r_s of the body.

    Purely diagnostic: the integrator never consults it.
    """
    return position.norm() <= ABSORPTION_MARGIN * body.schwarzschild_radius()


# =============================================================================
# Law registry
# =============================================================================

@dataclass(frozen=True)
class OrbitModel:
    """
    An acceleration law paired with its analytic circular-orbit speed.

    Attributes:
        name: Canonical identifier used in configs and on the command line.
        accel: The acceleration law.
        circular_speed: (body, radius) -> speed of a circular orbit.
    """
    name: str
    accel: AccelerationLaw
    circular_speed: Callable[[GravitatingBody, float], float]


NEWTONIAN = OrbitModel("newtonian", newtonian_accel, newton_orbit_speed)
PACZYNSKI_WIITA = OrbitModel("paczynski_wiita", pw_accel, pw_orbital_speed)

LAWS: dict[str, OrbitModel] = {
    NEWTONIAN.name: NEWTONIAN,
    PACZYNSKI_WIITA.name: PACZYNSKI_WIITA,
}

_ALIASES = {
    "newton": NEWTONIAN.name,
    "pw": PACZYNSKI_WIITA.name,
}


def get_law(name: str) -> OrbitModel:
    """
    Look up an orbit model by name ("newtonian", "paczynski_wiita") or
    alias ("newton", "pw"). Case-insensitive.

    Raises:
        ValueError: If the name is unknown or not a string.
    """
    if not isinstance(name, str):
        raise ValueError(f"Acceleration law name must be a string, got {name!r}")
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return LAWS[key]
    except KeyError:
        raise ValueError(f"Unknown acceleration law: {name}") from None
