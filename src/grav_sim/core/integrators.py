# MIT License (see LICENSE)
"""
Numerical integrators for test-particle orbits.

The particle obeys, per unit mass,
    dx/dt = v,    dv/dt = a(x)
where a is any acceleration law from core.accel.

Available integrators:
- verlet_step: one velocity-Verlet step (symplectic, second order)
- verlet_propagate: fixed-count loop over verlet_step, recording positions

Reference:
    Velocity Verlet: https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
"""
from __future__ import annotations

import numpy as np

from ..types import GravitatingBody, State
from .accel import AccelerationLaw


def verlet_step(
    state: State,
    dt: float,
    body: GravitatingBody,
    accel: AccelerationLaw,
) -> None:
    """
    Advance a particle state by dt using velocity Verlet.

    Verlet is symplectic and time-reversible, so for smooth forces the
    energy error stays bounded instead of drifting. The update is:
        a0      = a(x_n)
        x_{n+1} = x_n + v_n*dt + 0.5*a0*dt²
        a1      = a(x_{n+1})
        v_{n+1} = v_n + 0.5*(a0 + a1)*dt

    No sanity checks are made on dt or on the resulting state: a negative
    dt integrates backward, and NaN/Inf propagate. Absorption by the
    horizon is not checked here either (see core.accel.absorbed).

    Args:
        state: Particle state (modified in-place).
        dt: Timestep in seconds.
        body: Central gravitating body.
        accel: Acceleration law, evaluated twice per step.
    """
    a0 = accel(state.position, body)
    x1 = state.position + state.velocity * dt + a0 * (0.5 * dt * dt)

    a1 = accel(x1, body)
    v1 = state.velocity + (a0 + a1) * (0.5 * dt)

    state.position = x1
    state.velocity = v1


def verlet_propagate(
    state: State,
    dt: float,
    body: GravitatingBody,
    accel: AccelerationLaw,
    steps: int,
) -> np.ndarray:
    """
    Apply verlet_step a fixed number of times.

    Args:
        state: Particle state (modified in-place).
        dt: Timestep in seconds.
        body: Central gravitating body.
        accel: Acceleration law.
        steps: Number of steps to take (>= 0).

    Returns:
        Position history of shape (steps + 1, 3), initial position first.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    trail = np.empty((steps + 1, 3), dtype=np.float64)
    trail[0] = state.position.to_array()
    for i in range(1, steps + 1):
        verlet_step(state, dt, body, accel)
        trail[i] = state.position.to_array()
    return trail
