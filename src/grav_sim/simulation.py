# MIT License (see LICENSE)
"""
The simulation runner.

Simulation is the driver-facing controller around the numerical core. It
owns:
- One gravitating body and one test-particle state.
- The selected acceleration law and the base timestep.
- Bookkeeping: elapsed time, steps taken, and whether the particle has
  crossed the absorption radius.

Structure:
    - User builds a Simulation (directly or via circular_orbit()).
    - User calls sim.step() or sim.run(n).
    - An optional reporter receives the state after every step.

Absorption is advisory. The flag is raised and a warning is logged the
first time the particle comes within the absorption radius, but stepping
continues unless halt_on_absorption is set.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .core.accel import OrbitModel, absorbed as is_absorbed, get_law
from .core.integrators import verlet_step
from .types import GravitatingBody, State
from .vector import Vec3

if TYPE_CHECKING:
    from .reporting import StateReporter

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Single-particle orbit simulation.

    Attributes:
        body: Central gravitating body.
        state: Test-particle state, advanced in-place.
        law: Acceleration law name ("newtonian", "paczynski_wiita",
             or an alias accepted by core.accel.get_law).
        dt: Base timestep in seconds, used when step() is called without one.
        halt_on_absorption: Stop stepping once the particle is absorbed.
        reporter: Optional StateReporter called after every step.
        time: Elapsed simulation time in seconds.
        steps_taken: Number of completed steps.
        absorbed: True once the particle has been inside the absorption radius.
    """
    body: GravitatingBody
    state: State = field(default_factory=State)
    law: str = "newtonian"
    dt: float = 1.0
    halt_on_absorption: bool = False
    reporter: StateReporter | None = None

    # Run bookkeeping
    time: float = 0.0
    steps_taken: int = 0
    absorbed: bool = False

    def __post_init__(self) -> None:
        """Resolve the law name once; unknown names fail here, not mid-run."""
        self._model: OrbitModel = get_law(self.law)
        self.law = self._model.name

        # A particle that starts inside the absorption radius is flagged
        # before any step, so halt_on_absorption never integrates it.
        if not self.absorbed and is_absorbed(self.state.position, self.body):
            self.absorbed = True
            logger.warning(
                "Particle starts absorbed (r=%.6g m, r_s=%.6g m)",
                self.state.radius, self.body.r_s,
            )

    @property
    def model(self) -> OrbitModel:
        """The resolved acceleration law and its circular-speed function."""
        return self._model

    @classmethod
    def circular_orbit(
        cls,
        body: GravitatingBody,
        radius: float,
        law: str = "newtonian",
        dt_fraction: float = 0.01,
        **kwargs,
    ) -> Simulation:
        """
        Start a particle on a circular orbit of the chosen law.

        The particle sits at (radius, 0, 0) moving along +y at the law's
        circular speed. The timestep is dt_fraction * radius / speed, i.e.
        the particle sweeps about dt_fraction radians per step.

        Raises:
            ValueError: If the radius admits no circular orbit under the law.
        """
        model = get_law(law)
        v = model.circular_speed(body, radius)
        state = State(position=Vec3(radius, 0.0, 0.0), velocity=Vec3(0.0, v, 0.0))
        kwargs.setdefault("dt", dt_fraction * radius / v)
        return cls(body=body, state=state, law=model.name, **kwargs)

    def step(self, dt: float | None = None) -> bool:
        """
        Advance the particle by one velocity-Verlet step.

        Args:
            dt: Timestep override. Defaults to self.dt.

        Returns:
            True if a step was taken, False if the run is halted because
            the particle was absorbed and halt_on_absorption is set.
        """
        if self.absorbed and self.halt_on_absorption:
            return False

        h = self.dt if dt is None else dt
        verlet_step(self.state, h, self.body, self._model.accel)
        self.time += h
        self.steps_taken += 1

        if not self.absorbed and is_absorbed(self.state.position, self.body):
            self.absorbed = True
            logger.warning(
                "Particle absorbed at step %d (t=%.6g s, r=%.6g m, r_s=%.6g m)",
                self.steps_taken, self.time, self.state.radius, self.body.r_s,
            )
        logger.debug("step %d t=%.6g r=%.6g", self.steps_taken, self.time, self.state.radius)

        if self.reporter is not None:
            self.reporter.report(self)
        return True

    def run(self, steps: int) -> int:
        """
        Take up to `steps` steps.

        Returns:
            Number of steps actually taken (fewer than requested only when
            halted by absorption).
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        logger.info(
            "Running %d steps: law=%s mass=%.6g M_sun dt=%.6g s",
            steps, self.law, self.body.mass_solar, self.dt,
        )
        taken = 0
        for _ in range(steps):
            if not self.step():
                logger.info("Halted after %d steps: particle absorbed", taken)
                break
            taken += 1
        return taken
