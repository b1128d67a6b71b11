# MIT License (see LICENSE)
"""
State reporters for watching a simulation run.

This module provides an abstract base class for reporting and concrete
text, no-op, and recording implementations. The numerical core has no
output dependency; reporters are optional and attached to a Simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..core.accel import absorbed
from ..types import GravitatingBody, State

if TYPE_CHECKING:
    from ..simulation import Simulation


class StateReporter(ABC):
    """
    Abstract base class for reporter implementations.

    Usage:
        reporter = MyReporter()
        reporter.begin_frame(sim.time, sim.steps_taken)
        reporter.draw_state(sim.state, sim.body)
        reporter.end_frame()

    Or use the convenience method:
        reporter.report(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float, step: int) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
            step: Number of steps completed so far.
        """
        ...

    @abstractmethod
    def draw_state(self, state: State, body: GravitatingBody) -> None:
        """Record or display a particle state."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def report(self, sim: "Simulation") -> None:
        """Convenience method to report the full simulation state."""
        self.begin_frame(sim.time, sim.steps_taken)
        self.draw_state(sim.state, sim.body)
        self.end_frame()


def _fmt(v) -> str:
    return f"({v.x:.6e}, {v.y:.6e}, {v.z:.6e})"


class ConsoleReporter(StateReporter):
    """
    Text reporter for development and quick experiments.

    Output:
        [   1] t=4.139e-04 s  pos=(5.906e+05, 5.906e+03, 0.000e+00)  vel=(...)  r/r_s=19.999
        [   2] ...

    Particles inside the absorption radius are tagged ABSORBED.
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and r/r_s.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._line = ""

    def begin_frame(self, time: float, step: int) -> None:
        self._line = f"[{step:4d}] t={time:.3e} s"

    def draw_state(self, state: State, body: GravitatingBody) -> None:
        line = f"  pos={_fmt(state.position)}"
        if self.verbose:
            line += f"  vel={_fmt(state.velocity)}  r/r_s={state.radius / body.r_s:.3f}"
        if absorbed(state.position, body):
            line += "  ABSORBED"
        self._line += line

    def end_frame(self) -> None:
        self.output.write(self._line + "\n")
        self.output.flush()


class NullReporter(StateReporter):
    """No-op reporter, for timing runs without output overhead."""

    def begin_frame(self, time: float, step: int) -> None:
        pass

    def draw_state(self, state: State, body: GravitatingBody) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedReporter(StateReporter):
    """
    Reporter that records every frame for later analysis.

    Example:
        reporter = BufferedReporter()
        sim = Simulation.circular_orbit(body, r0, reporter=reporter)
        sim.run(1000)
        xy = reporter.positions()[:, :2]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float, step: int) -> None:
        self._current_frame = {"time": time, "step": step}

    def draw_state(self, state: State, body: GravitatingBody) -> None:
        if self._current_frame is None:
            return
        self._current_frame["position"] = state.position.to_list()
        self._current_frame["velocity"] = state.velocity.to_list()
        self._current_frame["absorbed"] = absorbed(state.position, body)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def times(self) -> np.ndarray:
        return np.array([f["time"] for f in self.frames], dtype=np.float64)

    def positions(self) -> np.ndarray:
        """Recorded positions, shape (n_frames, 3)."""
        return np.array([f["position"] for f in self.frames], dtype=np.float64).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        """Recorded velocities, shape (n_frames, 3)."""
        return np.array([f["velocity"] for f in self.frames], dtype=np.float64).reshape(-1, 3)

    def clear(self) -> None:
        self.frames.clear()
