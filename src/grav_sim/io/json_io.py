# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulation setups.

A setup file fully describes a run: the central body, the acceleration
law, the timestep, and the particle's initial conditions. The format is
meant to be edited by hand.

JSON Schema Overview:
---------------------
{
  "body": {                        # Required, exactly one of:
    "mass_kg": float,              #   mass in kilograms
    "mass_solar": float            #   mass in solar masses
  },
  "law": string,                   # "newtonian" (default) or "paczynski_wiita"
  "dt": float,                     # Timestep (sec). Optional with "orbit".
  "time": float,                   # Elapsed time, default: 0
  "steps_taken": int,              # Completed steps, default: 0
  "halt_on_absorption": bool,      # Default: false
  "state": {                       # Explicit initial conditions, or...
    "position": [x, y, z],         # meters
    "velocity": [vx, vy, vz]       # m/s, default: [0, 0, 0]
  },
  "orbit": {                       # ...a circular orbit of the chosen law
    "radius_rs": float,            # Radius in Schwarzschild radii
    "dt_fraction": float           # Default: 0.01 (radians per step)
  }
}
"""
from __future__ import annotations
import json
from typing import Any

from ..simulation import Simulation
from ..types import GravitatingBody, State
from ..vector import Vec3


def _require_object(value: Any, what: str) -> None:
    if not isinstance(value, dict):
        raise ValueError(f"'{what}' must be a JSON object, got {type(value).__name__}")


def _float(value: Any, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{what}' must be a number, got {value!r}") from None


def load_simulation_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a setup file without object construction."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> Simulation:
    """
    Load and construct a ready-to-run Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the setup is incomplete or inconsistent.
    """
    return simulation_from_json(load_simulation_raw(path))


def body_from_json(d: dict[str, Any]) -> GravitatingBody:
    """Parse a body definition given in kg or in solar masses."""
    _require_object(d, "body")
    if "mass_kg" in d and "mass_solar" in d:
        raise ValueError("Body must give either 'mass_kg' or 'mass_solar', not both.")
    if "mass_kg" in d:
        return GravitatingBody(mass=_float(d["mass_kg"], "mass_kg"))
    if "mass_solar" in d:
        return GravitatingBody.from_solar_mass(_float(d["mass_solar"], "mass_solar"))
    raise ValueError("Body definition missing 'mass_kg' or 'mass_solar'.")


def state_from_json(d: dict[str, Any]) -> State:
    _require_object(d, "state")
    if "position" not in d:
        raise ValueError("State definition missing required 'position' field.")
    return State(
        position=Vec3.from_array(d["position"]),
        velocity=Vec3.from_array(d.get("velocity", [0.0, 0.0, 0.0])),
    )


def simulation_from_json(data: dict[str, Any]) -> Simulation:
    """
    Build a Simulation from a parsed setup dictionary.

    Raises:
        ValueError: If required fields are missing, or both/neither of
                    "state" and "orbit" are given.
    """
    _require_object(data, "setup")
    if "body" not in data:
        raise ValueError("Setup missing required 'body' field.")
    body = body_from_json(data["body"])

    law = data.get("law", "newtonian")
    halt = bool(data.get("halt_on_absorption", False))
    time = _float(data.get("time", 0.0), "time")
    steps_taken = int(_float(data.get("steps_taken", 0), "steps_taken"))

    has_state = "state" in data
    has_orbit = "orbit" in data
    if has_state == has_orbit:
        raise ValueError("Setup must contain exactly one of 'state' or 'orbit'.")

    if has_orbit:
        orbit = data["orbit"]
        _require_object(orbit, "orbit")
        if "radius_rs" not in orbit:
            raise ValueError("Orbit definition missing required 'radius_rs' field.")
        radius = _float(orbit["radius_rs"], "radius_rs") * body.r_s
        kwargs: dict[str, Any] = {
            "halt_on_absorption": halt,
            "time": time,
            "steps_taken": steps_taken,
        }
        if "dt" in data:
            kwargs["dt"] = _float(data["dt"], "dt")
        return Simulation.circular_orbit(
            body,
            radius,
            law=law,
            dt_fraction=_float(orbit.get("dt_fraction", 0.01), "dt_fraction"),
            **kwargs,
        )

    if "dt" not in data:
        raise ValueError("Setup with an explicit 'state' requires 'dt'.")
    return Simulation(
        body=body,
        state=state_from_json(data["state"]),
        law=law,
        dt=_float(data["dt"], "dt"),
        halt_on_absorption=halt,
        time=time,
        steps_taken=steps_taken,
    )


def state_to_json(state: State) -> dict[str, Any]:
    return {
        "position": state.position.to_list(),
        "velocity": state.velocity.to_list(),
    }


def simulation_to_json(sim: Simulation) -> dict[str, Any]:
    """
    Convert a Simulation to a setup dictionary.

    The current state is written explicitly, so loading the result
    resumes the run from where it was saved.
    """
    return {
        "body": {"mass_kg": sim.body.mass},
        "law": sim.law,
        "dt": sim.dt,
        "time": sim.time,
        "steps_taken": sim.steps_taken,
        "halt_on_absorption": sim.halt_on_absorption,
        "state": state_to_json(sim.state),
    }


def save_simulation(sim: Simulation, path: str, indent: int = 2) -> None:
    """Save a Simulation setup to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(simulation_to_json(sim), f, indent=indent)
