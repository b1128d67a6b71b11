# MIT License (see LICENSE)
"""
Input/Output utilities for simulation setups.

This subpackage provides:
    - JSON setup files: describe a body, law, timestep and initial state.
    - Resumable saves: a saved simulation reloads at its current state.

Typical usage:
    from grav_sim.io import load_simulation, save_simulation

    sim = load_simulation("setup.json")
    sim.run(1000)
    save_simulation(sim, "checkpoint.json")
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_to_json,
    simulation_from_json,
    state_to_json,
    state_from_json,
    body_from_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_simulation_raw",
    # Saving
    "save_simulation",
    # Serialization
    "simulation_to_json",
    "simulation_from_json",
    "state_to_json",
    "state_from_json",
    "body_from_json",
]
