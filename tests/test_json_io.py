import json

import pytest

from grav_sim.io import (
    load_simulation,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)
from grav_sim.simulation import Simulation
from grav_sim.types import GravitatingBody
from grav_sim.vector import Vec3


def test_orbit_block_builds_circular_orbit():
    data = {
        "body": {"mass_solar": 10.0},
        "law": "pw",
        "orbit": {"radius_rs": 20.0, "dt_fraction": 0.02},
    }
    sim = simulation_from_json(data)
    expected = Simulation.circular_orbit(
        GravitatingBody.from_solar_mass(10.0),
        20.0 * GravitatingBody.from_solar_mass(10.0).r_s,
        law="paczynski_wiita",
        dt_fraction=0.02,
    )
    assert sim.law == "paczynski_wiita"
    assert sim.state == expected.state
    assert sim.dt == expected.dt


def test_explicit_state():
    data = {
        "body": {"mass_kg": 2.0e31},
        "dt": 0.5,
        "time": 3.0,
        "halt_on_absorption": True,
        "state": {"position": [1.0e6, 0.0, 0.0], "velocity": [0.0, 1.0e7, 0.0]},
    }
    sim = simulation_from_json(data)
    assert sim.body.mass == 2.0e31
    assert sim.law == "newtonian"
    assert sim.dt == 0.5
    assert sim.time == 3.0
    assert sim.halt_on_absorption
    assert sim.state.position == Vec3(1.0e6, 0.0, 0.0)
    assert sim.state.velocity == Vec3(0.0, 1.0e7, 0.0)


@pytest.mark.parametrize(
    "data",
    [
        {"orbit": {"radius_rs": 20.0}},
        {"body": {}, "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_kg": 1e30, "mass_solar": 1.0}, "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_solar": 1.0}},
        {"body": {"mass_solar": 1.0}, "dt": 1.0, "state": {"position": [1, 0, 0]}, "orbit": {"radius_rs": 5}},
        {"body": {"mass_solar": 1.0}, "state": {"position": [1, 0, 0]}},
        {"body": {"mass_solar": 1.0}, "dt": 1.0, "state": {"velocity": [1, 0, 0]}},
        {"body": {"mass_solar": 1.0}, "orbit": {}},
        {"body": {"mass_solar": 1.0}, "law": "kerr", "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_solar": -1.0}, "orbit": {"radius_rs": 20.0}},
        [],
        {"body": [10.0], "orbit": {"radius_rs": 20.0}},
        {"body": "10 solar masses", "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_kg": None}, "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_solar": 1.0}, "law": 5, "orbit": {"radius_rs": 20.0}},
        {"body": {"mass_solar": 1.0}, "orbit": [20.0]},
        {"body": {"mass_solar": 1.0}, "orbit": {"radius_rs": "far"}},
        {"body": {"mass_solar": 1.0}, "dt": 1.0, "state": "origin"},
        {"body": {"mass_solar": 1.0}, "dt": None, "state": {"position": [1, 0, 0]}},
        {"body": {"mass_solar": 1.0}, "dt": 1.0, "state": {"position": [None, 0, 0]}},
    ],
)
def test_invalid_setups_rejected(data):
    with pytest.raises(ValueError):
        simulation_from_json(data)


def test_save_and_resume(tmp_path):
    """A saved run reloads at its current state and continues identically."""
    bh = GravitatingBody.from_solar_mass(10.0)
    sim = Simulation.circular_orbit(bh, 20.0 * bh.r_s, law="paczynski_wiita")
    sim.run(25)

    path = tmp_path / "checkpoint.json"
    save_simulation(sim, str(path))
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == simulation_to_json(sim)

    resumed = load_simulation(str(path))
    assert resumed.body == sim.body
    assert resumed.law == sim.law
    assert resumed.dt == sim.dt
    assert resumed.time == sim.time
    assert resumed.steps_taken == sim.steps_taken == 25
    assert resumed.state == sim.state

    sim.run(10)
    resumed.run(10)
    assert resumed.state == sim.state
    assert resumed.steps_taken == sim.steps_taken == 35


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_simulation(str(tmp_path / "nope.json"))
