"""
Microbenchmark: time per velocity-Verlet step for each acceleration law.
Run:
  python benchmarks/bench_steps.py
"""
import time
from grav_sim import GravitatingBody, Simulation
from grav_sim.core import LAWS
from grav_sim.reporting import NullReporter

def run(law: str, steps: int = 20000):
    bh = GravitatingBody.from_solar_mass(10.0)
    sim = Simulation.circular_orbit(bh, 20.0 * bh.r_s, law=law, reporter=NullReporter())

    # warmup
    sim.run(100)

    t0 = time.perf_counter()
    sim.run(steps)
    t1 = time.perf_counter()
    return (t1 - t0) / steps

if __name__ == "__main__":
    for name in LAWS:
        per_step = run(name)
        print(f"{name:16s}  step={1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")
