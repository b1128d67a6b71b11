from grav_sim import GravitatingBody, Simulation
from grav_sim.reporting import ConsoleReporter

# Quick r_s sanity check
sun = GravitatingBody.from_solar_mass(1.0)
print(f"Schwarzschild radius of (Sun): {sun.r_s:.3f} m")

# 10 solar masses, circular Newtonian orbit at 20 r_s, ~1 radian in 100 steps
bh = GravitatingBody.from_solar_mass(10.0)
sim = Simulation.circular_orbit(bh, 20.0 * bh.r_s, law="newtonian", reporter=ConsoleReporter())
sim.run(100)
