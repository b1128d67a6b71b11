from grav_sim import GravitatingBody, Simulation, State, Vec3
from grav_sim.core import newton_orbit_speed
from grav_sim.reporting import BufferedReporter
import numpy as np

# Same initial conditions (Newtonian circular speed) under both laws.
# Far from the horizon the two agree; at a few r_s the PW pull is much
# stronger and the orbit dips toward the hole.
bh = GravitatingBody.from_solar_mass(10.0)

for r_over_rs in (50.0, 8.0, 4.0):
    r0 = r_over_rs * bh.r_s
    v = newton_orbit_speed(bh, r0)
    dt = 0.005 * r0 / v
    for law in ("newtonian", "paczynski_wiita"):
        rec = BufferedReporter()
        state = State(position=Vec3(r0, 0.0, 0.0), velocity=Vec3(0.0, v, 0.0))
        sim = Simulation(body=bh, state=state, law=law, dt=dt, reporter=rec)
        sim.run(2000)
        r = np.linalg.norm(rec.positions(), axis=1) / bh.r_s
        print(f"r0={r_over_rs:5.1f} r_s  {law:16s} r/r_s in [{r.min():8.3f}, {r.max():8.3f}]  absorbed={sim.absorbed}")
