# MIT License (see LICENSE)
"""
Command-line driver.

Sets up a circular orbit (or loads a JSON setup), runs a fixed number of
velocity-Verlet steps and prints the particle state after each one.

Example:
    grav-sim --mass 10 --radius-rs 20 --law pw --steps 100
"""
from __future__ import annotations
import argparse
import logging
import os
import sys

from .core.accel import LAWS
from .io import load_simulation, save_simulation
from .reporting import ConsoleReporter, NullReporter
from .simulation import Simulation
from .types import GravitatingBody

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "GRAV_SIM_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grav-sim",
        description="Test-particle orbits around a compact body: Newtonian vs Paczyński–Wiita.",
    )
    parser.add_argument(
        "--mass",
        type=float,
        default=10.0,
        help="Body mass in solar masses (default: 10).",
    )
    parser.add_argument(
        "--radius-rs",
        dest="radius_rs",
        type=float,
        default=20.0,
        help="Initial circular-orbit radius in Schwarzschild radii (default: 20).",
    )
    parser.add_argument(
        "--law",
        choices=sorted(LAWS) + ["newton", "pw"],
        default="newtonian",
        help="Acceleration law (default: newtonian).",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=100,
        help="Number of integration steps (default: 100).",
    )
    parser.add_argument(
        "--dt-fraction",
        dest="dt_fraction",
        type=float,
        default=0.01,
        help="Timestep as a fraction of r/v, i.e. radians per step (default: 0.01).",
    )
    parser.add_argument(
        "--halt-on-absorption",
        dest="halt_on_absorption",
        action="store_true",
        help="Stop integrating once the particle is within 1.01 r_s.",
    )
    parser.add_argument(
        "--config",
        help="JSON setup file. Overrides --mass, --radius-rs, --law and --dt-fraction.",
    )
    parser.add_argument(
        "--save",
        help="Write the final simulation state to this JSON file.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the state after every step.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING).",
    )
    return parser


def configure_logging(level: str) -> None:
    """
    Configure root logging for the command.

    Raises:
        ValueError: If level is not one of LOG_LEVELS (case-insensitive).
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})")
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def make_simulation(args: argparse.Namespace) -> Simulation:
    if args.config:
        sim = load_simulation(args.config)
        if args.halt_on_absorption:
            sim.halt_on_absorption = True
        return sim

    body = GravitatingBody.from_solar_mass(args.mass)
    return Simulation.circular_orbit(
        body,
        args.radius_rs * body.r_s,
        law=args.law,
        dt_fraction=args.dt_fraction,
        halt_on_absorption=args.halt_on_absorption,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        # $GRAV_SIM_LOG_LEVEL bypasses argparse choices
        print(f"grav-sim: {exc}", file=sys.stderr)
        return 2

    sun = GravitatingBody.from_solar_mass(1.0)
    print(f"Schwarzschild radius of (Sun): {sun.r_s:.3f} m")

    try:
        sim = make_simulation(args)
    except (OSError, ValueError) as exc:
        logger.error("Could not set up simulation: %s", exc)
        return 2

    sim.reporter = NullReporter() if args.quiet else ConsoleReporter()
    taken = sim.run(args.steps)

    print(
        f"Done: {taken} steps, law={sim.model.name}, t={sim.time:.6e} s, "
        f"r/r_s={sim.state.radius / sim.body.r_s:.6f}, absorbed={sim.absorbed}"
    )

    if args.save:
        save_simulation(sim, args.save)
        logger.info("Saved simulation to %s", args.save)
    return 0


if __name__ == "__main__":
    sys.exit(main())
