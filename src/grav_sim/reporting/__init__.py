# MIT License (see LICENSE)
"""
Reporters for simulation output.

This subpackage provides abstract and concrete reporter implementations:
    - StateReporter: Abstract base class defining the reporting interface.
    - ConsoleReporter: Text output, one line per step.
    - NullReporter: No-op reporter.
    - BufferedReporter: Records frames for analysis or export.

Typical usage:
    from grav_sim.reporting import ConsoleReporter

    sim.reporter = ConsoleReporter()
    sim.run(100)
"""
from .adapter import (
    StateReporter,
    ConsoleReporter,
    NullReporter,
    BufferedReporter,
)

__all__ = [
    "StateReporter",
    "ConsoleReporter",
    "NullReporter",
    "BufferedReporter",
]
