"""Lander - Turn-based vertical descent simulation.

This package simulates a vehicle descending under constant gravity with a
throttle commanded every tick, until it reaches the surface.

Example:
    >>> from lander import LanderState, simulate_step, classify_landing
    >>>
    >>> state = LanderState(altitude=1000.0, velocity=0.0, fuel=500.0)
    >>> while state.altitude > 0:
    ...     simulate_step(state, thrust_percent=50.0 if state.velocity < -5 else 0.0)
    >>> print(classify_landing(state.velocity))
"""

__version__ = "0.1.0"

from lander.landing import (
    SAFE_LANDING_SPEED,
    LandingOutcome,
    classify_landing,
)
from lander.simulation import (
    SimConfig,
    SimulationResult,
    Simulator,
    TerminationReason,
    ThrottlePolicy,
    run_simulation,
    simulate_step,
)
from lander.state import (
    DEFAULT_ALTITUDE,
    DEFAULT_FUEL,
    DEFAULT_FUEL_BURN_RATE,
    DEFAULT_MAX_THRUST,
    MOON_GRAVITY,
    LanderState,
)

__all__ = [
    # Version
    "__version__",
    # State
    "LanderState",
    "MOON_GRAVITY",
    "DEFAULT_MAX_THRUST",
    "DEFAULT_FUEL_BURN_RATE",
    "DEFAULT_ALTITUDE",
    "DEFAULT_FUEL",
    # Physics
    "simulate_step",
    # Simulation
    "SimConfig",
    "SimulationResult",
    "Simulator",
    "TerminationReason",
    "ThrottlePolicy",
    "run_simulation",
    # Landing
    "SAFE_LANDING_SPEED",
    "LandingOutcome",
    "classify_landing",
]
