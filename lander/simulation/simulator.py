"""Step-driven descent simulation.

Provides a simulation interface where an external Input Source (a human at
the console or an autopilot strategy) decides the throttle every tick. The
simulator owns the truth state and advances it with :func:`simulate_step`.

Architecture:
    The driver owns the loop and calls:
    - sim.get_state() -> copy of the current truth state
    - sim.step(thrust_percent) -> advance one tick
    or hands a policy to sim.run(), which loops until a terminal condition.

Example:
    >>> from lander.simulation import Simulator, SimConfig
    >>> from autopilot import velocity_fine_control
    >>>
    >>> sim = Simulator(config=SimConfig(dt=1.0, max_steps=500))
    >>> result = sim.run(velocity_fine_control())
    >>> result.reason, result.outcome
    (<TerminationReason.TOUCHDOWN: 'touchdown'>, <LandingOutcome.SUCCESS: 'success'>)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.landing import SAFE_LANDING_SPEED, LandingOutcome, classify_landing
from lander.simulation.step import simulate_step
from lander.state import NUMERIC_CONF, LanderState

logger = logging.getLogger(__name__)

ThrottlePolicy = Callable[[LanderState], float]

# =============================================================================
# Configuration
# =============================================================================


@beartype(conf=NUMERIC_CONF)
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        dt: Fixed time step [s]
        max_steps: Upper bound on ticks for a single run
        stop_on_fuel_exhausted: End the run when the tanks empty above ground
        safe_landing_speed: Largest survivable touchdown speed [m/s]
        record_history: Keep a copy of the state after every tick
    """
    dt: float = 1.0
    max_steps: int = 1000
    stop_on_fuel_exhausted: bool = True
    safe_landing_speed: float = SAFE_LANDING_SPEED
    record_history: bool = True

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {self.max_steps}")
        if self.safe_landing_speed < 0:
            raise ValueError(
                f"safe_landing_speed must be non-negative, got {self.safe_landing_speed}"
            )


class TerminationReason(Enum):
    """Why a run stopped."""
    TOUCHDOWN = "touchdown"
    OUT_OF_FUEL = "out_of_fuel"
    MAX_STEPS = "max_steps"


# =============================================================================
# Results
# =============================================================================


@beartype
@dataclass
class SimulationResult:
    """Results from a completed run.

    ``states`` holds the initial state followed by the state after each
    recorded tick; ``commands`` holds the throttle applied on each tick, so
    ``commands[i]`` took ``states[i]`` to ``states[i + 1]``. The history
    starts at the last ``clear_history`` and may include ticks stepped by
    hand before ``run``; ``steps`` counts only the ticks of the run itself.
    """
    states: list[LanderState]
    commands: list[float]
    reason: TerminationReason
    steps: int
    safe_landing_speed: float = SAFE_LANDING_SPEED

    @property
    def final_state(self) -> LanderState:
        """State at the end of the run."""
        return self.states[-1]

    @property
    def outcome(self) -> LandingOutcome | None:
        """Landing classification, or None if the run never reached the surface."""
        if self.reason is not TerminationReason.TOUCHDOWN:
            return None
        return classify_landing(self.final_state.velocity, self.safe_landing_speed)

    @property
    def landed_safely(self) -> bool:
        return self.outcome is LandingOutcome.SUCCESS

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.time for s in self.states])

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.altitude for s in self.states])

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s]."""
        return np.array([s.velocity for s in self.states])

    @property
    def fuel(self) -> NDArray[np.float64]:
        """Fuel history [kg]."""
        return np.array([s.fuel for s in self.states])

    @property
    def throttle(self) -> NDArray[np.float64]:
        """Throttle command per row [%]; NaN on the final row (no command)."""
        return np.append(np.array(self.commands, dtype=np.float64), np.nan)

    def to_dataframe(self):
        """Convert to Polars DataFrame, one row per recorded state."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "altitude": self.altitude,
            "velocity": self.velocity,
            "fuel": self.fuel,
            "throttle": self.throttle,
        })


# =============================================================================
# Simulator
# =============================================================================


@beartype(conf=NUMERIC_CONF)
@dataclass
class Simulator:
    """Step-driven lander simulator.

    Maintains the truth state and advances it in response to throttle
    commands. External code may either call :meth:`step` itself or pass a
    throttle policy to :meth:`run`.
    """
    state: LanderState = field(default_factory=LanderState)
    config: SimConfig = field(default_factory=SimConfig)

    # Internal
    _history: list[LanderState] = field(default_factory=list, init=False, repr=False)
    _commands: list[float] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._history = [self.state.copy()]

    def get_state(self) -> LanderState:
        """Get current truth state.

        Returns a copy to prevent external modification.
        """
        return self.state.copy()

    def step(self, thrust_percent: float, dt: float | None = None) -> LanderState:
        """Advance the simulation by one tick.

        Args:
            thrust_percent: Commanded throttle [%]
            dt: Time step [s]; defaults to ``config.dt``

        Returns:
            The updated state
        """
        if dt is None:
            dt = self.config.dt

        simulate_step(self.state, thrust_percent, dt)

        if self.config.record_history:
            self._history.append(self.state.copy())
            self._commands.append(float(thrust_percent))

        logger.debug(
            "t=%.1f alt=%.2f vel=%.2f fuel=%.2f throttle=%.1f",
            self.state.time, self.state.altitude, self.state.velocity,
            self.state.fuel, thrust_percent,
        )
        return self.state

    def run(self, policy: ThrottlePolicy) -> "SimulationResult":
        """Run the simulation under ``policy`` until a terminal condition.

        The loop stops when the vehicle reaches the surface, when the tanks
        empty above ground (if ``config.stop_on_fuel_exhausted``), or when
        ``config.max_steps`` ticks have been taken.

        Args:
            policy: Callable mapping the current state to a throttle [%]

        Returns:
            SimulationResult for the run
        """
        cfg = self.config
        logger.info(
            "Starting run: alt=%.1f m, vel=%.2f m/s, fuel=%.1f kg, dt=%.3f s",
            self.state.altitude, self.state.velocity, self.state.fuel, cfg.dt,
        )

        steps = 0
        while True:
            if self.state.altitude <= 0:
                reason = TerminationReason.TOUCHDOWN
                break
            if steps >= cfg.max_steps:
                logger.warning("Step limit reached: %d ticks", cfg.max_steps)
                reason = TerminationReason.MAX_STEPS
                break

            thrust = float(policy(self.get_state()))
            self.step(thrust)
            steps += 1

            if cfg.stop_on_fuel_exhausted and self.state.fuel <= 0 and self.state.altitude > 0:
                reason = TerminationReason.OUT_OF_FUEL
                break

        result = self.result(reason, steps)
        logger.info(
            "Run terminated (%s) at t=%.1f s: alt=%.2f m, vel=%.2f m/s, fuel=%.2f kg",
            reason.value, self.state.time, self.state.altitude,
            self.state.velocity, self.state.fuel,
        )
        return result

    def result(self, reason: TerminationReason, steps: int) -> SimulationResult:
        """Package the recorded history as a SimulationResult.

        Args:
            reason: Why the run stopped
            steps: Ticks taken by the run being reported
        """
        if self.config.record_history:
            states = self.get_history()
            commands = list(self._commands)
        else:
            states = [self.get_state()]
            commands = []
        return SimulationResult(
            states=states,
            commands=commands,
            reason=reason,
            steps=steps,
            safe_landing_speed=self.config.safe_landing_speed,
        )

    def get_history(self) -> list[LanderState]:
        """Get recorded state history."""
        return [s.copy() for s in self._history]

    def clear_history(self) -> None:
        """Clear recorded state history."""
        self._history = [self.state.copy()]
        self._commands = []

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return self.state.time

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self.state.altitude

    @property
    def velocity(self) -> float:
        """Current vertical velocity [m/s]."""
        return self.state.velocity

    @property
    def fuel(self) -> float:
        """Remaining fuel [kg]."""
        return self.state.fuel

    @property
    def is_terminal(self) -> bool:
        """True once the vehicle has reached the surface."""
        return self.state.is_landed


@beartype
def run_simulation(
    policy: ThrottlePolicy,
    state: LanderState | None = None,
    config: SimConfig | None = None,
) -> SimulationResult:
    """Run a complete simulation under ``policy``.

    Args:
        policy: Callable mapping the current state to a throttle [%]
        state: Initial state; defaults to a fresh LanderState
        config: Simulation configuration

    Returns:
        SimulationResult for the run
    """
    sim = Simulator(state=state or LanderState(), config=config or SimConfig())
    return sim.run(policy)
