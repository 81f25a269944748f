"""Lander state representation for vertical descent simulation.

The state contains:
- Altitude [m] above the landing surface (positive up)
- Velocity [m/s] (positive up, negative while descending)
- Fuel [kg] remaining
- Time [s] elapsed since the start of the run

and the vehicle/environment constants that stay fixed for a run:
- Gravity [m/s^2] (negative, acts downward)
- Maximum thrust acceleration [m/s^2] at 100% throttle
- Fuel burn rate [kg per m/s^2 of thrust acceleration per second]
"""

from dataclasses import dataclass, replace

from beartype import BeartypeConf, beartype

# =============================================================================
# Default Constants
# =============================================================================

MOON_GRAVITY = -1.62          # [m/s^2]
DEFAULT_MAX_THRUST = 4.0      # [m/s^2] at 100% throttle
DEFAULT_FUEL_BURN_RATE = 0.5  # [kg / (m/s^2) / s]

DEFAULT_ALTITUDE = 1000.0     # [m]
DEFAULT_FUEL = 500.0          # [kg]

# Public numeric APIs accept ints wherever a float is hinted
NUMERIC_CONF = BeartypeConf(is_pep484_tower=True)


# =============================================================================
# Lander State
# =============================================================================


@beartype(conf=NUMERIC_CONF)
@dataclass
class LanderState:
    """Mutable state of a vertical descent vehicle.

    One instance is created per run and mutated in place by
    :func:`lander.simulation.simulate_step` once per tick. The constant
    fields may be overridden at construction, e.g. for tests.

    Attributes:
        altitude: Height above the surface [m]
        velocity: Vertical velocity, positive up [m/s]
        fuel: Remaining fuel [kg]
        time: Elapsed simulated time [s]
        gravity: Constant gravitational acceleration [m/s^2]
        max_thrust: Thrust acceleration at 100% throttle [m/s^2]
        fuel_burn_rate: Fuel used per unit thrust acceleration per second
    """
    altitude: float = DEFAULT_ALTITUDE
    velocity: float = 0.0
    fuel: float = DEFAULT_FUEL
    time: float = 0.0
    gravity: float = MOON_GRAVITY
    max_thrust: float = DEFAULT_MAX_THRUST
    fuel_burn_rate: float = DEFAULT_FUEL_BURN_RATE

    def copy(self) -> "LanderState":
        """Create an independent copy of this state."""
        return replace(self)

    @property
    def is_landed(self) -> bool:
        """True once the vehicle has reached or passed the surface."""
        return self.altitude <= 0

    @property
    def is_out_of_fuel(self) -> bool:
        """True when the tanks are empty."""
        return self.fuel <= 0

    @property
    def hover_throttle(self) -> float:
        """Throttle [%] whose thrust exactly cancels gravity."""
        return -self.gravity / self.max_thrust * 100.0

    def as_row(self) -> tuple[float, float, float, float]:
        """(time, altitude, velocity, fuel) tuple for tabulation."""
        return (self.time, self.altitude, self.velocity, self.fuel)
